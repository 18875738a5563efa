"""Per-printer queue panels for ``PrinterQueueView``.

Call context:
    ``PrintFilesWorkflow`` calls ``PrinterQueueVM.add_or_update_panel`` on
    every routing commit. The first routing to a printer creates its panel
    and asks the session's ``PanelLayoutEngine`` where to put it.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from printflow.domain.entities import PrintableItem
from printflow.domain.panel_layout import PanelLayoutEngine, PanelPlacement
from printflow.domain.selectable_list import SelectableList
from .snapshots import FileRow, PanelSnapshot
from .status_format import label_count_label, queue_status_label


class PrinterPanelVM:
    """Queue of one printer plus its derived unit total."""

    def __init__(self, printer_name: str, placement: PanelPlacement) -> None:
        self.printer_name = printer_name
        self.placement = placement
        self.queue: SelectableList[PrintableItem] = SelectableList()
        self._unit_total = 0

    @property
    def title(self) -> str:
        return self.printer_name

    @property
    def unit_total(self) -> int:
        return self._unit_total

    def append_items(self, items: Iterable[PrintableItem]) -> None:
        for item in items:
            self.queue.append(item)
        self._recompute_total()

    def label_count_text(self) -> str:
        return label_count_label(self._unit_total)

    def snapshot(self) -> PanelSnapshot:
        rows = tuple(
            FileRow(
                index=idx,
                item_id=item.id,
                name=item.name,
                unit_count=item.unit_count,
                label=str(item),
            )
            for idx, item in enumerate(self.queue)
        )
        return PanelSnapshot(
            title=self.title,
            label_count_text=self.label_count_text(),
            unit_total=self._unit_total,
            rows=rows,
            placement=self.placement,
        )

    def _recompute_total(self) -> None:
        # Always summed from the queue so the total cannot drift.
        self._unit_total = sum(item.unit_count for item in self.queue)


class PrinterQueueVM:
    """Keyed collection of printer panels in creation order."""

    def __init__(self, layout: Optional[PanelLayoutEngine] = None) -> None:
        self.layout = layout if layout is not None else PanelLayoutEngine()
        self._panels: Dict[str, PrinterPanelVM] = {}

    def add_or_update_panel(
        self, printer_name: str, items: Iterable[PrintableItem]
    ) -> PrinterPanelVM:
        panel = self._panels.get(printer_name)
        if panel is None:
            placement = self.layout.place_panel(len(self._panels), key=printer_name)
            panel = PrinterPanelVM(printer_name, placement)
            self._panels[printer_name] = panel
        panel.append_items(items)
        return panel

    def panel(self, printer_name: str) -> Optional[PrinterPanelVM]:
        return self._panels.get(printer_name)

    def panels(self) -> List[PrinterPanelVM]:
        return list(self._panels.values())

    def status_text(self) -> str:
        return queue_status_label(len(self._panels))

    def snapshots(self) -> Tuple[PanelSnapshot, ...]:
        return tuple(panel.snapshot() for panel in self._panels.values())

    def reset(self) -> None:
        self._panels = {}
        self.layout.reset()


__all__ = ["PrinterPanelVM", "PrinterQueueVM"]
