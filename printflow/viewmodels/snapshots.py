"""Immutable view-model snapshots handed to the display port.

Call context:
    ``PrintFilesWorkflow`` builds one ``WorkflowSnapshot`` after every
    mutation and passes it to ``DisplayPort.render``. Renderers only read
    these objects; nothing flows back except input events.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from printflow.domain.entities import WorkflowState
from printflow.domain.panel_layout import PanelPlacement


@dataclass(frozen=True)
class FileRow:
    """One list row, for the available list or a printer queue."""
    index: int
    item_id: int
    name: str
    unit_count: int
    label: str
    marked: bool = False


@dataclass(frozen=True)
class PanelSnapshot:
    """Printer panel contents and placement."""
    title: str
    label_count_text: str
    unit_total: int
    rows: Tuple[FileRow, ...]
    placement: PanelPlacement


@dataclass(frozen=True)
class MenuSnapshot:
    """Open modal menu (operation or printer choice)."""
    title: str
    options: Tuple[str, ...]


@dataclass(frozen=True)
class WorkflowSnapshot:
    state: WorkflowState
    file_status: str
    files: Tuple[FileRow, ...]
    queue_status: str
    panels: Tuple[PanelSnapshot, ...]
    touched: Tuple[str, ...] = ()
    """Titles of panels changed by the mutation that produced this snapshot."""
    menu: Optional[MenuSnapshot] = None

    def panel(self, title: str) -> Optional[PanelSnapshot]:
        for panel in self.panels:
            if panel.title == title:
                return panel
        return None


__all__ = ["FileRow", "MenuSnapshot", "PanelSnapshot", "WorkflowSnapshot"]
