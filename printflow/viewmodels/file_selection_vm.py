"""Available-files list state for ``FileSelectionView``.

Call context:
    ``PrintFilesWorkflow`` owns one instance, loads it from the catalog, and
    asks it to hand over marked files when they are routed to a printer.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from printflow.domain.entities import PrintableItem
from printflow.domain.selectable_list import SelectableList
from .snapshots import FileRow
from .status_format import file_status_label


class FileSelectionVM:
    """Owns the available-files ``SelectableList`` and its status line."""

    def __init__(self) -> None:
        self.files: SelectableList[PrintableItem] = SelectableList()
        self.loading = False

    # ---- Loading ----
    def begin_loading(self) -> None:
        self.loading = True

    def load(self, items: Iterable[PrintableItem]) -> None:
        self.files.clear()
        self.files.extend(items)
        self.loading = False

    # ---- Marks (called through the workflow) ----
    def mark(self, index: int) -> None:
        self.files.mark(index)

    def unmark(self, index: int) -> None:
        self.files.unmark(index)

    def toggle(self, index: int) -> bool:
        return self.files.toggle(index)

    def unmark_all(self) -> None:
        self.files.unmark_all()

    def accept(self) -> List[int]:
        return self.files.accept_marked()

    def remove_marked_files(self, indices: Optional[Iterable[int]]) -> List[PrintableItem]:
        """Detach ``indices`` from the list and return them in selection order."""
        if indices is None:
            return []
        return self.files.remove_and_collect(indices)

    # ---- Projection ----
    def total_units(self) -> int:
        return sum(item.unit_count for item in self.files)

    def status_text(self) -> str:
        return file_status_label(self.total_units(), loading=self.loading)

    def rows(self) -> Tuple[FileRow, ...]:
        marked = set(self.files.marked())
        return tuple(
            FileRow(
                index=idx,
                item_id=item.id,
                name=item.name,
                unit_count=item.unit_count,
                label=str(item),
                marked=idx in marked,
            )
            for idx, item in enumerate(self.files)
        )


__all__ = ["FileSelectionVM"]
