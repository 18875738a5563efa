"""Ordered collection with multi-mark support.

Used for the available-files list and for every printer queue. Each instance
is owned by exactly one view model; items move between lists by removal from
one and append to another.
"""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, List, Sequence, TypeVar

T = TypeVar("T")


class SelectableList(Generic[T]):
    """Sequence of items plus the indices the operator has marked.

    Marks are kept in the order they were made so that downstream consumers
    can preserve the operator's selection order.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: List[T] = list(items)
        self._marked: List[int] = []

    # ---- Sequence protocol ----
    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        self._check_index(index)
        return self._items[index]

    # ---- Mutation ----
    def append(self, item: T) -> None:
        self._items.append(item)

    def extend(self, items: Iterable[T]) -> None:
        self._items.extend(items)

    def clear(self) -> None:
        self._items.clear()
        self._marked.clear()

    # ---- Marks ----
    def mark(self, index: int) -> None:
        self._check_index(index)
        if index not in self._marked:
            self._marked.append(index)

    def unmark(self, index: int) -> None:
        self._check_index(index)
        if index in self._marked:
            self._marked.remove(index)

    def toggle(self, index: int) -> bool:
        """Flip the mark on ``index`` and return the new marked state."""
        if self.is_marked(index):
            self.unmark(index)
            return False
        self.mark(index)
        return True

    def is_marked(self, index: int) -> bool:
        self._check_index(index)
        return index in self._marked

    def marked(self) -> List[int]:
        return list(self._marked)

    def unmark_all(self) -> None:
        self._marked = []

    def accept_marked(self) -> List[int]:
        """Return the current marks and clear them in one step."""
        accepted, self._marked = self._marked, []
        return accepted

    def remove_and_collect(self, indices: Iterable[int]) -> List[T]:
        """Remove ``indices`` and return their items in the supplied order.

        Removal runs in descending index order so earlier deletions never
        shift a position that is still pending. Every index is validated
        before anything is removed.
        """
        order = list(indices)
        for index in order:
            self._check_index(index)
        if len(set(order)) != len(order):
            raise ValueError(f"Duplicate indices in removal request: {order}")

        collected = [self._items[index] for index in order]
        for index in sorted(order, reverse=True):
            del self._items[index]
        self._rebase_marks(order)
        return collected

    # ---- Internal helpers ----
    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"List index must be an int, got {type(index).__name__}.")
        if index < 0 or index >= len(self._items):
            raise IndexError(
                f"Index {index} out of range for list of length {len(self._items)}."
            )

    def _rebase_marks(self, removed: Sequence[int]) -> None:
        gone = set(removed)
        rebased: List[int] = []
        for index in self._marked:
            if index in gone:
                continue
            rebased.append(index - sum(1 for r in gone if r < index))
        self._marked = rebased

    def __repr__(self) -> str:
        return f"SelectableList(items={self._items!r}, marked={self._marked!r})"


__all__ = ["SelectableList"]
