"""Two-column placement of printer queue panels.

Panels alternate between a left and a right column in creation order and
stack downwards inside their column. One engine belongs to one workflow
session; nothing here is shared across sessions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

LEFT_COLUMN = 0
RIGHT_COLUMN = 1
COLUMN_COUNT = 2

LEFT_MARGIN = 1
"""Cells between the container edge and the left column."""
LEFT_WIDTH_PCT = 49
RIGHT_X_PCT = 51
RIGHT_FILL_MARGIN = 1
"""Cells kept free on the right edge when the right column fills."""


@dataclass(frozen=True)
class PanelPlacement:
    """Display-agnostic position of one panel."""

    key: str
    """Panel key (printer name)."""
    creation_order: int
    """0-based index of the panel among all panels of the session."""
    column: int
    """``LEFT_COLUMN`` or ``RIGHT_COLUMN``."""
    row: int
    """0-based slot inside the column, top to bottom."""
    anchor_below: Optional[str]
    """Key of the panel this one sits under, ``None`` at offset 0."""
    x_percent: int
    """Horizontal start as a percentage of the container width."""
    x_margin: int
    """Extra cells added to ``x_percent``."""
    width_percent: Optional[int]
    """Fixed width percentage, ``None`` when the panel fills the remainder."""
    fill_margin: int
    """Cells left free on the right edge when filling."""

    @property
    def is_left(self) -> bool:
        return self.column == LEFT_COLUMN


class PanelLayoutEngine:
    """Assign columns and vertical anchors to panels in creation order."""

    def __init__(self) -> None:
        self._placements: List[PanelPlacement] = []
        self._last_in_column: Dict[int, str] = {}

    def place_panel(self, creation_order: int, key: Optional[str] = None) -> PanelPlacement:
        """Return the placement of the panel created ``creation_order``-th.

        Orders must arrive sequentially starting at 0. Asking again for an
        order that was already placed returns the recorded placement.
        """
        if isinstance(creation_order, bool) or not isinstance(creation_order, int):
            raise TypeError("creation_order must be an int.")
        if creation_order < 0:
            raise ValueError("creation_order must be non-negative.")
        if creation_order < len(self._placements):
            return self._placements[creation_order]
        if creation_order != len(self._placements):
            raise ValueError(
                f"Panel {creation_order} placed out of order; "
                f"next expected is {len(self._placements)}."
            )

        column = creation_order % COLUMN_COUNT
        panel_key = key if key is not None else f"panel-{creation_order}"
        if column == LEFT_COLUMN:
            placement = PanelPlacement(
                key=panel_key,
                creation_order=creation_order,
                column=column,
                row=creation_order // COLUMN_COUNT,
                anchor_below=self._last_in_column.get(column),
                x_percent=0,
                x_margin=LEFT_MARGIN,
                width_percent=LEFT_WIDTH_PCT,
                fill_margin=0,
            )
        else:
            placement = PanelPlacement(
                key=panel_key,
                creation_order=creation_order,
                column=column,
                row=creation_order // COLUMN_COUNT,
                anchor_below=self._last_in_column.get(column),
                x_percent=RIGHT_X_PCT,
                x_margin=0,
                width_percent=None,
                fill_margin=RIGHT_FILL_MARGIN,
            )
        self._placements.append(placement)
        self._last_in_column[column] = panel_key
        return placement

    def placements(self) -> List[PanelPlacement]:
        return list(self._placements)

    def column_keys(self, column: int) -> List[str]:
        return [p.key for p in self._placements if p.column == column]

    def reset(self) -> None:
        """Forget every placement, e.g. when a new session starts."""
        self._placements = []
        self._last_in_column = {}


__all__ = [
    "COLUMN_COUNT",
    "LEFT_COLUMN",
    "PanelLayoutEngine",
    "PanelPlacement",
    "RIGHT_COLUMN",
]
