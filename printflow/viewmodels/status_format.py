"""Operator-facing status strings shared by the view models.

Call context:
    ``FileSelectionVM`` and ``PrinterQueueVM`` call these helpers whenever a
    snapshot is built, so every renderer shows identical wording.
"""

from __future__ import annotations

LOADING_LABEL = "Loading Files..."
QUEUE_EMPTY_LABEL = "Queue Empty"


def file_status_label(total_units: int, *, loading: bool = False) -> str:
    """Status line under the available-files list."""
    if loading:
        return LOADING_LABEL
    return f"Found {total_units} Files"


def label_count_label(unit_total: int) -> str:
    """Footer line of a printer queue panel."""
    return f"LabelCount: {unit_total}"


def queue_status_label(panel_count: int) -> str:
    """Placeholder shown in the queue area until the first panel exists."""
    return QUEUE_EMPTY_LABEL if panel_count == 0 else ""


__all__ = [
    "LOADING_LABEL",
    "QUEUE_EMPTY_LABEL",
    "file_status_label",
    "label_count_label",
    "queue_status_label",
]
