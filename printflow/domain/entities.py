"""Domain value objects shared across adapters, use-cases, and view models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


@dataclass
class PrintableItem:
    """A file that can be routed into a printer queue.

    Instances are created by the catalog at load time. Only the workflow
    mutates them afterwards (``queued`` flag and list membership).
    """

    id: int
    """1-based position of the file in the catalog listing."""
    name: str
    """Base file name shown to the operator."""
    source_path: str
    """Absolute or catalog-relative path of the backing file."""
    unit_count: int
    """Size measure used for queue totals (line count)."""
    queued: bool = False
    """Set once the item has been routed into a printer queue."""

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id < 1:
            raise ValueError("PrintableItem.id must be a positive integer.")
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("PrintableItem.name must be a non-empty string.")
        if (
            isinstance(self.unit_count, bool)
            or not isinstance(self.unit_count, int)
            or self.unit_count < 0
        ):
            raise ValueError("PrintableItem.unit_count must be a non-negative integer.")

    def __str__(self) -> str:
        return f"{self.name} ({self.unit_count})"


@dataclass(frozen=True)
class Printer:
    """Printer destination discovered under the printers root."""

    id: int
    """1-based position of the printer in the catalog listing."""
    name: str
    """Display name, also the key of the printer's queue panel."""
    source_path: str
    """Directory backing the printer entry."""

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id < 1:
            raise ValueError("Printer.id must be a positive integer.")
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("Printer.name must be a non-empty string.")

    def __str__(self) -> str:
        return self.name


class FileOperation(Enum):
    """Operations offered after the operator accepts a file selection."""

    ASSIGN_TO_PRINTER = "Select Printer"
    DUPLICATE = "Duplicate"
    SPLIT = "Split"
    DELETE = "Delete"

    @property
    def label(self) -> str:
        return self.value


OPERATIONS: Tuple[FileOperation, ...] = tuple(FileOperation)


class WorkflowState(Enum):
    """Phases of the print-files workflow."""

    SELECTING = "selecting"
    CHOOSING_OPERATION = "choosing_operation"
    CHOOSING_PRINTER = "choosing_printer"


__all__ = [
    "FileOperation",
    "OPERATIONS",
    "PrintableItem",
    "Printer",
    "WorkflowState",
]
