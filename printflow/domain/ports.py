from __future__ import annotations
from typing import Dict, List, Optional, Protocol, TYPE_CHECKING

from .entities import PrintableItem, Printer

if TYPE_CHECKING:  # pragma: no cover - type checking helper
    from printflow.viewmodels.snapshots import WorkflowSnapshot


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class CatalogPort(Protocol):
    """Read-only listing of printable files and printer destinations.

    ``list_items`` may raise ``OSError`` when the folder or one of its files
    cannot be read.
    """

    def list_items(self, folder_path: str) -> List[PrintableItem]: ...
    def list_printers(self, root_path: str) -> List[Printer]: ...


class DisplayPort(Protocol):
    """Receives immutable view-model snapshots after every workflow mutation."""

    def render(self, snapshot: "WorkflowSnapshot") -> None: ...


class StoragePort(Protocol):
    """Persistence for user settings."""

    def save_user_settings(self, payload: Dict) -> None: ...
    def load_user_settings(self) -> Optional[Dict]: ...
