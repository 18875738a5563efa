"""Domain package exports for value objects, ports, and pure workflow logic."""

from .entities import OPERATIONS, FileOperation, PrintableItem, Printer, WorkflowState
from .errors import InvalidTransition, WorkflowNotReady
from .panel_layout import PanelLayoutEngine, PanelPlacement
from .ports import UseCaseError
from .selectable_list import SelectableList

__all__ = [
    "FileOperation",
    "InvalidTransition",
    "OPERATIONS",
    "PanelLayoutEngine",
    "PanelPlacement",
    "PrintableItem",
    "Printer",
    "SelectableList",
    "UseCaseError",
    "WorkflowNotReady",
    "WorkflowState",
]
