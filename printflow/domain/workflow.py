"""Pure state machine for the select -> operation -> printer flow.

``transition`` consumes one typed event and returns the next machine state
together with the effects the orchestrator has to apply. It performs no I/O
and touches no lists, so every path can be exercised without a display.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .entities import OPERATIONS, FileOperation, WorkflowState
from .errors import InvalidTransition

Marks = Tuple[int, ...]


# ---- Events ----
@dataclass(frozen=True)
class Accept:
    """Operator confirmed the file selection; carries the accepted marks."""

    marked: Marks = ()


@dataclass(frozen=True)
class ChooseOperation:
    operation: FileOperation

    @classmethod
    def from_index(cls, index: int) -> "ChooseOperation":
        """Resolve a menu position into an operation (``IndexError`` if out of range)."""
        if isinstance(index, bool) or not isinstance(index, int) or index < 0:
            raise IndexError(f"Operation index {index!r} out of range.")
        return cls(OPERATIONS[index])


@dataclass(frozen=True)
class ChoosePrinter:
    index: int


@dataclass(frozen=True)
class Cancel:
    """Operator closed the open menu without choosing."""


WorkflowEvent = Union[Accept, ChooseOperation, ChoosePrinter, Cancel]


# ---- Effects ----
@dataclass(frozen=True)
class ShowOperationMenu:
    operations: Tuple[FileOperation, ...] = OPERATIONS


@dataclass(frozen=True)
class ShowPrinterMenu:
    pass


@dataclass(frozen=True)
class CloseMenu:
    pass


@dataclass(frozen=True)
class DiscardMarks:
    marked: Marks
    operation: Optional[FileOperation] = None
    """Operation that ended the flow, ``None`` when cancelled."""


@dataclass(frozen=True)
class RouteToPrinter:
    printer_index: int
    marked: Marks


Effect = Union[ShowOperationMenu, ShowPrinterMenu, CloseMenu, DiscardMarks, RouteToPrinter]


@dataclass(frozen=True)
class MachineState:
    state: WorkflowState = WorkflowState.SELECTING
    pending: Marks = ()
    """Marks captured on accept, held until routing or discard."""


@dataclass(frozen=True)
class Transition:
    state: MachineState
    effects: Tuple[Effect, ...] = ()


IDLE = MachineState()


def transition(current: MachineState, event: WorkflowEvent, *, printer_count: int) -> Transition:
    """Advance the workflow by one event.

    Raises:
        InvalidTransition: ``event`` cannot be consumed in ``current.state``.
        IndexError: a printer index outside ``[0, printer_count)``.
    """
    state = current.state

    if state is WorkflowState.SELECTING:
        if isinstance(event, Accept):
            if not event.marked:
                return Transition(IDLE)
            return Transition(
                MachineState(WorkflowState.CHOOSING_OPERATION, tuple(event.marked)),
                (ShowOperationMenu(),),
            )
        raise InvalidTransition(state, event)

    if isinstance(event, Cancel):
        return Transition(IDLE, (DiscardMarks(current.pending), CloseMenu()))

    if state is WorkflowState.CHOOSING_OPERATION:
        if isinstance(event, ChooseOperation):
            if event.operation is FileOperation.ASSIGN_TO_PRINTER:
                return Transition(
                    MachineState(WorkflowState.CHOOSING_PRINTER, current.pending),
                    (ShowPrinterMenu(),),
                )
            # Duplicate/Split/Delete have no effect yet; they only close the menu.
            return Transition(
                IDLE, (DiscardMarks(current.pending, event.operation), CloseMenu())
            )
        raise InvalidTransition(state, event)

    if state is WorkflowState.CHOOSING_PRINTER:
        if isinstance(event, ChoosePrinter):
            index = event.index
            if isinstance(index, bool) or not isinstance(index, int):
                raise TypeError("Printer index must be an int.")
            if index < 0 or index >= printer_count:
                raise IndexError(
                    f"Printer index {index} out of range for {printer_count} printers."
                )
            return Transition(
                IDLE, (RouteToPrinter(index, current.pending), CloseMenu())
            )
        raise InvalidTransition(state, event)

    raise InvalidTransition(state, event)  # pragma: no cover - exhaustive enum


__all__ = [
    "Accept",
    "Cancel",
    "ChooseOperation",
    "ChoosePrinter",
    "CloseMenu",
    "DiscardMarks",
    "Effect",
    "IDLE",
    "MachineState",
    "RouteToPrinter",
    "ShowOperationMenu",
    "ShowPrinterMenu",
    "Transition",
    "WorkflowEvent",
    "transition",
]
