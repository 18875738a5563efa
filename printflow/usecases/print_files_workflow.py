"""Coordinator for one print-files session without UI concerns.

The coordinator owns the session state: the available-files view model, the
printer panels (and through them the session's layout engine), the printer
list, and the current machine state. Input events go through the pure
``transition`` function; the returned effects are applied here and a fresh
snapshot is pushed to the display port afterwards.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Tuple, Union

from printflow.domain.entities import OPERATIONS, FileOperation, Printer, WorkflowState
from printflow.domain.errors import InvalidTransition, WorkflowNotReady
from printflow.domain.ports import DisplayPort
from printflow.domain.workflow import (
    IDLE,
    Accept,
    Cancel,
    ChooseOperation,
    ChoosePrinter,
    DiscardMarks,
    MachineState,
    RouteToPrinter,
    Transition,
    WorkflowEvent,
    transition,
)
from printflow.usecases.load_catalog import CatalogSnapshot
from printflow.viewmodels.file_selection_vm import FileSelectionVM
from printflow.viewmodels.printer_queue_vm import PrinterQueueVM
from printflow.viewmodels.settings_vm import SettingsConfig
from printflow.viewmodels.snapshots import MenuSnapshot, WorkflowSnapshot

MENU_TITLE = "File Operation"

LoadCatalogFn = Callable[[str, str], CatalogSnapshot]


class PrintFilesWorkflow:
    """Drives selection -> operation -> printer -> queue update for one session."""

    def __init__(
        self,
        uc_load_catalog: LoadCatalogFn,
        display: DisplayPort,
        settings: SettingsConfig,
        *,
        file_vm: Optional[FileSelectionVM] = None,
        queue_vm: Optional[PrinterQueueVM] = None,
    ) -> None:
        """
        Initialize the workflow with its collaborators.

        Each instance gets its own ``PrinterQueueVM`` (and layout engine)
        unless one is injected, so sessions never share panel placement.
        """
        self._log = logging.getLogger(__name__)
        self.uc_load_catalog = uc_load_catalog
        self.display = display
        self.settings = settings
        self.file_vm = file_vm or FileSelectionVM()
        self.queue_vm = queue_vm or PrinterQueueVM()
        self._printers: Tuple[Printer, ...] = ()
        self._machine: MachineState = IDLE
        self._ready = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    @property
    def ready(self) -> bool:
        return self._ready

    def initialize(self) -> None:
        """Load the catalog and block until the workflow can take input.

        Calling again after a successful load does nothing. A failed load
        propagates the ``UseCaseError`` and leaves the workflow not ready.
        """
        if self._ready:
            return
        self.file_vm.begin_loading()
        self._emit()

        catalog = self.uc_load_catalog(self.settings.labels_dir, self.settings.printers_dir)

        self.file_vm.load(catalog.items)
        self._printers = tuple(catalog.printers)
        self._machine = IDLE
        self._ready = True
        self._emit()

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------
    @property
    def state(self) -> WorkflowState:
        return self._machine.state

    @property
    def pending_marks(self) -> Tuple[int, ...]:
        return self._machine.pending

    @property
    def printers(self) -> Tuple[Printer, ...]:
        return self._printers

    # ------------------------------------------------------------------
    # Input events
    # ------------------------------------------------------------------
    def mark(self, index: int) -> None:
        self._require_selecting("mark")
        self.file_vm.mark(index)
        self._emit()

    def unmark(self, index: int) -> None:
        self._require_selecting("unmark")
        self.file_vm.unmark(index)
        self._emit()

    def toggle(self, index: int) -> bool:
        self._require_selecting("toggle")
        marked = self.file_vm.toggle(index)
        self._emit()
        return marked

    def unmark_all(self) -> None:
        self._require_selecting("unmark_all")
        self.file_vm.unmark_all()
        self._emit()

    def accept(self) -> Transition:
        """Hand the marked files to the operation menu; marks clear either way."""
        self._require_selecting("accept")
        marked = self.file_vm.accept()
        return self.dispatch(Accept(tuple(marked)))

    def choose_operation(self, operation: Union[FileOperation, int]) -> Transition:
        if isinstance(operation, FileOperation):
            return self.dispatch(ChooseOperation(operation))
        return self.dispatch(ChooseOperation.from_index(operation))

    def choose_printer(self, index: int) -> Transition:
        return self.dispatch(ChoosePrinter(index))

    def cancel(self) -> Transition:
        return self.dispatch(Cancel())

    def dispatch(self, event: WorkflowEvent) -> Transition:
        """Run one event to completion and publish the resulting snapshot."""
        self._require_ready()
        result = transition(self._machine, event, printer_count=len(self._printers))

        touched: List[str] = []
        for effect in result.effects:
            if isinstance(effect, RouteToPrinter):
                touched.append(self._route(effect))
            elif isinstance(effect, DiscardMarks):
                self._discard(effect)

        self._log.debug(
            "%s: %s -> %s", type(event).__name__, self._machine.state.value, result.state.state.value
        )
        self._machine = result.state
        self._emit(touched)
        return result

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------
    def snapshot(self, touched: Sequence[str] = ()) -> WorkflowSnapshot:
        return WorkflowSnapshot(
            state=self._machine.state,
            file_status=self.file_vm.status_text(),
            files=self.file_vm.rows(),
            queue_status=self.queue_vm.status_text(),
            panels=self.queue_vm.snapshots(),
            touched=tuple(touched),
            menu=self._menu(),
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _route(self, effect: RouteToPrinter) -> str:
        printer = self._printers[effect.printer_index]
        files = self.file_vm.remove_marked_files(effect.marked)
        for item in files:
            item.queued = True
        panel = self.queue_vm.add_or_update_panel(printer.name, files)
        self._log.info(
            "Routed %d file(s) to %s (queue total %d)",
            len(files),
            printer.name,
            panel.unit_total,
        )
        return printer.name

    def _discard(self, effect: DiscardMarks) -> None:
        if effect.operation is None:
            self._log.debug("Selection of %d file(s) cancelled", len(effect.marked))
        else:
            self._log.info(
                "%s is not implemented; discarded selection of %d file(s)",
                effect.operation.label,
                len(effect.marked),
            )

    def _menu(self) -> Optional[MenuSnapshot]:
        if self._machine.state is WorkflowState.CHOOSING_OPERATION:
            return MenuSnapshot(MENU_TITLE, tuple(op.label for op in OPERATIONS))
        if self._machine.state is WorkflowState.CHOOSING_PRINTER:
            return MenuSnapshot(MENU_TITLE, tuple(p.name for p in self._printers))
        return None

    def _emit(self, touched: Sequence[str] = ()) -> None:
        self.display.render(self.snapshot(touched))

    def _require_ready(self) -> None:
        if not self._ready:
            raise WorkflowNotReady()

    def _require_selecting(self, action: str) -> None:
        self._require_ready()
        if self._machine.state is not WorkflowState.SELECTING:
            raise InvalidTransition(self._machine.state, action)


__all__ = ["MENU_TITLE", "PrintFilesWorkflow"]
