"""Tkinter implementation of :class:`printflow.domain.ports.DisplayPort`.

Call context:
    ``printflow.app.main.App`` builds one instance and hands it to
    ``PrintFilesWorkflow``. Every snapshot is pushed into the views; the menu
    dialog is opened, swapped, or closed to match ``snapshot.menu``.
"""

from __future__ import annotations

from typing import Callable, Optional

from printflow.domain.entities import WorkflowState
from printflow.domain.ports import DisplayPort
from printflow.viewmodels.snapshots import WorkflowSnapshot
from .views.file_selection_view import FileSelectionView
from .views.operation_dialog import OperationDialog
from .views.printer_queue_view import PrinterQueueView


class TkDisplay(DisplayPort):
    """Route workflow snapshots into the Tk views."""

    def __init__(
        self,
        master,
        file_view: FileSelectionView,
        queue_view: PrinterQueueView,
        *,
        on_choose: Callable[[int], None],
        on_cancel: Callable[[], None],
    ) -> None:
        self.master = master
        self.file_view = file_view
        self.queue_view = queue_view
        self.on_choose = on_choose
        self.on_cancel = on_cancel
        self._dialog: Optional[OperationDialog] = None
        self._dialog_state: Optional[WorkflowState] = None

    def render(self, snapshot: WorkflowSnapshot) -> None:
        self.file_view.set_rows(snapshot.files)
        self.file_view.set_status(snapshot.file_status)
        self.file_view.set_enabled(snapshot.menu is None)

        self.queue_view.set_queue_status(snapshot.queue_status)
        self.queue_view.apply_panels(snapshot.panels)

        if snapshot.menu is None:
            self._close_dialog()
            return
        if self._dialog is not None and self._dialog_state is snapshot.state:
            return
        self._close_dialog()
        self._dialog = OperationDialog(
            self.master,
            snapshot.menu.options,
            title=snapshot.menu.title,
            on_choose=self.on_choose,
            on_cancel=self.on_cancel,
        )
        self._dialog_state = snapshot.state

    def _close_dialog(self) -> None:
        if self._dialog is None:
            return
        dialog, self._dialog, self._dialog_state = self._dialog, None, None
        dialog.grab_release()
        dialog.destroy()


__all__ = ["TkDisplay"]
