# printflow/app/main.py
from __future__ import annotations
import logging
import os
import sys
from tkinter import messagebox
from typing import Callable

# ---- Views (UI-only) ----
from .views.main_window import MainWindowView
from .views.file_selection_view import FileSelectionView
from .views.printer_queue_view import PrinterQueueView
from .tk_display import TkDisplay

# ---- ViewModels ----
from ..viewmodels.settings_vm import SettingsVM

# ---- UseCases & Adapters ----
from ..adapters.catalog_fs import CatalogFs
from ..adapters.storage_local import StorageLocal
from ..domain.entities import WorkflowState
from ..domain.ports import UseCaseError
from ..usecases.load_catalog import LoadCatalog
from ..usecases.load_settings import LoadSettings
from ..usecases.print_files_workflow import PrintFilesWorkflow
from ..usecases.save_settings import SaveSettings
from ..utils import logging as logging_utils

logging_utils.configure_root()


class App:
    """Bootstrap: wire Views <-> ViewModels, filesystem catalog, and the workflow."""

    def __init__(self) -> None:
        self._log = logging.getLogger(__name__)

        # ---- LocalStorage Adapter & settings ----
        self._storage_root = os.environ.get("PRINTFLOW_STORAGE_ROOT") or "."
        self._storage = StorageLocal(root_dir=self._storage_root)
        self.uc_load_settings = LoadSettings(self._storage)
        self.uc_save_settings = SaveSettings(self._storage)
        self.settings_vm = SettingsVM(on_save=self._on_settings_saved)
        self._load_user_settings()

        # ---- Main window (hidden until the catalog is loaded) ----
        self.win = MainWindowView(on_save_settings=self._on_save_settings)
        self.win.withdraw()

        # ---- Subviews (constructor callbacks) ----
        self.file_view = FileSelectionView(
            self.win.file_host,
            on_toggle=lambda idx: self._guard(self.workflow.toggle, idx),
            on_accept=lambda: self._guard(self.workflow.accept),
        )
        self.file_view.pack(fill="both", expand=True)

        self.queue_view = PrinterQueueView(self.win.queue_host)
        self.queue_view.pack(fill="both", expand=True)

        self.display = TkDisplay(
            self.win,
            self.file_view,
            self.queue_view,
            on_choose=self._on_menu_choice,
            on_cancel=lambda: self._guard(self.workflow.cancel),
        )

        # ---- Catalog adapter & workflow ----
        self._catalog = CatalogFs(skip_unreadable=self.runtime_config.skip_unreadable)
        self.uc_load_catalog = LoadCatalog(self._catalog)
        self.workflow = PrintFilesWorkflow(
            self.uc_load_catalog, self.display, self.runtime_config
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def run(self) -> int:
        """Load the catalog, then show the window; a failed load never shows it."""
        try:
            self.workflow.initialize()
        except UseCaseError as err:
            self._log.error("Initialization failed (%s): %s", err.code, err.message)
            messagebox.showerror("PrintFlow", f"Could not load files:\n{err.message}", parent=self.win)
            self.win.destroy()
            return 1
        self.win.deiconify()
        self.win.set_status_message("Ready.")
        self.win.mainloop()
        return 0

    def _load_user_settings(self) -> None:
        try:
            payload = self.uc_load_settings()
            self.settings_vm.apply_dict(payload)
        except (UseCaseError, ValueError) as err:
            self._log.warning("Ignoring saved settings: %s", err)
        # Env overrides apply to this run only; Save Settings persists settings_vm.config.
        self.runtime_config = self.settings_vm.runtime_config()
        level = logging_utils.apply_preferences(self.runtime_config.debug_logging)
        self._log.debug("Effective log level: %s", logging.getLevelName(level))
        self._log.info(
            "Labels folder %s, printers folder %s",
            self.runtime_config.labels_dir,
            self.runtime_config.printers_dir,
        )

    # ------------------------------------------------------------------
    # Callbacks
    # ------------------------------------------------------------------
    def _on_menu_choice(self, index: int) -> None:
        if self.workflow.state is WorkflowState.CHOOSING_PRINTER:
            self._guard(self.workflow.choose_printer, index)
        else:
            self._guard(self.workflow.choose_operation, index)

    def _on_save_settings(self) -> None:
        self._guard(self.settings_vm.cmd_save)

    def _on_settings_saved(self, payload: dict) -> None:
        self.uc_save_settings(payload)
        self.win.show_toast(f"Settings saved to {self._storage.settings_path}")

    def _guard(self, fn: Callable, *args) -> None:
        try:
            fn(*args)
        except UseCaseError as err:
            self._toast_error(err)

    def _toast_error(self, err: UseCaseError) -> None:
        self._log.warning("UseCase error (%s): %s", err.code, err.message)
        self.win.show_toast(err.message, level="error")


def main() -> int:
    app = App()
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
