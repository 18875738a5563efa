from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional, Sequence


class OperationDialog(tk.Toplevel):
    """
    Modal option picker used for both the operation and the printer choice.
    Emits the chosen position through ``on_choose``; closing the window emits
    ``on_cancel``.
    """
    def __init__(self, master, options: Sequence[str], title: str = "File Operation",
                 on_choose: Optional[Callable[[int], None]] = None,
                 on_cancel: Optional[Callable[[], None]] = None):
        super().__init__(master)
        self.title(title)
        self.on_choose = on_choose
        self.on_cancel = on_cancel
        self.resizable(False, False)
        self.protocol("WM_DELETE_WINDOW", self._on_cancel)

        body = ttk.Frame(self, padding=12)
        body.pack(fill="both", expand=True)

        # First option preselected, like an option selector with no value yet
        self.choice = tk.IntVar(value=0)
        for index, label in enumerate(options):
            ttk.Radiobutton(body, text=label, value=index, variable=self.choice).pack(
                anchor="w", pady=1
            )

        buttons = ttk.Frame(body)
        buttons.pack(fill="x", pady=(10, 0))
        ttk.Button(buttons, text="OK", command=self._on_ok).pack(side="right")
        ttk.Button(buttons, text="Cancel", command=self._on_cancel).pack(side="right", padx=(0, 6))

        self.bind("<Return>", lambda _e: self._on_ok())
        self.bind("<Escape>", lambda _e: self._on_cancel())

        # --- Modal
        self.transient(master)
        self.wait_visibility()
        self.grab_set()
        self.focus_set()

    def _on_ok(self) -> None:
        index = int(self.choice.get())
        if callable(self.on_choose):
            self.on_choose(index)

    def _on_cancel(self) -> None:
        if callable(self.on_cancel):
            self.on_cancel()


__all__ = ["OperationDialog"]
