"""File-selection view: multi-mark list of available files plus status line.

The view never keeps its own notion of which files are marked. Clicks are
forwarded as per-index toggles and the next snapshot re-syncs the listbox.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional, Sequence, Set

from printflow.viewmodels.snapshots import FileRow


class FileSelectionView(ttk.LabelFrame):
    """Listbox of available files with an Accept action."""

    def __init__(
        self,
        parent,
        *,
        on_toggle: Optional[Callable[[int], None]] = None,
        on_accept: Optional[Callable[[], None]] = None,
        **kwargs,
    ):
        super().__init__(parent, text="File Selection", padding=6, **kwargs)
        self.on_toggle = on_toggle
        self.on_accept = on_accept
        self._shown_marks: Set[int] = set()

        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        self.listbox = tk.Listbox(
            self,
            selectmode=tk.MULTIPLE,
            exportselection=False,
            activestyle="none",
            width=32,
        )
        vsb = ttk.Scrollbar(self, orient="vertical", command=self.listbox.yview)
        self.listbox.configure(yscrollcommand=vsb.set)
        self.listbox.grid(row=0, column=0, sticky="nsew")
        vsb.grid(row=0, column=1, sticky="ns")

        self.status_var = tk.StringVar(value="")
        ttk.Label(self, textvariable=self.status_var).grid(
            row=1, column=0, columnspan=2, sticky="w", pady=(6, 0)
        )

        self.btn_accept = ttk.Button(self, text="Accept", command=self._on_accept_click)
        self.btn_accept.grid(row=2, column=0, columnspan=2, sticky="e", pady=(6, 0))

        self.listbox.bind("<<ListboxSelect>>", self._on_select_changed)
        self.listbox.bind("<Return>", lambda _e: self._on_accept_click())

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def set_rows(self, rows: Sequence[FileRow]) -> None:
        # A disabled listbox ignores edits; refill it in normal state.
        previous = str(self.listbox.cget("state"))
        self.listbox.configure(state="normal")
        self.listbox.delete(0, tk.END)
        for row in rows:
            self.listbox.insert(tk.END, row.label)
        self._shown_marks = {row.index for row in rows if row.marked}
        for index in sorted(self._shown_marks):
            self.listbox.selection_set(index)
        self.listbox.configure(state=previous)

    def set_status(self, text: str) -> None:
        self.status_var.set(text)

    def set_enabled(self, enabled: bool) -> None:
        state = "normal" if enabled else "disabled"
        self.listbox.configure(state=state)
        self.btn_accept.configure(state=state)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _on_select_changed(self, _event=None) -> None:
        current = set(self.listbox.curselection())
        changed = sorted(current ^ self._shown_marks)
        self._shown_marks = current
        if self.on_toggle:
            for index in changed:
                self.on_toggle(index)

    def _on_accept_click(self) -> None:
        if self.on_accept:
            self.on_accept()


__all__ = ["FileSelectionView"]
