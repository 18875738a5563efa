"""
MainWindowView
---------------
Tkinter main window for PrintFlow following MVVM + Hexagonal architecture.
This file contains **only View code**: no filesystem access, no workflow
logic. It exposes host frames for the child views and a status bar.

Notes:
- Left area hosts the FileSelectionView.
- Right area hosts the PrinterQueueView.
- The toolbar only signals intents via callbacks passed to the constructor.
"""
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional


class MainWindowView(tk.Tk):
    """Top-level application window."""

    OnVoid = Optional[Callable[[], None]]

    def __init__(self, *, on_save_settings: OnVoid = None) -> None:
        super().__init__()

        self.title("PrintFlow")
        self.geometry("1100x700")
        self.minsize(800, 500)

        self._on_save_settings = on_save_settings

        # Toolbar, main area, status bar
        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)

        self._build_toolbar(self)
        self._build_main_area(self)
        self._build_statusbar(self)

    # ------------------------------------------------------------------
    # Toolbar
    # ------------------------------------------------------------------
    def _build_toolbar(self, parent: tk.Widget) -> None:
        toolbar = ttk.Frame(parent)
        toolbar.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 4))
        ttk.Button(toolbar, text="Save Settings", command=self._on_save_settings).grid(
            row=0, column=0, padx=(0, 6)
        )

    # ------------------------------------------------------------------
    # Main Area (split: left file selection, right printer queues)
    # ------------------------------------------------------------------
    def _build_main_area(self, parent: tk.Widget) -> None:
        content = ttk.Frame(parent)
        content.grid(row=1, column=0, sticky="nsew", padx=8, pady=4)
        content.rowconfigure(0, weight=1)
        content.columnconfigure(0, weight=0)
        content.columnconfigure(1, weight=1)

        self.file_host = ttk.Frame(content)
        self.file_host.grid(row=0, column=0, sticky="nsw", padx=(0, 8))

        self.queue_host = ttk.Frame(content)
        self.queue_host.grid(row=0, column=1, sticky="nsew")

    # ------------------------------------------------------------------
    # StatusBar
    # ------------------------------------------------------------------
    def _build_statusbar(self, parent: tk.Widget) -> None:
        status = ttk.Frame(parent)
        status.grid(row=2, column=0, sticky="ew", padx=8, pady=(4, 8))
        status.columnconfigure(0, weight=1)

        self.status_message_var = tk.StringVar(value="")
        ttk.Label(status, textvariable=self.status_message_var).grid(row=0, column=0, sticky="w")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def set_status_message(self, text: str) -> None:
        """Update the short status message shown in the status bar."""
        self.status_message_var.set(text)

    def show_toast(self, message: str, level: str = "info") -> None:
        """
        Lightweight user feedback in the statusbar.
        level is currently informational.
        """
        self.status_message_var.set(message)


__all__ = ["MainWindowView"]
