"""Printer-queue view: one bordered panel per printer in two columns.

Column frames are positioned from the ``PanelPlacement`` percentages; panels
are packed top to bottom inside their column in creation order, so each one
sits directly below the previous panel of the same column.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Dict, Sequence

from printflow.domain.panel_layout import LEFT_COLUMN, PanelPlacement
from printflow.viewmodels.snapshots import PanelSnapshot

CELL_PX = 8
"""Pixel width of one layout margin cell."""


class PrinterQueuePanel(ttk.LabelFrame):
    """Queue list and label total for a single printer."""

    def __init__(self, parent, printer_name: str, **kwargs):
        super().__init__(parent, text=printer_name, padding=4, **kwargs)
        self.printer_name = printer_name
        self.queue_list = tk.Listbox(self, height=1, activestyle="none", exportselection=False)
        self.queue_list.pack(side=tk.TOP, fill=tk.X)
        self.label_count_var = tk.StringVar(value="")
        ttk.Label(self, textvariable=self.label_count_var).pack(side=tk.TOP, anchor="w", pady=(4, 0))

    def update_panel(self, snapshot: PanelSnapshot) -> None:
        self.queue_list.delete(0, tk.END)
        for row in snapshot.rows:
            self.queue_list.insert(tk.END, row.label)
        self.queue_list.configure(height=max(1, len(snapshot.rows)))
        self.label_count_var.set(snapshot.label_count_text)


class PrinterQueueView(ttk.LabelFrame):
    """Container that arranges printer panels by their placement."""

    def __init__(self, parent, **kwargs):
        super().__init__(parent, text="Printer Queue", padding=4, height=400, **kwargs)
        self.pack_propagate(False)

        self.lbl_status = ttk.Label(self, text="")
        self._columns: Dict[int, ttk.Frame] = {}
        self._panels: Dict[str, PrinterQueuePanel] = {}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def set_queue_status(self, text: str) -> None:
        """Show the placeholder while ``text`` is non-empty."""
        if text:
            self.lbl_status.configure(text=text)
            self.lbl_status.place(relx=0.5, rely=0.5, anchor="center")
        else:
            self.lbl_status.place_forget()

    def apply_panels(self, panels: Sequence[PanelSnapshot]) -> None:
        for snapshot in panels:
            panel = self._panels.get(snapshot.title)
            if panel is None:
                column = self._column_frame(snapshot.placement)
                panel = PrinterQueuePanel(column, snapshot.title)
                panel.pack(side=tk.TOP, fill=tk.X, pady=(0, 4))
                self._panels[snapshot.title] = panel
            panel.update_panel(snapshot)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _column_frame(self, placement: PanelPlacement) -> ttk.Frame:
        frame = self._columns.get(placement.column)
        if frame is not None:
            return frame
        frame = ttk.Frame(self)
        if placement.column == LEFT_COLUMN:
            frame.place(
                relx=placement.x_percent / 100,
                x=placement.x_margin * CELL_PX,
                relwidth=(placement.width_percent or 0) / 100,
                relheight=1.0,
            )
        else:
            frame.place(
                relx=placement.x_percent / 100,
                relwidth=1.0 - placement.x_percent / 100,
                width=-placement.fill_margin * CELL_PX,
                relheight=1.0,
            )
        self._columns[placement.column] = frame
        return frame


__all__ = ["PrinterQueuePanel", "PrinterQueueView"]
