import tkinter as tk
from tkinter import ttk

from gui.state import AppState


class StatusBar(ttk.Frame):
    """
    Status bar for the root window.

    Displays the last status message on the left and the number of
    stored items on the right.
    """

    def __init__(self, parent, app_state: AppState):
        super().__init__(parent, style="Panel.TFrame", padding=(6, 3))
        self.app_state = app_state

        # Status message (left side)
        self.message_var = tk.StringVar(value=app_state.status_message)
        ttk.Label(self, textvariable=self.message_var, style="Muted.TLabel").pack(side=tk.LEFT)

        # Item count (right side)
        self.count_var = tk.StringVar(value="")
        ttk.Label(self, textvariable=self.count_var, style="Muted.TLabel").pack(side=tk.RIGHT)

    def update_status(self):
        """Refresh status bar from app state."""
        self.message_var.set(self.app_state.status_message)
        noun = "item" if self.app_state.item_count == 1 else "items"
        self.count_var.set(f"{self.app_state.item_count} {noun}")
