"""Base class for GUI views.

Views receive the shared ModelContainer explicitly; nothing is looked up
from globals.
"""

from __future__ import annotations

from tkinter import ttk
from typing import Optional

from coinpeek.database.container import ModelContainer
from gui.state import AppState


class BaseView(ttk.Frame):
    def __init__(
        self,
        parent,
        container: ModelContainer,
        state: Optional[AppState] = None,
        **kwargs,
    ):
        super().__init__(parent, style="Main.TFrame", padding=12, **kwargs)
        self.container = container
        self.app_state = state or AppState()
        self._build()

    def _build(self) -> None:
        raise NotImplementedError

    def refresh(self) -> None:
        """Reload data from the container."""
