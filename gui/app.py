"""Main GUI application object.

`CoinPeekApp` owns the single ModelContainer for the process and mounts the
root ContentView in a Tk window. Container construction failure is fatal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from coinpeek.config import Settings, get_settings
from coinpeek.database.container import (
    ContainerError,
    ModelConfiguration,
    ModelContainer,
    Schema,
)
from coinpeek.database.models import Item
from coinpeek.utils.logger import get_logger, setup_logging
from gui.state import AppState

logger = get_logger(__name__)


def create_shared_container(settings: Optional[Settings] = None) -> ModelContainer:
    """Build the container for the app's schema or terminate the process."""
    settings = settings or get_settings()
    schema = Schema([Item])
    configuration = ModelConfiguration(
        schema=schema,
        is_stored_in_memory_only=settings.in_memory,
        url=settings.database_url,
    )
    try:
        return ModelContainer(schema, configurations=[configuration])
    except ContainerError as exc:
        logger.critical("Could not create ModelContainer: %s", exc)
        raise SystemExit(f"Could not create ModelContainer: {exc}") from exc


@dataclass
class CoinPeekApp:
    """Application shell: one container, one window, one root view."""

    settings: Settings = field(default_factory=get_settings)
    state: AppState = field(default_factory=AppState)
    _container: Optional[ModelContainer] = field(default=None, init=False, repr=False)

    @property
    def shared_model_container(self) -> ModelContainer:
        if self._container is None:
            self._container = create_shared_container(self.settings)
        return self._container

    def build_window(self, root):
        """Mount the root view in ``root`` and return it."""
        from gui.theme import apply_theme
        from gui.views.content import ContentView

        container = self.shared_model_container
        root.title(self.settings.window_title)
        root.geometry("480x600")
        root.minsize(360, 400)
        apply_theme(root)
        view = ContentView(root, container, state=self.state)
        view.pack(fill="both", expand=True)
        return view

    def run(self) -> None:
        """Start the Tk event loop; blocks until the window closes."""
        import tkinter as tk

        container = self.shared_model_container
        try:
            root = tk.Tk()
            self.build_window(root)
            root.mainloop()
        finally:
            container.dispose()
            self._container = None


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, force=True)
    CoinPeekApp(settings=settings).run()


if __name__ == "__main__":
    main()
