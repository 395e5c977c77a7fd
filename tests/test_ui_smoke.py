"""
UI Component Smoke Tests.
Widget tests need a display; they skip cleanly when Tk cannot start.
"""

from datetime import datetime, timezone

import pytest

from coinpeek.config import Settings
from gui.app import CoinPeekApp
from gui.state import AppState
from gui.theme import ModernTheme, Theme

tk = pytest.importorskip("tkinter")


@pytest.fixture()
def root():
    try:
        window = tk.Tk()
    except tk.TclError as exc:
        pytest.skip(f"Tk unavailable: {exc}")
    window.withdraw()
    try:
        yield window
    finally:
        window.destroy()


@pytest.fixture()
def app():
    application = CoinPeekApp(
        settings=Settings(
            database_url="sqlite://", in_memory=True, log_level="INFO", window_title="CoinPeek Test"
        )
    )
    try:
        yield application
    finally:
        application.shared_model_container.dispose()


class TestThemeAndState:
    def test_modern_theme_overrides_colors(self):
        assert ModernTheme().background_color != Theme().background_color
        assert ModernTheme().name == "Modern"

    def test_state_defaults(self):
        state = AppState()
        assert state.selected_item_ids == []
        assert state.item_count == 0
        assert state.status_message == "Ready"


class TestContentView:
    def test_launch_renders_zero_items(self, root, app):
        view = app.build_window(root)
        root.update_idletasks()

        assert root.title() == "CoinPeek Test"
        assert view.tree.get_children() == ()
        assert view.detail_var.get() == "Select an item"
        assert str(view.delete_btn["state"]) == "disabled"
        assert view.status_bar.count_var.get() == "0 items"

    def test_add_and_delete_items(self, root, app):
        view = app.build_window(root)

        view.add_item()
        root.update()
        assert len(view.tree.get_children()) == 1
        assert app.state.item_count == 1
        assert view.status_bar.count_var.get() == "1 item"
        assert app.state.status_message.startswith("Added item at ")

        view.tree.selection_set(view.tree.get_children()[0])
        root.update()
        assert view.detail_var.get().startswith("Item at ")
        assert str(view.delete_btn["state"]) == "normal"

        view.delete_selected()
        root.update()
        assert view.tree.get_children() == ()
        assert app.state.status_message == "Deleted 1 item"
        assert view.service.count() == 0

    def test_rows_show_local_time(self, root, app):
        from gui.views.content import format_timestamp

        ts = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        view = app.build_window(root)
        created = view.service.add_item(ts)
        view.refresh()

        assert view.tree.set(str(created.id), "timestamp") == format_timestamp(ts)

    def test_delete_without_selection_is_noop(self, root, app):
        view = app.build_window(root)
        view.service.add_item()
        view.refresh()
        view.delete_selected()
        assert len(view.tree.get_children()) == 1
