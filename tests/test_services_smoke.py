"""
Smoke tests for GUI services.
These run against an in-memory container, no display required.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from coinpeek.database.container import ModelConfiguration, ModelContainer, Schema
from coinpeek.database.models import Item
from gui.services.items_service import ItemsService


@pytest.fixture()
def service():
    container = ModelContainer(
        Schema([Item]), [ModelConfiguration(is_stored_in_memory_only=True)]
    )
    try:
        yield ItemsService(container)
    finally:
        container.dispose()


class TestItemsService:
    """Tests for gui/services/items_service.py."""

    def test_empty_store(self, service):
        assert service.fetch_items() == []
        assert service.count() == 0
        assert service.export_items() == []

    def test_add_item_defaults_to_now(self, service):
        before = datetime.now(timezone.utc)
        created = service.add_item()
        after = datetime.now(timezone.utc)

        assert created.id is not None
        # SQLite keeps microseconds, so the stored value stays within bounds
        assert before <= created.timestamp <= after
        assert service.count() == 1

    def test_add_item_with_explicit_timestamp(self, service):
        ts = datetime(2024, 4, 1, 10, 0, tzinfo=timezone.utc)
        created = service.add_item(ts)
        [fetched] = service.fetch_items()
        assert fetched.id == created.id
        assert fetched.timestamp == ts

    def test_fetch_orders_by_timestamp(self, service):
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        for hours in (3, 1, 2):
            service.add_item(base + timedelta(hours=hours))

        ordered = [i.timestamp.hour for i in service.fetch_items()]
        assert ordered == [1, 2, 3]
        assert [i.timestamp.hour for i in service.fetch_items(newest_first=True)] == [3, 2, 1]

    def test_delete_items(self, service):
        a = service.add_item(datetime(2024, 1, 1, tzinfo=timezone.utc))
        b = service.add_item(datetime(2024, 1, 2, tzinfo=timezone.utc))

        assert service.delete_items([]) == 0
        assert service.delete_items([a.id, 12345]) == 1
        assert [i.id for i in service.fetch_items()] == [b.id]

    def test_mutations_are_logged(self, service):
        with patch("gui.services.items_service.log") as log:
            item = service.add_item(datetime(2024, 1, 1, tzinfo=timezone.utc))
            service.delete_items([item.id])
        messages = [call.args[0] for call in log.call_args_list]
        assert messages[0].startswith(f"Added item {item.id}")
        assert messages[1] == "Deleted 1 items"

    def test_export_items(self, service):
        item = service.add_item(datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc))
        assert service.export_items() == [
            {"id": item.id, "timestamp": "2024-01-02T03:04:05+00:00"}
        ]
