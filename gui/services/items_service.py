"""Item CRUD helpers for the GUI.

The service wraps the shared ModelContainer so views never open sessions
themselves. Everything it returns is a detached ItemSchema.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from coinpeek.database.container import ModelContainer
from coinpeek.database.repository import (
    add_item,
    count_items,
    delete_items,
    list_items,
)
from coinpeek.models.schemas import ItemSchema, utc_now
from gui.utils.logging import log


class ItemsService:
    """Read and mutate items in the shared container."""

    def __init__(self, container: ModelContainer):
        self.container = container

    def fetch_items(self, newest_first: bool = False) -> List[ItemSchema]:
        with self.container.session_scope() as db:
            return [
                ItemSchema.model_validate(item)
                for item in list_items(db, newest_first=newest_first)
            ]

    def add_item(self, timestamp: Optional[datetime] = None) -> ItemSchema:
        payload = ItemSchema(timestamp=timestamp or utc_now())
        with self.container.session_scope() as db:
            item = add_item(db, payload)
            created = ItemSchema.model_validate(item)
        log(f"Added item {created.id} at {created.timestamp.isoformat()}")
        return created

    def delete_items(self, item_ids: Iterable[int]) -> int:
        ids = list(item_ids)
        if not ids:
            return 0
        with self.container.session_scope() as db:
            deleted = delete_items(db, ids)
        if deleted != len(set(ids)):
            log(f"Deleted {deleted} of {len(set(ids))} requested items", logging.WARNING)
        else:
            log(f"Deleted {deleted} items")
        return deleted

    def count(self) -> int:
        with self.container.session_scope() as db:
            return count_items(db)

    def export_items(self) -> List[Dict[str, Any]]:
        """Export all items as JSON-serializable dicts."""

        return [item.to_export() for item in self.fetch_items()]
