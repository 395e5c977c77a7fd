"""Thin repository helpers for items.

These functions provide a small abstraction over SQLAlchemy sessions so the
GUI services can persist items without building queries themselves.
"""
from typing import Iterable, List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from coinpeek.models.schemas import ItemSchema

from .models import Item


def _commit(session: Session) -> None:
    try:
        session.commit()
    except Exception:
        session.rollback()
        raise


def add_item(session: Session, payload: ItemSchema) -> Item:
    """Insert a new item and return it with its assigned id."""
    item = Item(timestamp=payload.timestamp)
    session.add(item)
    _commit(session)
    session.refresh(item)
    return item


def get_item(session: Session, item_id: int) -> Optional[Item]:
    return session.get(Item, item_id)


def list_items(session: Session, newest_first: bool = False) -> List[Item]:
    """Return all items ordered by timestamp (oldest first by default)."""
    order = Item.timestamp.desc() if newest_first else Item.timestamp.asc()
    q = select(Item).order_by(order, Item.id)
    return list(session.execute(q).scalars().all())


def delete_items(session: Session, item_ids: Iterable[int]) -> int:
    """Delete the given items; unknown ids are ignored.

    Returns the number of rows removed.
    """
    deleted = 0
    for item_id in set(item_ids):
        item = session.get(Item, item_id)
        if item is None:
            continue
        session.delete(item)
        deleted += 1
    if deleted:
        _commit(session)
    return deleted


def count_items(session: Session) -> int:
    return session.execute(select(func.count(Item.id))).scalar_one()
