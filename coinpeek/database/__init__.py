"""Database models, container and session management."""
from .models import Base, Item
from .engine import get_engine, init_db
from .container import ContainerError, ModelConfiguration, ModelContainer, Schema
from .repository import (
    add_item,
    count_items,
    delete_items,
    get_item,
    list_items,
)

__all__ = [
    "Base",
    "Item",
    "get_engine",
    "init_db",
    "ContainerError",
    "ModelConfiguration",
    "ModelContainer",
    "Schema",
    "add_item",
    "count_items",
    "delete_items",
    "get_item",
    "list_items",
]
