"""Data schemas and validation."""
from .schemas import ItemSchema, utc_now

__all__ = [
    "ItemSchema",
    "utc_now",
]
