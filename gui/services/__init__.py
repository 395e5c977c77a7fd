from .items_service import ItemsService

__all__ = ["ItemsService"]
