"""Pydantic schemas to validate item payloads at ingress.

The GUI builds an ItemSchema before anything touches the database, so a
missing or malformed timestamp fails fast instead of at commit time.
"""
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ItemSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = Field(default=None, ge=1)
    timestamp: datetime

    def to_export(self) -> Dict[str, Any]:
        """JSON-serializable dict with an ISO-8601 timestamp."""
        return {"id": self.id, "timestamp": self.timestamp.isoformat()}
