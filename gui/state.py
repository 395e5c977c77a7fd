"""Application state container.

Small, import-safe state object shared by the root view and status bar.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class AppState:
    """Holds ephemeral UI state."""

    selected_item_ids: List[int] = field(default_factory=list)
    status_message: str = "Ready"
    item_count: int = 0
