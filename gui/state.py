"""Application state container.

This is a small, import-safe state object used by the GUI layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class AppState:
    """Holds ephemeral UI state."""

    current_view: str = "orders"
    site_id: Optional[int] = None
    is_app_active: bool = True
