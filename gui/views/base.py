"""Base class for GUI views.

The actual UI framework is not required for tests; views track only the
state a toolkit binding needs.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BaseView:
    name: str = "base"
    is_visible: bool = False

    def view_will_appear(self) -> None:
        self.is_visible = True

    def view_did_disappear(self) -> None:
        self.is_visible = False
