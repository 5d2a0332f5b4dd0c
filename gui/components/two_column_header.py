"""Reusable two-label section header."""

from __future__ import annotations

from dataclasses import dataclass, field

from gui.theme import DEFAULT_THEME, TextStyle, Theme


@dataclass
class TwoColumnSectionHeaderView:
    left_text: str = ""
    right_text: str = ""
    left_style: TextStyle = field(default_factory=lambda: DEFAULT_THEME.footnote_style)
    right_style: TextStyle = field(default_factory=lambda: DEFAULT_THEME.footnote_style)
    background_color: str = DEFAULT_THEME.clear_color

    @classmethod
    def make(cls, theme: Theme = DEFAULT_THEME) -> "TwoColumnSectionHeaderView":
        """Return a header styled with ``theme``'s footnote style."""
        return cls(
            left_style=theme.footnote_style,
            right_style=theme.footnote_style,
            background_color=theme.clear_color,
        )

    def configure(self, left_text: str, right_text: str) -> None:
        self.left_text = left_text
        self.right_text = right_text
