"""Theme primitives shared by the headless components.

Colors are hex strings and fonts are ``(family, size)`` pairs so any toolkit
binding can translate them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Font = Tuple[str, int]


@dataclass(frozen=True)
class TextStyle:
    font: Font
    color: str


@dataclass(frozen=True)
class Theme:
    """Base theme definition."""

    name: str = "Default"
    primary_color: str = "#1f2937"  # slate-800
    secondary_color: str = "#6b7280"  # gray-500
    background_color: str = "#ffffff"
    clear_color: str = ""
    body_font: Font = ("Helvetica", 17)
    footnote_font: Font = ("Helvetica", 13)

    @property
    def body_style(self) -> TextStyle:
        return TextStyle(font=self.body_font, color=self.primary_color)

    @property
    def footnote_style(self) -> TextStyle:
        return TextStyle(font=self.footnote_font, color=self.secondary_color)


@dataclass(frozen=True)
class DarkTheme(Theme):
    name: str = "Dark"
    background_color: str = "#0b1220"
    primary_color: str = "#e5e7eb"  # gray-200
    secondary_color: str = "#9ca3af"  # gray-400


DEFAULT_THEME = Theme()
