"""Product Settings view."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from gui.components.two_column_header import TwoColumnSectionHeaderView
from gui.sections.product_settings import ProductSettingsSection, build_sections
from gui.utils.logging import log
from gui.views.base import BaseView
from storedesk.config import get_settings
from storedesk.models.schemas import ProductSettings, ProductType


@dataclass
class RenderedSection:
    header: TwoColumnSectionHeaderView
    rows: List[Tuple[str, Any]]


@dataclass
class ProductSettingsView(BaseView):
    name: str = "product_settings"
    settings: ProductSettings = field(default_factory=ProductSettings)
    product_type: ProductType = ProductType.simple
    is_edit_products_release5_enabled: Optional[bool] = None
    sections: List[ProductSettingsSection] = field(default_factory=list)

    def reload(self) -> List[ProductSettingsSection]:
        flag = self.is_edit_products_release5_enabled
        if flag is None:
            flag = get_settings().edit_products_release_5
        self.sections = build_sections(self.settings, self.product_type, flag)
        log(f"Built {len(self.sections)} product settings sections (release 5: {flag})", logging.DEBUG)
        return self.sections

    def render(self) -> List[RenderedSection]:
        """Materialize headers and ``(label, value)`` rows for every section."""
        if not self.sections:
            self.reload()
        rendered = []
        for section in self.sections:
            header = TwoColumnSectionHeaderView.make()
            header.configure(section.title, f"{len(section.rows)} settings")
            rendered.append(
                RenderedSection(
                    header=header,
                    rows=[(row.label, row.value) for row in section.rows],
                )
            )
        return rendered
