"""Section and row configuration for the Product Settings screen.

Each section is declared as a table of ``(row kind, predicate)`` pairs. A
row is shown when its predicate holds for the product type and the
feature flag; rows that do not apply are omitted, never reported as errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Sequence, Tuple

from storedesk.models.schemas import ProductSettings, ProductType


class ProductSettingsRowKind(str, Enum):
    status = "status"
    visibility = "visibility"
    catalog_visibility = "catalog_visibility"
    virtual_product = "virtual_product"
    downloadable_product = "downloadable_product"
    reviews_allowed = "reviews_allowed"
    slug = "slug"
    purchase_note = "purchase_note"
    menu_order = "menu_order"


# kind -> (label, settings attribute)
_ROW_FIELDS = {
    ProductSettingsRowKind.status: ("Status", "status"),
    ProductSettingsRowKind.visibility: ("Visibility", "visibility"),
    ProductSettingsRowKind.catalog_visibility: ("Catalog Visibility", "catalog_visibility"),
    ProductSettingsRowKind.virtual_product: ("Virtual Product", "virtual"),
    ProductSettingsRowKind.downloadable_product: ("Downloadable Product", "downloadable"),
    ProductSettingsRowKind.reviews_allowed: ("Enable Reviews", "reviews_allowed"),
    ProductSettingsRowKind.slug: ("Slug", "slug"),
    ProductSettingsRowKind.purchase_note: ("Purchase Note", "purchase_note"),
    ProductSettingsRowKind.menu_order: ("Menu Order", "menu_order"),
}


@dataclass(frozen=True)
class ProductSettingsRow:
    """One settings field shown as a table row."""

    kind: ProductSettingsRowKind
    settings: ProductSettings

    @property
    def label(self) -> str:
        return _ROW_FIELDS[self.kind][0]

    @property
    def value(self) -> Any:
        return getattr(self.settings, _ROW_FIELDS[self.kind][1])


RowPredicate = Callable[[ProductType, bool], bool]
RowSpec = Tuple[ProductSettingsRowKind, RowPredicate]


def always(product_type: ProductType, flag_enabled: bool) -> bool:
    return True


def simple_only(product_type: ProductType, flag_enabled: bool) -> bool:
    return product_type == ProductType.simple


def simple_with_flag(product_type: ProductType, flag_enabled: bool) -> bool:
    return product_type == ProductType.simple and flag_enabled


class ProductSettingsSection:
    """Base for a settings section; subclasses declare ``title`` and ``row_specs``."""

    title: str = ""
    row_specs: Sequence[RowSpec] = ()

    def __init__(
        self,
        settings: ProductSettings,
        product_type: ProductType,
        is_edit_products_release5_enabled: bool,
    ):
        product_type = ProductType(product_type)
        self.rows: List[ProductSettingsRow] = [
            ProductSettingsRow(kind=kind, settings=settings)
            for kind, predicate in self.row_specs
            if predicate(product_type, is_edit_products_release5_enabled)
        ]

    @property
    def row_kinds(self) -> List[ProductSettingsRowKind]:
        return [row.kind for row in self.rows]

    def __repr__(self) -> str:
        kinds = ", ".join(k.value for k in self.row_kinds)
        return f"{type(self).__name__}(title={self.title!r}, rows=[{kinds}])"


class PublishSettings(ProductSettingsSection):
    title = "Publish Settings"
    row_specs = (
        (ProductSettingsRowKind.status, always),
        (ProductSettingsRowKind.visibility, always),
        (ProductSettingsRowKind.catalog_visibility, always),
        (ProductSettingsRowKind.virtual_product, simple_only),
        (ProductSettingsRowKind.downloadable_product, simple_with_flag),
    )


class MoreOptions(ProductSettingsSection):
    title = "More Options"
    row_specs = (
        (ProductSettingsRowKind.reviews_allowed, always),
        (ProductSettingsRowKind.slug, always),
        (ProductSettingsRowKind.purchase_note, always),
        (ProductSettingsRowKind.menu_order, always),
    )


SECTIONS = (PublishSettings, MoreOptions)


def build_sections(
    settings: ProductSettings,
    product_type: ProductType,
    is_edit_products_release5_enabled: bool,
) -> List[ProductSettingsSection]:
    """Return the Product Settings sections in display order."""
    return [
        section(settings, product_type, is_edit_products_release5_enabled)
        for section in SECTIONS
    ]
