"""Pydantic schemas to validate external inputs (store API, push payloads).

These schemas act as contracts at ingress points so we fail fast when
remote payloads change shape. Enum fields tolerate values the client does
not know yet by mapping them to a catch-all member.
"""
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class OrderStatus(str, Enum):
    pending = "pending"
    processing = "processing"
    on_hold = "on-hold"
    completed = "completed"
    cancelled = "cancelled"
    refunded = "refunded"
    failed = "failed"


class ProductType(str, Enum):
    simple = "simple"
    grouped = "grouped"
    affiliate = "external"
    variable = "variable"
    custom = "custom"

    @classmethod
    def _missing_(cls, value):
        # Plugins register their own product types.
        return cls.custom


class NoteKind(str, Enum):
    store_order = "store_order"
    comment = "comment"
    product_review = "store_review"
    unknown = "unknown"

    @classmethod
    def _missing_(cls, value):
        return cls.unknown


class ProductSettings(BaseModel):
    """Snapshot of the editable settings of a single product."""

    model_config = ConfigDict(frozen=True)

    status: str = Field(default="publish")
    visibility: str = Field(default="public")
    catalog_visibility: str = Field(default="visible")
    virtual: bool = False
    downloadable: bool = False
    reviews_allowed: bool = True
    slug: str = ""
    purchase_note: Optional[str] = None
    menu_order: int = 0
    password: Optional[str] = None

    @field_validator("slug")
    @classmethod
    def slug_stripped(cls, v: str) -> str:
        return (v or "").strip()


class PushNotification(BaseModel):
    note_id: int = Field(ge=0)
    kind: NoteKind = NoteKind.unknown
    title: str = ""
    body: str = ""

    @field_validator("kind", mode="before")
    @classmethod
    def kind_from_type(cls, v):
        if v is None:
            return NoteKind.unknown
        return NoteKind(v)
