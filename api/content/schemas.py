"""
Pydantic schemas for page content endpoints.
"""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from core.schemas import Record
from core.validation import OptionalText, Payload, Text


class PageContent(Record):
    id: int
    slug: str
    title: str
    content: str
    meta_description: str | None = None
    meta_keywords: str | None = None
    sidebar_content: str | None = None
    updated_at: datetime | None = None
    updated_by: str | None = None


class PageSummary(Record):
    slug: str
    title: str
    updated_at: datetime | None = None
    updated_by: str | None = None


class PageListResponse(Record):
    items: list[PageSummary]
    total: int


class PageSave(Payload):
    """
    Body of `PUT /api/content/{slug}`: a full replacement of the page.
    """

    required_fields: ClassVar[tuple[str, ...]] = ("title", "content")
    system_fields: ClassVar[tuple[str, ...]] = ("id", "updatedAt")

    title: Text
    content: Text
    meta_description: OptionalText = None
    meta_keywords: OptionalText = None
    sidebar_content: OptionalText = None
    updated_by: OptionalText = None
