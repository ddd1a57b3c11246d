"""
Pydantic schemas for news endpoints.
"""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from pydantic import StrictBool

from core.schemas import Record
from core.validation import OptionalText, Payload, Slug, Text, TextList


class NewsItem(Record):
    id: int
    title: str
    slug: str
    summary: str | None = None
    content: str
    thumbnail_url: str | None = None
    author: str | None = None
    category: str | None = None
    published_at: datetime | None = None
    updated_at: datetime | None = None
    is_published: bool = True
    view_count: int = 0
    tags: list[str] | None = None


class NewsListResponse(Record):
    items: list[NewsItem]
    total: int
    page: int
    page_size: int
    total_pages: int


class ViewCountResponse(Record):
    id: int
    view_count: int


class NewsCreate(Payload):
    required_fields: ClassVar[tuple[str, ...]] = ("title", "slug", "content")

    title: Text
    slug: Slug
    content: Text
    summary: OptionalText = None
    thumbnail_url: OptionalText = None
    author: OptionalText = None
    category: OptionalText = None
    is_published: StrictBool = True
    tags: TextList | None = None


class NewsUpdate(NewsCreate):
    partial: ClassVar[bool] = True
    system_fields: ClassVar[tuple[str, ...]] = ("id", "viewCount", "publishedAt", "updatedAt")

    title: Text | None = None
    slug: Slug | None = None
    content: Text | None = None
