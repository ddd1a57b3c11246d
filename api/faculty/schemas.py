"""
Pydantic schemas for faculty endpoints.
"""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from pydantic import StrictBool

from core.schemas import Record
from core.validation import Int32, OptionalText, Payload, Text, TextList


class FacultyMember(Record):
    id: int
    name: str
    name_en: str | None = None
    title: str
    category: str
    photo_url: str | None = None
    email: str | None = None
    phone: str | None = None
    office: str | None = None
    research_interests: list[str] | None = None
    education: str | None = None
    biography: str | None = None
    publications: str | None = None
    projects: str | None = None
    awards: str | None = None
    sort_order: int = 0
    is_visible: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


class FacultyListResponse(Record):
    items: list[FacultyMember]
    total: int


class FacultyCreate(Payload):
    required_fields: ClassVar[tuple[str, ...]] = ("name", "title", "category")

    name: Text
    title: Text
    category: Text
    name_en: OptionalText = None
    photo_url: OptionalText = None
    email: OptionalText = None
    phone: OptionalText = None
    office: OptionalText = None
    research_interests: TextList | None = None
    education: OptionalText = None
    biography: OptionalText = None
    publications: OptionalText = None
    projects: OptionalText = None
    awards: OptionalText = None
    sort_order: Int32 = 0
    is_visible: StrictBool = True


class FacultyUpdate(FacultyCreate):
    partial: ClassVar[bool] = True
    system_fields: ClassVar[tuple[str, ...]] = ("id", "createdAt", "updatedAt")

    name: Text | None = None
    title: Text | None = None
    category: Text | None = None
