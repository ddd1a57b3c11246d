"""
Pydantic schemas for the teaching catalog.
"""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from pydantic import StrictBool

from core.schemas import Record
from core.validation import Int32, OptionalText, Payload, Text


class Course(Record):
    id: int
    name: str
    description: str
    schedule: str
    instructor: str
    credits: int | None = None
    semester: str | None = None
    prerequisites: str | None = None
    objectives: str | None = None
    sort_order: int = 0
    is_visible: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Laboratory(Record):
    id: int
    name: str
    location: str
    equipment: str
    opening_hours: str
    capacity: int | None = None
    description: str | None = None
    manager: str | None = None
    contact_info: str | None = None
    sort_order: int = 0
    is_visible: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Resource(Record):
    id: int
    title: str
    description: str | None = None
    download_url: str
    file_type: str | None = None
    file_size: str | None = None
    category: str | None = None
    course_id: int | None = None
    sort_order: int = 0
    is_visible: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CourseListResponse(Record):
    items: list[Course]
    total: int


class LaboratoryListResponse(Record):
    items: list[Laboratory]
    total: int


class ResourceListResponse(Record):
    items: list[Resource]
    total: int


class CourseCreate(Payload):
    required_fields: ClassVar[tuple[str, ...]] = ("name", "description", "schedule", "instructor")

    name: Text
    description: Text
    schedule: Text
    instructor: Text
    credits: Int32 | None = None
    semester: OptionalText = None
    prerequisites: OptionalText = None
    objectives: OptionalText = None
    sort_order: Int32 = 0
    is_visible: StrictBool = True


class CourseUpdate(CourseCreate):
    partial: ClassVar[bool] = True
    system_fields: ClassVar[tuple[str, ...]] = ("id", "createdAt", "updatedAt")

    name: Text | None = None
    description: Text | None = None
    schedule: Text | None = None
    instructor: Text | None = None


class LaboratoryCreate(Payload):
    required_fields: ClassVar[tuple[str, ...]] = ("name", "location", "equipment", "opening_hours")

    name: Text
    location: Text
    equipment: Text
    opening_hours: Text
    capacity: Int32 | None = None
    description: OptionalText = None
    manager: OptionalText = None
    contact_info: OptionalText = None
    sort_order: Int32 = 0
    is_visible: StrictBool = True


class LaboratoryUpdate(LaboratoryCreate):
    partial: ClassVar[bool] = True
    system_fields: ClassVar[tuple[str, ...]] = ("id", "createdAt", "updatedAt")

    name: Text | None = None
    location: Text | None = None
    equipment: Text | None = None
    opening_hours: Text | None = None


class ResourceCreate(Payload):
    required_fields: ClassVar[tuple[str, ...]] = ("title", "download_url")

    title: Text
    download_url: Text
    description: OptionalText = None
    file_type: OptionalText = None
    file_size: OptionalText = None
    category: OptionalText = None
    course_id: Int32 | None = None
    sort_order: Int32 = 0
    is_visible: StrictBool = True


class ResourceUpdate(ResourceCreate):
    partial: ClassVar[bool] = True
    system_fields: ClassVar[tuple[str, ...]] = ("id", "createdAt", "updatedAt")

    title: Text | None = None
    download_url: Text | None = None
