"""
Teaching catalog business logic: courses, laboratories, resources.
"""

from __future__ import annotations

from typing import Any

from core.errors import not_found
from core.validation import parse_payload

from . import repository, schemas

COURSE_NOT_FOUND = "Course not found"
LABORATORY_NOT_FOUND = "Laboratory not found"
RESOURCE_NOT_FOUND = "Resource not found"


# Courses


async def list_courses() -> schemas.CourseListResponse:
    items = [schemas.Course.model_validate(row) for row in await repository.list_courses()]
    return schemas.CourseListResponse(items=items, total=len(items))


async def get_course(course_id: int) -> schemas.Course:
    row = await repository.get_course_by_id(course_id)
    if row is None:
        raise not_found(COURSE_NOT_FOUND)
    return schemas.Course.model_validate(row)


async def create_course(body: Any) -> schemas.Course:
    fields = parse_payload(schemas.CourseCreate, body).model_dump()
    return schemas.Course.model_validate(await repository.create_course(fields))


async def update_course(course_id: int, body: Any) -> schemas.Course:
    fields = parse_payload(schemas.CourseUpdate, body).model_dump(exclude_unset=True)
    row = await repository.update_course(course_id, fields)
    if row is None:
        raise not_found(COURSE_NOT_FOUND)
    return schemas.Course.model_validate(row)


async def delete_course(course_id: int) -> dict[str, str]:
    if not await repository.delete_course(course_id):
        raise not_found(COURSE_NOT_FOUND)
    return {"message": "Course deleted successfully"}


# Laboratories


async def list_laboratories() -> schemas.LaboratoryListResponse:
    items = [schemas.Laboratory.model_validate(row) for row in await repository.list_laboratories()]
    return schemas.LaboratoryListResponse(items=items, total=len(items))


async def get_laboratory(laboratory_id: int) -> schemas.Laboratory:
    row = await repository.get_laboratory_by_id(laboratory_id)
    if row is None:
        raise not_found(LABORATORY_NOT_FOUND)
    return schemas.Laboratory.model_validate(row)


async def create_laboratory(body: Any) -> schemas.Laboratory:
    fields = parse_payload(schemas.LaboratoryCreate, body).model_dump()
    return schemas.Laboratory.model_validate(await repository.create_laboratory(fields))


async def update_laboratory(laboratory_id: int, body: Any) -> schemas.Laboratory:
    fields = parse_payload(schemas.LaboratoryUpdate, body).model_dump(exclude_unset=True)
    row = await repository.update_laboratory(laboratory_id, fields)
    if row is None:
        raise not_found(LABORATORY_NOT_FOUND)
    return schemas.Laboratory.model_validate(row)


async def delete_laboratory(laboratory_id: int) -> dict[str, str]:
    if not await repository.delete_laboratory(laboratory_id):
        raise not_found(LABORATORY_NOT_FOUND)
    return {"message": "Laboratory deleted successfully"}


# Resources


async def list_resources(
    *,
    category: str | None = None,
    course_id: int | None = None,
) -> schemas.ResourceListResponse:
    rows = await repository.list_resources(
        category=(category or "").strip() or None,
        course_id=course_id,
    )
    items = [schemas.Resource.model_validate(row) for row in rows]
    return schemas.ResourceListResponse(items=items, total=len(items))


async def get_resource(resource_id: int) -> schemas.Resource:
    row = await repository.get_resource_by_id(resource_id)
    if row is None:
        raise not_found(RESOURCE_NOT_FOUND)
    return schemas.Resource.model_validate(row)


async def create_resource(body: Any) -> schemas.Resource:
    fields = parse_payload(schemas.ResourceCreate, body).model_dump()
    return schemas.Resource.model_validate(await repository.create_resource(fields))


async def update_resource(resource_id: int, body: Any) -> schemas.Resource:
    fields = parse_payload(schemas.ResourceUpdate, body).model_dump(exclude_unset=True)
    row = await repository.update_resource(resource_id, fields)
    if row is None:
        raise not_found(RESOURCE_NOT_FOUND)
    return schemas.Resource.model_validate(row)


async def delete_resource(resource_id: int) -> dict[str, str]:
    if not await repository.delete_resource(resource_id):
        raise not_found(RESOURCE_NOT_FOUND)
    return {"message": "Resource deleted successfully"}
