"""
Faculty business logic.
"""

from __future__ import annotations

from typing import Any

from core.errors import not_found
from core.validation import parse_payload

from . import repository, schemas

NOT_FOUND_MESSAGE = "Faculty member not found"


def _to_member(row: dict[str, Any]) -> schemas.FacultyMember:
    return schemas.FacultyMember.model_validate(row)


async def list_faculty(*, category: str | None = None, search: str | None = None) -> schemas.FacultyListResponse:
    rows = await repository.list_faculty(
        category=(category or "").strip() or None,
        search=(search or "").strip() or None,
    )
    items = [_to_member(row) for row in rows]
    return schemas.FacultyListResponse(items=items, total=len(items))


async def get_faculty(faculty_id: int) -> schemas.FacultyMember:
    row = await repository.get_faculty_by_id(faculty_id)
    if row is None:
        raise not_found(NOT_FOUND_MESSAGE)
    return _to_member(row)


async def create_faculty(body: Any) -> schemas.FacultyMember:
    fields = parse_payload(schemas.FacultyCreate, body).model_dump()
    return _to_member(await repository.create_faculty(fields))


async def update_faculty(faculty_id: int, body: Any) -> schemas.FacultyMember:
    fields = parse_payload(schemas.FacultyUpdate, body).model_dump(exclude_unset=True)
    row = await repository.update_faculty(faculty_id, fields)
    if row is None:
        raise not_found(NOT_FOUND_MESSAGE)
    return _to_member(row)


async def delete_faculty(faculty_id: int) -> dict[str, str]:
    if not await repository.delete_faculty(faculty_id):
        raise not_found(NOT_FOUND_MESSAGE)
    return {"message": "Faculty member deleted successfully"}
