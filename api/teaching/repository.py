"""
Teaching catalog persistence (raw SQL).

Courses, laboratories and resources share the same row lifecycle, so the
get/create/update/delete statements are built by the private helpers at the
bottom from per-table column lists.
"""

from __future__ import annotations

from typing import Any

from core import db
from core.sql import FieldDiff, Params, build_update, insert_values

COURSE_COLUMNS = """
    id, name, description, schedule, instructor, credits, semester,
    prerequisites, objectives, sort_order, is_visible, created_at, updated_at
"""
COURSE_WRITABLE = (
    "name",
    "description",
    "schedule",
    "instructor",
    "credits",
    "semester",
    "prerequisites",
    "objectives",
    "sort_order",
    "is_visible",
)

LABORATORY_COLUMNS = """
    id, name, location, equipment, opening_hours, capacity, description,
    manager, contact_info, sort_order, is_visible, created_at, updated_at
"""
LABORATORY_WRITABLE = (
    "name",
    "location",
    "equipment",
    "opening_hours",
    "capacity",
    "description",
    "manager",
    "contact_info",
    "sort_order",
    "is_visible",
)

RESOURCE_COLUMNS = """
    id, title, description, download_url, file_type, file_size, category,
    course_id, sort_order, is_visible, created_at, updated_at
"""
RESOURCE_WRITABLE = (
    "title",
    "description",
    "download_url",
    "file_type",
    "file_size",
    "category",
    "course_id",
    "sort_order",
    "is_visible",
)


# Courses


async def list_courses() -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {COURSE_COLUMNS}
        FROM courses
        WHERE is_visible = true
        ORDER BY sort_order ASC, name ASC, id ASC
        """
    )


async def get_course_by_id(course_id: int) -> dict[str, Any] | None:
    return await _get("courses", COURSE_COLUMNS, course_id)


async def create_course(fields: dict[str, Any]) -> dict[str, Any]:
    return await _create("courses", COURSE_COLUMNS, COURSE_WRITABLE, fields, what="course")


async def update_course(course_id: int, fields: dict[str, Any]) -> dict[str, Any] | None:
    return await _update("courses", COURSE_COLUMNS, COURSE_WRITABLE, course_id, fields)


async def delete_course(course_id: int) -> bool:
    return await _delete("courses", course_id)


# Laboratories


async def list_laboratories() -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {LABORATORY_COLUMNS}
        FROM laboratories
        WHERE is_visible = true
        ORDER BY sort_order ASC, name ASC, id ASC
        """
    )


async def get_laboratory_by_id(laboratory_id: int) -> dict[str, Any] | None:
    return await _get("laboratories", LABORATORY_COLUMNS, laboratory_id)


async def create_laboratory(fields: dict[str, Any]) -> dict[str, Any]:
    return await _create(
        "laboratories", LABORATORY_COLUMNS, LABORATORY_WRITABLE, fields, what="laboratory"
    )


async def update_laboratory(laboratory_id: int, fields: dict[str, Any]) -> dict[str, Any] | None:
    return await _update(
        "laboratories", LABORATORY_COLUMNS, LABORATORY_WRITABLE, laboratory_id, fields
    )


async def delete_laboratory(laboratory_id: int) -> bool:
    return await _delete("laboratories", laboratory_id)


# Resources


async def list_resources(
    *,
    category: str | None = None,
    course_id: int | None = None,
) -> list[dict[str, Any]]:
    params = Params()
    clauses = ["is_visible = true"]
    if category:
        clauses.append(f"category = {params.add(category)}")
    if course_id is not None:
        clauses.append(f"course_id = {params.add(course_id)}")

    return await db.fetch_all(
        f"""
        SELECT {RESOURCE_COLUMNS}
        FROM resources
        WHERE {" AND ".join(clauses)}
        ORDER BY sort_order ASC, title ASC, id ASC
        """,
        *params.values,
    )


async def get_resource_by_id(resource_id: int) -> dict[str, Any] | None:
    return await _get("resources", RESOURCE_COLUMNS, resource_id)


async def create_resource(fields: dict[str, Any]) -> dict[str, Any]:
    return await _create("resources", RESOURCE_COLUMNS, RESOURCE_WRITABLE, fields, what="resource")


async def update_resource(resource_id: int, fields: dict[str, Any]) -> dict[str, Any] | None:
    return await _update("resources", RESOURCE_COLUMNS, RESOURCE_WRITABLE, resource_id, fields)


async def delete_resource(resource_id: int) -> bool:
    return await _delete("resources", resource_id)


# Shared statements. `table` and `columns` are always module literals.


async def _get(table: str, columns: str, row_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {columns}
        FROM {table}
        WHERE id = $1
        """,
        row_id,
    )


async def _create(
    table: str,
    columns: str,
    writable: tuple[str, ...],
    fields: dict[str, Any],
    *,
    what: str,
) -> dict[str, Any]:
    row_in = dict(fields)
    if row_in.get("sort_order") is None:
        row_in["sort_order"] = 0
    if row_in.get("is_visible") is None:
        row_in["is_visible"] = True

    names, placeholders, args = insert_values(row_in, writable)
    row = await db.fetch_one(
        f"""
        INSERT INTO {table} ({names})
        VALUES ({placeholders})
        RETURNING {columns}
        """,
        *args,
    )
    if row is None:
        raise RuntimeError(f"Failed to create {what}.")
    return row


async def _update(
    table: str,
    columns: str,
    writable: tuple[str, ...],
    row_id: int,
    fields: dict[str, Any],
) -> dict[str, Any] | None:
    diff = FieldDiff.from_fields(fields, writable)
    if not diff:
        return await _get(table, columns, row_id)

    sql, args = build_update(table, diff, key_column="id", key_value=row_id, returning=columns)
    return await db.fetch_one(sql, *args)


async def _delete(table: str, row_id: int) -> bool:
    row = await db.fetch_one(
        f"DELETE FROM {table} WHERE id = $1 RETURNING id",
        row_id,
    )
    return row is not None
