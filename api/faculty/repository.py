"""
Faculty persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db
from core.sql import FieldDiff, Params, build_update, insert_values, like_pattern

FACULTY_COLUMNS = """
    id, name, name_en, title, category, photo_url, email, phone, office,
    research_interests, education, biography, publications, projects, awards,
    sort_order, is_visible, created_at, updated_at
"""

WRITABLE_COLUMNS = (
    "name",
    "name_en",
    "title",
    "category",
    "photo_url",
    "email",
    "phone",
    "office",
    "research_interests",
    "education",
    "biography",
    "publications",
    "projects",
    "awards",
    "sort_order",
    "is_visible",
)


async def list_faculty(
    *,
    category: str | None = None,
    search: str | None = None,
) -> list[dict[str, Any]]:
    """
    Visible faculty, optionally narrowed by category and a search term.

    The search term matches case-insensitively anywhere in name, name_en,
    title or any single research interest.
    """
    params = Params()
    clauses = ["is_visible = true"]

    if category:
        clauses.append(f"category = {params.add(category)}")

    if search:
        pattern = params.add(like_pattern(search))
        clauses.append(
            f"""(
            name ILIKE {pattern}
            OR name_en ILIKE {pattern}
            OR title ILIKE {pattern}
            OR EXISTS (
              SELECT 1
              FROM unnest(research_interests) AS interest
              WHERE interest ILIKE {pattern}
            )
          )"""
        )

    return await db.fetch_all(
        f"""
        SELECT {FACULTY_COLUMNS}
        FROM faculty
        WHERE {" AND ".join(clauses)}
        ORDER BY sort_order ASC, name ASC, id ASC
        """,
        *params.values,
    )


async def search_faculty(query: str) -> list[dict[str, Any]]:
    return await list_faculty(search=query)


async def get_faculty_by_id(faculty_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {FACULTY_COLUMNS}
        FROM faculty
        WHERE id = $1
        """,
        faculty_id,
    )


async def create_faculty(fields: dict[str, Any]) -> dict[str, Any]:
    row_in = dict(fields)
    if row_in.get("sort_order") is None:
        row_in["sort_order"] = 0
    if row_in.get("is_visible") is None:
        row_in["is_visible"] = True

    columns, placeholders, args = insert_values(row_in, WRITABLE_COLUMNS)
    row = await db.fetch_one(
        f"""
        INSERT INTO faculty ({columns})
        VALUES ({placeholders})
        RETURNING {FACULTY_COLUMNS}
        """,
        *args,
    )
    if row is None:
        raise RuntimeError("Failed to create faculty member.")
    return row


async def update_faculty(faculty_id: int, fields: dict[str, Any]) -> dict[str, Any] | None:
    diff = FieldDiff.from_fields(fields, WRITABLE_COLUMNS)
    if not diff:
        return await get_faculty_by_id(faculty_id)

    sql, args = build_update(
        "faculty",
        diff,
        key_column="id",
        key_value=faculty_id,
        returning=FACULTY_COLUMNS,
    )
    return await db.fetch_one(sql, *args)


async def delete_faculty(faculty_id: int) -> bool:
    row = await db.fetch_one(
        "DELETE FROM faculty WHERE id = $1 RETURNING id",
        faculty_id,
    )
    return row is not None
