"""
Page content persistence (raw SQL). Pages are addressed by slug.
"""

from __future__ import annotations

from typing import Any

from core import db
from core.sql import insert_values

PAGE_COLUMNS = """
    id, slug, title, content, meta_description, meta_keywords,
    sidebar_content, updated_at, updated_by
"""

WRITABLE_COLUMNS = (
    "title",
    "content",
    "meta_description",
    "meta_keywords",
    "sidebar_content",
    "updated_by",
)


async def get_page_content(slug: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {PAGE_COLUMNS}
        FROM page_content
        WHERE slug = $1
        """,
        slug,
    )


async def list_page_slugs() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT slug, title, updated_at, updated_by
        FROM page_content
        ORDER BY slug ASC
        """
    )


async def upsert_page_content(slug: str, fields: dict[str, Any]) -> dict[str, Any]:
    """
    Create the page or replace its editable fields, in one statement.

    Fields missing from `fields` are written as NULL, so this is a full
    replacement rather than a merge.
    """
    columns, placeholders, args = insert_values({"slug": slug, **fields}, ("slug", *WRITABLE_COLUMNS))
    assignments = ",\n            ".join(f"{column} = EXCLUDED.{column}" for column in WRITABLE_COLUMNS)
    row = await db.fetch_one(
        f"""
        INSERT INTO page_content ({columns})
        VALUES ({placeholders})
        ON CONFLICT (slug) DO UPDATE
        SET {assignments},
            updated_at = now()
        RETURNING {PAGE_COLUMNS}
        """,
        *args,
    )
    if row is None:
        raise RuntimeError("Failed to upsert page content.")
    return row


async def delete_page_content(slug: str) -> bool:
    row = await db.fetch_one(
        "DELETE FROM page_content WHERE slug = $1 RETURNING id",
        slug,
    )
    return row is not None
