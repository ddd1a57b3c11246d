"""
News persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db
from core.sql import INT8_MAX, FieldDiff, Params, build_update, insert_values

NEWS_COLUMNS = """
    id, title, slug, summary, content, thumbnail_url, author, category,
    published_at, updated_at, is_published, view_count, tags
"""

# Columns a caller may write. Order fixes the order of SET clauses.
WRITABLE_COLUMNS = (
    "title",
    "slug",
    "summary",
    "content",
    "thumbnail_url",
    "author",
    "category",
    "is_published",
    "tags",
)


def _published_filter(params: Params, *, category: str | None) -> str:
    clauses = ["is_published = true"]
    if category:
        clauses.append(f"category = {params.add(category)}")
    return " AND ".join(clauses)


async def count_news(*, category: str | None = None) -> int:
    params = Params()
    where = _published_filter(params, category=category)
    row = await db.fetch_one(
        f"SELECT count(*) AS n FROM news WHERE {where}",
        *params.values,
    )
    return int((row or {}).get("n", 0))


async def list_news(
    *,
    page: int = 1,
    page_size: int = 10,
    category: str | None = None,
) -> tuple[list[dict[str, Any]], int]:
    """
    One page of published news, newest first, plus the filtered total.

    The total comes from a window count in the same statement, so it always
    describes the same snapshot as the page. Ties on published_at fall back
    to the newer id.
    """
    skip = (page - 1) * page_size
    if skip > INT8_MAX:
        # OFFSET is a bigint; a page this far out is past the end anyway.
        return [], await count_news(category=category)

    params = Params()
    where = _published_filter(params, category=category)
    limit = params.add(page_size)
    offset = params.add(skip)

    rows = await db.fetch_all(
        f"""
        SELECT {NEWS_COLUMNS}, count(*) OVER () AS total_count
        FROM news
        WHERE {where}
        ORDER BY published_at DESC, id DESC
        LIMIT {limit}
        OFFSET {offset}
        """,
        *params.values,
    )

    if rows:
        total = int(rows[0]["total_count"])
    elif page > 1:
        # Past the last page the window has nothing to count over.
        total = await count_news(category=category)
    else:
        total = 0

    for row in rows:
        row.pop("total_count", None)
    return rows, total


async def get_news_by_id(news_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {NEWS_COLUMNS}
        FROM news
        WHERE id = $1
        """,
        news_id,
    )


async def get_news_by_slug(slug: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {NEWS_COLUMNS}
        FROM news
        WHERE slug = $1
        """,
        slug,
    )


async def create_news(fields: dict[str, Any]) -> dict[str, Any]:
    row_in = dict(fields)
    if row_in.get("is_published") is None:
        row_in["is_published"] = True

    columns, placeholders, args = insert_values(row_in, WRITABLE_COLUMNS)
    row = await db.fetch_one(
        f"""
        INSERT INTO news ({columns})
        VALUES ({placeholders})
        RETURNING {NEWS_COLUMNS}
        """,
        *args,
    )
    if row is None:
        raise RuntimeError("Failed to create news article.")
    return row


async def update_news(news_id: int, fields: dict[str, Any]) -> dict[str, Any] | None:
    """
    Apply the supplied fields only. No fields means no write at all:
    the current row is returned and updated_at is left alone.
    """
    diff = FieldDiff.from_fields(fields, WRITABLE_COLUMNS)
    if not diff:
        return await get_news_by_id(news_id)

    sql, args = build_update(
        "news",
        diff,
        key_column="id",
        key_value=news_id,
        returning=NEWS_COLUMNS,
    )
    return await db.fetch_one(sql, *args)


async def delete_news(news_id: int) -> bool:
    row = await db.fetch_one(
        "DELETE FROM news WHERE id = $1 RETURNING id",
        news_id,
    )
    return row is not None


async def increment_view_count(news_id: int) -> int | None:
    row = await db.fetch_one(
        """
        UPDATE news
        SET view_count = view_count + 1
        WHERE id = $1
        RETURNING view_count
        """,
        news_id,
    )
    if row is None:
        return None
    return int(row["view_count"])
