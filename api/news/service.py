"""
News business logic.

Scope:
- payload validation for create/update
- pagination checks
- mapping rows to API records and store errors to HTTP errors
"""

from __future__ import annotations

import math
from typing import Any

from core import db
from core.errors import conflict, not_found
from core.validation import bad_request, parse_payload

from . import repository, schemas

MAX_PAGE_SIZE = 100
PAGINATION_MESSAGE = (
    "Invalid pagination parameters. Page must be >= 1, pageSize must be between 1 and 100."
)
NOT_FOUND_MESSAGE = "News article not found"
DUPLICATE_SLUG_MESSAGE = "A news article with this slug already exists"


def _to_item(row: dict[str, Any]) -> schemas.NewsItem:
    return schemas.NewsItem.model_validate(row)


async def list_news(*, page: int, page_size: int, category: str | None = None) -> schemas.NewsListResponse:
    if page < 1 or page_size < 1 or page_size > MAX_PAGE_SIZE:
        raise bad_request(PAGINATION_MESSAGE)

    rows, total = await repository.list_news(page=page, page_size=page_size, category=category or None)
    return schemas.NewsListResponse(
        items=[_to_item(row) for row in rows],
        total=total,
        page=page,
        page_size=page_size,
        total_pages=math.ceil(total / page_size),
    )


async def get_news(news_id: int) -> schemas.NewsItem:
    row = await repository.get_news_by_id(news_id)
    if row is None:
        raise not_found(NOT_FOUND_MESSAGE)
    return _to_item(row)


async def get_published_news_by_slug(slug: str) -> schemas.NewsItem:
    row = await repository.get_news_by_slug(slug)
    if row is None or not row.get("is_published", False):
        raise not_found(NOT_FOUND_MESSAGE)
    return _to_item(row)


async def create_news(body: Any) -> schemas.NewsItem:
    fields = validate_news_create(body)
    try:
        row = await repository.create_news(fields)
    except db.ConflictError as exc:
        raise conflict(DUPLICATE_SLUG_MESSAGE) from exc
    return _to_item(row)


async def update_news(news_id: int, body: Any) -> schemas.NewsItem:
    fields = validate_news_update(body)
    try:
        row = await repository.update_news(news_id, fields)
    except db.ConflictError as exc:
        raise conflict(DUPLICATE_SLUG_MESSAGE) from exc
    if row is None:
        raise not_found(NOT_FOUND_MESSAGE)
    return _to_item(row)


async def delete_news(news_id: int) -> dict[str, str]:
    deleted = await repository.delete_news(news_id)
    if not deleted:
        raise not_found(NOT_FOUND_MESSAGE)
    return {"message": "News article deleted successfully"}


async def record_view(news_id: int) -> schemas.ViewCountResponse:
    view_count = await repository.increment_view_count(news_id)
    if view_count is None:
        raise not_found(NOT_FOUND_MESSAGE)
    return schemas.ViewCountResponse(id=news_id, view_count=view_count)


def validate_news_create(body: Any) -> dict[str, Any]:
    return parse_payload(schemas.NewsCreate, body).model_dump()


def validate_news_update(body: Any) -> dict[str, Any]:
    return parse_payload(schemas.NewsUpdate, body).model_dump(exclude_unset=True)
