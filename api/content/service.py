"""
Page content business logic.

Writes go through a single INSERT ... ON CONFLICT statement, so two editors
saving a brand-new page at the same time both succeed (last write wins)
instead of one of them failing on the slug constraint.
"""

from __future__ import annotations

from typing import Any

from core.errors import not_found
from core.validation import SLUG_MESSAGE, bad_request, is_slug, parse_payload

from . import repository, schemas

NOT_FOUND_MESSAGE = "Page content not found"


def _checked_slug(slug: str) -> str:
    if not is_slug(slug):
        raise bad_request(SLUG_MESSAGE)
    return slug


async def list_pages() -> schemas.PageListResponse:
    items = [schemas.PageSummary.model_validate(row) for row in await repository.list_page_slugs()]
    return schemas.PageListResponse(items=items, total=len(items))


async def get_page(slug: str) -> schemas.PageContent:
    row = await repository.get_page_content(_checked_slug(slug))
    if row is None:
        raise not_found(NOT_FOUND_MESSAGE)
    return schemas.PageContent.model_validate(row)


async def save_page(slug: str, body: Any) -> schemas.PageContent:
    slug = _checked_slug(slug)
    fields = parse_payload(schemas.PageSave, body).model_dump()
    row = await repository.upsert_page_content(slug, fields)
    return schemas.PageContent.model_validate(row)


async def delete_page(slug: str) -> dict[str, str]:
    if not await repository.delete_page_content(_checked_slug(slug)):
        raise not_found(NOT_FOUND_MESSAGE)
    return {"message": "Page content deleted successfully"}
