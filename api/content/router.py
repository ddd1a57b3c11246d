"""
Page content API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Request

from core.schemas import MessageResponse

from . import schemas, service

router = APIRouter(prefix="/api/content")


@router.get("", response_model=schemas.PageListResponse)
async def list_pages() -> schemas.PageListResponse:
    return await service.list_pages()


@router.get("/{slug}", response_model=schemas.PageContent)
async def get_page(slug: str) -> schemas.PageContent:
    return await service.get_page(slug)


@router.put("/{slug}", response_model=schemas.PageContent)
async def save_page(slug: str, request: Request) -> schemas.PageContent:
    """
    Create the page if the slug is new, otherwise replace its content.
    """
    body = await request.json()
    return await service.save_page(slug, body)


@router.delete("/{slug}", response_model=MessageResponse)
async def delete_page(slug: str) -> dict:
    return await service.delete_page(slug)
