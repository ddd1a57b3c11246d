"""
News API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Query, Request, status

from core.schemas import MessageResponse
from core.validation import parse_id, parse_int_param

from . import schemas, service

router = APIRouter(prefix="/api/news")


@router.get("", response_model=schemas.NewsListResponse)
async def list_news(
    page: str | None = Query(default=None),
    page_size: str | None = Query(default=None, alias="pageSize"),
    category: str | None = Query(default=None),
) -> schemas.NewsListResponse:
    return await service.list_news(
        page=parse_int_param(page, default=1, message=service.PAGINATION_MESSAGE),
        page_size=parse_int_param(page_size, default=10, message=service.PAGINATION_MESSAGE),
        category=category,
    )


@router.post("", response_model=schemas.NewsItem, status_code=status.HTTP_201_CREATED)
async def create_news(request: Request) -> schemas.NewsItem:
    body = await request.json()
    return await service.create_news(body)


@router.get("/slug/{slug}", response_model=schemas.NewsItem)
async def get_news_by_slug(slug: str) -> schemas.NewsItem:
    return await service.get_published_news_by_slug(slug)


@router.get("/{news_id}", response_model=schemas.NewsItem)
async def get_news(news_id: str) -> schemas.NewsItem:
    return await service.get_news(parse_id(news_id, label="news"))


@router.put("/{news_id}", response_model=schemas.NewsItem)
async def update_news(news_id: str, request: Request) -> schemas.NewsItem:
    parsed_id = parse_id(news_id, label="news")
    body = await request.json()
    return await service.update_news(parsed_id, body)


@router.delete("/{news_id}", response_model=MessageResponse)
async def delete_news(news_id: str) -> dict:
    return await service.delete_news(parse_id(news_id, label="news"))


@router.post("/{news_id}/views", response_model=schemas.ViewCountResponse)
async def record_view(news_id: str) -> schemas.ViewCountResponse:
    """
    Count one page view. The increment happens in a single UPDATE.
    """
    return await service.record_view(parse_id(news_id, label="news"))
