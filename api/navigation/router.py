"""
Navigation API endpoint.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request

from core import settings

from . import schemas, service

router = APIRouter(prefix="/api/navigation")


def get_navigation_fallback(request: Request) -> list[dict[str, Any]]:
    fallback = getattr(request.app.state, "navigation_fallback", None)
    if fallback is None:
        fallback = settings.load_navigation_fallback()
        request.app.state.navigation_fallback = fallback
    return fallback


@router.get("", response_model=schemas.NavigationResponse)
async def get_navigation(
    fallback: list[dict[str, Any]] = Depends(get_navigation_fallback),
) -> schemas.NavigationResponse:
    return await service.get_navigation_structure(fallback)
