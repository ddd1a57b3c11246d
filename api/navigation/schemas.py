"""
Pydantic schemas for the navigation tree.
"""

from __future__ import annotations

from core.schemas import Record


class NavItem(Record):
    id: int
    label: str
    url: str
    parent_id: int | None = None
    sort_order: int = 0
    is_visible: bool = True
    icon: str | None = None
    description: str | None = None
    children: list[NavItem] = []


class NavigationResponse(Record):
    items: list[NavItem]
    source: str
