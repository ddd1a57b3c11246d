"""
Navigation tree assembly.

The navigation table is a flat list with a self-referencing parent_id. The
tree is rebuilt on every read:
- a row whose parent is visible and present hangs under that parent
- a row without a parent, with a parent that is missing from the result,
  or that sits on a parent cycle (including pointing at itself) is a root
- siblings are ordered by (sort_order, id) within each parent

When the table cannot be read, the configured fallback tree is served so the
site header still renders.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from core import db

from . import repository, schemas

logger = logging.getLogger(__name__)


def _sort_key(node: dict[str, Any]) -> tuple[int, int]:
    return (int(node.get("sort_order") or 0), int(node["id"]))


def _on_parent_cycle(node_id: int, parent_of: dict[int, int | None]) -> bool:
    seen: set[int] = set()
    current = parent_of.get(node_id)
    while current is not None and current in parent_of and current not in seen:
        if current == node_id:
            return True
        seen.add(current)
        current = parent_of[current]
    return False


def build_tree(rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
    nodes: dict[int, dict[str, Any]] = {}
    for row in rows:
        nodes[int(row["id"])] = {**row, "children": []}

    parent_of = {
        node_id: (int(node["parent_id"]) if node.get("parent_id") is not None else None)
        for node_id, node in nodes.items()
    }

    roots: list[dict[str, Any]] = []
    for node_id, node in nodes.items():
        parent_id = parent_of[node_id]
        if parent_id is None or parent_id not in nodes or _on_parent_cycle(node_id, parent_of):
            roots.append(node)
        else:
            nodes[parent_id]["children"].append(node)

    for node in nodes.values():
        node["children"].sort(key=_sort_key)
    roots.sort(key=_sort_key)
    return roots


async def get_navigation_structure(fallback: list[dict[str, Any]]) -> schemas.NavigationResponse:
    try:
        rows = await repository.list_visible_items()
    except db.DatabaseError as exc:
        logger.warning("navigation_fallback reason=%s", exc)
        items = [schemas.NavItem.model_validate(item) for item in copy.deepcopy(fallback)]
        return schemas.NavigationResponse(items=items, source="fallback")

    items = [schemas.NavItem.model_validate(node) for node in build_tree(rows)]
    return schemas.NavigationResponse(items=items, source="db")
