"""
Navigation persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_visible_items() -> list[dict[str, Any]]:
    """
    Flat list of visible nav rows. The tree is assembled by the service.
    """
    return await db.fetch_all(
        """
        SELECT id, label, url, parent_id, sort_order, is_visible, icon, description
        FROM navigation
        WHERE is_visible = true
        ORDER BY sort_order ASC, id ASC
        """
    )
