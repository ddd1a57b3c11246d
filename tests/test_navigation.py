import pytest

from core import db
from main import app
from navigation import repository
from navigation.service import build_tree, get_navigation_structure


def nav(item_id, parent_id=None, sort_order=0, label=None):
    return {
        "id": item_id,
        "label": label or f"Item {item_id}",
        "url": f"/item-{item_id}",
        "parent_id": parent_id,
        "sort_order": sort_order,
        "is_visible": True,
        "icon": None,
        "description": None,
    }


def flatten(nodes):
    for node in nodes:
        yield node["id"]
        yield from flatten(node["children"])


def test_builds_nested_tree_sorted_by_sort_order_then_id():
    rows = [
        nav(1, sort_order=2),
        nav(2, sort_order=1),
        nav(3, parent_id=1, sort_order=5),
        nav(4, parent_id=1, sort_order=1),
        nav(5, parent_id=1, sort_order=1),
        nav(6, parent_id=4),
    ]

    tree = build_tree(rows)

    assert [node["id"] for node in tree] == [2, 1]
    children = tree[1]["children"]
    assert [node["id"] for node in children] == [4, 5, 3]
    assert [node["id"] for node in children[0]["children"]] == [6]


def test_orphans_are_promoted_to_roots():
    tree = build_tree([nav(1), nav(2, parent_id=99, sort_order=-1)])
    assert [node["id"] for node in tree] == [2, 1]


def test_self_reference_and_cycles_become_roots():
    rows = [nav(1, parent_id=1), nav(2, parent_id=3), nav(3, parent_id=2), nav(4, parent_id=2)]

    tree = build_tree(rows)

    assert sorted(flatten(tree)) == [1, 2, 3, 4]
    assert [node["id"] for node in tree] == [1, 2, 3]
    assert [node["id"] for node in tree[1]["children"]] == [4]


def test_every_row_appears_exactly_once():
    rows = [nav(i, parent_id=(i // 2) or None, sort_order=i % 3) for i in range(1, 30)]
    assert sorted(flatten(build_tree(rows))) == list(range(1, 30))


def test_empty_input():
    assert build_tree([]) == []


@pytest.mark.asyncio
async def test_structure_falls_back_when_store_fails(monkeypatch):
    async def broken():
        raise db.DatabaseError("Database operation failed: connection refused")

    monkeypatch.setattr(repository, "list_visible_items", broken)
    fallback = [{"id": 1, "label": "Home", "url": "/", "sortOrder": 1, "isVisible": True}]

    response = await get_navigation_structure(fallback)

    assert response.source == "fallback"
    assert response.items[0].label == "Home"
    assert response.items[0].children == []


@pytest.mark.asyncio
async def test_structure_from_store(fake_db):
    fake_db.queue([nav(1), nav(2, parent_id=1)])

    response = await get_navigation_structure([])

    assert response.source == "db"
    assert response.items[0].children[0].id == 2


def test_navigation_endpoint_serializes_camel_case_tree(client, fake_db):
    fake_db.queue([nav(1, label="About"), nav(2, parent_id=1, label="History", sort_order=3)])

    response = client.get("/api/navigation")

    assert response.status_code == 200
    body = response.json()
    assert body["source"] == "db"
    child = body["items"][0]["children"][0]
    assert child["label"] == "History"
    assert child["parentId"] == 1
    assert child["sortOrder"] == 3


def test_navigation_endpoint_uses_configured_fallback(client, fake_db, monkeypatch):
    fake_db.queue(db.DatabaseError("Database operation failed"))
    monkeypatch.setattr(
        app.state,
        "navigation_fallback",
        [{"id": 9, "label": "Contact", "url": "/contact"}],
        raising=False,
    )

    response = client.get("/api/navigation")

    assert response.status_code == 200
    assert response.json()["source"] == "fallback"
    assert [item["label"] for item in response.json()["items"]] == ["Contact"]


def test_navigation_endpoint_default_fallback(client, fake_db, monkeypatch):
    fake_db.queue(db.DatabaseError("Database operation failed"))
    monkeypatch.setattr(app.state, "navigation_fallback", None, raising=False)

    body = client.get("/api/navigation").json()

    assert body["source"] == "fallback"
    assert [item["url"] for item in body["items"]][0] == "/"
    assert len(body["items"]) == 6


def test_navigation_falls_back_before_pool_startup(client, monkeypatch):
    monkeypatch.setattr(db, "_pool", None)
    monkeypatch.setattr(app.state, "navigation_fallback", [{"id": 1, "label": "Home", "url": "/"}], raising=False)

    response = client.get("/api/navigation")

    assert response.status_code == 200
    assert response.json()["source"] == "fallback"
    assert response.json()["items"][0]["label"] == "Home"


def test_other_routes_report_missing_pool_as_500(client, monkeypatch):
    monkeypatch.setattr(db, "_pool", None)
    response = client.get("/api/news")
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
