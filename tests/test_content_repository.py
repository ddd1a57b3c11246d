import pytest

from content import repository

pytestmark = pytest.mark.asyncio


async def test_upsert_is_a_single_statement(fake_db):
    fake_db.queue({"id": 1, "slug": "about", "title": "About"})

    row = await repository.upsert_page_content("about", {"title": "About", "content": "<p>Hi</p>"})

    assert row["slug"] == "about"
    assert len(fake_db.calls) == 1
    sql = fake_db.sql
    assert sql.startswith(
        "INSERT INTO page_content (slug, title, content, meta_description, meta_keywords, "
        "sidebar_content, updated_by) VALUES ($1, $2, $3, $4, $5, $6, $7)"
    )
    assert "ON CONFLICT (slug) DO UPDATE SET title = EXCLUDED.title," in sql
    assert "updated_by = EXCLUDED.updated_by, updated_at = now()" in sql
    assert fake_db.args == ["about", "About", "<p>Hi</p>", None, None, None, None]


async def test_get_and_delete_by_slug(fake_db):
    fake_db.queue(None, {"id": 3})

    assert await repository.get_page_content("missing") is None
    assert fake_db.sql.endswith("FROM page_content WHERE slug = $1")
    assert await repository.delete_page_content("about") is True
    assert fake_db.args == ["about"]


async def test_list_page_slugs_sorted(fake_db):
    fake_db.queue([{"slug": "about", "title": "About", "updated_at": None, "updated_by": None}])
    rows = await repository.list_page_slugs()
    assert rows[0]["slug"] == "about"
    assert fake_db.sql.endswith("ORDER BY slug ASC")
