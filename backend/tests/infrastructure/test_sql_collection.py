"""SQL Document Collection - the five primitives over SQLite via aiosqlite.

Invariants:
    - Records never expose the surrogate pk
    - update()/delete() report 0 when nothing matched
    - Unknown filter fields and operators raise ValueError
    - Driver failures surface as StoreUnavailableError
    - Text and likes columns accept everything the schemas accept
"""

import pytest
from sqlalchemy import BigInteger, Text

from blog_api.core.errors import StoreUnavailableError
from blog_api.infrastructure.database import DatabaseSessionManager
from blog_api.infrastructure.sql_collection import SqlDocumentCollection
from blog_api.models.blog import BlogRecord
from blog_api.models.user import UserRecord


def _blog(blog_id, **overrides):
    record = {
        "id": blog_id, "title": f"T{blog_id}", "content": "C", "author": "X",
        "likes": 0, "comments": [],
    }
    record.update(overrides)
    return record


@pytest.fixture
def blogs(sql_manager):
    return SqlDocumentCollection(sql_manager, BlogRecord)


@pytest.fixture
def users(sql_manager):
    return SqlDocumentCollection(sql_manager, UserRecord)


async def test_fields_exclude_surrogate_key(blogs):
    assert "pk" not in blogs.fields
    assert set(blogs.fields) == {"id", "title", "content", "author", "likes", "comments"}


async def test_insert_then_find_one(blogs):
    await blogs.insert(_blog(1))
    found = await blogs.find_one({"id": 1})
    assert found == _blog(1)


async def test_find_one_returns_none_when_absent(blogs):
    assert await blogs.find_one({"id": 404}) is None


async def test_find_all_in_insertion_order(blogs):
    for blog_id in (3, 1, 2):
        await blogs.insert(_blog(blog_id))
    assert [r["id"] for r in await blogs.find_all()] == [3, 1, 2]


async def test_update_inc_and_push(blogs):
    await blogs.insert(_blog(1))
    assert await blogs.update({"id": 1}, {"$inc": {"likes": 1}}) == 1
    assert await blogs.update(
        {"id": 1}, {"$push": {"comments": {"author": "Y", "content": "hi"}}},
    ) == 1
    found = await blogs.find_one({"id": 1})
    assert found["likes"] == 1
    assert found["comments"] == [{"author": "Y", "content": "hi"}]


async def test_update_missing_returns_zero(blogs):
    assert await blogs.update({"id": 9}, {"$inc": {"likes": 1}}) == 0


async def test_delete_removes_one_record(blogs):
    await blogs.insert(_blog(1))
    await blogs.insert(_blog(2))
    assert await blogs.delete({"id": 1}) == 1
    assert [r["id"] for r in await blogs.find_all()] == [2]
    assert await blogs.delete({"id": 1}) == 0


async def test_filter_on_multiple_fields(users):
    await users.insert({"username": "a", "password": "p1"})
    assert await users.find_one({"username": "a", "password": "p1"}) is not None
    assert await users.find_one({"username": "a", "password": "P1"}) is None


async def test_unknown_filter_field_raises(blogs):
    with pytest.raises(ValueError, match="Unknown field"):
        await blogs.find_one({"slug": "x"})


async def test_unknown_operator_raises(blogs):
    await blogs.insert(_blog(1))
    with pytest.raises(ValueError):
        await blogs.update({"id": 1}, {"$pull": {"comments": {}}})


async def test_returned_records_are_copies(blogs):
    await blogs.insert(_blog(1))
    found = await blogs.find_one({"id": 1})
    found["comments"].append({"author": "Z", "content": "local"})
    assert (await blogs.find_one({"id": 1}))["comments"] == []


async def test_duplicate_username_violates_unique_index(users):
    await users.insert({"username": "a", "password": "p1"})
    with pytest.raises(StoreUnavailableError):
        await users.insert({"username": "a", "password": "p2"})


async def test_unreachable_database_raises_store_unavailable(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'blog.db'}",
    )
    try:
        with pytest.raises(StoreUnavailableError):
            await SqlDocumentCollection(manager, BlogRecord).find_all()
        assert await manager.health_check() is False
    finally:
        await manager.dispose()


async def test_health_check_ok(sql_manager):
    assert await sql_manager.health_check() is True


@pytest.mark.parametrize(
    "column",
    [
        BlogRecord.__table__.c.title,
        BlogRecord.__table__.c.content,
        BlogRecord.__table__.c.author,
        UserRecord.__table__.c.username,
        UserRecord.__table__.c.password,
    ],
    ids=lambda c: f"{c.table.name}.{c.name}",
)
def test_text_columns_have_no_length_limit(column):
    assert isinstance(column.type, Text)
    assert getattr(column.type, "length", None) is None


def test_likes_column_is_64_bit():
    assert isinstance(BlogRecord.__table__.c.likes.type, BigInteger)
