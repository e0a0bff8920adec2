"""Store Registry - process-wide store wiring."""

import pytest

from blog_api.core.domain_types import StoreBackend
from blog_api.infrastructure import database
from blog_api.infrastructure.memory_collection import InMemoryDocumentCollection
from blog_api.infrastructure.sql_collection import SqlDocumentCollection
from blog_api.services import store_registry


@pytest.fixture(autouse=True)
def _reset_registry(monkeypatch):
    monkeypatch.setattr(store_registry, "blog_store", None)
    monkeypatch.setattr(store_registry, "credential_store", None)
    monkeypatch.setattr(database, "db_manager", None)


def test_getters_fail_before_init():
    with pytest.raises(RuntimeError):
        store_registry.get_blog_store()
    with pytest.raises(RuntimeError):
        store_registry.get_credential_store()


def test_init_stores_registers_shared_instances():
    blogs, users = store_registry.build_collections(StoreBackend.MEMORY)
    blog_store, credential_store = store_registry.init_stores(blogs, users)
    assert store_registry.get_blog_store() is blog_store
    assert store_registry.get_credential_store() is credential_store
    assert store_registry.get_blog_store() is store_registry.get_blog_store()


def test_memory_backend_builds_memory_collections():
    blogs, users = store_registry.build_collections(StoreBackend.MEMORY)
    assert isinstance(blogs, InMemoryDocumentCollection)
    assert isinstance(users, InMemoryDocumentCollection)
    assert blogs is not users


def test_sql_backend_requires_database():
    with pytest.raises(RuntimeError, match="Database not initialized"):
        store_registry.build_collections(StoreBackend.SQL)


async def test_sql_backend_uses_db_manager(monkeypatch, sql_manager):
    monkeypatch.setattr(database, "db_manager", sql_manager)
    blogs, users = store_registry.build_collections(StoreBackend.SQL)
    assert isinstance(blogs, SqlDocumentCollection)
    assert "title" in blogs.fields
    assert users.fields == ["username", "password"]
