"""API test fixtures - httpx client against the app with SQLite-backed stores.

Invariants:
    - get_blog_store / get_credential_store overridden per test
    - Lifespan is not run (ASGITransport), so no real database is touched
"""

import pytest
from httpx import ASGITransport, AsyncClient

from blog_api.infrastructure.sql_collection import SqlDocumentCollection
from blog_api.main import app
from blog_api.models.blog import BlogRecord
from blog_api.models.user import UserRecord
from blog_api.services.blog_store import BlogStore
from blog_api.services.credential_store import CredentialStore
from blog_api.services.store_registry import get_blog_store, get_credential_store


@pytest.fixture
def stores(sql_manager):
    return (
        BlogStore(SqlDocumentCollection(sql_manager, BlogRecord)),
        CredentialStore(SqlDocumentCollection(sql_manager, UserRecord)),
    )


@pytest.fixture
async def client(stores):
    blog_store, credential_store = stores
    app.dependency_overrides[get_blog_store] = lambda: blog_store
    app.dependency_overrides[get_credential_store] = lambda: credential_store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
