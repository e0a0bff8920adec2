"""Service test fixtures - stores over both collection backends.

Invariants:
    - Every store test runs twice: in-memory collection and SQLite collection
    - Each test gets fresh stores (fresh guards, counter at 0)
"""

import pytest

from blog_api.core.domain_types import StoreBackend
from blog_api.infrastructure.memory_collection import InMemoryDocumentCollection
from blog_api.infrastructure.sql_collection import SqlDocumentCollection
from blog_api.models.blog import BlogRecord
from blog_api.models.user import UserRecord
from blog_api.services.blog_store import BlogStore
from blog_api.services.credential_store import CredentialStore


@pytest.fixture(
    params=[StoreBackend.MEMORY, StoreBackend.SQL], ids=lambda b: b.value,
)
def backend(request):
    return request.param


@pytest.fixture
def blog_collection(backend, sql_manager):
    if backend is StoreBackend.MEMORY:
        return InMemoryDocumentCollection()
    return SqlDocumentCollection(sql_manager, BlogRecord)


@pytest.fixture
def user_collection(backend, sql_manager):
    if backend is StoreBackend.MEMORY:
        return InMemoryDocumentCollection()
    return SqlDocumentCollection(sql_manager, UserRecord)


@pytest.fixture
def blog_store(blog_collection):
    return BlogStore(blog_collection)


@pytest.fixture
def credential_store(user_collection):
    return CredentialStore(user_collection)
