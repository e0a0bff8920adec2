"""Store Registry - process-wide BlogStore and CredentialStore instances.

Invariants:
    - Exactly one BlogStore and one CredentialStore per process once initialized
    - Every request shares those instances, and therefore their guards
    - get_* raise RuntimeError before init_stores has run

Design Decisions:
    - Module-level singletons initialized from the FastAPI lifespan, the same
      way infrastructure/database.py holds db_manager
    - get_blog_store/get_credential_store double as FastAPI dependencies so
      tests swap stores through app.dependency_overrides
"""

import logging

from blog_api.core.domain_types import StoreBackend
from blog_api.core.repository_protocols import DocumentCollection
from blog_api.infrastructure import database
from blog_api.infrastructure.memory_collection import InMemoryDocumentCollection
from blog_api.infrastructure.sql_collection import SqlDocumentCollection
from blog_api.models.blog import BlogRecord
from blog_api.models.user import UserRecord
from blog_api.services.blog_store import BlogStore
from blog_api.services.credential_store import CredentialStore

logger = logging.getLogger(__name__)

blog_store: BlogStore | None = None
credential_store: CredentialStore | None = None


def build_collections(
    backend: StoreBackend,
) -> tuple[DocumentCollection, DocumentCollection]:
    """Return (blogs, users) collections for the configured backend."""
    if backend is StoreBackend.MEMORY:
        return InMemoryDocumentCollection(), InMemoryDocumentCollection()
    manager = database.get_db_manager()
    return (
        SqlDocumentCollection(manager, BlogRecord),
        SqlDocumentCollection(manager, UserRecord),
    )


def init_stores(
    blogs: DocumentCollection, users: DocumentCollection,
) -> tuple[BlogStore, CredentialStore]:
    global blog_store, credential_store
    blog_store = BlogStore(blogs)
    credential_store = CredentialStore(users)
    logger.info("Blog and credential stores initialized")
    return blog_store, credential_store


def get_blog_store() -> BlogStore:
    if not blog_store:
        raise RuntimeError("Blog store not initialized")
    return blog_store


def get_credential_store() -> CredentialStore:
    if not credential_store:
        raise RuntimeError("Credential store not initialized")
    return credential_store
