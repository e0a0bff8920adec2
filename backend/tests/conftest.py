"""Root conftest - shared test configuration and the SQLite-backed session manager."""

import os

import pytest

# Keep tests off real infrastructure
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("LOG_FORMAT", "text")

from blog_api.infrastructure.database import DatabaseSessionManager  # noqa: E402
import blog_api.models  # noqa: E402,F401


@pytest.fixture
async def sql_manager(tmp_path):
    """Fresh file-backed SQLite database per test.

    A file (not :memory:) so concurrent sessions each get their own connection.
    """
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'blog.db'}",
    )
    await manager.create_schema()
    yield manager
    await manager.dispose()
