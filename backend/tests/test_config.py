"""Settings - environment parsing and URL normalization."""

from blog_api.config import Settings
from blog_api.core.domain_types import StoreBackend


def test_postgres_url_rewritten_for_asyncpg():
    settings = Settings(database_url="postgresql://u:p@host:5432/blogdb")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/blogdb"


def test_sqlite_url_left_alone():
    settings = Settings(database_url="sqlite+aiosqlite:///blog.db")
    assert settings.database_url == "sqlite+aiosqlite:///blog.db"


def test_store_backend_from_env(monkeypatch):
    monkeypatch.setenv("STORE_BACKEND", "sql")
    assert Settings().store_backend is StoreBackend.SQL


def test_id_seeding_off_by_default(monkeypatch):
    monkeypatch.delenv("SEED_BLOG_IDS_FROM_STORE", raising=False)
    settings = Settings()
    assert settings.seed_blog_ids_from_store is False
    assert settings.port == 3030
