"""Settings — environment-driven configuration."""

from catalog.config import Settings


def test_postgres_url_rewritten_for_asyncpg(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@host:5432/shop")
    settings = Settings()
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/shop"


def test_sqlite_url_left_untouched(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///catalog.db")
    assert Settings().database_url == "sqlite+aiosqlite:///catalog.db"


def test_defaults(monkeypatch):
    monkeypatch.delenv("DATABASE_AUTO_CREATE", raising=False)
    settings = Settings()
    assert settings.database_pool_size == 20
    assert settings.database_auto_create is False
