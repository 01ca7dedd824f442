"""Pytest fixtures and configuration."""

from pathlib import Path

import pytest
from sqlalchemy import create_engine, text

from src.chainkit.config import ChainkitSettings, get_settings
from src.chainkit.sql.database import SQLDatabase

# Project root (parent of tests/)
PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def settings() -> ChainkitSettings:
    """Settings that ignore any local .env file."""
    return ChainkitSettings(_env_file=None, OPENAI_API_KEY="sk-test")


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sqlite_url(tmp_path: Path) -> str:
    """File-backed SQLite database with orders, users and logs tables."""
    url = f"sqlite:///{tmp_path / 'shop.db'}"
    engine = create_engine(url)
    with engine.begin() as conn:
        conn.execute(text("CREATE TABLE orders (id INTEGER PRIMARY KEY, date TEXT, amount REAL)"))
        conn.execute(text("INSERT INTO orders VALUES (1, '2024-01-01', 10.5), (2, '2024-02-01', NULL)"))
        conn.execute(text("CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT)"))
        conn.execute(text("INSERT INTO users VALUES (1, 'Ada')"))
        conn.execute(text("CREATE TABLE logs (id INTEGER PRIMARY KEY, message TEXT)"))
    engine.dispose()
    return url


@pytest.fixture
def database(sqlite_url: str):
    """SQLDatabase over the sample SQLite file, two sample rows per table."""
    db = SQLDatabase.from_uri(sqlite_url, sample_rows_in_table_info=2)
    yield db
    db.close()
