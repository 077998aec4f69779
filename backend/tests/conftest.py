# backend/tests/conftest.py
"""
Pytest configuration for the CRM workspace backend tests.

- Ensures that the project root (backend/) is added to sys.path
  so that `import app.*` works correctly in tests.
- Points DATABASE_PATH at a throwaway location so that importing
  `app.main` never touches a real database file.
- Provides a `client` fixture: a TestClient bound to a fresh SQLite file
  per test, with the application lifespan (schema bootstrap) running.
"""

import os
import sys
import tempfile
from pathlib import Path

import pytest


def _ensure_project_root_in_sys_path() -> None:
    # This file is located at: backend/tests/conftest.py
    # parents[1] -> backend/
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)

    if project_root_str not in sys.path:
        # Insert at the beginning so it has priority over site-packages, etc.
        sys.path.insert(0, project_root_str)


def _ensure_test_env_vars() -> None:
    """
    Set environment variables required for tests.

    The module-level `app = create_app()` in app.main only reads settings;
    the database is opened in the lifespan, so this path is never created
    unless a test enters that app's lifespan.
    """
    os.environ.setdefault("DATABASE_PATH", os.path.join(tempfile.gettempdir(), "crm-tests-unused.db"))
    os.environ.setdefault("LOG_LEVEL", "DEBUG")


_ensure_project_root_in_sys_path()
_ensure_test_env_vars()


@pytest.fixture
def db_settings(tmp_path):
    from app.db.config import DatabaseSettings

    return DatabaseSettings(path=str(tmp_path / "test.db"), timeout_seconds=5.0)


@pytest.fixture
def client(db_settings):
    from fastapi.testclient import TestClient

    from app.config import AppSettings
    from app.main import create_app

    app = create_app(
        database_settings=db_settings,
        app_settings=AppSettings(cors_allow_origins=["*"]),
    )
    with TestClient(app) as test_client:
        yield test_client
