"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (no database, no network)
    │   ├── blogger_auth/
    │   ├── domain/
    │   ├── application/
    │   ├── infrastructure/
    │   └── presentation/
    └── integration/       # In-memory SQLite and FastAPI TestClient
        ├── persistence/
        └── api/
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from blogger_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")

# Required settings for code paths that fall back to get_settings()
os.environ.setdefault("AUTH_SECRET", "test-auth-secret-for-testing-only")
os.environ.setdefault("POSTGRES_PASSWORD", "test-password")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests using the in-memory database or the ASGI app",
    )


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Start every test session with fresh settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
