"""Root pytest configuration.

Test Structure:
    tests/
    ├── storerating/             # Stores, ratings, directory, API
    │   ├── unit/                # Fast, isolated tests
    │   └── integration/         # Tests against a throwaway SQLite database
    ├── storerating_identity/    # Users, tokens, passwords, access gate
    │   ├── unit/
    │   └── integration/
    └── shared/                  # Shared fixtures and utilities

Integration tests are marked with @pytest.mark.integration and can be
deselected with ``-m "not integration"``.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from storerating_config.settings import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")

# Settings refuse to load without a signing secret
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-for-testing-only")


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Start and finish the session with an empty settings cache."""
    clear_settings_cache()
    yield
    clear_settings_cache()
