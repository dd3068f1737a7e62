"""
Pytest configuration for storerating_identity integration tests.

Re-exports the shared SQLite database fixtures.
"""

from tests.shared.fixtures.database import (
    async_engine,
    database_url,
    db_session,
    session_maker,
)

__all__ = ["async_engine", "database_url", "db_session", "session_maker"]
