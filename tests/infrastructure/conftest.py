"""Infrastructure fixtures — file-backed SQLite database per test.

Invariants:
    - Every test gets a fresh database with all tables created
    - Engine disposed after each test

Design Decisions:
    - SQLite via aiosqlite: fast, no external dependency, sufficient for
      default and constraint behavior (PostgreSQL-only server defaults live
      in the Alembic migration and are not exercised here)
"""

import pytest

from batcave.infrastructure.database import DatabaseSessionManager


@pytest.fixture
async def manager(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'batcave.db'}",
    )
    await manager.create_all()
    yield manager
    await manager.close()
