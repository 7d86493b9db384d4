"""
feedback_collector.db.init_db

DB initialization helpers (dev/test convenience).

Responsibilities:
- Create the `prompts` and `feedback` tables for local development and tests.
- Keep production migration workflow separate (Alembic).
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from feedback_collector.db import models  # noqa: F401  # registers tables on Base.metadata
from feedback_collector.db.base import Base


async def init_db(engine: AsyncEngine) -> None:
    """
    Dev/test bootstrap: create tables if they don't exist.
    Production should rely on Alembic migrations.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
