"""
feedback_collector.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`): the storage target answers and the schema is in place.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from feedback_collector.api.deps import db_session
from feedback_collector.db.models import Prompt

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(session: AsyncSession = Depends(db_session)) -> dict[str, str]:
    # Fails (500) until the `prompts` table exists, e.g. before `alembic upgrade head` in prod.
    await session.execute(select(Prompt.id).limit(1))
    return {"status": "ready"}


# --- Module Notes -----------------------------------------------------------
# These are the only JSON endpoints; everything else renders HTML.
