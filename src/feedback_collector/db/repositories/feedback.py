"""
feedback_collector.db.repositories.feedback

Repository for `Feedback` entities.

Responsibilities:
- Append feedback responses against a prompt.
- List a single prompt's feedback, newest-first.
"""

from __future__ import annotations

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from feedback_collector.db.models import Feedback


class FeedbackRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, prompt_id: str, content: str) -> Feedback:
        # Callers confirm the prompt exists; the store's FK is the only other check.
        fb = Feedback(prompt_id=prompt_id, content=content)
        self._session.add(fb)
        await self._session.flush()
        return fb

    async def list_for_prompt(self, prompt_id: str) -> list[Feedback]:
        stmt = (
            select(Feedback)
            .where(Feedback.prompt_id == prompt_id)
            .order_by(desc(Feedback.created_at), desc(Feedback.id))
        )
        return list((await self._session.execute(stmt)).scalars().all())
