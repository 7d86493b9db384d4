"""
feedback_collector.db.repositories.prompts

Repository for `Prompt` entities.

Responsibilities:
- Create, list and fetch prompts.
- Delete a prompt together with the feedback collected against it.
"""

from __future__ import annotations

from sqlalchemy import delete, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from feedback_collector.db.models import Feedback, Prompt


class PromptRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, title: str, description: str) -> Prompt:
        # id and created_at come from column defaults and are populated by the flush.
        prompt = Prompt(title=title, description=description)
        self._session.add(prompt)
        await self._session.flush()
        return prompt

    async def list_all(self) -> list[Prompt]:
        # Newest-first; id breaks created_at ties so the order is deterministic.
        stmt = select(Prompt).order_by(desc(Prompt.created_at), desc(Prompt.id))
        return list((await self._session.execute(stmt)).scalars().all())

    async def get(self, prompt_id: str) -> Prompt | None:
        return await self._session.get(Prompt, prompt_id)

    async def delete(self, prompt_id: str) -> None:
        """
        Cascade delete: dependent feedback rows go first, then the prompt row.
        Both statements share the caller's transaction; nothing is committed here.
        """

        await self._session.execute(delete(Feedback).where(Feedback.prompt_id == prompt_id))
        await self._session.execute(delete(Prompt).where(Prompt.id == prompt_id))


# --- Module Notes -----------------------------------------------------------
# The ordering inside `delete` matters when the store enforces the foreign key
# (see `Settings.sqlite_foreign_keys`).
