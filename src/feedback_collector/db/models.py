"""
feedback_collector.db.models

Persistence schema for prompts and the feedback collected against them.

Responsibilities:
- Define ORM models:
  - Prompt: an operator-authored question that feedback is requested on
  - Feedback: a free-text response tied to exactly one Prompt
- Generate ids and creation timestamps server-side.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from feedback_collector.db.base import Base


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow_iso() -> str:
    # Fixed-width ISO-8601 with offset so lexical order matches chronological order.
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")


class Prompt(Base):
    __tablename__ = "prompts"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[str] = mapped_column(String(40), nullable=False, default=_utcnow_iso)

    def __repr__(self) -> str:
        return f"<Prompt {self.id} {self.title!r}>"


class Feedback(Base):
    __tablename__ = "feedback"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    # Passive reference: rows are not revalidated if the prompt disappears later.
    prompt_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("prompts.id"), nullable=False, index=True
    )
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[str] = mapped_column(String(40), nullable=False, default=_utcnow_iso)

    def __repr__(self) -> str:
        return f"<Feedback {self.id} prompt={self.prompt_id}>"


# --- Module Notes -----------------------------------------------------------
# Timestamps are stored as text (not DateTime) so the stored form is exactly the
# ISO-8601-with-offset string handed to templates and API consumers.
