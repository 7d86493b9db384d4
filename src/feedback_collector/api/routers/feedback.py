"""
feedback_collector.api.routers.feedback

Respondent-facing feedback form.

Responsibilities:
- Show the submission form for an existing prompt.
- Record a submitted response and thank the respondent.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from feedback_collector.api.deps import db_session
from feedback_collector.api.rendering import PROMPT_NOT_FOUND, render, render_message
from feedback_collector.db.models import Prompt
from feedback_collector.db.repositories.feedback import FeedbackRepo
from feedback_collector.db.repositories.prompts import PromptRepo
from feedback_collector.observability.logging import get_logger

log = get_logger(__name__)

router = APIRouter(prefix="/feedback", tags=["feedback"])

SUBMIT_FAILED = "Error submitting feedback"


async def _existing_prompt(session: AsyncSession, prompt_id: str) -> Prompt | None:
    try:
        return await PromptRepo(session).get(prompt_id)
    except SQLAlchemyError:
        log.exception("prompt_get_failed", prompt_id=prompt_id)
        return None


@router.get("/{prompt_id}", response_class=HTMLResponse)
async def feedback_form(
    request: Request,
    prompt_id: str,
    session: AsyncSession = Depends(db_session),
) -> HTMLResponse:
    prompt = await _existing_prompt(session, prompt_id)
    if prompt is None:
        return render_message(request, PROMPT_NOT_FOUND)
    return render(request, "feedback_form.html", {"prompt": prompt})


@router.post("/{prompt_id}", response_class=HTMLResponse)
async def submit_feedback(
    request: Request,
    prompt_id: str,
    content: str = Form(""),
    session: AsyncSession = Depends(db_session),
) -> HTMLResponse:
    # The prompt must exist at submission time; nothing re-checks it afterwards.
    prompt = await _existing_prompt(session, prompt_id)
    if prompt is None:
        return render_message(request, PROMPT_NOT_FOUND)

    try:
        fb = await FeedbackRepo(session).create(prompt_id=prompt.id, content=content)
        await session.commit()
    except SQLAlchemyError:
        log.exception("feedback_create_failed", prompt_id=prompt_id)
        return render_message(request, SUBMIT_FAILED)

    log.info("feedback_created", prompt_id=prompt_id, feedback_id=fb.id)
    return render(request, "feedback_success.html", {"prompt": prompt})
