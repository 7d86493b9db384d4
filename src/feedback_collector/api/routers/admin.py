"""
feedback_collector.api.routers.admin

Operator-facing pages for managing prompts.

Responsibilities:
- List, create and delete prompts.
- Show a prompt with its collected feedback and shareable feedback link.
- Degrade storage failures into empty listings, redirects or the not-found page.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_303_SEE_OTHER

from feedback_collector.api.deps import db_session
from feedback_collector.api.rendering import PROMPT_NOT_FOUND, render, render_message
from feedback_collector.db.models import Feedback, Prompt
from feedback_collector.db.repositories.feedback import FeedbackRepo
from feedback_collector.db.repositories.prompts import PromptRepo
from feedback_collector.observability.logging import get_logger
from feedback_collector.services.feedback_links import feedback_url, request_host

log = get_logger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


def _see_other(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=HTTP_303_SEE_OTHER)


@router.get("", response_class=HTMLResponse)
async def list_prompts(
    request: Request,
    session: AsyncSession = Depends(db_session),
) -> HTMLResponse:
    prompts: list[Prompt]
    try:
        prompts = await PromptRepo(session).list_all()
    except SQLAlchemyError:
        log.exception("prompt_list_failed")
        prompts = []
    return render(request, "admin_list.html", {"prompts": prompts})


@router.get("/new", response_class=HTMLResponse)
async def new_prompt_form(request: Request) -> HTMLResponse:
    return render(request, "admin_new.html")


@router.post("/new")
async def create_prompt(
    title: str = Form(""),
    description: str = Form(""),
    session: AsyncSession = Depends(db_session),
) -> RedirectResponse:
    if not title.strip():
        return _see_other("/admin/new")

    try:
        prompt = await PromptRepo(session).create(title=title, description=description)
        await session.commit()
    except SQLAlchemyError:
        # The operator just lands back on the listing; the failure only shows up in logs.
        log.exception("prompt_create_failed")
        return _see_other("/admin")

    log.info("prompt_created", prompt_id=prompt.id)
    return _see_other(f"/admin/prompt/{prompt.id}")


@router.get("/prompt/{prompt_id}", response_class=HTMLResponse)
async def prompt_detail(
    request: Request,
    prompt_id: str,
    session: AsyncSession = Depends(db_session),
) -> HTMLResponse:
    try:
        prompt = await PromptRepo(session).get(prompt_id)
    except SQLAlchemyError:
        log.exception("prompt_get_failed", prompt_id=prompt_id)
        prompt = None
    if prompt is None:
        return render_message(request, PROMPT_NOT_FOUND)

    feedback_list: list[Feedback]
    try:
        feedback_list = await FeedbackRepo(session).list_for_prompt(prompt_id)
    except SQLAlchemyError:
        log.exception("feedback_list_failed", prompt_id=prompt_id)
        feedback_list = []

    host = request_host(request)
    return render(
        request,
        "admin_detail.html",
        {
            "prompt": prompt,
            "feedback_list": feedback_list,
            "feedback_url": feedback_url(host, prompt_id),
        },
    )


@router.post("/prompt/{prompt_id}/delete")
async def delete_prompt(
    prompt_id: str,
    session: AsyncSession = Depends(db_session),
) -> RedirectResponse:
    try:
        await PromptRepo(session).delete(prompt_id)
        # One commit covers both deletes, so a crash cannot strand a feedback-less prompt.
        await session.commit()
    except SQLAlchemyError:
        log.exception("prompt_delete_failed", prompt_id=prompt_id)
        return _see_other("/admin")

    log.info("prompt_deleted", prompt_id=prompt_id)
    return _see_other("/admin")


# --- Module Notes -----------------------------------------------------------
# No admin route ever surfaces a storage failure as an error status; operators
# see an empty list or the not-found page and the details go to the logs.
