"""
feedback_collector.api.rendering

Template rendering for HTML views.

Responsibilities:
- Load the package's Jinja2 templates.
- Render a named view with its data into an HTML response.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

PROMPT_NOT_FOUND = "Prompt not found"


def render(request: Request, view: str, data: dict[str, Any] | None = None) -> HTMLResponse:
    return templates.TemplateResponse(request, view, data or {})


def render_message(request: Request, message: str) -> HTMLResponse:
    # Not-found and inline failures are ordinary 200 pages, never error statuses.
    return render(request, "message.html", {"message": message})
