"""
tests.test_admin_routes

Operator pages: listing, creation, detail (with the shareable link), deletion,
and how each degrades when storage fails.
"""

from __future__ import annotations

import httpx
import pytest
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from feedback_collector.db.repositories.feedback import FeedbackRepo
from feedback_collector.db.repositories.prompts import PromptRepo


async def _storage_down(*_args, **_kwargs):
    raise SQLAlchemyError("storage offline")


@pytest.mark.asyncio
async def test_root_redirects_to_admin(client: httpx.AsyncClient) -> None:
    r = await client.get("/")
    assert r.status_code == 303
    assert r.headers["location"] == "/admin"


@pytest.mark.asyncio
async def test_admin_list_empty(client: httpx.AsyncClient) -> None:
    r = await client.get("/admin")
    assert r.status_code == 200
    assert "Feedback Prompts" in r.text
    assert "No prompts yet" in r.text


@pytest.mark.asyncio
async def test_admin_list_with_prompts(
    client: httpx.AsyncClient, app_session: AsyncSession
) -> None:
    await PromptRepo(app_session).create(title="Test Prompt", description="Test Description")
    await app_session.commit()

    r = await client.get("/admin")
    assert r.status_code == 200
    assert "Test Prompt" in r.text
    assert "Test Description" in r.text
    assert "No prompts yet" not in r.text


@pytest.mark.asyncio
async def test_admin_list_escapes_user_text(
    client: httpx.AsyncClient, app_session: AsyncSession
) -> None:
    await PromptRepo(app_session).create(title="<script>x</script>", description="")
    await app_session.commit()

    r = await client.get("/admin")
    assert "<script>x</script>" not in r.text
    assert "&lt;script&gt;" in r.text


@pytest.mark.asyncio
async def test_admin_list_storage_failure_renders_empty(
    client: httpx.AsyncClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(PromptRepo, "list_all", _storage_down)

    r = await client.get("/admin")
    assert r.status_code == 200
    assert "No prompts yet" in r.text


@pytest.mark.asyncio
async def test_admin_new_form(client: httpx.AsyncClient) -> None:
    r = await client.get("/admin/new")
    assert r.status_code == 200
    assert "Create New Prompt" in r.text
    assert "Title" in r.text
    assert "Description" in r.text


@pytest.mark.asyncio
async def test_admin_new_submit(client: httpx.AsyncClient, app_session: AsyncSession) -> None:
    r = await client.post(
        "/admin/new", data={"title": "New Prompt", "description": "New Description"}
    )
    assert r.status_code == 303

    prompts = await PromptRepo(app_session).list_all()
    assert len(prompts) == 1
    assert prompts[0].title == "New Prompt"
    assert prompts[0].description == "New Description"
    assert r.headers["location"] == f"/admin/prompt/{prompts[0].id}"


@pytest.mark.asyncio
async def test_admin_new_submit_blank_title_creates_nothing(
    client: httpx.AsyncClient, app_session: AsyncSession
) -> None:
    r = await client.post("/admin/new", data={"title": "   ", "description": "x"})
    assert r.status_code == 303
    assert r.headers["location"] == "/admin/new"
    assert await PromptRepo(app_session).list_all() == []


@pytest.mark.asyncio
async def test_admin_new_submit_storage_failure_redirects_to_list(
    client: httpx.AsyncClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(PromptRepo, "create", _storage_down)

    r = await client.post("/admin/new", data={"title": "T", "description": "D"})
    assert r.status_code == 303
    assert r.headers["location"] == "/admin"


@pytest.mark.asyncio
async def test_admin_detail(client: httpx.AsyncClient, app_session: AsyncSession) -> None:
    prompt = await PromptRepo(app_session).create(
        title="Detail Test", description="Detail Description"
    )
    await app_session.commit()

    r = await client.get(f"/admin/prompt/{prompt.id}", headers={"host": "localhost:3000"})
    assert r.status_code == 200
    assert "Detail Test" in r.text
    assert "Detail Description" in r.text
    assert f"http://localhost:3000/feedback/{prompt.id}" in r.text


@pytest.mark.asyncio
async def test_admin_detail_public_host_uses_https(
    client: httpx.AsyncClient, app_session: AsyncSession
) -> None:
    prompt = await PromptRepo(app_session).create(title="Public", description="")
    await app_session.commit()

    r = await client.get(f"/admin/prompt/{prompt.id}", headers={"host": "example.com"})
    assert f"https://example.com/feedback/{prompt.id}" in r.text


@pytest.mark.asyncio
async def test_admin_detail_shows_feedback_newest_first(
    client: httpx.AsyncClient, app_session: AsyncSession
) -> None:
    prompt = await PromptRepo(app_session).create(title="With Feedback", description="")
    await FeedbackRepo(app_session).create(prompt_id=prompt.id, content="First response")
    await FeedbackRepo(app_session).create(prompt_id=prompt.id, content="Second response")
    await app_session.commit()

    r = await client.get(f"/admin/prompt/{prompt.id}", headers={"host": "localhost:3000"})
    assert r.status_code == 200
    assert "Feedback Responses (2)" in r.text
    assert r.text.index("Second response") < r.text.index("First response")


@pytest.mark.asyncio
async def test_admin_detail_not_found(client: httpx.AsyncClient) -> None:
    r = await client.get("/admin/prompt/nonexistent-id", headers={"host": "localhost:3000"})
    assert r.status_code == 200
    assert "Prompt not found" in r.text


@pytest.mark.asyncio
async def test_admin_detail_storage_failure_renders_not_found(
    client: httpx.AsyncClient, app_session: AsyncSession, monkeypatch: pytest.MonkeyPatch
) -> None:
    prompt = await PromptRepo(app_session).create(title="Hidden", description="")
    await app_session.commit()
    monkeypatch.setattr(PromptRepo, "get", _storage_down)

    r = await client.get(f"/admin/prompt/{prompt.id}")
    assert r.status_code == 200
    assert "Prompt not found" in r.text


@pytest.mark.asyncio
async def test_admin_detail_feedback_failure_renders_empty_feedback(
    client: httpx.AsyncClient, app_session: AsyncSession, monkeypatch: pytest.MonkeyPatch
) -> None:
    prompt = await PromptRepo(app_session).create(title="Still Shown", description="")
    await FeedbackRepo(app_session).create(prompt_id=prompt.id, content="invisible")
    await app_session.commit()
    monkeypatch.setattr(FeedbackRepo, "list_for_prompt", _storage_down)

    r = await client.get(f"/admin/prompt/{prompt.id}")
    assert r.status_code == 200
    assert "Still Shown" in r.text
    assert "Feedback Responses (0)" in r.text
    assert "invisible" not in r.text


@pytest.mark.asyncio
async def test_admin_delete_prompt_cascades(
    client: httpx.AsyncClient, app_session: AsyncSession
) -> None:
    prompt = await PromptRepo(app_session).create(title="Gone", description="")
    await FeedbackRepo(app_session).create(prompt_id=prompt.id, content="bye")
    await app_session.commit()

    r = await client.post(f"/admin/prompt/{prompt.id}/delete")
    assert r.status_code == 303
    assert r.headers["location"] == "/admin"

    app_session.expunge_all()
    assert await PromptRepo(app_session).get(prompt.id) is None
    assert await FeedbackRepo(app_session).list_for_prompt(prompt.id) == []


@pytest.mark.asyncio
async def test_admin_delete_storage_failure_redirects_to_list(
    client: httpx.AsyncClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(PromptRepo, "delete", _storage_down)

    r = await client.post("/admin/prompt/whatever/delete")
    assert r.status_code == 303
    assert r.headers["location"] == "/admin"


@pytest.mark.asyncio
async def test_admin_detail_link_uses_x_forwarded_host(
    client: httpx.AsyncClient, app_session: AsyncSession
) -> None:
    prompt = await PromptRepo(app_session).create(title="Proxied", description="")
    await app_session.commit()

    r = await client.get(
        f"/admin/prompt/{prompt.id}",
        headers={"host": "127.0.0.1:3000", "x-forwarded-host": "feedback.example.com"},
    )
    assert f"https://feedback.example.com/feedback/{prompt.id}" in r.text
    assert "127.0.0.1:3000" not in r.text


@pytest.mark.asyncio
async def test_admin_detail_link_prefers_forwarded_header(
    client: httpx.AsyncClient, app_session: AsyncSession
) -> None:
    prompt = await PromptRepo(app_session).create(title="Proxied", description="")
    await app_session.commit()

    r = await client.get(
        f"/admin/prompt/{prompt.id}",
        headers={
            "host": "127.0.0.1:3000",
            "x-forwarded-host": "ignored.example.com",
            "forwarded": 'for=203.0.113.7;host="feedback.example.org";proto=https',
        },
    )
    assert f"https://feedback.example.org/feedback/{prompt.id}" in r.text
    assert "ignored.example.com" not in r.text
