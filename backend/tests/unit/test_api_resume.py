"""Tests for the resume feedback and mock interview API endpoints."""

import pytest
import pytest_asyncio
from httpx import AsyncClient

from careerai.controllers.resume import (
    FEEDBACK_ERROR_MESSAGE,
    INTERVIEW_START_ERROR_MESSAGE,
)
from careerai.prompts.career import INTERVIEW_OPENING_MESSAGE
from careerai.providers.errors import RateLimitError
from careerai.providers.llm.base import TaskType


@pytest_asyncio.fixture
async def on_resume(client: AsyncClient) -> AsyncClient:
    await client.post("/api/v1/onboarding/submit")
    response = await client.post("/api/v1/shell/navigate", json={"screen": "resume"})
    assert response.status_code == 200
    return client


class TestResumeFeedback:
    """Tests for POST /resume/feedback."""

    @pytest.mark.asyncio
    async def test_feedback_with_rendered_html(self, on_resume: AsyncClient):
        response = await on_resume.post(
            "/api/v1/resume/feedback", json={"resume_text": "Experienced student"}
        )

        data = response.json()["data"]
        assert response.status_code == 200
        assert data["feedback"] == "### Strengths\n- **Clear** summary"
        assert data["html"] == (
            "<h3>Strengths</h3><br /><li><strong>Clear</strong> summary</li>"
        )

    @pytest.mark.asyncio
    async def test_failure_returns_apology(self, on_resume: AsyncClient, mock_llm):
        mock_llm.set_error(TaskType.RESUME_FEEDBACK, RateLimitError("429"))

        response = await on_resume.post(
            "/api/v1/resume/feedback", json={"resume_text": "Resume"}
        )

        assert response.status_code == 200
        assert response.json()["data"]["feedback"] == FEEDBACK_ERROR_MESSAGE

    @pytest.mark.asyncio
    async def test_blank_resume_rejected(self, on_resume: AsyncClient, mock_llm):
        response = await on_resume.post(
            "/api/v1/resume/feedback", json={"resume_text": "   "}
        )

        assert response.status_code == 400
        assert mock_llm.count_calls(TaskType.RESUME_FEEDBACK) == 0

    @pytest.mark.asyncio
    async def test_requires_resume_screen(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/resume/feedback", json={"resume_text": "Resume"}
        )
        assert response.status_code == 422


class TestInterview:
    """Tests for the /interview endpoints."""

    @pytest.mark.asyncio
    async def test_start_returns_first_question(self, on_resume: AsyncClient, mock_llm):
        response = await on_resume.post("/api/v1/interview/start")

        data = response.json()["data"]
        assert response.status_code == 200
        # No roadmap role chosen: first profile target role is used
        assert data["target_role"] == "Data Analyst"
        assert data["messages"] == [
            {
                "role": "model",
                "text": "Tell me about yourself.",
                "html": "Tell me about yourself.",
            }
        ]
        assert mock_llm.calls[-1]["messages"][-1].content == INTERVIEW_OPENING_MESSAGE

    @pytest.mark.asyncio
    async def test_start_failure_returns_apology(
        self, on_resume: AsyncClient, mock_llm
    ):
        mock_llm.set_error(TaskType.MOCK_INTERVIEW, RateLimitError("429"))

        response = await on_resume.post("/api/v1/interview/start")

        messages = response.json()["data"]["messages"]
        assert [m["text"] for m in messages] == [INTERVIEW_START_ERROR_MESSAGE]

    @pytest.mark.asyncio
    async def test_turn(self, on_resume: AsyncClient, mock_llm):
        await on_resume.post("/api/v1/interview/start")
        mock_llm.set_response(TaskType.MOCK_INTERVIEW, "**Good.** Next?")

        response = await on_resume.post(
            "/api/v1/interview/messages", json={"content": "I led a project."}
        )

        messages = response.json()["data"]["messages"]
        assert [m["role"] for m in messages] == ["model", "user", "model"]
        assert messages[-1]["html"] == "<strong>Good.</strong> Next?"

    @pytest.mark.asyncio
    async def test_log(self, on_resume: AsyncClient):
        await on_resume.post("/api/v1/interview/start")

        response = await on_resume.get("/api/v1/interview/messages")

        assert len(response.json()["data"]["messages"]) == 1

    @pytest.mark.asyncio
    async def test_messages_before_start_not_found(self, on_resume: AsyncClient):
        get_response = await on_resume.get("/api/v1/interview/messages")
        post_response = await on_resume.post(
            "/api/v1/interview/messages", json={"content": "Hello"}
        )

        assert get_response.status_code == 404
        assert post_response.status_code == 404

    @pytest.mark.asyncio
    async def test_target_role_follows_roadmap_choice(self, on_resume: AsyncClient):
        await on_resume.post("/api/v1/roadmap", json={"target_role": "ML Engineer"})
        await on_resume.post("/api/v1/shell/navigate", json={"screen": "resume"})

        response = await on_resume.post("/api/v1/interview/start")

        assert response.json()["data"]["target_role"] == "ML Engineer"
