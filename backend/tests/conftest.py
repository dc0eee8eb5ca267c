import json
import os
from collections.abc import AsyncGenerator, Iterator

# Settings are validated at import time and require a credential.
os.environ.setdefault("GOOGLE_API_KEY", "test-google-api-key")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from careerai.api.deps import reset_app_shell  # noqa: E402
from careerai.controllers.app_shell import AppShell  # noqa: E402
from careerai.providers import factory  # noqa: E402
from careerai.providers.llm.base import TaskType  # noqa: E402
from careerai.providers.llm.mock_adapter import MockLLMProvider  # noqa: E402
from careerai.schemas.profile import Profile, Skill  # noqa: E402

SUGGESTIONS_TEXT = """###
**Career:** Data Analyst
**Description:** Turns data into business decisions.
**Key Skills:** SQL, Python, Tableau
###
**Career:** Machine Learning Engineer
**Description:** Builds and deploys models.
**Key Skills:** Python, PyTorch
###"""

ROADMAP_MILESTONES = [
    {
        "title": "Learn SQL",
        "type": "course",
        "description": "Complete an intro SQL course.",
        "resources": ["https://example.com/sql"],
    },
    {
        "title": "Build a dashboard",
        "type": "project",
        "description": "Publish a dashboard from a public dataset.",
        "resources": [],
    },
]

ROADMAP_JSON = json.dumps(ROADMAP_MILESTONES)


@pytest.fixture
def profile() -> Profile:
    """A small submitted profile."""
    return Profile(
        name="Test Student",
        education="B.Sc.",
        major="Statistics",
        interests=["Data"],
        target_roles=["Data Analyst", "Data Engineer"],
        skills=[
            Skill(name="Python", proficiency=80),
            Skill(name="SQL", proficiency=40),
        ],
    )


@pytest.fixture
def mock_llm() -> Iterator[MockLLMProvider]:
    """Fixture that provides mock LLM and resets after test.

    Provides MockLLMProvider with pre-configured responses for every task
    type. Automatically injects into factory singleton and resets after
    test.

    Yields:
        MockLLMProvider instance with pre-configured responses.
    """
    mock = MockLLMProvider(
        {
            TaskType.CAREER_SUGGESTIONS: SUGGESTIONS_TEXT,
            TaskType.ROADMAP_GENERATION: ROADMAP_JSON,
            TaskType.RESUME_FEEDBACK: "### Strengths\n- **Clear** summary",
            TaskType.MENTOR_CHAT: "Keep learning every day",
            TaskType.MOCK_INTERVIEW: "Tell me about yourself.",
        }
    )

    # Inject mock into factory singleton
    factory._llm_provider = mock

    yield mock

    # Reset after test
    factory.reset_providers()


@pytest.fixture
def shell(mock_llm: MockLLMProvider) -> AppShell:
    """Fresh shell on the onboarding screen."""
    return AppShell(mock_llm)


@pytest.fixture
def submitted_shell(shell: AppShell, profile: Profile) -> AppShell:
    """Shell with a submitted profile, showing the dashboard."""
    shell.submit_profile(profile)
    return shell


@pytest_asyncio.fixture
async def client(mock_llm: MockLLMProvider) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against a fresh app and a fresh in-memory session.

    Yields:
        AsyncClient bound to the ASGI app.
    """
    from careerai.main import create_app

    reset_app_shell()
    app = create_app()
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac
    reset_app_shell()
