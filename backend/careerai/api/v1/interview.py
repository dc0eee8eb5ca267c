"""Mock interview API router.

The interview lives inside the resume prep screen. Starting it again
replaces the running interview with a fresh session.
"""

from fastapi import APIRouter, Request

from careerai.api.deps import Shell, screen_errors
from careerai.controllers.resume import MockInterviewController, ResumeController
from careerai.core.config import settings
from careerai.core.errors import NotFoundError
from careerai.core.rate_limiting import limiter
from careerai.core.responses import DataResponse
from careerai.schemas.chat import ChatMessageRequest
from careerai.schemas.views import InterviewView, RenderedMessage
from careerai.services.markdown import render_simple_markdown

router = APIRouter()


def _interview_view(interview: MockInterviewController) -> InterviewView:
    return InterviewView(
        target_role=interview.target_role,
        messages=[
            RenderedMessage(
                role=m.role, text=m.text, html=render_simple_markdown(m.text)
            )
            for m in interview.messages
        ],
        is_loading=interview.is_loading,
    )


def _current_interview(controller: ResumeController) -> MockInterviewController:
    if controller.interview is None:
        raise NotFoundError("Interview")
    return controller.interview


@router.post("/start")
@limiter.limit(settings.rate_limit_llm)
async def start_interview(
    request: Request,  # noqa: ARG001
    shell: Shell,
) -> DataResponse[InterviewView]:
    """Start a mock interview; the response carries the first question.

    Security: Rate limited to prevent LLM cost abuse.
    """
    with screen_errors():
        controller = shell.require(ResumeController)
        interview = controller.open_interview()
        await interview.start()
    return DataResponse(data=_interview_view(interview))


@router.get("/messages")
async def get_interview_messages(shell: Shell) -> DataResponse[InterviewView]:
    """Interview log.

    Raises:
        NotFoundError: If no interview has been started.
    """
    with screen_errors():
        controller = shell.require(ResumeController)
    return DataResponse(data=_interview_view(_current_interview(controller)))


@router.post("/messages")
@limiter.limit(settings.rate_limit_llm)
async def send_interview_message(
    request: Request,  # noqa: ARG001
    body: ChatMessageRequest,
    shell: Shell,
) -> DataResponse[InterviewView]:
    """Answer the interviewer; the response carries feedback and next question.

    Raises:
        NotFoundError: If no interview has been started.
        ConflictError: If the previous turn is still in flight.
    """
    with screen_errors():
        controller = shell.require(ResumeController)
    interview = _current_interview(controller)
    with screen_errors():
        await interview.send_message(body.content)
    return DataResponse(data=_interview_view(interview))
