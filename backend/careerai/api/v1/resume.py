"""Resume prep API router: feedback on pasted resume text."""

from fastapi import APIRouter, Request

from careerai.api.deps import Shell, screen_errors
from careerai.controllers.resume import ResumeController
from careerai.core.config import settings
from careerai.core.rate_limiting import limiter
from careerai.core.responses import DataResponse
from careerai.schemas.views import ResumeFeedbackRequest, ResumeFeedbackView
from careerai.services.markdown import render_simple_markdown

router = APIRouter()


@router.post("/feedback")
@limiter.limit(settings.rate_limit_llm)
async def request_resume_feedback(
    request: Request,  # noqa: ARG001
    body: ResumeFeedbackRequest,
    shell: Shell,
) -> DataResponse[ResumeFeedbackView]:
    """Get coach feedback on a resume.

    On provider failure ``feedback`` holds the apology text.
    Security: Rate limited to prevent LLM cost abuse.
    """
    with screen_errors():
        controller = shell.require(ResumeController)
        feedback = await controller.request_feedback(body.resume_text)
    return DataResponse(
        data=ResumeFeedbackView(
            feedback=feedback, html=render_simple_markdown(feedback)
        )
    )
