"""Resume feedback generation."""

import structlog

from careerai.prompts.career import build_resume_feedback_prompt
from careerai.providers import ProviderError, factory
from careerai.providers.llm.base import LLMMessage, LLMProvider, TaskType

logger = structlog.get_logger()


class ResumeFeedbackError(Exception):
    """Resume feedback could not be obtained."""

    def __init__(self, message: str = "Failed to get resume feedback.") -> None:
        super().__init__(message)
        self.message = message


async def get_resume_feedback(
    resume_text: str,
    provider: LLMProvider | None = None,
) -> str:
    """Ask the LLM for structured markdown feedback on a resume.

    Args:
        resume_text: Resume pasted by the student.
        provider: LLM provider; defaults to the factory singleton.

    Returns:
        Markdown feedback text.

    Raises:
        ResumeFeedbackError: If the provider call fails.
    """
    llm = provider or factory.get_llm_provider()

    try:
        response = await llm.complete(
            messages=[
                LLMMessage(
                    role="user", content=build_resume_feedback_prompt(resume_text)
                ),
            ],
            task=TaskType.RESUME_FEEDBACK,
        )
    except ProviderError as e:
        logger.error(
            "resume_feedback_failed",
            error=str(e),
            error_type=type(e).__name__,
            resume_length=len(resume_text),
        )
        raise ResumeFeedbackError() from e

    return response.content or ""
