"""Resume prep screen: resume feedback tab and mock interview tab.

Both tabs use blocking provider calls. Failures are turned into a single
apology text in place of the expected output.
"""

import structlog

from careerai.agents.chat_session import ChatSession, create_interview_chat
from careerai.controllers.base import ChatBusyError, ScreenController, ScreenStateError
from careerai.prompts.career import INTERVIEW_OPENING_MESSAGE
from careerai.providers import ProviderError
from careerai.providers.llm.base import LLMProvider
from careerai.schemas.chat import ChatMessage, ChatRole
from careerai.services.resume_feedback import ResumeFeedbackError, get_resume_feedback

logger = structlog.get_logger()

FEEDBACK_ERROR_MESSAGE = "Sorry, there was an error getting feedback."
INTERVIEW_START_ERROR_MESSAGE = "Sorry, I can't start the interview right now."
INTERVIEW_ERROR_MESSAGE = "Sorry, I encountered an error."


class MockInterviewController(ScreenController):
    """Interview for one target role; the interviewer speaks first."""

    screen_name = "mock_interview"

    def __init__(self, provider: LLMProvider, target_role: str) -> None:
        super().__init__()
        self.provider = provider
        self.target_role = target_role
        self.session: ChatSession | None = None
        self.messages: list[ChatMessage] = []
        self.is_loading = False

    def unmount(self) -> None:
        super().unmount()
        self.session = None

    async def start(self) -> None:
        """Create the interviewer session and fetch the opening question."""
        token = self._begin()
        session = create_interview_chat(self.provider, self.target_role)
        self.session = session
        self.messages = []
        self.is_loading = True
        try:
            reply = await session.send(INTERVIEW_OPENING_MESSAGE)
        except ProviderError as e:
            logger.error(
                "interview_start_failed",
                target_role=self.target_role,
                error=str(e),
                error_type=type(e).__name__,
            )
            reply = INTERVIEW_START_ERROR_MESSAGE
        finally:
            if self._is_current(token):
                self.is_loading = False

        if self._is_current(token):
            self.messages = [ChatMessage(role=ChatRole.MODEL, text=reply)]
        else:
            self._discard("interview_start")

    async def send_message(self, text: str) -> ChatMessage | None:
        """Answer the interviewer and wait for feedback plus next question.

        Blank input is ignored.

        Returns:
            The model message appended to the log, or None if nothing was
            sent or the result was discarded.

        Raises:
            ChatBusyError: If a turn is already in flight.
            ScreenStateError: If the interview has not been started.
        """
        if not text.strip():
            return None
        if self.is_loading:
            raise ChatBusyError("The interviewer is still responding")
        token = self._begin()
        session = self.session
        if session is None:
            raise ScreenStateError("Interview has not been started")

        self.messages.append(ChatMessage(role=ChatRole.USER, text=text))
        self.is_loading = True
        try:
            reply = await session.send(text)
        except ProviderError as e:
            logger.error(
                "interview_turn_failed",
                target_role=self.target_role,
                error=str(e),
                error_type=type(e).__name__,
            )
            reply = INTERVIEW_ERROR_MESSAGE
        finally:
            if self._is_current(token):
                self.is_loading = False

        if not self._is_current(token):
            self._discard("interview_turn")
            return None
        message = ChatMessage(role=ChatRole.MODEL, text=reply)
        self.messages.append(message)
        return message


class ResumeController(ScreenController):
    """Resume feedback plus an optional mock interview."""

    screen_name = "resume"

    def __init__(self, provider: LLMProvider, target_role: str) -> None:
        super().__init__()
        self.provider = provider
        self.target_role = target_role
        self.feedback = ""
        self.is_loading = False
        self.interview: MockInterviewController | None = None

    def unmount(self) -> None:
        super().unmount()
        if self.interview is not None:
            self.interview.unmount()
            self.interview = None

    async def request_feedback(self, resume_text: str) -> str:
        """Get coach feedback for pasted resume text.

        Blank input is ignored and returns the current feedback.

        Raises:
            ChatBusyError: If a feedback request is already in flight.
        """
        if not resume_text.strip():
            return self.feedback
        if self.is_loading:
            raise ChatBusyError("Feedback is already being generated")

        token = self._begin()
        self.is_loading = True
        self.feedback = ""
        try:
            result = await get_resume_feedback(resume_text, provider=self.provider)
        except ResumeFeedbackError:
            result = FEEDBACK_ERROR_MESSAGE
        finally:
            if self._is_current(token):
                self.is_loading = False

        if self._is_current(token):
            self.feedback = result
        else:
            self._discard("resume_feedback")
        return result

    def open_interview(self) -> MockInterviewController:
        """Replace any running interview with a new, mounted one.

        Call ``start()`` on the result to fetch the opening question.
        """
        self._begin()
        if self.interview is not None:
            self.interview.unmount()
        self.interview = MockInterviewController(self.provider, self.target_role)
        self.interview.mount()
        return self.interview
