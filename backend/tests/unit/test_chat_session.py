"""Tests for ChatSession and the persona factories."""

import pytest

from careerai.agents.chat_session import (
    ChatSession,
    create_interview_chat,
    create_mentor_chat,
)
from careerai.prompts.career import MENTOR_SYSTEM_INSTRUCTION
from careerai.providers.errors import ContentFilterError, TransientError
from careerai.providers.llm.base import TaskType


class TestPersonaFactories:
    def test_mentor_session(self, mock_llm):
        session = create_mentor_chat(mock_llm)

        assert session.system_instruction == MENTOR_SYSTEM_INSTRUCTION
        assert session.task == TaskType.MENTOR_CHAT
        assert session.history == []

    def test_interviewer_session_names_target_role(self, mock_llm):
        session = create_interview_chat(mock_llm, "Data Analyst")

        assert "'Data Analyst'" in session.system_instruction
        assert session.task == TaskType.MOCK_INTERVIEW


class TestSend:
    """Tests for the blocking send mode."""

    @pytest.mark.asyncio
    async def test_returns_reply_and_records_turn(self, mock_llm):
        session = create_mentor_chat(mock_llm)

        reply = await session.send("Hi")

        assert reply == "Keep learning every day"
        assert [(m.role, m.content) for m in session.history] == [
            ("user", "Hi"),
            ("assistant", "Keep learning every day"),
        ]

    @pytest.mark.asyncio
    async def test_history_is_replayed_after_system_instruction(self, mock_llm):
        session = ChatSession(mock_llm, "Be nice.", TaskType.MENTOR_CHAT)
        await session.send("first")

        await session.send("second")

        messages = mock_llm.calls[-1]["messages"]
        assert [(m.role, m.content) for m in messages] == [
            ("system", "Be nice."),
            ("user", "first"),
            ("assistant", "Keep learning every day"),
            ("user", "second"),
        ]

    @pytest.mark.asyncio
    async def test_failed_turn_leaves_history_unchanged(self, mock_llm):
        session = create_mentor_chat(mock_llm)
        await session.send("ok")
        mock_llm.set_error(TaskType.MENTOR_CHAT, TransientError("503"))

        with pytest.raises(TransientError):
            await session.send("boom")

        assert len(session.history) == 2

    @pytest.mark.asyncio
    async def test_session_usable_after_failure(self, mock_llm):
        session = create_mentor_chat(mock_llm)
        mock_llm.set_error(TaskType.MENTOR_CHAT, TransientError("503"))
        with pytest.raises(TransientError):
            await session.send("boom")
        mock_llm.set_error(TaskType.MENTOR_CHAT, None)

        assert await session.send("again") == "Keep learning every day"

    def test_history_is_a_copy(self, mock_llm):
        session = create_mentor_chat(mock_llm)
        session.history.append("junk")
        assert session.history == []


class TestSendStream:
    """Tests for the streaming send mode."""

    @pytest.mark.asyncio
    async def test_yields_fragments_in_order(self, mock_llm):
        mock_llm.set_stream_chunks(TaskType.MENTOR_CHAT, ["Hel", "lo, ", "world"])
        session = create_mentor_chat(mock_llm)

        fragments = [f async for f in session.send_stream("Hi")]

        assert fragments == ["Hel", "lo, ", "world"]

    @pytest.mark.asyncio
    async def test_records_joined_reply(self, mock_llm):
        mock_llm.set_stream_chunks(TaskType.MENTOR_CHAT, ["Hel", "lo, ", "world"])
        session = create_mentor_chat(mock_llm)

        async for _ in session.send_stream("Hi"):
            pass

        assert session.history[-1].content == "Hello, world"

    @pytest.mark.asyncio
    async def test_mid_stream_failure_records_nothing(self, mock_llm):
        mock_llm.set_stream_chunks(TaskType.MENTOR_CHAT, ["partial"])
        mock_llm.set_error(TaskType.MENTOR_CHAT, ContentFilterError("blocked"))
        session = create_mentor_chat(mock_llm)
        received = []

        with pytest.raises(ContentFilterError):
            async for fragment in session.send_stream("Hi"):
                received.append(fragment)

        assert received == ["partial"]
        assert session.history == []
