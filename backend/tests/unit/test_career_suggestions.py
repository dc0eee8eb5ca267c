"""Tests for career suggestion parsing and generation.

Parsing never raises: malformed blocks are dropped and unparseable text
yields an empty list.
"""

import pytest

from careerai.providers.errors import RateLimitError
from careerai.providers.llm.base import TaskType
from careerai.services.career_suggestions import (
    generate_career_suggestions,
    parse_career_suggestions,
)

SUGGESTIONS_TEXT = """###
**Career:** Data Analyst
**Description:** Turns data into business decisions.
**Key Skills:** SQL, Python, Tableau
###
**Career:** Machine Learning Engineer
**Description:** Builds and deploys models.
**Key Skills:** Python, PyTorch
###"""

# =============================================================================
# Parser
# =============================================================================


class TestParseCareerSuggestions:
    """Tests for parse_career_suggestions."""

    def test_parses_well_formed_blocks_in_order(self):
        """Each complete block becomes one suggestion, in output order."""
        result = parse_career_suggestions(SUGGESTIONS_TEXT)

        assert [s.name for s in result] == [
            "Data Analyst",
            "Machine Learning Engineer",
        ]
        assert result[0].description == "Turns data into business decisions."
        assert result[0].skills == ["SQL", "Python", "Tableau"]

    def test_single_block(self):
        text = (
            "###\n**Career:** Data Analyst\n**Description:** Analyzes data.\n"
            "**Key Skills:** SQL, Python\n###"
        )

        result = parse_career_suggestions(text)

        assert len(result) == 1
        assert result[0].name == "Data Analyst"
        assert result[0].description == "Analyzes data."
        assert result[0].skills == ["SQL", "Python"]

    def test_block_missing_skills_is_dropped(self):
        """A block without Key Skills does not appear in the result."""
        text = (
            "###\n**Career:** X\n**Description:** Y\n###\n"
            "**Career:** Z\n**Description:** W\n**Key Skills:** A\n###"
        )

        result = parse_career_suggestions(text)

        assert [s.name for s in result] == ["Z"]

    def test_every_field_is_trimmed(self):
        text = (
            "###\n**Career:**   Analyst  \n**Description:**  Does things. \n"
            "**Key Skills:**  SQL ,  Excel  \n###"
        )

        result = parse_career_suggestions(text)

        assert result[0].name == "Analyst"
        assert result[0].description == "Does things."
        assert result[0].skills == ["SQL", "Excel"]

    def test_empty_skill_tokens_are_kept(self):
        text = "**Career:** A\n**Description:** B\n**Key Skills:** SQL, , Python,"

        result = parse_career_suggestions(text)

        assert result[0].skills == ["SQL", "", "Python", ""]

    def test_text_without_delimiters_parses_as_one_block(self):
        text = "**Career:** A\n**Description:** B\n**Key Skills:** C"

        assert len(parse_career_suggestions(text)) == 1

    @pytest.mark.parametrize(
        "text",
        ["", "   ", "###", "### ### ###", "I cannot help with that.", "{not json"],
    )
    def test_malformed_text_returns_empty_list(self, text):
        """Nothing extractable yields [] rather than an exception."""
        assert parse_career_suggestions(text) == []


# =============================================================================
# Generation
# =============================================================================


class TestGenerateCareerSuggestions:
    """Tests for generate_career_suggestions."""

    @pytest.mark.asyncio
    async def test_returns_parsed_suggestions(self, mock_llm, profile):
        result = await generate_career_suggestions(profile, provider=mock_llm)

        assert len(result) == 2
        mock_llm.assert_called_with_task(TaskType.CAREER_SUGGESTIONS)

    @pytest.mark.asyncio
    async def test_prompt_embeds_profile_and_format(self, mock_llm, profile):
        """The single user message carries the profile and output format."""
        await generate_career_suggestions(profile, provider=mock_llm)

        messages = mock_llm.calls[0]["messages"]
        assert len(messages) == 1
        assert messages[0].role == "user"
        assert "Test Student" in messages[0].content
        assert "**Career:**" in messages[0].content
        assert "###" in messages[0].content

    @pytest.mark.asyncio
    async def test_uses_factory_provider_by_default(self, mock_llm, profile):
        result = await generate_career_suggestions(profile)

        assert len(result) == 2
        assert mock_llm.count_calls(TaskType.CAREER_SUGGESTIONS) == 1

    @pytest.mark.asyncio
    async def test_provider_failure_returns_empty_list(self, mock_llm, profile):
        """Provider errors degrade to an empty list; nothing is raised."""
        mock_llm.set_error(TaskType.CAREER_SUGGESTIONS, RateLimitError("429"))

        result = await generate_career_suggestions(profile, provider=mock_llm)

        assert result == []

    @pytest.mark.asyncio
    async def test_unparseable_response_returns_empty_list(self, mock_llm, profile):
        mock_llm.set_response(TaskType.CAREER_SUGGESTIONS, "Sorry, no.")

        result = await generate_career_suggestions(profile, provider=mock_llm)

        assert result == []
