"""Tests for roadmap decoding and generation."""

import json

import pytest

from careerai.providers.errors import TransientError
from careerai.providers.llm.base import TaskType
from careerai.schemas.roadmap import MilestoneStatus, MilestoneType
from careerai.services.roadmap_generation import (
    ROADMAP_RESPONSE_SCHEMA,
    RoadmapGenerationError,
    decode_milestones,
    generate_learning_roadmap,
)

_SQL_MILESTONE = {
    "title": "Learn SQL",
    "type": "course",
    "description": "Basics",
    "resources": ["https://a"],
}

# =============================================================================
# Decoder
# =============================================================================


class TestDecodeMilestones:
    """Tests for decode_milestones."""

    def test_decodes_array_in_order(self):
        milestones = decode_milestones(json.dumps([_SQL_MILESTONE]))

        assert len(milestones) == 1
        m = milestones[0]
        assert m.title == "Learn SQL"
        assert m.type == MilestoneType.COURSE
        assert m.description == "Basics"
        assert m.resources == ["https://a"]
        assert m.status == MilestoneStatus.TODO

    def test_incoming_status_is_ignored(self):
        """Every decoded milestone starts as TODO."""
        item = {**_SQL_MILESTONE, "status": "done"}

        milestones = decode_milestones(json.dumps([item, item]))

        assert all(m.status == MilestoneStatus.TODO for m in milestones)

    def test_empty_array_decodes_to_empty_list(self):
        assert decode_milestones("[]") == []

    def test_surrounding_whitespace_is_tolerated(self):
        assert len(decode_milestones(f"\n  {json.dumps([_SQL_MILESTONE])}  \n")) == 1

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "not json",
            '{"title": "x"}',
            '["just a string"]',
            json.dumps([{"title": "Learn SQL", "type": "course"}]),
            json.dumps([{**_SQL_MILESTONE, "type": "bootcamp"}]),
            json.dumps([{**_SQL_MILESTONE, "resources": "https://a"}]),
        ],
    )
    def test_invalid_input_raises(self, text):
        with pytest.raises(RoadmapGenerationError):
            decode_milestones(text)


class TestRoadmapResponseSchema:
    """The response schema requires exactly the four milestone fields."""

    def test_schema_shape(self):
        assert ROADMAP_RESPONSE_SCHEMA["type"] == "ARRAY"
        items = ROADMAP_RESPONSE_SCHEMA["items"]
        assert items["type"] == "OBJECT"
        assert set(items["required"]) == {"title", "type", "description", "resources"}
        assert items["properties"]["type"]["enum"] == [
            "course",
            "project",
            "certification",
            "task",
        ]


# =============================================================================
# Generation
# =============================================================================


class TestGenerateLearningRoadmap:
    """Tests for generate_learning_roadmap."""

    @pytest.mark.asyncio
    async def test_returns_decoded_milestones(self, mock_llm, profile):
        milestones = await generate_learning_roadmap(
            profile, "Data Analyst", provider=mock_llm
        )

        assert [m.title for m in milestones] == ["Learn SQL", "Build a dashboard"]
        assert all(m.status == MilestoneStatus.TODO for m in milestones)

    @pytest.mark.asyncio
    async def test_call_is_schema_constrained(self, mock_llm, profile):
        await generate_learning_roadmap(profile, "Data Analyst", provider=mock_llm)

        call = mock_llm.calls[0]
        assert call["task"] == TaskType.ROADMAP_GENERATION
        assert call["kwargs"]["response_schema"] is ROADMAP_RESPONSE_SCHEMA
        assert "Data Analyst" in call["messages"][0].content

    @pytest.mark.asyncio
    async def test_provider_failure_raises_generation_error(self, mock_llm, profile):
        mock_llm.set_error(TaskType.ROADMAP_GENERATION, TransientError("503"))

        with pytest.raises(RoadmapGenerationError):
            await generate_learning_roadmap(profile, "Data Analyst", provider=mock_llm)

    @pytest.mark.asyncio
    async def test_undecodable_response_raises(self, mock_llm, profile):
        mock_llm.set_response(TaskType.ROADMAP_GENERATION, "Here is your roadmap!")

        with pytest.raises(RoadmapGenerationError):
            await generate_learning_roadmap(profile, "Data Analyst", provider=mock_llm)

    @pytest.mark.asyncio
    async def test_attempted_exactly_once(self, mock_llm, profile):
        """Failures are not retried."""
        mock_llm.set_error(TaskType.ROADMAP_GENERATION, TransientError("503"))

        with pytest.raises(RoadmapGenerationError):
            await generate_learning_roadmap(profile, "Data Analyst", provider=mock_llm)

        assert mock_llm.count_calls(TaskType.ROADMAP_GENERATION) == 1
