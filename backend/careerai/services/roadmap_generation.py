"""Learning roadmap generation.

The roadmap call is schema-constrained: the provider is asked for a JSON
array of milestone objects with exactly four required fields. Decoding
only maps that structure onto Milestone records and resets every status
to TODO. Unlike career suggestions, any failure is raised; a roadmap is
either fully decoded or not produced at all.
"""

import json
from typing import Any

import structlog
from pydantic import ValidationError

from careerai.prompts.career import build_roadmap_prompt
from careerai.providers import ProviderError, factory
from careerai.providers.llm.base import LLMMessage, LLMProvider, TaskType
from careerai.schemas.profile import Profile
from careerai.schemas.roadmap import Milestone, MilestoneStatus, MilestoneType

logger = structlog.get_logger()

_MILESTONE_FIELDS = ("title", "type", "description", "resources")

# Gemini response schema (OpenAPI subset, upper-case type names).
ROADMAP_RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "title": {"type": "STRING"},
            "type": {
                "type": "STRING",
                "enum": [t.value for t in MilestoneType],
            },
            "description": {"type": "STRING"},
            "resources": {"type": "ARRAY", "items": {"type": "STRING"}},
        },
        "required": list(_MILESTONE_FIELDS),
    },
}


class RoadmapGenerationError(Exception):
    """Roadmap could not be generated or decoded."""

    def __init__(self, message: str = "Failed to generate learning roadmap.") -> None:
        super().__init__(message)
        self.message = message


def decode_milestones(text: str) -> list[Milestone]:
    """Decode a schema-conforming JSON array into milestones.

    Any ``status`` present in the input is ignored; every milestone starts
    as TODO.

    Args:
        text: JSON text returned by the schema-constrained call.

    Returns:
        Milestones in array order.

    Raises:
        RoadmapGenerationError: If the text is not JSON or not an array of
            objects carrying the four milestone fields.
    """
    try:
        data = json.loads(text.strip())
    except json.JSONDecodeError as e:
        raise RoadmapGenerationError() from e

    if not isinstance(data, list):
        raise RoadmapGenerationError()

    milestones: list[Milestone] = []
    for item in data:
        if not isinstance(item, dict) or any(f not in item for f in _MILESTONE_FIELDS):
            raise RoadmapGenerationError()
        try:
            milestones.append(
                Milestone(
                    title=item["title"],
                    type=item["type"],
                    description=item["description"],
                    resources=item["resources"],
                    status=MilestoneStatus.TODO,
                )
            )
        except ValidationError as e:
            raise RoadmapGenerationError() from e

    return milestones


async def generate_learning_roadmap(
    profile: Profile,
    target_role: str,
    provider: LLMProvider | None = None,
) -> list[Milestone]:
    """Generate a personalized milestone list for a target role.

    Args:
        profile: Submitted student profile.
        target_role: Role the roadmap should lead to.
        provider: LLM provider; defaults to the factory singleton.

    Returns:
        Milestones, all with status TODO.

    Raises:
        RoadmapGenerationError: On provider failure or undecodable output.
            Attempted once, never retried.
    """
    llm = provider or factory.get_llm_provider()

    logger.info("roadmap_generation_start", target_role=target_role)

    try:
        response = await llm.complete(
            messages=[
                LLMMessage(
                    role="user", content=build_roadmap_prompt(profile, target_role)
                ),
            ],
            task=TaskType.ROADMAP_GENERATION,
            response_schema=ROADMAP_RESPONSE_SCHEMA,
        )
    except ProviderError as e:
        logger.error(
            "roadmap_generation_failed",
            target_role=target_role,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise RoadmapGenerationError() from e

    try:
        milestones = decode_milestones(response.content or "")
    except RoadmapGenerationError:
        logger.error(
            "roadmap_decoding_failed",
            target_role=target_role,
            response_preview=(response.content or "")[:200],
        )
        raise

    logger.info(
        "roadmap_generation_complete",
        target_role=target_role,
        milestone_count=len(milestones),
    )
    return milestones
