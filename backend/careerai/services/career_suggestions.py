"""Career suggestion generation and parsing.

The model is asked for '###'-delimited blocks of the form:

    ###
    **Career:** Data Analyst
    **Description:** Analyzes data.
    **Key Skills:** SQL, Python
    ###

Malformed output is expected from time to time. Blocks missing any of the
three fields are dropped, and neither parsing nor generation ever raises:
the worst outcome is an empty list, which the dashboard shows as an empty
state.
"""

import re

import structlog

from careerai.prompts.career import (
    SUGGESTION_DELIMITER,
    build_career_suggestions_prompt,
)
from careerai.providers import ProviderError, factory
from careerai.providers.llm.base import LLMMessage, LLMProvider, TaskType
from careerai.schemas.career import CareerSuggestion
from careerai.schemas.profile import Profile

logger = structlog.get_logger()

_NAME_PATTERN = re.compile(r"\*\*Career:\*\*\s*(.*)")
_DESCRIPTION_PATTERN = re.compile(r"\*\*Description:\*\*\s*(.*)")
_SKILLS_PATTERN = re.compile(r"\*\*Key Skills:\*\*\s*(.*)")


def _parse_block(block: str) -> CareerSuggestion | None:
    """Parse one delimited block.

    Args:
        block: Text between two delimiters.

    Returns:
        CareerSuggestion, or None if any of the three fields is missing.
    """
    name_match = _NAME_PATTERN.search(block)
    desc_match = _DESCRIPTION_PATTERN.search(block)
    skills_match = _SKILLS_PATTERN.search(block)

    if not (name_match and desc_match and skills_match):
        return None

    return CareerSuggestion(
        name=name_match.group(1).strip(),
        description=desc_match.group(1).strip(),
        skills=[s.strip() for s in skills_match.group(1).split(",")],
    )


def parse_career_suggestions(text: str) -> list[CareerSuggestion]:
    """Parse delimited LLM output into career suggestions.

    Args:
        text: Raw model output.

    Returns:
        Well-formed suggestions in output order. Empty list when nothing
        could be extracted or on any unexpected error.
    """
    try:
        suggestions: list[CareerSuggestion] = []
        blocks = [b for b in text.split(SUGGESTION_DELIMITER) if b.strip()]

        for block in blocks:
            suggestion = _parse_block(block)
            if suggestion is None:
                logger.debug("career_suggestion_block_dropped", block=block[:200])
                continue
            suggestions.append(suggestion)

        return suggestions
    except Exception:
        logger.exception("career_suggestion_parse_failed")
        return []


async def generate_career_suggestions(
    profile: Profile,
    provider: LLMProvider | None = None,
) -> list[CareerSuggestion]:
    """Ask the LLM for career paths suited to a profile.

    Args:
        profile: Submitted student profile.
        provider: LLM provider; defaults to the factory singleton.

    Returns:
        Parsed suggestions; empty list if the call fails.
    """
    llm = provider or factory.get_llm_provider()

    try:
        response = await llm.complete(
            messages=[
                LLMMessage(
                    role="user", content=build_career_suggestions_prompt(profile)
                ),
            ],
            task=TaskType.CAREER_SUGGESTIONS,
        )
    except ProviderError as e:
        logger.error(
            "career_suggestions_failed",
            error=str(e),
            error_type=type(e).__name__,
        )
        return []

    suggestions = parse_career_suggestions(response.content or "")
    logger.info("career_suggestions_generated", count=len(suggestions))
    return suggestions
