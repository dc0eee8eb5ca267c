"""Career readiness score.

Derived 0-100 metric blending skill proficiency and roadmap completion.
Recomputed from current state on every read, never stored.
"""

import math

from careerai.schemas.profile import Profile
from careerai.schemas.roadmap import Roadmap


def average_proficiency(profile: Profile) -> float:
    """Mean proficiency across all skills.

    Returns:
        0.0 when the profile has no skills.
    """
    if not profile.skills:
        return 0.0
    return sum(s.proficiency for s in profile.skills) / len(profile.skills)


def roadmap_completion(roadmap: Roadmap | None) -> float:
    """Roadmap completion percentage.

    Returns:
        0.0 with no roadmap or an empty one.
    """
    if roadmap is None:
        return 0.0
    return roadmap.progress_percentage


def calculate_readiness_score(profile: Profile, roadmap: Roadmap | None) -> int:
    """Blend skill proficiency and roadmap completion into one percentage.

    Example:
        One skill at 100 and a roadmap with 2 of 2 milestones done -> 100.
        No skills and no roadmap -> 0.

    Args:
        profile: Current student profile.
        roadmap: Current roadmap, if one has been generated.

    Returns:
        Arithmetic mean of the two components, rounded half up.
    """
    blended = (average_proficiency(profile) + roadmap_completion(roadmap)) / 2
    # Half-up rounding; round() would send 62.5 to 62.
    return math.floor(blended + 0.5)
