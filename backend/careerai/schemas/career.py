"""Career suggestion schema."""

from pydantic import BaseModel, ConfigDict, Field


class CareerSuggestion(BaseModel):
    """A suggested career path parsed from LLM output.

    Attributes:
        name: Career name (e.g., "Data Analyst").
        description: One-line description of the career.
        skills: Key skills in the order the model listed them.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    skills: list[str] = Field(default_factory=list)
