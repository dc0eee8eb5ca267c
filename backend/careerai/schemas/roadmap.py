"""Learning roadmap schemas.

A Roadmap is an ordered milestone sequence for one target role. Status is
the only milestone field that changes after creation, and every change
produces a new Roadmap so the shell can swap it in a single assignment.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field


class MilestoneType(str, Enum):
    """Kind of learning step."""

    COURSE = "course"
    PROJECT = "project"
    CERTIFICATION = "certification"
    TASK = "task"


class MilestoneStatus(str, Enum):
    """Milestone lifecycle status.

    IN_PROGRESS is a valid value but no operation produces it.
    """

    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"


class Milestone(BaseModel):
    """One actionable step in a learning roadmap.

    Attributes:
        title: Short milestone title.
        type: Course, project, certification or task.
        description: What the step involves.
        resources: Resource URLs in the order given.
        status: Lifecycle status, TODO on creation.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    type: MilestoneType
    description: str
    resources: list[str] = Field(default_factory=list)
    status: MilestoneStatus = MilestoneStatus.TODO

    def toggled(self) -> "Milestone":
        """Return a copy with status flipped between DONE and TODO.

        Anything that is not DONE becomes DONE.
        """
        new_status = (
            MilestoneStatus.TODO
            if self.status == MilestoneStatus.DONE
            else MilestoneStatus.DONE
        )
        return self.model_copy(update={"status": new_status})


class Roadmap(BaseModel):
    """Ordered milestones targeting one role."""

    model_config = ConfigDict(frozen=True)

    target_role: str
    milestones: list[Milestone] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def completed_count(self) -> int:
        """Number of milestones marked DONE."""
        return sum(1 for m in self.milestones if m.status == MilestoneStatus.DONE)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def progress_percentage(self) -> float:
        """Completed milestones over total, as a percentage.

        Returns:
            0.0 when the roadmap has no milestones.
        """
        if not self.milestones:
            return 0.0
        return self.completed_count / len(self.milestones) * 100

    def toggle_milestone(self, index: int) -> "Roadmap":
        """Return a new roadmap with one milestone's status toggled.

        Args:
            index: Zero-based milestone position.

        Returns:
            New Roadmap; self is left unchanged.

        Raises:
            IndexError: If index is out of range (negative indexes included).
        """
        if index < 0 or index >= len(self.milestones):
            msg = f"Milestone index {index} out of range"
            raise IndexError(msg)
        milestones = list(self.milestones)
        milestones[index] = milestones[index].toggled()
        return self.model_copy(update={"milestones": milestones})
