"""Feature contracts produced by the extractor."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

from scenariopilot.contracts.requirement import Priority, Requirement


class Complexity(StrEnum):
    SIMPLE = "simple"
    MEDIUM = "medium"
    COMPLEX = "complex"


class UserFlow(BaseModel):
    id: str
    name: str
    description: str = ""
    steps: list[str] = Field(default_factory=list)
    actor: str = "User"

    model_config = {"frozen": True}


class Feature(BaseModel):
    """A coherent group of requirements that is tested as one unit.

    ``dependencies`` holds feature ids for dependencies that resolved to an
    extracted feature and the raw label for everything else.
    """

    id: str
    name: str
    description: str = ""
    requirements: list[Requirement] = Field(default_factory=list)
    dependencies: list[str] = Field(default_factory=list)
    priority: Priority = Priority.MEDIUM
    complexity: Complexity = Complexity.SIMPLE
    estimated_scenario_count: int = Field(default=1, ge=1)
    user_flows: list[UserFlow] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def acceptance_criteria(self) -> list[str]:
        """All member criteria, in member order."""
        return [criterion for req in self.requirements for criterion in req.acceptance_criteria]
