"""Scenario contracts and generation options."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class StepKeyword(StrEnum):
    GIVEN = "Given"
    WHEN = "When"
    THEN = "Then"
    AND = "And"


class ScenarioKind(StrEnum):
    HAPPY_PATH = "happy-path"
    ERROR_CASE = "error-case"
    EDGE_CASE = "edge-case"
    INTEGRATION = "integration"


class ScenarioSource(StrEnum):
    USER_STORY = "user-story"
    ACCEPTANCE_CRITERIA = "acceptance-criteria"
    GENERATED = "generated"


class DetailLevel(StrEnum):
    BASIC = "basic"
    STANDARD = "standard"
    DETAILED = "detailed"


class Step(BaseModel):
    keyword: StepKeyword
    text: str
    order: int = Field(ge=1)

    model_config = {"frozen": True}


class Scenario(BaseModel):
    name: str
    description: str | None = None
    tags: list[str] = Field(default_factory=list)
    steps: list[Step] = Field(default_factory=list)
    kind: ScenarioKind
    source: ScenarioSource
    confidence: float = Field(ge=0.0, le=1.0)

    model_config = {"frozen": True}

    @property
    def identity(self) -> str:
        """Deduplication key: name plus the joined step texts."""
        return self.name + "|" + "|".join(step.text for step in self.steps)


class GenerationOptions(BaseModel):
    """Knobs for scenario generation.

    Accepts both snake_case names and the camelCase aliases
    (``includeEdgeCases``, ``detailLevel``, ...).
    """

    include_edge_cases: bool = True
    include_error_cases: bool = True
    include_integration_scenarios: bool = True
    max_scenarios_per_flow: int = Field(default=5, ge=1)
    detail_level: DetailLevel = DetailLevel.STANDARD

    model_config = {"frozen": True, "extra": "forbid", "alias_generator": to_camel, "populate_by_name": True}
