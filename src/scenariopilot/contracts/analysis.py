"""Analysis report contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field

from scenariopilot.contracts.feature import Feature
from scenariopilot.contracts.requirement import ParsedDocument
from scenariopilot.contracts.scenario import Scenario


class ValidationResult(BaseModel):
    """Quality verdict for a parsed document and its features.

    ``is_valid`` is false only when an error-class check fired; warnings lower
    ``score`` without affecting validity.
    """

    is_valid: bool = True
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    score: int = Field(default=100, ge=0, le=100)
    cycles: list[list[str]] = Field(default_factory=list)

    model_config = {"frozen": True}


class AnalysisSummary(BaseModel):
    total_requirements: int = 0
    total_features: int = 0
    total_scenarios: int = 0
    by_complexity: dict[str, int] = Field(default_factory=dict)
    by_priority: dict[str, int] = Field(default_factory=dict)
    by_scenario_kind: dict[str, int] = Field(default_factory=dict)

    model_config = {"frozen": True}


class AnalysisReport(BaseModel):
    """Everything one analysis run produced.

    ``scenarios`` maps feature id to that feature's ranked scenarios and has
    one entry per feature, in feature order.
    """

    document: ParsedDocument
    features: list[Feature] = Field(default_factory=list)
    scenarios: dict[str, list[Scenario]] = Field(default_factory=dict)
    summary: AnalysisSummary = Field(default_factory=AnalysisSummary)
    recommendations: list[str] = Field(default_factory=list)
    validation: ValidationResult = Field(default_factory=ValidationResult)

    model_config = {"frozen": True}

    def scenarios_for(self, feature: Feature) -> list[Scenario]:
        return self.scenarios.get(feature.id, [])
