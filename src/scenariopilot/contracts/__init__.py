"""Public contracts for ScenarioPilot."""

from scenariopilot.contracts.analysis import AnalysisReport, AnalysisSummary, ValidationResult
from scenariopilot.contracts.config import AnalysisRules, Penalties, PenaltyScope, PatternRules
from scenariopilot.contracts.exceptions import (
    ConfigError,
    DocumentLoadError,
    NotFoundError,
    OptionsError,
    ScenarioPilotError,
)
from scenariopilot.contracts.feature import Complexity, Feature, UserFlow
from scenariopilot.contracts.requirement import (
    DocumentMetadata,
    ParsedDocument,
    Priority,
    Requirement,
    RequirementKind,
)
from scenariopilot.contracts.scenario import (
    DetailLevel,
    GenerationOptions,
    Scenario,
    ScenarioKind,
    ScenarioSource,
    Step,
    StepKeyword,
)

__all__ = [
    "AnalysisReport",
    "AnalysisRules",
    "AnalysisSummary",
    "Complexity",
    "ConfigError",
    "DetailLevel",
    "DocumentLoadError",
    "DocumentMetadata",
    "Feature",
    "GenerationOptions",
    "NotFoundError",
    "OptionsError",
    "ParsedDocument",
    "PatternRules",
    "Penalties",
    "PenaltyScope",
    "Priority",
    "Requirement",
    "RequirementKind",
    "Scenario",
    "ScenarioKind",
    "ScenarioPilotError",
    "ScenarioSource",
    "Step",
    "StepKeyword",
    "UserFlow",
    "ValidationResult",
]
