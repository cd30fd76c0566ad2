"""Public API surface for ScenarioPilot."""

from scenariopilot.analysis import RequirementsAnalyzer, RequirementsValidator
from scenariopilot.contracts import (
    AnalysisReport,
    AnalysisRules,
    AnalysisSummary,
    Complexity,
    ConfigError,
    DetailLevel,
    DocumentLoadError,
    Feature,
    GenerationOptions,
    NotFoundError,
    OptionsError,
    ParsedDocument,
    Priority,
    Requirement,
    RequirementKind,
    Scenario,
    ScenarioKind,
    ScenarioPilotError,
    ValidationResult,
)
from scenariopilot.features import FeatureExtractor
from scenariopilot.parsing import RequirementParser
from scenariopilot.renderers import create_renderer
from scenariopilot.scenarios import ScenarioGenerator
from scenariopilot.sdk import (
    analyze,
    analyze_file,
    extract,
    generate,
    load_rules,
    parse,
    to_json,
    to_markdown,
    to_markdown_files,
)

__all__ = [
    "AnalysisReport",
    "AnalysisRules",
    "AnalysisSummary",
    "Complexity",
    "ConfigError",
    "DetailLevel",
    "DocumentLoadError",
    "Feature",
    "FeatureExtractor",
    "GenerationOptions",
    "NotFoundError",
    "OptionsError",
    "ParsedDocument",
    "Priority",
    "Requirement",
    "RequirementKind",
    "RequirementParser",
    "RequirementsAnalyzer",
    "RequirementsValidator",
    "Scenario",
    "ScenarioGenerator",
    "ScenarioKind",
    "ScenarioPilotError",
    "ValidationResult",
    "analyze",
    "analyze_file",
    "create_renderer",
    "extract",
    "generate",
    "load_rules",
    "parse",
    "to_json",
    "to_markdown",
    "to_markdown_files",
]
