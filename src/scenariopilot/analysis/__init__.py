"""Analysis orchestration, validation and recommendations."""

from scenariopilot.analysis.analyzer import RequirementsAnalyzer, summarize
from scenariopilot.analysis.graph import DependencyGraph
from scenariopilot.analysis.recommendations import recommend
from scenariopilot.analysis.validator import RequirementsValidator

__all__ = [
    "DependencyGraph",
    "RequirementsAnalyzer",
    "RequirementsValidator",
    "recommend",
    "summarize",
]
