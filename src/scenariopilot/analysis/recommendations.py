"""Heuristic recommendations over a finished analysis."""

from __future__ import annotations

from collections.abc import Mapping

from scenariopilot.contracts.config import AnalysisRules
from scenariopilot.contracts.feature import Complexity, Feature
from scenariopilot.contracts.requirement import ParsedDocument, Priority, RequirementKind
from scenariopilot.contracts.scenario import Scenario, ScenarioKind


def recommend(
    document: ParsedDocument,
    features: list[Feature],
    scenarios: Mapping[str, list[Scenario]],
    rules: AnalysisRules | None = None,
) -> list[str]:
    """Return human-readable suggestions; each heuristic contributes at most one line."""
    rules = rules or AnalysisRules()
    recommendations: list[str] = []
    feature_ids = {feature.id for feature in features}
    total_scenarios = sum(len(items) for items in scenarios.values())

    if not any(req.kind is RequirementKind.USER_STORY for req in document.requirements):
        recommendations.append("Consider adding user stories to better capture user perspectives")

    uncovered = [feature for feature in features if not scenarios.get(feature.id)]
    if uncovered:
        recommendations.append(
            f"{len(uncovered)} feature(s) have no test scenarios. Consider adding acceptance criteria"
        )

    complex_count = sum(1 for feature in features if feature.complexity is Complexity.COMPLEX)
    if features and complex_count / len(features) > rules.complex_share_threshold:
        recommendations.append(
            "Many features are marked as complex. Consider breaking them down into smaller features"
        )

    if features and not any(feature.priority is Priority.HIGH for feature in features):
        recommendations.append("No high-priority features identified. Consider which features are most critical")

    dependent = [feature for feature in features if feature.dependencies]
    if dependent:
        recommendations.append(f"Plan implementation order for {len(dependent)} feature(s) with dependencies")

    unresolved: list[str] = []
    for feature in dependent:
        for dep in feature.dependencies:
            if dep not in feature_ids and dep not in unresolved:
                unresolved.append(dep)
    if unresolved:
        recommendations.append(f"Resolve dependencies that match no extracted feature: {', '.join(unresolved)}")

    if features and total_scenarios / len(features) < rules.density_threshold:
        recommendations.append("Consider adding more test scenarios to ensure comprehensive coverage")

    has_edge_cases = any(
        scenario.kind is ScenarioKind.EDGE_CASE for items in scenarios.values() for scenario in items
    )
    if not has_edge_cases:
        recommendations.append("Consider adding edge case scenarios to handle boundary conditions")

    return recommendations
