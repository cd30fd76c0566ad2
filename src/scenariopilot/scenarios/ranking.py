"""Scenario deduplication and deterministic ordering."""

from __future__ import annotations

from collections.abc import Iterable

from scenariopilot.contracts.scenario import Scenario, ScenarioKind

KIND_PRECEDENCE: dict[ScenarioKind, int] = {
    ScenarioKind.HAPPY_PATH: 0,
    ScenarioKind.INTEGRATION: 1,
    ScenarioKind.EDGE_CASE: 2,
    ScenarioKind.ERROR_CASE: 3,
}


def deduplicate(scenarios: Iterable[Scenario]) -> list[Scenario]:
    """Drop scenarios whose name and step texts repeat an earlier one."""
    seen: set[str] = set()
    unique: list[Scenario] = []
    for scenario in scenarios:
        if scenario.identity in seen:
            continue
        seen.add(scenario.identity)
        unique.append(scenario)
    return unique


def rank(scenarios: Iterable[Scenario]) -> list[Scenario]:
    """Order by kind precedence, then descending confidence, then name."""
    return sorted(scenarios, key=lambda s: (KIND_PRECEDENCE[s.kind], -s.confidence, s.name))
