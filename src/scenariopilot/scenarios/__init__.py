"""Scenario generation entrypoints."""

from scenariopilot.scenarios.generator import ScenarioGenerator, resolve_options
from scenariopilot.scenarios.ranking import KIND_PRECEDENCE, deduplicate, rank

__all__ = ["KIND_PRECEDENCE", "ScenarioGenerator", "deduplicate", "rank", "resolve_options"]
