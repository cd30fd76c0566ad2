"""Scenario generation: features to ranked BDD scenarios."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from scenariopilot.contracts.config import AnalysisRules
from scenariopilot.contracts.exceptions import OptionsError
from scenariopilot.contracts.feature import Feature, UserFlow
from scenariopilot.contracts.scenario import (
    DetailLevel,
    GenerationOptions,
    Scenario,
    ScenarioKind,
    ScenarioSource,
    Step,
    StepKeyword,
)
from scenariopilot.scenarios import templates
from scenariopilot.scenarios.ranking import deduplicate, rank

logger = logging.getLogger(__name__)


def resolve_options(options: GenerationOptions | Mapping[str, Any] | None) -> GenerationOptions:
    """Coerce *options* into :class:`GenerationOptions`.

    Raises:
        OptionsError: If a mapping contains unknown keys or invalid values.
    """
    if options is None:
        return GenerationOptions()
    if isinstance(options, GenerationOptions):
        return options
    try:
        return GenerationOptions.model_validate(dict(options))
    except ValidationError as exc:
        errors = [f"{'.'.join(str(part) for part in err['loc']) or 'options'}: {err['msg']}" for err in exc.errors()]
        raise OptionsError(errors) from exc
    except (TypeError, ValueError) as exc:
        raise OptionsError([f"options: {exc}"]) from exc


class ScenarioGenerator:
    """Synthesize happy-path, criteria, edge, error and integration scenarios for a feature."""

    def __init__(self, rules: AnalysisRules | None = None) -> None:
        self._rules = rules or AnalysisRules()

    def generate(
        self,
        feature: Feature,
        options: GenerationOptions | Mapping[str, Any] | None = None,
    ) -> list[Scenario]:
        opts = resolve_options(options)
        name = templates.scenario_title(feature.name)
        scenarios: list[Scenario] = []

        for flow in feature.user_flows:
            scenarios.extend(self._from_flow(flow, opts))
        criteria_scenarios = self._from_criteria(feature)
        scenarios.extend(criteria_scenarios)
        if not feature.user_flows and not criteria_scenarios:
            scenarios.extend(self._from_requirements(feature))

        if opts.include_edge_cases:
            if any(hint in feature.name.lower() for hint in templates.BOUNDARY_HINTS):
                scenarios.append(templates.boundary_scenario(name))
            scenarios.append(templates.concurrency_scenario(name))

        if opts.include_error_cases:
            scenarios.append(templates.network_failure_scenario(name))
            scenarios.append(templates.invalid_input_scenario(name))
            if any(hint in feature.name.lower() for hint in templates.AUTH_HINTS):
                scenarios.append(templates.unauthorized_scenario(name))

        if opts.include_integration_scenarios:
            scenarios.extend(templates.integration_scenario(name, dep) for dep in feature.dependencies)

        ranked = rank(deduplicate(scenarios))
        logger.debug("generated %d scenario(s) for %s", len(ranked), feature.id)
        return ranked

    def _from_flow(self, flow: UserFlow, options: GenerationOptions) -> list[Scenario]:
        title = templates.capitalize_first(templates.scenario_title(flow.name))
        scenarios = [
            Scenario(
                name=f"{title} - Success",
                description=flow.description or None,
                tags=["@happy-path", f"@actor-{templates.tag_slug(flow.actor)}"],
                steps=self._flow_steps(flow),
                kind=ScenarioKind.HAPPY_PATH,
                source=ScenarioSource.USER_STORY,
                confidence=0.9,
            )
        ]
        if options.detail_level is DetailLevel.DETAILED and len(flow.steps) > 2:
            scenarios.append(
                Scenario(
                    name=f"{title} - Partial completion",
                    description=f"Partial completion of {flow.name}",
                    tags=["@edge-case", "@partial"],
                    steps=self._partial_steps(flow),
                    kind=ScenarioKind.EDGE_CASE,
                    source=ScenarioSource.GENERATED,
                    confidence=0.7,
                )
            )
        return scenarios[: options.max_scenarios_per_flow]

    def _from_criteria(self, feature: Feature) -> list[Scenario]:
        criteria = feature.acceptance_criteria
        size = self._rules.criteria_chunk_size
        chunks = [criteria[start : start + size] for start in range(0, len(criteria), size)]
        title = templates.scenario_title(feature.name)
        scenarios: list[Scenario] = []
        for index, chunk in enumerate(chunks, start=1):
            suffix = f" part {index} of {len(chunks)}" if len(chunks) > 1 else ""
            scenarios.append(
                Scenario(
                    name=f"{title} acceptance criteria{suffix}",
                    description=feature.description or None,
                    tags=["@acceptance-criteria"],
                    steps=templates.build_steps(
                        (StepKeyword.GIVEN, "the system is in the initial state"),
                        (StepKeyword.WHEN, "the relevant action is performed"),
                        *((StepKeyword.THEN if i == 0 else StepKeyword.AND, text) for i, text in enumerate(chunk)),
                    ),
                    kind=ScenarioKind.HAPPY_PATH,
                    source=ScenarioSource.ACCEPTANCE_CRITERIA,
                    confidence=0.8,
                )
            )
        return scenarios

    @staticmethod
    def _from_requirements(feature: Feature) -> list[Scenario]:
        """Fallback happy paths for features with neither flows nor criteria."""
        scenarios: list[Scenario] = []
        for requirement in feature.requirements:
            title = templates.scenario_title(requirement.title) or templates.scenario_title(feature.name)
            actor = (requirement.actor or "user").lower()
            scenarios.append(
                Scenario(
                    name=title,
                    description=requirement.description or None,
                    tags=["@happy-path", "@requirement"],
                    steps=templates.build_steps(
                        (StepKeyword.GIVEN, "the system is in the initial state"),
                        (StepKeyword.WHEN, f"the {actor} exercises {requirement.title.lower() or 'the feature'}"),
                        (StepKeyword.THEN, requirement.description or "the requirement should be satisfied"),
                    ),
                    kind=ScenarioKind.HAPPY_PATH,
                    source=ScenarioSource.GENERATED,
                    confidence=0.6,
                )
            )
        return scenarios

    @staticmethod
    def _flow_steps(flow: UserFlow) -> list[Step]:
        pairs = [(StepKeyword.GIVEN, f"the {flow.actor.lower()} is on the relevant screen")]
        pairs.extend((StepKeyword.WHEN if i == 0 else StepKeyword.AND, text) for i, text in enumerate(flow.steps))
        pairs.append((StepKeyword.THEN, "the expected outcome should occur"))
        return templates.build_steps(*pairs)

    @staticmethod
    def _partial_steps(flow: UserFlow) -> list[Step]:
        partial = flow.steps[: len(flow.steps) // 2]
        pairs = [(StepKeyword.GIVEN, f"the {flow.actor.lower()} is performing an action")]
        pairs.extend((StepKeyword.WHEN if i == 0 else StepKeyword.AND, text) for i, text in enumerate(partial))
        pairs.append((StepKeyword.THEN, "the system should handle partial completion"))
        return templates.build_steps(*pairs)
