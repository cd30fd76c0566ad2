"""Analysis orchestrator: text to a complete :class:`AnalysisReport`."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from scenariopilot.analysis.recommendations import recommend
from scenariopilot.analysis.validator import RequirementsValidator
from scenariopilot.contracts.analysis import AnalysisReport, AnalysisSummary
from scenariopilot.contracts.config import AnalysisRules
from scenariopilot.contracts.feature import Complexity, Feature
from scenariopilot.contracts.requirement import ParsedDocument, Priority
from scenariopilot.contracts.scenario import GenerationOptions, Scenario, ScenarioKind
from scenariopilot.features.extractor import FeatureExtractor
from scenariopilot.parsing.parser import RequirementParser
from scenariopilot.scenarios.generator import ScenarioGenerator, resolve_options

logger = logging.getLogger(__name__)

Options = GenerationOptions | Mapping[str, Any] | None


class RequirementsAnalyzer:
    """Run parse, extract, generate and validate as one synchronous pipeline.

    Each stage consumes the previous stage's output whole and nothing is
    shared between runs, so identical input always yields an identical report.
    """

    def __init__(
        self,
        rules: AnalysisRules | None = None,
        *,
        parser: RequirementParser | None = None,
        extractor: FeatureExtractor | None = None,
        generator: ScenarioGenerator | None = None,
        validator: RequirementsValidator | None = None,
    ) -> None:
        self._rules = rules or AnalysisRules()
        self._parser = parser or RequirementParser(self._rules)
        self._extractor = extractor or FeatureExtractor(self._rules)
        self._generator = generator or ScenarioGenerator(self._rules)
        self._validator = validator or RequirementsValidator(self._rules)

    def analyze(self, text: str, options: Options = None) -> AnalysisReport:
        """Analyze raw requirement text.

        Raises:
            OptionsError: If *options* is invalid; raised before parsing starts.
        """
        opts = resolve_options(options)
        return self.analyze_document(self._parser.parse(text), opts)

    def analyze_file(self, path: str | Path, options: Options = None) -> AnalysisReport:
        opts = resolve_options(options)
        return self.analyze_document(self._parser.parse_file(path), opts)

    def analyze_document(self, document: ParsedDocument, options: Options = None) -> AnalysisReport:
        opts = resolve_options(options)
        features = self._extractor.extract(document)
        scenarios = {feature.id: self._generator.generate(feature, opts) for feature in features}

        summary = summarize(document, features, scenarios)
        recommendations = recommend(document, features, scenarios, self._rules)
        validation = self._validator.validate(document, features)
        logger.debug(
            "analysis: %d requirement(s), %d feature(s), %d scenario(s), score %d",
            summary.total_requirements,
            summary.total_features,
            summary.total_scenarios,
            validation.score,
        )

        return AnalysisReport(
            document=document,
            features=features,
            scenarios=scenarios,
            summary=summary,
            recommendations=recommendations,
            validation=validation,
        )


def summarize(
    document: ParsedDocument,
    features: list[Feature],
    scenarios: Mapping[str, list[Scenario]],
) -> AnalysisSummary:
    complexities = Counter(feature.complexity for feature in features)
    priorities = Counter(feature.priority for feature in features)
    kinds = Counter(scenario.kind for items in scenarios.values() for scenario in items)
    return AnalysisSummary(
        total_requirements=len(document.requirements),
        total_features=len(features),
        total_scenarios=sum(kinds.values()),
        by_complexity={level.value: complexities[level] for level in Complexity if complexities[level]},
        by_priority={level.value: priorities[level] for level in Priority if priorities[level]},
        by_scenario_kind={kind.value: kinds[kind] for kind in ScenarioKind if kinds[kind]},
    )
