"""Structural validation and quality scoring of a requirement set."""

from __future__ import annotations

import logging
from collections import Counter

from scenariopilot.analysis.graph import DependencyGraph
from scenariopilot.contracts.analysis import ValidationResult
from scenariopilot.contracts.config import AnalysisRules, PenaltyScope
from scenariopilot.contracts.feature import Feature
from scenariopilot.contracts.requirement import ParsedDocument, RequirementKind

logger = logging.getLogger(__name__)

MAX_SCORE = 100


def _listing(values: list[str]) -> str:
    return ", ".join(values)


class RequirementsValidator:
    """Validate a parsed document and its features.

    Defects never raise. Duplicate ids and empty fields are errors and make
    the result invalid; the remaining checks are warnings that only lower the
    score. Checks run in a fixed order so messages are stable.
    """

    def __init__(self, rules: AnalysisRules | None = None) -> None:
        self._rules = rules or AnalysisRules()

    def validate(self, document: ParsedDocument, features: list[Feature]) -> ValidationResult:
        errors: list[str] = []
        warnings: list[str] = []
        penalty = 0
        penalties = self._rules.penalties

        penalty += self._charge(penalties.duplicate_ids, self._check_duplicate_ids(document, errors))
        penalty += self._charge(penalties.empty_fields, self._check_empty_fields(document, errors))
        penalty += self._charge(penalties.orphaned_criteria, self._check_orphaned_criteria(document, warnings))
        penalty += self._charge(penalties.oversized_feature, self._check_oversized_features(features, warnings))
        penalty += self._charge(penalties.undefined_actor, self._check_undefined_actors(features, warnings))

        cycles = DependencyGraph.from_features(features).find_cycles()
        for cycle in cycles:
            warnings.append(f"Circular dependency detected: {' -> '.join([*cycle, cycle[0]])}")
        penalty += self._charge(penalties.circular_dependency, len(cycles))

        score = max(0, MAX_SCORE - penalty)
        logger.debug("validation: %d error(s), %d warning(s), score %d", len(errors), len(warnings), score)
        return ValidationResult(
            is_valid=not errors,
            errors=errors,
            warnings=warnings,
            score=score,
            cycles=cycles,
        )

    def _charge(self, weight: int, defects: int) -> int:
        if not defects:
            return 0
        if self._rules.penalty_scope is PenaltyScope.PER_CHECK:
            return weight
        return weight * defects

    @staticmethod
    def _check_duplicate_ids(document: ParsedDocument, errors: list[str]) -> int:
        counts = Counter(req.id for req in document.requirements)
        duplicates = [req_id for req_id, count in counts.items() if count > 1]
        if duplicates:
            errors.append(f"Duplicate requirement IDs: {_listing(duplicates)}")
        return len(duplicates)

    @staticmethod
    def _check_empty_fields(document: ParsedDocument, errors: list[str]) -> int:
        empty = [req.id for req in document.requirements if not req.title.strip() or not req.description.strip()]
        if empty:
            errors.append(f"{len(empty)} requirement(s) have missing titles or descriptions: {_listing(empty)}")
        return len(empty)

    @staticmethod
    def _check_orphaned_criteria(document: ParsedDocument, warnings: list[str]) -> int:
        known = {req.id for req in document.requirements}
        orphaned = [
            req.id
            for req in document.requirements
            if req.kind is RequirementKind.ACCEPTANCE_CRITERION and req.parent_id not in known
        ]
        if orphaned:
            warnings.append(
                f"{len(orphaned)} acceptance criteria without a parent requirement: {_listing(orphaned)}"
            )
        return len(orphaned)

    def _check_oversized_features(self, features: list[Feature], warnings: list[str]) -> int:
        limit = self._rules.oversized_feature_limit
        oversized = [feature.name for feature in features if len(feature.requirements) > limit]
        if oversized:
            warnings.append(
                f"{len(oversized)} feature(s) have more than {limit} requirements, "
                f"consider breaking them down: {_listing(oversized)}"
            )
        return len(oversized)

    @staticmethod
    def _check_undefined_actors(features: list[Feature], warnings: list[str]) -> int:
        undefined = [
            feature.name
            for feature in features
            if not feature.user_flows or all(not flow.actor.strip() for flow in feature.user_flows)
        ]
        if undefined:
            warnings.append(f"{len(undefined)} feature(s) have undefined actors: {_listing(undefined)}")
        return len(undefined)
