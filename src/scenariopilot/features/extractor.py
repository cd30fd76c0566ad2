"""Feature extraction: group requirement records into testable features."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field

from scenariopilot.contracts.config import AnalysisRules
from scenariopilot.contracts.feature import Complexity, Feature
from scenariopilot.contracts.requirement import ParsedDocument, Priority, Requirement, RequirementKind
from scenariopilot.features.flows import derive_user_flows
from scenariopilot.features.keywords import requirement_keywords, similarity

logger = logging.getLogger(__name__)

_UNSAFE_NAME_CHARS = re.compile(r"[^A-Za-z0-9\s-]")
_VERB_SUFFIXES = ("e", "ed", "ing")


@dataclass
class _Group:
    label: str
    members: list[Requirement] = field(default_factory=list)
    feature_id: str = ""


class FeatureExtractor:
    """Cluster requirements into features.

    Grouping runs in three passes, each only over requirements no earlier
    pass claimed:

    1. every ``feature`` requirement seeds a group and claims the requirements
       whose keyword similarity to it exceeds the explicit threshold;
    2. each remaining requirement may seed a theme that absorbs requirements
       above the thematic threshold;
    3. whatever is left becomes a single-requirement feature.

    Acceptance criteria linked to a parent requirement follow their parent.
    """

    def __init__(self, rules: AnalysisRules | None = None) -> None:
        self._rules = rules or AnalysisRules()

    def extract(self, document: ParsedDocument) -> list[Feature]:
        requirements = document.requirements
        known_ids = {req.id for req in requirements}
        children: dict[str, list[Requirement]] = {}
        primaries: list[Requirement] = []
        for req in requirements:
            if req.kind is RequirementKind.ACCEPTANCE_CRITERION and req.parent_id in known_ids:
                children.setdefault(req.parent_id, []).append(req)
            else:
                primaries.append(req)

        keywords = {
            req.id: requirement_keywords(
                req, stop_words=self._rules.stop_words, min_length=self._rules.min_keyword_length
            )
            for req in primaries
        }
        claimed: set[str] = set()
        groups = [
            *self._group_explicit(primaries, keywords, claimed),
            *self._group_thematic(primaries, keywords, claimed),
            *self._group_singletons(primaries, claimed),
        ]
        for index, group in enumerate(groups, start=1):
            group.feature_id = f"FEAT-{index:03d}"
            group.members = [
                attached for member in group.members for attached in (member, *children.get(member.id, []))
            ]

        lookup = self._dependency_lookup(groups)
        features = [self._build_feature(group, lookup) for group in groups]
        features.sort(key=lambda feature: feature.priority.rank)
        logger.debug("extracted %d feature(s) from %d requirement(s)", len(features), len(requirements))
        return features

    def _group_explicit(
        self,
        primaries: list[Requirement],
        keywords: dict[str, frozenset[str]],
        claimed: set[str],
    ) -> list[_Group]:
        threshold = self._rules.explicit_similarity_threshold
        groups: list[_Group] = []
        for seed in primaries:
            if seed.kind is not RequirementKind.FEATURE:
                continue
            claimed.add(seed.id)
            group = _Group(label=seed.title, members=[seed])
            for other in primaries:
                if other.id in claimed or other.kind is RequirementKind.FEATURE:
                    continue
                if similarity(keywords[seed.id], keywords[other.id]) > threshold:
                    group.members.append(other)
                    claimed.add(other.id)
            groups.append(group)
        return groups

    def _group_thematic(
        self,
        primaries: list[Requirement],
        keywords: dict[str, frozenset[str]],
        claimed: set[str],
    ) -> list[_Group]:
        threshold = self._rules.thematic_similarity_threshold
        groups: list[_Group] = []
        for seed in primaries:
            if seed.id in claimed:
                continue
            absorbed = [
                other
                for other in primaries
                if other.id != seed.id
                and other.id not in claimed
                and similarity(keywords[seed.id], keywords[other.id]) > threshold
            ]
            if not absorbed:
                continue
            claimed.add(seed.id)
            claimed.update(other.id for other in absorbed)
            groups.append(_Group(label=self._theme(seed), members=[seed, *absorbed]))
        return groups

    @staticmethod
    def _group_singletons(primaries: list[Requirement], claimed: set[str]) -> list[_Group]:
        groups: list[_Group] = []
        for req in primaries:
            if req.id in claimed:
                continue
            claimed.add(req.id)
            label = req.goal if req.kind is RequirementKind.USER_STORY and req.goal else req.title
            groups.append(_Group(label=label or "General", members=[req]))
        return groups

    @staticmethod
    def _theme(requirement: Requirement) -> str:
        if requirement.kind is RequirementKind.USER_STORY and requirement.goal:
            return requirement.goal.split()[0]
        if requirement.kind is RequirementKind.FEATURE:
            return requirement.title
        words = requirement.title.split()
        verbs = [word for word in words if word.lower().endswith(_VERB_SUFFIXES)]
        return (verbs or words or ["General"])[0]

    @staticmethod
    def _dependency_lookup(groups: list[_Group]) -> dict[str, str]:
        """Map lower-cased feature names, member titles and member ids to feature ids."""
        lookup: dict[str, str] = {}
        for group in groups:
            lookup.setdefault(_sanitize_name(group.label).lower(), group.feature_id)
        for group in groups:
            for member in group.members:
                lookup.setdefault(member.id.lower(), group.feature_id)
                if member.title:
                    lookup.setdefault(member.title.lower(), group.feature_id)
        return lookup

    def _build_feature(self, group: _Group, lookup: dict[str, str]) -> Feature:
        members = group.members
        name = _sanitize_name(group.label)
        user_flows = derive_user_flows(members)

        dependencies: list[str] = []
        for member in members:
            for raw in member.dependencies:
                target = lookup.get(raw.lower(), raw)
                if target != group.feature_id and target not in dependencies:
                    dependencies.append(target)

        descriptions = [member.description for member in members if member.description][:3]
        criteria_count = sum(len(member.acceptance_criteria) for member in members)
        estimate = (
            len(members)
            + sum(1 for flow in user_flows if len(flow.steps) > 3)
            + math.ceil(criteria_count / self._rules.criteria_per_estimated_scenario)
        )

        return Feature(
            id=group.feature_id,
            name=name,
            description=" ".join(descriptions) or f"Feature related to {name}",
            requirements=members,
            dependencies=dependencies,
            priority=min((member.priority for member in members), key=lambda p: p.rank, default=Priority.MEDIUM),
            complexity=self._complexity(members),
            estimated_scenario_count=max(estimate, 1),
            user_flows=user_flows,
        )

    def _complexity(self, members: list[Requirement]) -> Complexity:
        has_dependencies = any(member.dependencies for member in members)
        actors = {member.actor for member in members if member.actor}
        if len(members) > self._rules.complex_member_limit or has_dependencies or len(actors) > 1:
            return Complexity.COMPLEX
        if len(members) > self._rules.medium_member_limit:
            return Complexity.MEDIUM
        return Complexity.SIMPLE


def _sanitize_name(label: str) -> str:
    name = " ".join(_UNSAFE_NAME_CHARS.sub("", label).split())
    if not name:
        return "General"
    return name[0].upper() + name[1:]
