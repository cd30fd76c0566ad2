"""User flow derivation from user stories and acceptance criteria."""

from __future__ import annotations

import re
from collections.abc import Iterable

from scenariopilot.contracts.feature import UserFlow
from scenariopilot.contracts.requirement import Requirement, RequirementKind

DEFAULT_ACTOR = "User"

_STEP_KEYWORD = re.compile(r"\b(?:given|when|then|and)\b", re.IGNORECASE)
_SENTENCE_BREAK = re.compile(r"[.!?]")


def split_into_steps(criterion: str) -> list[str]:
    """Split a criterion on Given/When/Then/And, or on sentence punctuation when none occur."""
    splitter = _STEP_KEYWORD if _STEP_KEYWORD.search(criterion) else _SENTENCE_BREAK
    steps = (part.strip(" ,;:") for part in splitter.split(criterion))
    return [step for step in steps if step]


def flow_from_story(story: Requirement) -> UserFlow:
    actor = story.actor or DEFAULT_ACTOR
    goal = story.goal or "complete the goal"
    who = actor.lower()
    return UserFlow(
        id=f"{story.id}-flow",
        name=goal,
        description=story.description,
        steps=[
            f"the {who} initiates the action",
            f"the {who} attempts to {goal}",
            story.value or f"the {who} achieves the intended outcome",
        ],
        actor=actor,
    )


def flows_from_criteria(requirement: Requirement) -> list[UserFlow]:
    flows: list[UserFlow] = []
    for index, criterion in enumerate(requirement.acceptance_criteria, start=1):
        steps = split_into_steps(criterion)
        if len(steps) < 2:
            continue
        flows.append(
            UserFlow(
                id=f"{requirement.id}-flow-{index}",
                name=f"Flow for {requirement.title}",
                description=criterion,
                steps=steps,
                actor=requirement.actor or DEFAULT_ACTOR,
            )
        )
    return flows


def derive_user_flows(requirements: Iterable[Requirement]) -> list[UserFlow]:
    flows: list[UserFlow] = []
    for requirement in requirements:
        if requirement.kind is RequirementKind.USER_STORY and requirement.actor and requirement.goal:
            flows.append(flow_from_story(requirement))
        flows.extend(flows_from_criteria(requirement))
    return flows
