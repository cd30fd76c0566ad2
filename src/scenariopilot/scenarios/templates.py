"""Canned scenario templates for generated edge, error and integration cases."""

from __future__ import annotations

import re

from scenariopilot.contracts.scenario import Scenario, ScenarioKind, ScenarioSource, Step, StepKeyword

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]+")
_UNSAFE_TITLE_CHARS = re.compile(r"[^a-zA-Z0-9\s]")

AUTH_HINTS = ("auth", "login", "log in", "sign in", "signin", "password")
BOUNDARY_HINTS = ("search", "filter")


def build_steps(*pairs: tuple[StepKeyword, str]) -> list[Step]:
    return [Step(keyword=keyword, text=text, order=order) for order, (keyword, text) in enumerate(pairs, start=1)]


def scenario_title(base: str) -> str:
    return " ".join(_UNSAFE_TITLE_CHARS.sub(" ", base).split())


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def tag_slug(value: str) -> str:
    return _NON_ALNUM.sub("-", value.lower()).strip("-") or "unknown"


def boundary_scenario(feature_name: str) -> Scenario:
    return Scenario(
        name=f"{feature_name} with boundary values",
        tags=["@edge-case", "@boundary"],
        steps=build_steps(
            (StepKeyword.GIVEN, "the input is at the minimum or maximum allowed value"),
            (StepKeyword.WHEN, "the user performs the action"),
            (StepKeyword.THEN, "the system should handle the boundary value gracefully"),
        ),
        kind=ScenarioKind.EDGE_CASE,
        source=ScenarioSource.GENERATED,
        confidence=0.6,
    )


def concurrency_scenario(feature_name: str) -> Scenario:
    return Scenario(
        name=f"Multiple users performing {feature_name} simultaneously",
        tags=["@edge-case", "@concurrent"],
        steps=build_steps(
            (StepKeyword.GIVEN, "multiple users are active in the system"),
            (StepKeyword.WHEN, "users perform actions simultaneously"),
            (StepKeyword.THEN, "all actions should be processed correctly"),
            (StepKeyword.AND, "data integrity should be maintained"),
        ),
        kind=ScenarioKind.EDGE_CASE,
        source=ScenarioSource.GENERATED,
        confidence=0.7,
    )


def network_failure_scenario(feature_name: str) -> Scenario:
    return Scenario(
        name=f"{feature_name} with network failure",
        tags=["@error-case", "@network"],
        steps=build_steps(
            (StepKeyword.GIVEN, "the network connection is unavailable"),
            (StepKeyword.WHEN, "the user attempts to perform the action"),
            (StepKeyword.THEN, "the system should display an appropriate error message"),
            (StepKeyword.AND, "the system should retry the connection when it is available"),
        ),
        kind=ScenarioKind.ERROR_CASE,
        source=ScenarioSource.GENERATED,
        confidence=0.8,
    )


def invalid_input_scenario(feature_name: str) -> Scenario:
    return Scenario(
        name=f"{feature_name} with invalid input",
        tags=["@error-case", "@validation"],
        steps=build_steps(
            (StepKeyword.GIVEN, "the user provides invalid input"),
            (StepKeyword.WHEN, "the user submits the form"),
            (StepKeyword.THEN, "the system should validate the input"),
            (StepKeyword.AND, "the system should show specific error messages"),
            (StepKeyword.AND, "the system should preserve valid input"),
        ),
        kind=ScenarioKind.ERROR_CASE,
        source=ScenarioSource.GENERATED,
        confidence=0.9,
    )


def unauthorized_scenario(feature_name: str) -> Scenario:
    return Scenario(
        name=f"{feature_name} with unauthorized access attempt",
        tags=["@error-case", "@security"],
        steps=build_steps(
            (StepKeyword.GIVEN, "the user is not authenticated"),
            (StepKeyword.WHEN, "the user tries to access protected resources"),
            (StepKeyword.THEN, "the system should deny access"),
            (StepKeyword.AND, "the system should redirect to login"),
        ),
        kind=ScenarioKind.ERROR_CASE,
        source=ScenarioSource.GENERATED,
        confidence=0.9,
    )


def integration_scenario(feature_name: str, dependency: str) -> Scenario:
    return Scenario(
        name=f"{feature_name} integrates with {dependency}",
        tags=["@integration", f"@dependency-{tag_slug(dependency)}"],
        steps=build_steps(
            (StepKeyword.GIVEN, f"{dependency} is available"),
            (StepKeyword.AND, f"the system is configured to use {dependency}"),
            (StepKeyword.WHEN, f"the feature needs to communicate with {dependency}"),
            (StepKeyword.THEN, "the integration should complete successfully"),
            (StepKeyword.AND, "data should be synchronized correctly"),
        ),
        kind=ScenarioKind.INTEGRATION,
        source=ScenarioSource.GENERATED,
        confidence=0.7,
    )
