import pytest
from pydantic import ValidationError

from scenariopilot.contracts.feature import Feature
from scenariopilot.contracts.requirement import Priority, Requirement, RequirementKind
from scenariopilot.contracts.scenario import (
    DetailLevel,
    GenerationOptions,
    Scenario,
    ScenarioKind,
    ScenarioSource,
    Step,
    StepKeyword,
)


def test_generation_options_defaults() -> None:
    options = GenerationOptions()

    assert options.include_edge_cases is True
    assert options.include_error_cases is True
    assert options.include_integration_scenarios is True
    assert options.max_scenarios_per_flow == 5
    assert options.detail_level is DetailLevel.STANDARD


def test_generation_options_accept_camel_case_aliases() -> None:
    options = GenerationOptions.model_validate({"includeEdgeCases": False, "detailLevel": "detailed"})

    assert options.include_edge_cases is False
    assert options.detail_level is DetailLevel.DETAILED


def test_generation_options_reject_unknown_keys() -> None:
    with pytest.raises(ValidationError):
        GenerationOptions.model_validate({"include_everything": True})


def test_generation_options_reject_zero_scenarios_per_flow() -> None:
    with pytest.raises(ValidationError):
        GenerationOptions(max_scenarios_per_flow=0)


def test_scenario_identity_joins_name_and_step_texts() -> None:
    scenario = Scenario(
        name="Checkout",
        steps=[
            Step(keyword=StepKeyword.GIVEN, text="a cart", order=1),
            Step(keyword=StepKeyword.THEN, text="an order", order=2),
        ],
        kind=ScenarioKind.HAPPY_PATH,
        source=ScenarioSource.GENERATED,
        confidence=0.5,
    )

    assert scenario.identity == "Checkout|a cart|an order"


def test_scenario_confidence_is_bounded() -> None:
    with pytest.raises(ValidationError):
        Scenario(name="x", kind=ScenarioKind.HAPPY_PATH, source=ScenarioSource.GENERATED, confidence=1.5)


def test_priority_rank_orders_high_first() -> None:
    assert sorted(Priority, key=lambda p: p.rank) == [Priority.HIGH, Priority.MEDIUM, Priority.LOW]


def test_feature_pools_member_acceptance_criteria() -> None:
    feature = Feature(
        id="FEAT-001",
        name="Cart",
        requirements=[
            Requirement(id="REQ-001", title="a", kind=RequirementKind.FEATURE, acceptance_criteria=["one", "two"]),
            Requirement(id="REQ-002", title="b", kind=RequirementKind.REQUIREMENT, acceptance_criteria=["three"]),
        ],
    )

    assert feature.acceptance_criteria == ["one", "two", "three"]


def test_feature_requires_positive_estimate() -> None:
    with pytest.raises(ValidationError):
        Feature(id="FEAT-001", name="Cart", estimated_scenario_count=0)
