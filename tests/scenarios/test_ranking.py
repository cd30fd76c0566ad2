from scenariopilot.contracts.scenario import Scenario, ScenarioKind, ScenarioSource, StepKeyword
from scenariopilot.scenarios.ranking import deduplicate, rank
from scenariopilot.scenarios.templates import build_steps


def _scenario(name: str, kind: ScenarioKind, confidence: float, *steps: str) -> Scenario:
    return Scenario(
        name=name,
        steps=build_steps(*((StepKeyword.GIVEN, text) for text in steps)),
        kind=kind,
        source=ScenarioSource.GENERATED,
        confidence=confidence,
    )


def test_deduplicate_keeps_first_occurrence() -> None:
    first = _scenario("Same", ScenarioKind.HAPPY_PATH, 0.9, "a", "b")
    repeat = _scenario("Same", ScenarioKind.ERROR_CASE, 0.1, "a", "b")

    assert deduplicate([first, repeat]) == [first]


def test_deduplicate_distinguishes_step_texts() -> None:
    scenarios = [
        _scenario("Same", ScenarioKind.HAPPY_PATH, 0.9, "a"),
        _scenario("Same", ScenarioKind.HAPPY_PATH, 0.9, "b"),
    ]

    assert deduplicate(scenarios) == scenarios


def test_rank_orders_kind_then_confidence_then_name() -> None:
    scenarios = [
        _scenario("zeta error", ScenarioKind.ERROR_CASE, 0.9),
        _scenario("edge", ScenarioKind.EDGE_CASE, 0.7),
        _scenario("alpha error", ScenarioKind.ERROR_CASE, 0.9),
        _scenario("weak error", ScenarioKind.ERROR_CASE, 0.8),
        _scenario("integration", ScenarioKind.INTEGRATION, 0.7),
        _scenario("happy", ScenarioKind.HAPPY_PATH, 0.6),
    ]

    assert [s.name for s in rank(scenarios)] == [
        "happy",
        "integration",
        "edge",
        "alpha error",
        "zeta error",
        "weak error",
    ]


def test_rank_is_a_total_order() -> None:
    scenarios = [
        _scenario("b", ScenarioKind.HAPPY_PATH, 0.5),
        _scenario("a", ScenarioKind.HAPPY_PATH, 0.5),
    ]

    assert rank(scenarios) == rank(list(reversed(scenarios)))
