from scenariopilot.contracts.scenario import ScenarioKind, StepKeyword
from scenariopilot.scenarios import templates


def test_build_steps_numbers_from_one() -> None:
    steps = templates.build_steps((StepKeyword.GIVEN, "a"), (StepKeyword.THEN, "b"))

    assert [(s.order, s.keyword, s.text) for s in steps] == [(1, StepKeyword.GIVEN, "a"), (2, StepKeyword.THEN, "b")]


def test_scenario_title_strips_punctuation() -> None:
    assert templates.scenario_title("Log-in (fast)!  now") == "Log in fast now"


def test_capitalize_first() -> None:
    assert templates.capitalize_first("login now") == "Login now"
    assert templates.capitalize_first("") == ""


def test_tag_slug() -> None:
    assert templates.tag_slug("Payments API v2") == "payments-api-v2"
    assert templates.tag_slug("***") == "unknown"


def test_generated_case_confidences() -> None:
    assert templates.boundary_scenario("Search").confidence == 0.6
    assert templates.concurrency_scenario("Search").confidence == 0.7
    assert templates.network_failure_scenario("Search").confidence == 0.8
    assert templates.invalid_input_scenario("Search").confidence == 0.9
    assert templates.unauthorized_scenario("Search").confidence == 0.9
    assert templates.integration_scenario("Search", "Index").kind is ScenarioKind.INTEGRATION


def test_integration_steps_mention_dependency() -> None:
    scenario = templates.integration_scenario("Checkout", "Payments API")

    assert scenario.steps[0].text == "Payments API is available"
    assert scenario.name == "Checkout integrates with Payments API"
