from scenariopilot.analysis import recommend
from scenariopilot.contracts.feature import Complexity, Feature
from scenariopilot.contracts.requirement import ParsedDocument, Priority, Requirement, RequirementKind
from scenariopilot.contracts.scenario import Scenario, ScenarioKind, ScenarioSource


def _scenario(kind: ScenarioKind = ScenarioKind.HAPPY_PATH, name: str = "works") -> Scenario:
    return Scenario(name=name, kind=kind, source=ScenarioSource.GENERATED, confidence=0.5)


def _story_document() -> ParsedDocument:
    story = Requirement(id="REQ-001", title="User Story: pay", kind=RequirementKind.USER_STORY, goal="pay")
    return ParsedDocument(title="Doc", version="1.0.0", requirements=[story])


def test_empty_analysis_recommendations() -> None:
    document = ParsedDocument(title="Doc", version="1.0.0")

    assert recommend(document, [], {}) == [
        "Consider adding user stories to better capture user perspectives",
        "Consider adding edge case scenarios to handle boundary conditions",
    ]


def test_uncovered_features_and_low_density() -> None:
    features = [
        Feature(id="FEAT-001", name="A", complexity=Complexity.COMPLEX),
        Feature(id="FEAT-002", name="B"),
    ]

    assert recommend(_story_document(), features, {}) == [
        "2 feature(s) have no test scenarios. Consider adding acceptance criteria",
        "No high-priority features identified. Consider which features are most critical",
        "Consider adding more test scenarios to ensure comprehensive coverage",
        "Consider adding edge case scenarios to handle boundary conditions",
    ]


def test_complex_majority_is_flagged() -> None:
    features = [
        Feature(id="FEAT-001", name="A", complexity=Complexity.COMPLEX, priority=Priority.HIGH),
        Feature(id="FEAT-002", name="B", complexity=Complexity.COMPLEX),
        Feature(id="FEAT-003", name="C"),
    ]
    covered = [_scenario(), _scenario(ScenarioKind.EDGE_CASE, "edge")]
    scenarios = {feature.id: covered for feature in features}

    assert recommend(_story_document(), features, scenarios) == [
        "Many features are marked as complex. Consider breaking them down into smaller features"
    ]


def test_dependencies_and_unresolved_labels() -> None:
    features = [
        Feature(id="FEAT-001", name="A", priority=Priority.HIGH, dependencies=["FEAT-002", "Payments API"]),
        Feature(id="FEAT-002", name="B", dependencies=["Payments API", "Ledger"]),
    ]
    covered = [_scenario(), _scenario(ScenarioKind.EDGE_CASE, "edge")]
    scenarios = {feature.id: covered for feature in features}

    assert recommend(_story_document(), features, scenarios) == [
        "Plan implementation order for 2 feature(s) with dependencies",
        "Resolve dependencies that match no extracted feature: Payments API, Ledger",
    ]
