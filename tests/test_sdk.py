from __future__ import annotations

import json
from pathlib import Path

import pytest

import scenariopilot
from scenariopilot.contracts.exceptions import ConfigError, OptionsError
from scenariopilot.contracts.scenario import ScenarioKind
from scenariopilot.sdk import (
    analyze,
    analyze_file,
    extract,
    generate,
    load_rules,
    parse,
    to_json,
    to_markdown,
    to_markdown_files,
)


def test_pipeline_operations_compose(checkout_text: str) -> None:
    document = parse(checkout_text)
    features = extract(document)
    scenarios = {feature.id: generate(feature) for feature in features}

    report = analyze(checkout_text)

    assert report.document == document
    assert report.features == features
    assert report.scenarios == scenarios


def test_generate_accepts_option_mappings(login_text: str) -> None:
    feature = extract(parse(login_text))[0]

    scenarios = generate(feature, {"includeErrorCases": False, "includeEdgeCases": False})

    assert {s.kind for s in scenarios} == {ScenarioKind.HAPPY_PATH}


def test_analyze_rejects_bad_options(login_text: str) -> None:
    with pytest.raises(OptionsError):
        analyze(login_text, {"max_scenarios_per_flow": -1})


def test_analyze_file(checkout_file: Path) -> None:
    assert analyze_file(checkout_file).document.title == "Checkout Platform"


def test_load_rules_partial_file(tmp_path: Path) -> None:
    path = tmp_path / "rules.json"
    path.write_text(json.dumps({"explicit_similarity_threshold": 0.1, "stop_words": ["cart"]}), encoding="utf-8")

    rules = load_rules(path)

    assert rules.explicit_similarity_threshold == 0.1
    assert rules.stop_words == frozenset({"cart"})
    assert rules.thematic_similarity_threshold == 0.40


def test_load_rules_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="failed reading rules file"):
        load_rules(tmp_path / "missing.json")


def test_load_rules_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "rules.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigError, match="invalid JSON"):
        load_rules(path)


def test_load_rules_schema_mismatch(tmp_path: Path) -> None:
    path = tmp_path / "rules.json"
    path.write_text(json.dumps({"patterns": {"bullet": "("}}), encoding="utf-8")

    with pytest.raises(ConfigError, match="invalid rules"):
        load_rules(path)


def test_rules_change_grouping() -> None:
    text = "- Card payment: process card payment refunds\n- Card storage: store card tokens securely\n"
    loose = scenariopilot.AnalysisRules(thematic_similarity_threshold=0.1)

    assert len(analyze(text).features) == 2
    assert len(analyze(text, rules=loose).features) == 1


def test_exports(login_text: str) -> None:
    report = analyze(login_text)

    assert json.loads(to_json(report))["summary"]["total_features"] == 2
    assert to_markdown(report).startswith("# Requirements Analysis Report")
    assert "analysis-report.md" in to_markdown_files(report)


def test_public_api_exports() -> None:
    for name in scenariopilot.__all__:
        assert hasattr(scenariopilot, name), name
