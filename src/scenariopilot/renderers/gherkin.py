"""Gherkin feature text and per-scenario markdown files."""

from __future__ import annotations

from scenariopilot.contracts.analysis import AnalysisReport
from scenariopilot.contracts.feature import Feature
from scenariopilot.contracts.scenario import Scenario
from scenariopilot.renderers.components import bullets, checklist, unique_slug
from scenariopilot.renderers.markdown import MarkdownRenderer

REPORT_FILE = "analysis-report.md"

IMPLEMENTATION_CHECKLIST = [
    "Step definitions written",
    "Implementation complete",
    "Tests passing",
    "Reviewed",
]


def feature_tags(feature: Feature) -> list[str]:
    return [f"@priority-{feature.priority.value}", f"@complexity-{feature.complexity.value}"]


def render_scenario(scenario: Scenario, *, indent: str = "  ") -> str:
    lines: list[str] = []
    if scenario.tags:
        lines.append(indent + " ".join(scenario.tags))
    lines.append(f"{indent}Scenario: {scenario.name}")
    for step in scenario.steps:
        lines.append(f"{indent}  {step.keyword.value} {step.text}")
    return "\n".join(lines)


def render_feature(feature: Feature, scenarios: list[Scenario]) -> str:
    """Render one feature and its scenarios as Gherkin text."""
    lines = [" ".join(feature_tags(feature)), f"Feature: {feature.name}"]
    if feature.description:
        lines.append(f"  {feature.description}")
    blocks = [render_scenario(scenario) for scenario in scenarios]
    body = "\n".join(lines)
    if blocks:
        body += "\n\n" + "\n\n".join(blocks)
    return body + "\n"


def render_scenario_markdown(feature: Feature, scenario: Scenario) -> str:
    sections = [f"# {scenario.name}"]
    details = [
        f"**Feature:** {feature.name} ({feature.id})  ",
        f"**Kind:** {scenario.kind.value}  ",
        f"**Source:** {scenario.source.value}  ",
        f"**Confidence:** {scenario.confidence:.2f}",
    ]
    sections.append("\n".join(details))
    if scenario.description:
        sections.append(scenario.description)
    if scenario.tags:
        sections.append(f"## Tags\n\n{bullets(scenario.tags)}")
    steps = "\n".join(f"{step.keyword.value} {step.text}" for step in scenario.steps)
    sections.append(f"## Steps\n\n```gherkin\n{steps}\n```")
    sections.append(f"## Implementation Status\n\n{checklist(IMPLEMENTATION_CHECKLIST)}")
    return "\n\n".join(sections) + "\n"


def render_markdown_files(report: AnalysisReport) -> dict[str, str]:
    """Map relative output paths to file contents for a whole report.

    Produces the markdown report, one ``.feature`` file per feature and one
    markdown file per scenario. Colliding slugs get a numeric suffix, so no
    two entries share a path.
    """
    files = {REPORT_FILE: MarkdownRenderer().render(report)}
    feature_slugs: set[str] = set()
    for feature in report.features:
        scenarios = report.scenarios_for(feature)
        feature_slug = unique_slug(feature.name, feature_slugs)
        files[f"features/{feature_slug}.feature"] = render_feature(feature, scenarios)

        scenario_slugs: set[str] = set()
        for scenario in scenarios:
            scenario_slug = unique_slug(scenario.name, scenario_slugs)
            files[f"scenarios/{feature_slug}/{scenario_slug}.md"] = render_scenario_markdown(feature, scenario)
    return files
