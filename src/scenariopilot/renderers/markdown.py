"""Markdown analysis report renderer."""

from __future__ import annotations

from scenariopilot.contracts.analysis import AnalysisReport
from scenariopilot.renderers.base import ReportRenderer
from scenariopilot.renderers.components import bullets, table


class MarkdownRenderer(ReportRenderer):
    def render(self, report: AnalysisReport) -> str:
        document = report.document
        summary = report.summary
        overview = "\n".join(
            [
                f"**Document:** {document.title}  ",
                f"**Version:** {document.version}  ",
                f"**Total Requirements:** {summary.total_requirements}  ",
                f"**Total Features:** {summary.total_features}  ",
                f"**Total Scenarios:** {summary.total_scenarios}",
            ]
        )
        sections: list[str] = [
            "# Requirements Analysis Report",
            f"## Overview\n\n{overview}\n\n**Validation Score:** {report.validation.score}/100",
        ]

        rows = [
            [feature.name, feature.priority.value, feature.complexity.value, str(len(report.scenarios_for(feature)))]
            for feature in report.features
        ]
        features_block = table(["Feature", "Priority", "Complexity", "Scenarios"], rows) if rows else "- (none)"
        sections.append(f"## Features Summary\n\n{features_block}")

        if report.recommendations:
            sections.append(f"## Recommendations\n\n{bullets(report.recommendations)}")

        validation = report.validation
        if validation.errors or validation.warnings:
            issues: list[str] = []
            if validation.errors:
                issues.append(f"### Errors\n\n{bullets(validation.errors)}")
            if validation.warnings:
                issues.append(f"### Warnings\n\n{bullets(validation.warnings)}")
            sections.append("## Validation Issues\n\n" + "\n\n".join(issues))

        return "\n\n".join(sections) + "\n"
