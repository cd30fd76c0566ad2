"""JSON report renderer."""

from __future__ import annotations

from scenariopilot.contracts.analysis import AnalysisReport
from scenariopilot.renderers.base import ReportRenderer


class JsonRenderer(ReportRenderer):
    """Serialize the full report, keyed by field name, with two-space indentation."""

    def __init__(self, *, indent: int = 2) -> None:
        self._indent = indent

    def render(self, report: AnalysisReport) -> str:
        return report.model_dump_json(indent=self._indent)
