"""Renderer contract."""

from __future__ import annotations

from abc import ABC, abstractmethod

from scenariopilot.contracts.analysis import AnalysisReport


class ReportRenderer(ABC):
    @abstractmethod
    def render(self, report: AnalysisReport) -> str: ...  # pragma: no cover
