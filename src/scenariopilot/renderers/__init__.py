"""Report renderers: JSON, markdown and Gherkin."""

from scenariopilot.renderers.base import ReportRenderer
from scenariopilot.renderers.factory import create_renderer
from scenariopilot.renderers.gherkin import render_feature, render_markdown_files, render_scenario_markdown
from scenariopilot.renderers.json_report import JsonRenderer
from scenariopilot.renderers.markdown import MarkdownRenderer

__all__ = [
    "JsonRenderer",
    "MarkdownRenderer",
    "ReportRenderer",
    "create_renderer",
    "render_feature",
    "render_markdown_files",
    "render_scenario_markdown",
]
