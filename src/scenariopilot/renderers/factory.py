"""Renderer factory."""

from __future__ import annotations

from scenariopilot.renderers.base import ReportRenderer
from scenariopilot.renderers.json_report import JsonRenderer
from scenariopilot.renderers.markdown import MarkdownRenderer

RENDERERS: dict[str, type[ReportRenderer]] = {"json": JsonRenderer, "markdown": MarkdownRenderer}


def create_renderer(name: str, **kwargs: object) -> ReportRenderer:
    renderer_cls = RENDERERS.get(name)
    if renderer_cls is None:
        raise ValueError(f"Unknown renderer: {name}")
    return renderer_cls(**kwargs)
