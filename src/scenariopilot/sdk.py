"""SDK composition root for scenariopilot.

The four pipeline operations are exposed as plain functions. Each accepts an
optional :class:`AnalysisRules`; without one the built-in defaults apply.
Callers own file output and presentation.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from scenariopilot.analysis import RequirementsAnalyzer
from scenariopilot.contracts.analysis import AnalysisReport
from scenariopilot.contracts.config import AnalysisRules
from scenariopilot.contracts.exceptions import ConfigError
from scenariopilot.contracts.feature import Feature
from scenariopilot.contracts.requirement import ParsedDocument
from scenariopilot.contracts.scenario import GenerationOptions, Scenario
from scenariopilot.features import FeatureExtractor
from scenariopilot.parsing import RequirementParser
from scenariopilot.renderers import create_renderer, render_markdown_files
from scenariopilot.scenarios import ScenarioGenerator

Options = GenerationOptions | Mapping[str, Any] | None


def load_rules(path: str | Path) -> AnalysisRules:
    """Load and validate an analysis rule table from JSON.

    Keys left out of the file keep their default values.

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON, or does not
            validate.
    """
    rules_path = Path(path).expanduser().resolve()
    try:
        raw_payload: Any = json.loads(rules_path.read_text(encoding="utf-8"))
        return AnalysisRules.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading rules file: {rules_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in rules file: {rules_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid rules: {exc}") from exc


def parse(text: str, *, rules: AnalysisRules | None = None) -> ParsedDocument:
    return RequirementParser(rules).parse(text)


def extract(document: ParsedDocument, *, rules: AnalysisRules | None = None) -> list[Feature]:
    return FeatureExtractor(rules).extract(document)


def generate(feature: Feature, options: Options = None, *, rules: AnalysisRules | None = None) -> list[Scenario]:
    return ScenarioGenerator(rules).generate(feature, options)


def analyze(text: str, options: Options = None, *, rules: AnalysisRules | None = None) -> AnalysisReport:
    return RequirementsAnalyzer(rules).analyze(text, options)


def analyze_file(
    path: str | Path,
    options: Options = None,
    *,
    rules: AnalysisRules | None = None,
) -> AnalysisReport:
    return RequirementsAnalyzer(rules).analyze_file(path, options)


def to_json(report: AnalysisReport) -> str:
    return create_renderer("json").render(report)


def to_markdown(report: AnalysisReport) -> str:
    return create_renderer("markdown").render(report)


def to_markdown_files(report: AnalysisReport) -> dict[str, str]:
    return render_markdown_files(report)
