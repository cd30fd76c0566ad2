"""Exception hierarchy for ScenarioPilot.

All scenariopilot exceptions inherit from :class:`ScenarioPilotError`, so
callers can catch any library error with a single ``except`` clause. Defects
found while validating a requirement set are never raised; they are reported
inside :class:`~scenariopilot.contracts.analysis.ValidationResult`.
"""

from __future__ import annotations

from pathlib import Path


class ScenarioPilotError(Exception):
    """Base exception for all ScenarioPilot errors."""


class DocumentLoadError(ScenarioPilotError):
    """Requirements document could not be read or decoded."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class NotFoundError(DocumentLoadError):
    """Requirements document does not exist."""


class ConfigError(ScenarioPilotError):
    """Rule table loading or validation failure."""


class OptionsError(ConfigError):
    """Scenario generation options are invalid.

    Attributes:
        errors: Individual validation messages, one per offending option.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        joined = "\n".join(f"  - {e}" for e in errors)
        super().__init__(f"Invalid generation options:\n{joined}")
