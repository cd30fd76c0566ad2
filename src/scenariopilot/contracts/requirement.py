"""Requirement contracts produced by the parser."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class RequirementKind(StrEnum):
    USER_STORY = "user-story"
    FEATURE = "feature"
    REQUIREMENT = "requirement"
    ACCEPTANCE_CRITERION = "acceptance-criterion"


class Priority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort rank; lower ranks come first."""
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}


class Requirement(BaseModel):
    """A single typed requirement record extracted from a document.

    ``dependencies`` and ``tags`` are insertion-ordered and free of duplicates.
    """

    id: str
    title: str
    description: str = ""
    kind: RequirementKind
    priority: Priority = Priority.MEDIUM
    actor: str | None = None
    goal: str | None = None
    value: str | None = None
    acceptance_criteria: list[str] = Field(default_factory=list)
    dependencies: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    parent_id: str | None = None
    source_line: int = 0

    model_config = {"frozen": True}


class DocumentMetadata(BaseModel):
    total_requirements: int = 0
    by_kind: dict[str, int] = Field(default_factory=dict)
    by_priority: dict[str, int] = Field(default_factory=dict)

    model_config = {"frozen": True}


class ParsedDocument(BaseModel):
    """Result of parsing one requirements text blob."""

    title: str
    description: str = ""
    version: str
    author: str | None = None
    stakeholders: list[str] = Field(default_factory=list)
    requirements: list[Requirement] = Field(default_factory=list)
    metadata: DocumentMetadata = Field(default_factory=DocumentMetadata)

    model_config = {"frozen": True}
