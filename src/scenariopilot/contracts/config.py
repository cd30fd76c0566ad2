"""Rule table contracts.

Every pattern, threshold and penalty the pipeline relies on lives here so it
can be tuned from a JSON file without touching code.
"""

from __future__ import annotations

import re
from enum import StrEnum

from pydantic import BaseModel, Field, field_validator, model_validator

DEFAULT_STOP_WORDS: frozenset[str] = frozenset(
    {
        "the", "be", "to", "of", "and", "a", "in", "that", "have", "i", "it", "for",
        "not", "on", "with", "he", "as", "you", "do", "at", "this", "but", "his",
        "by", "from", "they", "we", "say", "her", "she", "or", "an", "will", "my",
        "one", "all", "would", "there", "their", "what", "so", "up", "out", "if",
        "about", "who", "get", "which", "go", "me", "when", "make", "can", "like",
        "time", "no", "just", "him", "know", "take", "people", "into", "year",
        "your", "good", "some", "could", "them", "see", "other", "than", "then",
        "now", "look", "only", "come", "its", "over", "think", "also", "back",
        "after", "use", "two", "how", "our", "work", "first", "well", "way",
        "even", "new", "want", "because", "any", "these", "give", "day", "most",
        "us", "is", "was", "are", "been", "has", "had", "were", "said", "did",
        "getting", "made", "find", "where", "much", "too", "very", "still",
        "being", "going", "why", "before", "never", "here", "more",
    }
)  # fmt: skip


class PenaltyScope(StrEnum):
    PER_DEFECT = "per-defect"
    PER_CHECK = "per-check"


class Penalties(BaseModel):
    duplicate_ids: int = Field(default=20, ge=0)
    empty_fields: int = Field(default=15, ge=0)
    orphaned_criteria: int = Field(default=5, ge=0)
    oversized_feature: int = Field(default=10, ge=0)
    undefined_actor: int = Field(default=5, ge=0)
    circular_dependency: int = Field(default=10, ge=0)

    model_config = {"frozen": True, "extra": "forbid"}


class PatternRules(BaseModel):
    """Regex sources used by the requirement parser.

    ``user_story`` is applied to the whole text with IGNORECASE and DOTALL and
    must define the ``actor``, ``goal`` and ``value`` groups. A story ends at a
    sentence stop, a blank line, a list item, a heading, another story, or a
    line break not followed by a lower-case continuation. Every other
    pattern is matched against a single stripped line with IGNORECASE.
    """

    title: str = r"^#\s+(?P<title>.+?)\s*#*$"
    version: str = r"^[\W_]*version[\W_]*?\s*[:=]\s*[*_]*\s*(?P<value>.+?)\s*$"
    author: str = r"^[\W_]*author[\W_]*?\s*[:=]\s*[*_]*\s*(?P<value>.+?)\s*$"
    stakeholders: str = r"^[\W_]*stakeholders[\W_]*?\s*[:=]\s*[*_]*\s*(?P<value>.+?)\s*$"
    user_story: str = (
        r"\bAs\s+an?\s+(?P<actor>[^,.\n]+?)\s*,\s*I\s+want(?:\s+to)?\s+(?P<goal>(?!to\b)\S.*?)"
        r"(?:\s*,?\s*so\s+that\s+(?P<value>\S.*?))?"
        r"[ \t]*(?=\.(?:\s|$)|\n\s*\n|\n\s*(?:[-*#]|\d+[.)])\s"
        r"|\n\s*(?:[-*+]\s+|\d+[.)]\s+)?As\s+an?\s"
        r"|\n(?![ \t]*(?-i:[a-z])|[ \t]*so\s+that)|\Z)"
    )
    feature_heading: str = r"^(?:Feature\s*:|#{2,3}\s*Feature\b[:\s]*)\s*(?P<title>.*)$"
    bullet: str = r"^(?:[-*+]|\d+[.)])\s+(?P<text>.+)$"
    requirement: str = r"^[-*+]\s+(?P<title>[^:=]+?)\s*[:=]\s*(?P<description>.+)$"
    priority: str = r"\[\s*(?P<priority>high|medium|low)\s*\]"
    dependency_line: str = r"^(?:[-*+]\s+)?depends\s+on\s*:\s*(?P<names>.+)$"
    dependency_clause: str = r"\(\s*depends\s+on\s*:?\s*(?P<names>[^)]+)\)"
    acceptance_criterion: str = r"^(?:[-*+]\s+)?(?:AC|acceptance\s+criteri(?:on|a))\s*[:\-]\s*(?P<text>.+)$"
    story_line: str = r"^(?:[-*+]\s+)?As\s+an?\s"

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("*")
    @classmethod
    def _compiles(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f"invalid regular expression {value!r}: {exc}") from exc
        return value


class AnalysisRules(BaseModel):
    """Tunable thresholds, weights and patterns for one analysis run.

    With the default ``per-defect`` penalty scope every offending requirement,
    feature, duplicated id or cycle is charged, so a long list of otherwise
    clean features without actors can reach a score of 0. ``per-check``
    charges each violated check once instead.
    """

    stop_words: frozenset[str] = DEFAULT_STOP_WORDS
    min_keyword_length: int = Field(default=4, ge=1)
    explicit_similarity_threshold: float = Field(default=0.30, ge=0.0, le=1.0)
    thematic_similarity_threshold: float = Field(default=0.40, ge=0.0, le=1.0)
    criteria_chunk_size: int = Field(default=5, ge=1)
    criteria_per_estimated_scenario: int = Field(default=3, ge=1)
    complex_member_limit: int = Field(default=5, ge=1)
    medium_member_limit: int = Field(default=2, ge=1)
    oversized_feature_limit: int = Field(default=10, ge=1)
    density_threshold: float = Field(default=2.0, ge=0.0)
    complex_share_threshold: float = Field(default=0.5, ge=0.0, le=1.0)
    penalties: Penalties = Field(default_factory=Penalties)
    penalty_scope: PenaltyScope = PenaltyScope.PER_DEFECT
    patterns: PatternRules = Field(default_factory=PatternRules)

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("stop_words", mode="before")
    @classmethod
    def _normalize_stop_words(cls, value: object) -> object:
        if isinstance(value, (list, tuple, set, frozenset)):
            return frozenset(str(word).lower() for word in value)
        return value

    @model_validator(mode="after")
    def _validate_limits(self) -> AnalysisRules:
        if self.medium_member_limit > self.complex_member_limit:
            raise ValueError("medium_member_limit cannot exceed complex_member_limit")
        return self
