"""Keyword extraction and keyword-set similarity."""

from __future__ import annotations

import re
from collections.abc import Iterable

from scenariopilot.contracts.config import DEFAULT_STOP_WORDS
from scenariopilot.contracts.requirement import Requirement

_NON_WORD = re.compile(r"[^\w\s]")


def text_keywords(
    text: str,
    *,
    stop_words: Iterable[str] = DEFAULT_STOP_WORDS,
    min_length: int = 4,
) -> frozenset[str]:
    """Lower-case, strip punctuation, split, then drop short tokens and stop words."""
    stop = stop_words if isinstance(stop_words, (set, frozenset)) else frozenset(stop_words)
    tokens = _NON_WORD.sub(" ", text.lower()).split()
    return frozenset(token for token in tokens if len(token) >= min_length and token not in stop)


def requirement_keywords(
    requirement: Requirement,
    *,
    stop_words: Iterable[str] = DEFAULT_STOP_WORDS,
    min_length: int = 4,
) -> frozenset[str]:
    text = f"{requirement.title} {requirement.description} {requirement.goal or ''}"
    return text_keywords(text, stop_words=stop_words, min_length=min_length)


def similarity(first: frozenset[str] | set[str], second: frozenset[str] | set[str]) -> float:
    """Jaccard similarity of two keyword sets; 0.0 when both are empty."""
    union = first | second
    if not union:
        return 0.0
    return len(first & second) / len(union)
