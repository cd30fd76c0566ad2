"""Compiled form of the parser's pattern rules."""

from __future__ import annotations

import re
from dataclasses import dataclass

from scenariopilot.contracts.config import PatternRules


@dataclass(frozen=True)
class CompiledPatterns:
    title: re.Pattern[str]
    version: re.Pattern[str]
    author: re.Pattern[str]
    stakeholders: re.Pattern[str]
    user_story: re.Pattern[str]
    feature_heading: re.Pattern[str]
    bullet: re.Pattern[str]
    requirement: re.Pattern[str]
    priority: re.Pattern[str]
    dependency_line: re.Pattern[str]
    dependency_clause: re.Pattern[str]
    acceptance_criterion: re.Pattern[str]
    story_line: re.Pattern[str]

    @classmethod
    def from_rules(cls, rules: PatternRules) -> CompiledPatterns:
        sources = rules.model_dump()
        compiled = {
            name: re.compile(source, re.IGNORECASE | (re.DOTALL if name == "user_story" else 0))
            for name, source in sources.items()
        }
        return cls(**compiled)

    def is_metadata_line(self, line: str) -> bool:
        return any(p.match(line) for p in (self.version, self.author, self.stakeholders))


def heading_level(line: str) -> int:
    """Return the markdown heading level of *line*, or 0 when it is not a heading."""
    stripped = line.lstrip()
    level = len(stripped) - len(stripped.lstrip("#"))
    if level and stripped[level : level + 1].isspace():
        return level
    return 0


def normalize_space(text: str) -> str:
    return " ".join(text.split())


def split_names(raw: str) -> list[str]:
    """Split a comma/semicolon separated name list, dropping blanks and repeats."""
    names = (normalize_space(part).strip(" .") for part in re.split(r"[,;]", raw))
    return list(dict.fromkeys(name for name in names if name))
