"""Requirement parser: raw requirement text to typed requirement records."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

from scenariopilot.contracts.config import AnalysisRules
from scenariopilot.contracts.exceptions import DocumentLoadError, NotFoundError
from scenariopilot.contracts.requirement import (
    DocumentMetadata,
    ParsedDocument,
    Priority,
    Requirement,
    RequirementKind,
)
from scenariopilot.parsing.patterns import CompiledPatterns, heading_level, normalize_space, split_names

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Untitled Document"
DEFAULT_VERSION = "1.0.0"

# "Feature:" lines carry no heading level; they close like a level-2 heading.
_PLAIN_FEATURE_LEVEL = 2

_PASS_ORDER = {
    RequirementKind.USER_STORY: 0,
    RequirementKind.FEATURE: 1,
    RequirementKind.ACCEPTANCE_CRITERION: 2,
    RequirementKind.REQUIREMENT: 3,
}


@dataclass
class _Draft:
    kind: RequirementKind
    line: int
    title: str
    description: str = ""
    priority: Priority = Priority.MEDIUM
    actor: str | None = None
    goal: str | None = None
    value: str | None = None
    criteria: list[str] = field(default_factory=list)
    dependencies: list[str] = field(default_factory=list)


@dataclass
class _FeatureBlock:
    draft: _Draft
    level: int
    description_lines: list[str] = field(default_factory=list)


@dataclass
class _Metadata:
    title: str = DEFAULT_TITLE
    description: str = ""
    version: str | None = None
    author: str | None = None
    stakeholders: list[str] = field(default_factory=list)


def read_document(path: str | Path) -> str:
    file_path = Path(path)
    if not file_path.exists():
        raise NotFoundError(f"requirements file not found: {file_path}", path=file_path)
    if not file_path.is_file():
        raise DocumentLoadError(f"requirements path is not a file: {file_path}", path=file_path)
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(f"failed reading requirements file: {file_path}", path=file_path) from exc


class RequirementParser:
    """Turn free-form requirement text into a :class:`ParsedDocument`.

    Parsing never fails on content: text without any recognizable pattern
    yields a document with zero requirements. Only :meth:`parse_file` can
    raise, and only for I/O problems.
    """

    def __init__(self, rules: AnalysisRules | None = None) -> None:
        self._rules = rules or AnalysisRules()
        self._patterns = CompiledPatterns.from_rules(self._rules.patterns)

    def parse_file(self, path: str | Path) -> ParsedDocument:
        """Read *path* as UTF-8 and parse it.

        Raises:
            NotFoundError: If *path* does not exist.
            DocumentLoadError: If *path* is not a readable UTF-8 file.
        """
        return self.parse(read_document(path))

    def parse(self, text: str) -> ParsedDocument:
        text = text.replace("\r\n", "\n").replace("\r", "\n")
        lines = text.split("\n")
        metadata = self._extract_metadata(lines)

        stories, story_lines = self._extract_user_stories(text)
        consumed = set(story_lines)
        drafts = [
            *stories,
            *self._extract_features(lines, consumed),
            *self._extract_criteria(lines, consumed),
            *self._extract_requirements(lines, consumed),
        ]
        requirements = self._finalize(drafts)
        logger.debug("parsed %d requirement(s) from %d line(s)", len(requirements), len(lines))

        return ParsedDocument(
            title=metadata.title,
            description=metadata.description,
            version=metadata.version or DEFAULT_VERSION,
            author=metadata.author,
            stakeholders=metadata.stakeholders,
            requirements=requirements,
            metadata=self._summarize(requirements),
        )

    def _extract_metadata(self, lines: list[str]) -> _Metadata:
        metadata = _Metadata()
        title_index: int | None = None
        for index, raw in enumerate(lines):
            line = raw.strip()
            if title_index is None:
                title_match = self._patterns.title.match(line)
                if title_match:
                    metadata.title = normalize_space(title_match.group("title"))
                    title_index = index
                    continue
            if metadata.version is None and (match := self._patterns.version.match(line)):
                metadata.version = match.group("value").strip("*_ ")
            elif metadata.author is None and (match := self._patterns.author.match(line)):
                metadata.author = match.group("value").strip("*_ ")
            elif not metadata.stakeholders and (match := self._patterns.stakeholders.match(line)):
                metadata.stakeholders = split_names(match.group("value"))

        if title_index is not None:
            metadata.description = self._first_paragraph(lines[title_index + 1 :])
        return metadata

    def _first_paragraph(self, lines: list[str]) -> str:
        paragraph: list[str] = []
        for raw in lines:
            line = raw.strip()
            if heading_level(line):
                break
            if not line:
                if paragraph:
                    break
                continue
            if self._patterns.is_metadata_line(line):
                continue
            paragraph.append(line)
        return normalize_space(" ".join(paragraph))

    def _extract_user_stories(self, text: str) -> tuple[list[_Draft], set[int]]:
        """Match user stories across the whole text so stories may span lines.

        Returns the drafts and the zero-based indexes of every line a story
        touches.
        """
        stories: list[_Draft] = []
        covered: set[int] = set()
        for match in self._patterns.user_story.finditer(text):
            first_line = text.count("\n", 0, match.start())
            last_line = first_line + match.group(0).count("\n")
            covered.update(range(first_line, last_line + 1))

            priority, _ = self._take_priority(match.group(0))
            goal = self._strip_priority(match.group("goal"))
            value = self._strip_priority(match.group("value") or "") or None
            stories.append(
                _Draft(
                    kind=RequirementKind.USER_STORY,
                    line=first_line + 1,
                    title=f"User Story: {goal}",
                    description=self._strip_priority(match.group(0)),
                    priority=priority,
                    actor=normalize_space(match.group("actor")),
                    goal=goal,
                    value=value,
                )
            )
        return stories, covered

    def _extract_features(self, lines: list[str], consumed: set[int]) -> list[_Draft]:
        blocks: list[_FeatureBlock] = []
        current: _FeatureBlock | None = None

        for index, raw in enumerate(lines):
            line = raw.strip()
            if not line:
                continue
            heading = self._patterns.feature_heading.match(line)
            if heading:
                current = self._open_feature(heading.group("title"), index + 1, heading_level(line))
                blocks.append(current)
                consumed.add(index)
                continue

            level = heading_level(line)
            if current is not None and level and level <= current.level:
                current = None
            if current is None or index in consumed:
                continue

            consumed.add(index)
            if level:
                continue
            if dependency := self._patterns.dependency_line.match(line):
                self._add_unique(current.draft.dependencies, split_names(dependency.group("names")))
            elif criterion := self._patterns.acceptance_criterion.match(line):
                current.draft.criteria.append(normalize_space(criterion.group("text")))
            elif bullet := self._patterns.bullet.match(line):
                current.draft.criteria.append(normalize_space(bullet.group("text")))
            else:
                current.description_lines.append(line)

        for block in blocks:
            block.draft.description = normalize_space(" ".join(block.description_lines))
        return [block.draft for block in blocks]

    def _open_feature(self, raw_title: str, line: int, level: int) -> _FeatureBlock:
        priority, title = self._take_priority(raw_title)
        draft = _Draft(
            kind=RequirementKind.FEATURE,
            line=line,
            title=title.strip(" :"),
            priority=priority,
        )
        return _FeatureBlock(draft=draft, level=level or _PLAIN_FEATURE_LEVEL)

    def _extract_criteria(self, lines: list[str], consumed: set[int]) -> list[_Draft]:
        criteria: list[_Draft] = []
        for index, raw in enumerate(lines):
            if index in consumed:
                continue
            match = self._patterns.acceptance_criterion.match(raw.strip())
            if not match:
                continue
            consumed.add(index)
            text = normalize_space(match.group("text"))
            criteria.append(
                _Draft(
                    kind=RequirementKind.ACCEPTANCE_CRITERION,
                    line=index + 1,
                    title=text,
                    description=text,
                    criteria=[text],
                )
            )
        return criteria

    def _extract_requirements(self, lines: list[str], consumed: set[int]) -> list[_Draft]:
        requirements: list[_Draft] = []
        for index, raw in enumerate(lines):
            line = raw.strip()
            if index in consumed or self._patterns.story_line.match(line):
                continue
            if self._patterns.is_metadata_line(line) or self._patterns.dependency_line.match(line):
                continue
            match = self._patterns.requirement.match(line)
            if not match:
                continue

            priority, _ = self._take_priority(line)
            description = match.group("description")
            dependencies: list[str] = []
            for clause in self._patterns.dependency_clause.finditer(description):
                self._add_unique(dependencies, split_names(clause.group("names")))
            description = self._patterns.dependency_clause.sub(" ", description)

            requirements.append(
                _Draft(
                    kind=RequirementKind.REQUIREMENT,
                    line=index + 1,
                    title=self._strip_priority(match.group("title")),
                    description=self._strip_priority(description),
                    priority=priority,
                    dependencies=dependencies,
                )
            )
        return requirements

    def _finalize(self, drafts: list[_Draft]) -> list[Requirement]:
        """Assign ids in source order and link criteria to their parent."""
        ordered = sorted(enumerate(drafts), key=lambda pair: (pair[1].line, _PASS_ORDER[pair[1].kind], pair[0]))
        requirements: list[Requirement] = []
        last_parent: str | None = None
        for sequence, (_, draft) in enumerate(ordered, start=1):
            requirement_id = f"REQ-{sequence:03d}"
            parent_id = None
            if draft.kind is RequirementKind.ACCEPTANCE_CRITERION:
                parent_id = last_parent
            else:
                last_parent = requirement_id
            requirements.append(
                Requirement(
                    id=requirement_id,
                    title=draft.title,
                    description=draft.description,
                    kind=draft.kind,
                    priority=draft.priority,
                    actor=draft.actor,
                    goal=draft.goal,
                    value=draft.value,
                    acceptance_criteria=draft.criteria,
                    dependencies=draft.dependencies,
                    tags=[draft.kind.value],
                    parent_id=parent_id,
                    source_line=draft.line,
                )
            )
        return requirements

    @staticmethod
    def _summarize(requirements: list[Requirement]) -> DocumentMetadata:
        kinds = Counter(req.kind for req in requirements)
        priorities = Counter(req.priority for req in requirements)
        return DocumentMetadata(
            total_requirements=len(requirements),
            by_kind={kind.value: kinds[kind] for kind in RequirementKind if kinds[kind]},
            by_priority={priority.value: priorities[priority] for priority in Priority if priorities[priority]},
        )

    def _take_priority(self, text: str) -> tuple[Priority, str]:
        match = self._patterns.priority.search(text)
        if match is None:
            return Priority.MEDIUM, normalize_space(text)
        return Priority(match.group("priority").lower()), self._strip_priority(text)

    def _strip_priority(self, text: str) -> str:
        return normalize_space(self._patterns.priority.sub(" ", text))

    @staticmethod
    def _add_unique(target: list[str], names: list[str]) -> None:
        for name in names:
            if name not in target:
                target.append(name)
