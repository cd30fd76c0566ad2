"""Requirement parsing entrypoints."""

from scenariopilot.parsing.parser import RequirementParser, read_document

__all__ = ["RequirementParser", "read_document"]
