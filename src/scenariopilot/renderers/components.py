"""Reusable markdown building blocks."""

from __future__ import annotations

import re

_SLUG_UNSAFE = re.compile(r"[^a-z0-9]+")


def bullets(items: list[str], *, marker: str = "-") -> str:
    """Render a bullet list, or ``- (none)`` if empty."""
    if not items:
        return f"{marker} (none)"
    return "\n".join(f"{marker} {item}" for item in items)


def checklist(items: list[str]) -> str:
    return "\n".join(f"- [ ] {item}" for item in items)


def table(headers: list[str], rows: list[list[str]]) -> str:
    """Render a pipe table; cell pipes are escaped."""
    lines = [
        "| " + " | ".join(headers) + " |",
        "|" + "|".join("-" * (len(header) + 2) for header in headers) + "|",
    ]
    for row in rows:
        lines.append("| " + " | ".join(cell.replace("|", "\\|") for cell in row) + " |")
    return "\n".join(lines)


def slugify(text: str) -> str:
    """Lower-case, hyphen-separated file-name stem; ``untitled`` when nothing survives."""
    return _SLUG_UNSAFE.sub("-", text.lower()).strip("-") or "untitled"


def unique_slug(text: str, used: set[str]) -> str:
    """Slugify *text* and suffix ``-2``, ``-3``... until it is not in *used*."""
    base = slugify(text)
    slug = base
    counter = 2
    while slug in used:
        slug = f"{base}-{counter}"
        counter += 1
    used.add(slug)
    return slug
