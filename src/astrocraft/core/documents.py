"""Read-only views over the text of route and page files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path

from .errors import MalformedFileError

__all__ = [
    "FRONTMATTER_MARKER",
    "HTTP_METHODS",
    "ROUTE_IMPORT",
    "PageFile",
    "RouteFile",
    "route_declaration_pattern",
]


HTTP_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS", "HEAD")
ROUTE_IMPORT = "import type { APIRoute } from 'astro';"
FRONTMATTER_MARKER = "---"

_DECLARED_METHOD = re.compile(r"export const ([A-Z]+)\s*:\s*APIRoute")
_IMPORT_LINE = re.compile(r"^[ \t]*import\b.*$", re.MULTILINE)
_OPENING_TAG = re.compile(r"<([A-Za-z][\w.\-]*)")


def route_declaration_pattern(method: str) -> re.Pattern[str]:
    """Return the pattern matching an exported handler for ``method``."""

    return re.compile(rf"export const {re.escape(method)}\s*:\s*APIRoute")


@dataclass(frozen=True)
class RouteFile:
    """An API route module bound to a single path."""

    text: str
    path: Path | None = None

    @cached_property
    def methods(self) -> frozenset[str]:
        """HTTP methods with an exported handler in this file."""

        return frozenset(_DECLARED_METHOD.findall(self.text))

    @property
    def has_import(self) -> bool:
        return ROUTE_IMPORT in self.text

    def declares(self, method: str) -> bool:
        return route_declaration_pattern(method).search(self.text) is not None


@dataclass(frozen=True)
class PageFile:
    """A page split into its frontmatter and body regions.

    The frontmatter spans from the first ``---`` marker to the next one after
    it. Everything after the closing marker is the body.
    """

    text: str
    path: Path | None = None

    @cached_property
    def frontmatter_span(self) -> tuple[int, int]:
        """Offsets of the opening and closing markers.

        Raises :class:`MalformedFileError` when either marker is missing.
        """

        start = self.text.find(FRONTMATTER_MARKER)
        if start == -1:
            raise MalformedFileError(
                "Frontmatter start marker not found", marker=FRONTMATTER_MARKER, path=self.path
            )
        end = self.text.find(FRONTMATTER_MARKER, start + len(FRONTMATTER_MARKER))
        if end == -1:
            raise MalformedFileError(
                "Frontmatter end marker not found", marker=FRONTMATTER_MARKER, path=self.path
            )
        return start, end

    @property
    def frontmatter(self) -> str:
        start, end = self.frontmatter_span
        return self.text[start + len(FRONTMATTER_MARKER) : end]

    @property
    def body(self) -> str:
        _, end = self.frontmatter_span
        return self.text[end + len(FRONTMATTER_MARKER) :]

    @property
    def imports(self) -> frozenset[str]:
        """Import statements found in the frontmatter, stripped of indentation."""

        return frozenset(line.strip() for line in _IMPORT_LINE.findall(self.frontmatter))

    @property
    def tags(self) -> frozenset[str]:
        """Names of the elements opened in the body."""

        return frozenset(_OPENING_TAG.findall(self.body))

    def has_import(self, statement: str) -> bool:
        return statement in self.text

    def uses(self, tag: str) -> bool:
        return f"<{tag}" in self.text
