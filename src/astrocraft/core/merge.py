"""Idempotent text merging for route and page files.

Every operation takes the current file text and returns the updated text. No
operation touches the file system; callers own reading and writing. Presence
checks are literal substring tests, so content that differs only in
formatting is treated as absent.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field

from .documents import FRONTMATTER_MARKER, ROUTE_IMPORT, PageFile, RouteFile
from .errors import DuplicateMethodError, MalformedFileError

__all__ = [
    "DEFAULT_WRAPPER",
    "ItemKind",
    "MergeKind",
    "MergeRequest",
    "apply_merge",
    "merge_page_import",
    "merge_page_usage",
    "merge_route_method",
]


LOGGER = logging.getLogger(__name__)

DEFAULT_WRAPPER = "Layout"


class ItemKind(str, Enum):
    """Kinds of items that can be referenced from a page."""

    COMPONENT = "component"
    LAYOUT = "layout"


class MergeKind(str, Enum):
    """Target of a :class:`MergeRequest`."""

    ROUTE_METHOD = "route-method"
    PAGE_IMPORT = "page-import"
    PAGE_USAGE = "page-usage"


class MergeRequest(BaseModel):
    """One insertion to apply against existing file text."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: MergeKind = Field(..., description="Which merge operation applies the request.")
    content: str = Field(..., description="Text to insert, or the tag name for usage requests.")
    key: str = Field(..., description="Literal marker whose presence means the request was already applied.")
    item_kind: ItemKind | None = Field(None, description="Component or layout, for usage requests only.")
    wrapper: str = Field(DEFAULT_WRAPPER, description="Element wrapping the page body.")

    @classmethod
    def route_method(cls, method: str, block: str) -> "MergeRequest":
        return cls(kind=MergeKind.ROUTE_METHOD, content=block, key=method)

    @classmethod
    def page_import(cls, statement: str) -> "MergeRequest":
        return cls(kind=MergeKind.PAGE_IMPORT, content=statement, key=statement)

    @classmethod
    def page_usage(
        cls, item_kind: ItemKind | str, tag: str, *, wrapper: str = DEFAULT_WRAPPER
    ) -> "MergeRequest":
        return cls(
            kind=MergeKind.PAGE_USAGE,
            content=tag,
            key=f"<{tag}",
            item_kind=ItemKind(item_kind),
            wrapper=wrapper,
        )


def merge_route_method(text: str, method: str, render_block: Callable[[str], str]) -> str:
    """Append a handler for ``method`` to the route module ``text``.

    Raises :class:`DuplicateMethodError` when the module already exports a
    handler for ``method``; hand-written handlers are never replaced. The route
    import is prepended when absent.
    """

    route = RouteFile(text)
    if route.declares(method):
        raise DuplicateMethodError(method)

    block = render_block(method)
    if text and not text.endswith("\n"):
        text += "\n"
    if not route.has_import:
        LOGGER.debug("Prepending route import")
        text = f"{ROUTE_IMPORT}\n{text}"
    LOGGER.debug("Appending %s handler", method)
    return f"{text}\n{block}"


def merge_page_import(text: str, statement: str) -> str:
    """Insert ``statement`` as the first line inside the frontmatter."""

    page = PageFile(text)
    if page.has_import(statement):
        LOGGER.debug("Import already present: %s", statement)
        return text

    start, _ = page.frontmatter_span
    position = start + len(FRONTMATTER_MARKER)
    if text.startswith("\r\n", position):
        newline = "\r\n"
    else:
        newline = "\n"

    if text.startswith(newline, position):
        position += len(newline)
        inserted = f"{statement}{newline}"
    else:
        inserted = f"{newline}{statement}{newline}"

    LOGGER.debug("Inserting import: %s", statement)
    return text[:position] + inserted + text[position:]


def merge_page_usage(
    text: str,
    item_kind: ItemKind | str,
    tag: str,
    *,
    wrapper: str = DEFAULT_WRAPPER,
) -> str:
    """Reference ``tag`` from the page body unless ``<tag`` already appears.

    Components are inserted as a self-closing tag before the last closing
    ``wrapper`` tag. Layouts wrap the inner content of the first ``wrapper``
    element only.
    """

    kind = ItemKind(item_kind)
    if PageFile(text).uses(tag):
        LOGGER.debug("Usage of <%s> already present", tag)
        return text

    closing = f"</{wrapper}>"
    if kind is ItemKind.COMPONENT:
        position = text.rfind(closing)
        if position == -1:
            raise MalformedFileError(f"Closing {closing} tag not found", marker=closing)
        line_start = text.rfind("\n", 0, position) + 1
        indent = text[line_start:position]
        if indent.strip():
            line_start, indent = position, ""
        LOGGER.debug("Inserting <%s /> before %s", tag, closing)
        return f"{text[:line_start]}{indent}  <{tag} />\n{text[line_start:]}"

    pattern = re.compile(rf"(<{re.escape(wrapper)}(?:\s[^>]*)?>)([\s\S]*?){re.escape(closing)}")
    match = pattern.search(text)
    if match is None:
        raise MalformedFileError(f"<{wrapper}> element not found", marker=closing)

    opening, inner = match.group(1), match.group(2)
    wrapped = f"{opening}\n  <{tag}>\n{inner}  </{tag}>\n{closing}"
    LOGGER.debug("Wrapping <%s> content in <%s>", wrapper, tag)
    return text[: match.start()] + wrapped + text[match.end() :]


def apply_merge(text: str, request: MergeRequest) -> str:
    """Apply ``request`` to ``text`` and return the updated text.

    Page requests are skipped when ``request.key`` already occurs in ``text``.
    """

    if request.kind is MergeKind.ROUTE_METHOD:
        return merge_route_method(text, request.key, lambda _method: request.content)
    if request.key in text:
        LOGGER.debug("Key already present: %s", request.key)
        return text
    if request.kind is MergeKind.PAGE_IMPORT:
        return merge_page_import(text, request.content)
    if request.item_kind is None:
        raise ValueError("page usage requests require an item kind")
    return merge_page_usage(text, request.item_kind, request.content, wrapper=request.wrapper)
