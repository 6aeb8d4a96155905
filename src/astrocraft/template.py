"""Placeholder substitution for the file templates."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Mapping, MutableMapping

from .naming import capitalize, to_camel, to_dash, to_pascal

__all__ = [
    "TemplateRenderer",
    "TemplateRenderingError",
]


_PLACEHOLDER = re.compile(r"{{\s*(?P<key>\w+)\s*(?P<filters>(?:\|\s*\w+\s*)*)}}")

NameFilter = Callable[[str], str]


class TemplateRenderingError(RuntimeError):
    """Raised when a placeholder names an unknown value or filter."""


def _default_filters() -> dict[str, NameFilter]:
    return {
        "dash": to_dash,
        "camel": lambda value: to_camel(to_dash(value)),
        "pascal": lambda value: to_pascal(to_dash(value)),
        "capitalize": capitalize,
        "upper": str.upper,
    }


@dataclass(slots=True)
class TemplateRenderer:
    """Fill ``{{ key|filter }}`` placeholders from a flat mapping of strings.

    Filters convert an item name into the form a template needs::

        {{ name|pascal }} -> UserProfile
        {{ name|dash }}   -> user-profile

    Single braces, as used by the generated TypeScript, pass through as-is.
    """

    filters: MutableMapping[str, NameFilter] = field(default_factory=_default_filters)

    def render_string(self, template: str, context: Mapping[str, str]) -> str:
        def substitute(match: re.Match[str]) -> str:
            key = match.group("key")
            if key not in context:
                raise TemplateRenderingError(f"missing value for '{key}'")

            value = context[key]
            for name in filter(None, (part.strip() for part in match.group("filters").split("|"))):
                if name not in self.filters:
                    raise TemplateRenderingError(f"unknown filter '{name}'")
                value = self.filters[name](value)
            return value

        return _PLACEHOLDER.sub(substitute, template)
