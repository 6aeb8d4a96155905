"""Configuration helpers shared by the scaffolder and CLI."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable

from .core.documents import HTTP_METHODS
from .core.errors import ValidationError
from .naming import capitalize, to_camel, to_dash


class Command(str, Enum):
    """Commands understood by the scaffolder."""

    ADD_COMPONENT = "add-component"
    ADD_LAYOUT = "add-layout"
    ADD_API = "add-api"


COMMAND_ALIASES = {
    "-c": Command.ADD_COMPONENT.value,
    "-l": Command.ADD_LAYOUT.value,
    "-a": Command.ADD_API.value,
}

_IDENTIFIER = re.compile(r"[A-Za-z0-9\- ]+")


@dataclass(slots=True, frozen=True)
class ItemNames:
    """Derived identifiers describing a single item.

    Attributes
    ----------
    raw:
        The name as supplied by the caller, with surrounding whitespace
        removed. Used verbatim in generated messages.
    dash:
        Lower-case hyphenated form used for component, route and page file
        names.
    camel:
        ``dash`` with every hyphen removed and the following letter
        upper-cased.
    pascal:
        ``camel`` with its first letter upper-cased. Used for element names,
        import bindings and layout file names.
    """

    raw: str
    dash: str
    camel: str
    pascal: str

    @classmethod
    def from_name(cls, name: str) -> "ItemNames":
        raw = name.strip()
        if not raw:
            raise ValidationError("Item names must not be empty")
        if not _IDENTIFIER.fullmatch(raw):
            raise ValidationError(
                f"Invalid item name: {raw!r}. Use letters, digits, hyphens and spaces only"
            )

        dash = to_dash(raw)
        camel = to_camel(dash)
        if not camel:
            raise ValidationError(f"Invalid item name: {raw!r}. It must contain a letter or digit")
        return cls(raw=raw, dash=dash, camel=camel, pascal=capitalize(camel))


@dataclass(slots=True)
class ProjectLayout:
    """Where generated files live inside a project."""

    root: Path = field(default_factory=Path.cwd)
    component_ext: str = ".astro"
    route_ext: str = ".ts"

    def __post_init__(self) -> None:
        self.root = Path(self.root).expanduser()

    @property
    def components_dir(self) -> Path:
        return self.root / "src" / "components"

    @property
    def layouts_dir(self) -> Path:
        return self.root / "src" / "layouts"

    @property
    def pages_dir(self) -> Path:
        return self.root / "src" / "pages"

    @property
    def routes_dir(self) -> Path:
        return self.pages_dir / "api"

    def component_path(self, name: str) -> Path:
        return self.components_dir / f"{ItemNames.from_name(name).dash}{self.component_ext}"

    def layout_path(self, name: str) -> Path:
        return self.layouts_dir / f"{ItemNames.from_name(name).pascal}{self.component_ext}"

    def route_path(self, name: str) -> Path:
        return self.routes_dir / f"{ItemNames.from_name(name).dash}{self.route_ext}"

    def page_path(self, name: str) -> Path:
        return self.pages_dir / f"{ItemNames.from_name(name).dash}{self.component_ext}"


def normalize_method(method: str) -> str:
    """Return ``method`` upper-cased, rejecting names outside :data:`HTTP_METHODS`."""

    candidate = method.strip().upper()
    if candidate not in HTTP_METHODS:
        raise ValidationError(
            f"Invalid HTTP method: {candidate}. Must be one of: {', '.join(HTTP_METHODS)}"
        )
    return candidate


@dataclass(slots=True)
class ScaffoldRequest:
    """A validated invocation: one command applied to a batch of items."""

    command: Command
    items: tuple[str, ...]
    page: str | None = None
    method: str = "GET"

    @classmethod
    def from_args(
        cls,
        command: str,
        items: Iterable[str],
        *,
        page: str | None = None,
        method: str | None = None,
    ) -> "ScaffoldRequest":
        """Validate raw command line values.

        Every item name and the HTTP method are checked here so that a bad
        value aborts the run before any file is created.
        """

        command = COMMAND_ALIASES.get(command, command)
        try:
            resolved = Command(command)
        except ValueError as exc:
            raise ValidationError(
                f"Unknown command: {command}. Use add-component (-c), add-layout (-l), or add-api (-a)."
            ) from exc

        names = tuple(items)
        if not names:
            raise ValidationError("At least one item name is required")
        for name in names:
            ItemNames.from_name(name)

        if page is not None:
            if not page.strip():
                raise ValidationError("Page name must not be empty")
            ItemNames.from_name(page)

        return cls(
            command=resolved,
            items=names,
            page=page,
            method=normalize_method(method or "GET"),
        )
