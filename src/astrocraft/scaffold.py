"""Create item files and splice them into existing pages."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Callable

from .config import Command, ItemNames, ProjectLayout, ScaffoldRequest, normalize_method
from .core.documents import RouteFile
from .core.errors import DuplicateMethodError, MalformedFileError
from .core.merge import ItemKind, MergeRequest, apply_merge
from .template import TemplateRenderer
from .templates import TemplateSet

__all__ = ["ItemScaffolder", "read_text", "write_text_atomic"]


LOGGER = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    """Read ``path`` keeping its line endings untouched."""

    try:
        with path.open("r", encoding="utf-8", newline="") as stream:
            return stream.read()
    except UnicodeDecodeError as exc:
        raise MalformedFileError(
            f"File is not valid UTF-8 at byte {exc.start}", marker="utf-8", path=path
        ) from exc


def _default_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_text_atomic(path: Path, text: str) -> None:
    """Replace ``path`` with ``text`` in one step."""

    mode = path.stat().st_mode & 0o777 if path.exists() else _default_mode()
    handle, temp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(handle, "w", encoding="utf-8", newline="") as stream:
            stream.write(text)
        os.chmod(temp_name, mode)
        os.replace(temp_name, path)
    except BaseException:
        Path(temp_name).unlink(missing_ok=True)
        raise


class ItemScaffolder:
    """Write components, layouts and API routes into a project.

    New files are rendered from :class:`~astrocraft.templates.TemplateSet`.
    Existing route and page files are read, passed through the merge engine
    and written back whole. Every status line goes through ``reporter``.
    """

    def __init__(
        self,
        layout: ProjectLayout | None = None,
        renderer: TemplateRenderer | None = None,
        *,
        reporter: Callable[[str], None] = print,
    ) -> None:
        self.layout = layout or ProjectLayout()
        self.templates = TemplateSet(renderer)
        self.reporter = reporter

    def _ensure_directory(self, directory: Path) -> None:
        if not directory.exists():
            directory.mkdir(parents=True, exist_ok=True)
            self.reporter(f"Directory created: {directory}")

    def _write_new(self, path: Path, text: str) -> None:
        self._ensure_directory(path.parent)
        write_text_atomic(path, text)
        LOGGER.info("Wrote %s", path)

    def add_component(self, name: str, page: str | None = None) -> Path:
        path = self.layout.component_path(name)
        self._write_new(path, self.templates.component(name))
        self.reporter(f"Component created: {path}")
        if page:
            self.update_page(page, ItemKind.COMPONENT, name)
        return path

    def add_layout(self, name: str, page: str | None = None) -> Path:
        path = self.layout.layout_path(name)
        self._write_new(path, self.templates.layout(name))
        self.reporter(f"Layout created: {path}")
        if page:
            self.update_page(page, ItemKind.LAYOUT, name)
        return path

    def add_route(self, name: str, method: str = "GET") -> Path:
        """Create the route file for ``name`` or add a ``method`` handler to it."""

        method = normalize_method(method)
        path = self.layout.route_path(name)
        if not path.exists():
            self._write_new(path, self.templates.route(name, method))
            self.reporter(f"API endpoint created: {path} with {method} method")
            return path

        existing = read_text(path)
        LOGGER.debug("%s declares %s", path, sorted(RouteFile(existing, path).methods))
        request = MergeRequest.route_method(method, self.templates.route_method(name, method))
        try:
            updated = apply_merge(existing, request)
        except DuplicateMethodError as exc:
            raise DuplicateMethodError(exc.method, path) from exc
        write_text_atomic(path, updated)
        self.reporter(f"API endpoint {method} added to {path}")
        return path

    def update_page(self, page: str, item_kind: ItemKind | str, name: str) -> Path:
        """Import and use item ``name`` in ``page``, creating the page if needed."""

        kind = ItemKind(item_kind)
        path = self.layout.page_path(page)
        if not path.exists():
            self._write_new(path, self.templates.page(page, kind, name))
            self.reporter(f"Page created: {path}")
            return path

        existing = read_text(path)
        requests = (
            MergeRequest.page_import(self.templates.page_import(kind, name)),
            MergeRequest.page_usage(kind, ItemNames.from_name(name).pascal, wrapper=self.templates.wrapper),
        )
        updated = existing
        try:
            for request in requests:
                updated = apply_merge(updated, request)
        except MalformedFileError as exc:
            raise MalformedFileError(str(exc), marker=exc.marker, path=path) from exc

        if updated == existing:
            self.reporter(f"Page already up to date: {path}")
            return path

        write_text_atomic(path, updated)
        self.reporter(f"Page updated: {path}")
        return path

    def run(self, request: ScaffoldRequest) -> list[Path]:
        """Process every item in ``request`` in order.

        The first failure propagates immediately. Files written for earlier
        items are left in place.
        """

        if request.page and request.command is Command.ADD_API:
            LOGGER.warning("Ignoring page %r: API routes are not added to pages", request.page)

        created: list[Path] = []
        for item in request.items:
            if request.command is Command.ADD_COMPONENT:
                created.append(self.add_component(item, request.page))
            elif request.command is Command.ADD_LAYOUT:
                created.append(self.add_layout(item, request.page))
            else:
                created.append(self.add_route(item, request.method))
        return created
