"""Scaffolding for Astro projects.

The package converts item names between dash, camel and Pascal forms, renders
the files for new components, layouts and API routes, and merges references
to them into existing route and page files without duplicating anything that
is already there.
"""

from __future__ import annotations

from .config import ItemNames, ProjectLayout, ScaffoldRequest
from .core import (
    CraftError,
    DuplicateMethodError,
    MalformedFileError,
    MergeRequest,
    ValidationError,
    apply_merge,
)
from .naming import capitalize, to_camel, to_dash, to_pascal
from .scaffold import ItemScaffolder
from .template import TemplateRenderer, TemplateRenderingError

__all__ = [
    "CraftError",
    "DuplicateMethodError",
    "ItemNames",
    "ItemScaffolder",
    "MalformedFileError",
    "MergeRequest",
    "ProjectLayout",
    "ScaffoldRequest",
    "TemplateRenderer",
    "TemplateRenderingError",
    "ValidationError",
    "apply_merge",
    "capitalize",
    "to_camel",
    "to_dash",
    "to_pascal",
]

__version__ = "0.1.0"
