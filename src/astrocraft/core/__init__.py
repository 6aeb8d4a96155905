"""Merge engine and the error types it raises."""

from __future__ import annotations

from .documents import HTTP_METHODS, PageFile, RouteFile
from .errors import CraftError, DuplicateMethodError, MalformedFileError, ValidationError
from .merge import (
    ItemKind,
    MergeKind,
    MergeRequest,
    apply_merge,
    merge_page_import,
    merge_page_usage,
    merge_route_method,
)

__all__ = [
    "HTTP_METHODS",
    "CraftError",
    "DuplicateMethodError",
    "ItemKind",
    "MalformedFileError",
    "MergeKind",
    "MergeRequest",
    "PageFile",
    "RouteFile",
    "ValidationError",
    "apply_merge",
    "merge_page_import",
    "merge_page_usage",
    "merge_route_method",
]
