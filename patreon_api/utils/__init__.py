"""Utility modules for the Patreon API client."""

from .document import parse_document, parse_error_document
from .included import IncludedIndex, build_index
from .resolver import link_index, resolve
from .types import create_table_schema, get_polars_type

__all__ = [
    "parse_document",
    "parse_error_document",
    "IncludedIndex",
    "build_index",
    "link_index",
    "resolve",
    "create_table_schema",
    "get_polars_type",
]
