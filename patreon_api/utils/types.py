"""
Type conversion utilities for attribute schema to Polars schema mapping.
"""

import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Type, Union, get_args, get_origin

import polars as pl
from pydantic import BaseModel

POLARS_TYPE_MAP = {
    int: pl.Int64,
    str: pl.Utf8,
    float: pl.Float64,
    bool: pl.Boolean,
    datetime: pl.Datetime("us", "UTC"),
}


def get_polars_type(annotation: Any) -> pl.DataType:
    """
    Map attribute annotation to a Polars type.

    Optional[X] maps like X. Containers (lists, dicts) are stored as JSON text.
    """
    if get_origin(annotation) is Union:
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        annotation = args[0] if len(args) == 1 else str
    return POLARS_TYPE_MAP.get(annotation, pl.Utf8)


def create_table_schema(
    model: Type[BaseModel],
    key_columns: Optional[Dict[str, pl.DataType]] = None
) -> Dict[str, pl.DataType]:
    """
    Create Polars schema for a table of resources.

    Args:
        model: Attribute model of the resource type
        key_columns: Leading id / foreign key columns

    Returns:
        Dictionary suitable for pl.DataFrame(schema=...)
    """
    table_schema = dict(key_columns or {})
    for field_name, field_info in model.model_fields.items():
        table_schema[field_name] = get_polars_type(field_info.annotation)
    return table_schema


def to_cell(value: Any) -> Any:
    """Normalize attribute value for a Polars column."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, (dict, list)):
        return json.dumps(value, default=str)
    return value
