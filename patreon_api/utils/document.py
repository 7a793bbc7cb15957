"""
Parsing utilities for Patreon API response bodies.
"""

import json
import logging
from typing import Any, Union

from pydantic import ValidationError

from ..errors import DecodeError
from ..schemas.document import Document, ErrorDocument

logger = logging.getLogger(__name__)


def decode_json(body: Union[bytes, str]) -> Any:
    """Decode response body as JSON."""
    try:
        return json.loads(body)
    except ValueError as e:
        raise DecodeError(f"Response body is not valid JSON: {e}") from e


def parse_document(payload: Any) -> Document:
    """
    Parse compound document according to the JSON:API document schema.

    Args:
        payload: Decoded JSON body (or raw body bytes)

    Returns:
        Validated document with primary data and included resources
    """
    if isinstance(payload, (bytes, str)):
        payload = decode_json(payload)

    try:
        document = Document.model_validate(payload)
    except ValidationError as e:
        raise DecodeError(f"Malformed JSON:API document: {e}") from e

    primary_count = len(document.data) if isinstance(document.data, list) else int(document.data is not None)
    logger.debug(f"Parsed document with {primary_count} primary and {len(document.included)} included resources")
    return document


def parse_error_document(payload: Any) -> ErrorDocument:
    """
    Parse error document returned with a non-success status.

    Args:
        payload: Decoded JSON body (or raw body bytes)

    Returns:
        Validated error document
    """
    if isinstance(payload, (bytes, str)):
        payload = decode_json(payload)

    try:
        return ErrorDocument.model_validate(payload)
    except ValidationError as e:
        raise DecodeError(f"Malformed error document: {e}") from e
