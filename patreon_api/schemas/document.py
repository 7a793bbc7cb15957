"""
Pydantic models for the JSON:API wire format returned by the Patreon API.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ResourceIdentifier(BaseModel):
    """Resource identifier object: type + id. Hashable, compared by value."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    type: str
    id: str


class Relationship(BaseModel):
    """
    Relationship object of a resource.

    ``data`` is a single identifier for to-one relationships, a list for
    to-many relationships and ``None`` for an empty to-one (or when the
    server only sent links).
    """

    data: Union[ResourceIdentifier, List[ResourceIdentifier], None] = None
    links: Optional[Dict[str, Any]] = None
    meta: Optional[Dict[str, Any]] = None


class RawResource(BaseModel):
    """Resource object as it appears in ``data`` or ``included``."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    type: str
    id: str
    attributes: Optional[Dict[str, Any]] = None
    relationships: Dict[str, Relationship] = Field(default_factory=dict)
    links: Optional[Dict[str, Any]] = None

    @property
    def identifier(self) -> ResourceIdentifier:
        return ResourceIdentifier(type=self.type, id=self.id)


class Document(BaseModel):
    """Top-level compound document."""

    data: Union[RawResource, List[RawResource], None] = None
    included: List[RawResource] = Field(default_factory=list)
    links: Optional[Dict[str, Any]] = None
    meta: Optional[Dict[str, Any]] = None


class ErrorObject(BaseModel):
    """Single error object from an ``errors`` array."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    code: Optional[Union[int, str]] = None
    code_name: Optional[str] = None
    title: Optional[str] = None
    detail: Optional[str] = None
    status: Optional[str] = None
    id: Optional[str] = None
    source: Optional[Dict[str, Any]] = None


class ErrorDocument(BaseModel):
    """Top-level error document."""

    errors: List[ErrorObject]
