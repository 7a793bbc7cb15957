"""
Request options controlling includes, sparse fieldsets and pagination.
"""

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator


def _split_csv(value: Union[str, List[str]]) -> List[str]:
    if isinstance(value, str):
        value = value.split(",")
    return [item for item in (part.strip() for part in value) if item]


class RequestOptions(BaseModel):
    """
    Query options for a single API request.

    Only affects what the server returns, never how the response is decoded.

    Example:
        RequestOptions(
            include=["creator", "tiers"],
            fields={"campaign": ["summary", "url"], "tier": "title,amount_cents"},
        )
    """

    include: List[str] = Field(default_factory=list)
    fields: Dict[str, List[str]] = Field(default_factory=dict)
    page_size: Optional[int] = Field(default=None, gt=0)
    page_cursor: Optional[str] = None

    @field_validator("include", mode="before")
    @classmethod
    def _normalize_include(cls, value):
        if value is None:
            return []
        return _split_csv(value)

    @field_validator("fields", mode="before")
    @classmethod
    def _normalize_fields(cls, value):
        if value is None:
            return {}
        return {resource: _split_csv(names) for resource, names in dict(value).items()}

    def to_params(self) -> Dict[str, str]:
        """Build query parameters: include, fields[type], page[count], page[cursor]."""
        params = {}
        if self.include:
            params["include"] = ",".join(self.include)

        for resource, names in self.fields.items():
            params[f"fields[{resource}]"] = ",".join(names)

        if self.page_size is not None:
            params["page[count]"] = str(self.page_size)

        if self.page_cursor:
            params["page[cursor]"] = self.page_cursor

        return params
