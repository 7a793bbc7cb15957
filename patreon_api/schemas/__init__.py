"""Pydantic schemas for Patreon API documents and resource attributes."""

from .attributes import (
    AddressAttributes,
    BenefitAttributes,
    CampaignAttributes,
    DeliverableAttributes,
    GoalAttributes,
    MediaAttributes,
    MemberAttributes,
    OAuthClientAttributes,
    TierAttributes,
    UserAttributes,
    WebhookAttributes,
)
from .document import (
    Document,
    ErrorDocument,
    ErrorObject,
    RawResource,
    Relationship,
    ResourceIdentifier,
)

__all__ = [
    "AddressAttributes",
    "BenefitAttributes",
    "CampaignAttributes",
    "DeliverableAttributes",
    "GoalAttributes",
    "MediaAttributes",
    "MemberAttributes",
    "OAuthClientAttributes",
    "TierAttributes",
    "UserAttributes",
    "WebhookAttributes",
    "Document",
    "ErrorDocument",
    "ErrorObject",
    "RawResource",
    "Relationship",
    "ResourceIdentifier",
]
