"""
Patreon API - Python client for the Patreon API v2 with typed, fully linked resources.
"""

from .client import PatreonClient
from .config import ACCESS_TOKEN_URL, AUTHORIZATION_URL, BASE_URL, Config
from .entities import (
    Address,
    Benefit,
    Campaign,
    Deliverable,
    Goal,
    Media,
    Member,
    OAuthClient,
    Tier,
    User,
    Webhook,
)
from .errors import APIError, DanglingReferenceWarning, DecodeError, PatreonError, TransportError
from .options import RequestOptions

__version__ = "0.1.0"
__all__ = [
    "PatreonClient",
    "Config",
    "RequestOptions",
    "ACCESS_TOKEN_URL",
    "AUTHORIZATION_URL",
    "BASE_URL",
    "Address",
    "Benefit",
    "Campaign",
    "Deliverable",
    "Goal",
    "Media",
    "Member",
    "OAuthClient",
    "Tier",
    "User",
    "Webhook",
    "APIError",
    "DanglingReferenceWarning",
    "DecodeError",
    "PatreonError",
    "TransportError",
]
