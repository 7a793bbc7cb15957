"""Processors assembling Patreon API documents into typed entities."""

from .base import BaseProcessor
from .export import CampaignExporter
from .resources import CampaignProcessor, IdentityProcessor, MemberProcessor

__all__ = [
    "BaseProcessor",
    "CampaignExporter",
    "CampaignProcessor",
    "IdentityProcessor",
    "MemberProcessor",
]
