"""
Processors for the top-level resources returned by Patreon API endpoints.
"""

from typing import Any, List

from ..entities import Campaign, Member, User
from .base import BaseProcessor


class IdentityProcessor(BaseProcessor):
    """
    Assembles the identity endpoint's user.

    When the user resource carries no ``memberships`` relationship, every
    included member is attached instead.
    """

    @property
    def resource_type(self) -> str:
        return User.resource_type

    def assemble(self, payload: Any) -> User:
        return super().assemble(payload)


class CampaignProcessor(BaseProcessor):
    """Assembles campaigns with creator, tiers, benefits and goals."""

    @property
    def resource_type(self) -> str:
        return Campaign.resource_type

    def assemble(self, payload: Any) -> Campaign:
        return super().assemble(payload)

    def assemble_list(self, payload: Any) -> List[Campaign]:
        return super().assemble_list(payload)


class MemberProcessor(BaseProcessor):
    """
    Assembles members with address, campaign, user and entitled tiers.

    When a member carries no ``currently_entitled_tiers`` relationship,
    every included tier is attached instead.
    """

    @property
    def resource_type(self) -> str:
        return Member.resource_type

    def assemble(self, payload: Any) -> Member:
        return super().assemble(payload)

    def assemble_list(self, payload: Any) -> List[Member]:
        return super().assemble_list(payload)
