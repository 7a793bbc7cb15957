"""
Typed entities assembled from Patreon API documents.

Each entity holds its decoded attributes plus direct references to other
entities. Attribute values are reachable as plain attributes, so
``campaign.creator.full_name`` reads the creator's ``full_name``.
References may form cycles (a campaign's tiers point back at the
campaign), so entities compare by identity and leave relationships out of
their repr.
"""

import logging
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Dict, List, Optional, Type

from pydantic import ValidationError

from .errors import DecodeError
from .schemas.attributes import (
    AddressAttributes,
    Attributes,
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
from .schemas.document import RawResource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelationshipSpec:
    """Declaration of one relationship on an entity type."""
    target_type: str
    many: bool = False
    # Primary resources without a relationship block take every included
    # resource of target_type instead.
    fallback: bool = False


def to_one(target_type: str) -> Any:
    return field(default=None, repr=False, metadata={"relationship": RelationshipSpec(target_type)})


def to_many(target_type: str, fallback: bool = False) -> Any:
    spec = RelationshipSpec(target_type, many=True, fallback=fallback)
    return field(default=None, repr=False, metadata={"relationship": spec})


@dataclass(eq=False)
class Entity:
    """Base class for all typed resources."""

    resource_type: ClassVar[str] = ""
    attributes_model: ClassVar[Type[Attributes]] = Attributes

    id: str
    attributes: Attributes

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails: delegate to the attributes model.
        if name.startswith("_") or name == "attributes":
            raise AttributeError(name)
        try:
            return getattr(self.attributes, name)
        except AttributeError:
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            ) from None

    @classmethod
    def relationships(cls) -> Dict[str, RelationshipSpec]:
        """Get declared relationships keyed by relationship name."""
        return {
            f.name: f.metadata["relationship"]
            for f in fields(cls)
            if "relationship" in f.metadata
        }

    def to_dict(self, depth: int = 1) -> Dict[str, Any]:
        """
        Convert entity into a JSON-serializable dictionary.

        Args:
            depth: How many relationship levels to expand. Deeper references
                are rendered as ``{"type", "id"}`` identifiers.

        Returns:
            Dictionary with type, id, attributes and resolved relationships
        """
        result: Dict[str, Any] = {
            "type": self.resource_type,
            "id": self.id,
            "attributes": self.attributes.model_dump(mode="json", exclude_none=True),
        }

        relationships = {}
        for name, spec in self.relationships().items():
            value = getattr(self, name)
            if value is None:
                continue
            if spec.many:
                relationships[name] = [_dump_reference(item, depth - 1) for item in value]
            else:
                relationships[name] = _dump_reference(value, depth - 1)

        if relationships:
            result["relationships"] = relationships
        return result


def _dump_reference(entity: Entity, depth: int) -> Dict[str, Any]:
    if depth <= 0:
        return {"type": entity.resource_type, "id": entity.id}
    return entity.to_dict(depth)


@dataclass(eq=False)
class User(Entity):
    """Patreon user, either patron or creator."""

    resource_type: ClassVar[str] = "user"
    attributes_model: ClassVar[Type[Attributes]] = UserAttributes

    campaign: Optional["Campaign"] = to_one("campaign")
    memberships: Optional[List["Member"]] = to_many("member", fallback=True)


@dataclass(eq=False)
class Campaign(Entity):
    """Creator's page, the top-level object for members, tiers and benefits."""

    resource_type: ClassVar[str] = "campaign"
    attributes_model: ClassVar[Type[Attributes]] = CampaignAttributes

    creator: Optional[User] = to_one("user")
    tiers: Optional[List["Tier"]] = to_many("tier")
    benefits: Optional[List["Benefit"]] = to_many("benefit")
    goals: Optional[List["Goal"]] = to_many("goal")


@dataclass(eq=False)
class Member(Entity):
    """A user's membership to a campaign."""

    resource_type: ClassVar[str] = "member"
    attributes_model: ClassVar[Type[Attributes]] = MemberAttributes

    address: Optional["Address"] = to_one("address")
    campaign: Optional[Campaign] = to_one("campaign")
    user: Optional[User] = to_one("user")
    currently_entitled_tiers: Optional[List["Tier"]] = to_many("tier", fallback=True)


@dataclass(eq=False)
class Tier(Entity):
    """Membership level on a campaign."""

    resource_type: ClassVar[str] = "tier"
    attributes_model: ClassVar[Type[Attributes]] = TierAttributes

    campaign: Optional[Campaign] = to_one("campaign")
    tier_image: Optional["Media"] = to_one("media")
    benefits: Optional[List["Benefit"]] = to_many("benefit")


@dataclass(eq=False)
class Benefit(Entity):
    """Benefit a campaign delivers to patrons of the tiers it is attached to."""

    resource_type: ClassVar[str] = "benefit"
    attributes_model: ClassVar[Type[Attributes]] = BenefitAttributes

    tiers: Optional[List[Tier]] = to_many("tier")
    deliverables: Optional[List["Deliverable"]] = to_many("deliverable")
    campaign: Optional[Campaign] = to_one("campaign")


@dataclass(eq=False)
class Goal(Entity):
    resource_type: ClassVar[str] = "goal"
    attributes_model: ClassVar[Type[Attributes]] = GoalAttributes

    campaign: Optional[Campaign] = to_one("campaign")


@dataclass(eq=False)
class Address(Entity):
    resource_type: ClassVar[str] = "address"
    attributes_model: ClassVar[Type[Attributes]] = AddressAttributes

    user: Optional[User] = to_one("user")
    campaigns: Optional[List[Campaign]] = to_many("campaign")


@dataclass(eq=False)
class Deliverable(Entity):
    """Whether a patron has been delivered a benefit they are owed."""

    resource_type: ClassVar[str] = "deliverable"
    attributes_model: ClassVar[Type[Attributes]] = DeliverableAttributes

    campaign: Optional[Campaign] = to_one("campaign")
    benefit: Optional[Benefit] = to_one("benefit")
    member: Optional[Member] = to_one("member")
    user: Optional[User] = to_one("user")


@dataclass(eq=False)
class Media(Entity):
    resource_type: ClassVar[str] = "media"
    attributes_model: ClassVar[Type[Attributes]] = MediaAttributes


@dataclass(eq=False)
class OAuthClient(Entity):
    resource_type: ClassVar[str] = "oauth-client"
    attributes_model: ClassVar[Type[Attributes]] = OAuthClientAttributes

    user: Optional[User] = to_one("user")
    campaign: Optional[Campaign] = to_one("campaign")


@dataclass(eq=False)
class Webhook(Entity):
    resource_type: ClassVar[str] = "webhook"
    attributes_model: ClassVar[Type[Attributes]] = WebhookAttributes

    client: Optional[OAuthClient] = to_one("oauth-client")
    campaign: Optional[Campaign] = to_one("campaign")


RESOURCE_TYPES: Dict[str, Type[Entity]] = {
    cls.resource_type: cls
    for cls in (
        User, Campaign, Member, Tier, Benefit, Goal,
        Address, Deliverable, Media, OAuthClient, Webhook,
    )
}


def decode_resource(raw: RawResource) -> Optional[Entity]:
    """
    Decode raw resource into the entity class registered for its type.

    Args:
        raw: Resource object from the document

    Returns:
        Entity without resolved relationships, or None for unknown types
    """
    entity_cls = RESOURCE_TYPES.get(raw.type)
    if entity_cls is None:
        logger.debug(f"Skipping resource of unknown type '{raw.type}' (id {raw.id})")
        return None

    try:
        attributes = entity_cls.attributes_model.model_validate(raw.attributes or {})
    except ValidationError as e:
        raise DecodeError(f"Invalid attributes: {e}", raw.type, raw.id) from e

    return entity_cls(id=raw.id, attributes=attributes)
