"""
Relationship resolution against an included-resource index.
"""

import logging
from typing import Collection, Dict, List, Optional

from ..entities import Entity, RelationshipSpec
from ..errors import DanglingReferenceWarning, DecodeError
from ..schemas.document import Relationship, ResourceIdentifier
from .included import IncludedIndex

logger = logging.getLogger(__name__)


def _report_dangling(owner: Entity, name: str, identifier: ResourceIdentifier) -> None:
    logger.debug(
        f"{DanglingReferenceWarning.__name__}: {owner.resource_type} {owner.id} "
        f"relationship '{name}' points at {identifier.type} {identifier.id}, which is not included"
    )


def _lookup(
    identifier: ResourceIdentifier,
    index: IncludedIndex,
    owner: Entity,
    name: str,
    spec: RelationshipSpec
) -> Optional[Entity]:
    if identifier.type != spec.target_type:
        logger.debug(
            f"{DanglingReferenceWarning.__name__}: {owner.resource_type} {owner.id} "
            f"relationship '{name}' expects {spec.target_type}, got {identifier.type} {identifier.id}"
        )
        return None

    entity = index.get(identifier)
    if entity is None:
        _report_dangling(owner, name, identifier)
    return entity


def resolve_to_one(
    identifier: ResourceIdentifier,
    index: IncludedIndex,
    owner: Entity,
    name: str,
    spec: RelationshipSpec
) -> Optional[Entity]:
    """Look up a to-one reference. Dangling or mistyped references resolve to None."""
    return _lookup(identifier, index, owner, name, spec)


def resolve_to_many(
    identifiers: List[ResourceIdentifier],
    index: IncludedIndex,
    owner: Entity,
    name: str,
    spec: RelationshipSpec
) -> List[Entity]:
    """Look up a to-many reference, skipping dangling or mistyped identifiers and keeping order."""
    resolved = []
    for identifier in identifiers:
        entity = _lookup(identifier, index, owner, name, spec)
        if entity is not None:
            resolved.append(entity)
    return resolved


def resolve(
    entity: Entity,
    relationships: Dict[str, Relationship],
    index: IncludedIndex,
    primary: bool = False
) -> None:
    """
    Attach referenced entities to every relationship the entity type declares.

    Only entities already present in the index are attached, so reference
    cycles never trigger further decoding.

    Args:
        entity: Owning entity, updated in place
        relationships: Raw relationship objects of the owning resource
        index: Index of decoded resources
        primary: Whether entity is a primary resource of the document.
            Fallback relationships of primary resources with no relationship
            block take every indexed resource of the target type.
    """
    for name, spec in entity.relationships().items():
        relationship = relationships.get(name)

        if relationship is None:
            if primary and spec.fallback:
                fallback = index.of_type(spec.target_type)
                logger.debug(
                    f"No '{name}' relationship on {entity.resource_type} {entity.id}, "
                    f"using {len(fallback)} included {spec.target_type} resources"
                )
                setattr(entity, name, fallback)
            continue

        data = relationship.data
        if data is None:
            value = None
        elif isinstance(data, list):
            if not spec.many:
                raise DecodeError(
                    f"Relationship '{name}' must reference a single resource",
                    entity.resource_type,
                    entity.id
                )
            value = resolve_to_many(data, index, entity, name, spec)
        else:
            if spec.many:
                raise DecodeError(
                    f"Relationship '{name}' must reference a list of resources",
                    entity.resource_type,
                    entity.id
                )
            value = resolve_to_one(data, index, entity, name, spec)

        setattr(entity, name, value)


def link_index(index: IncludedIndex, primary: Collection[ResourceIdentifier] = ()) -> None:
    """
    Resolve relationships of every resource in the index.

    Args:
        index: Fully populated index
        primary: Identifiers of the document's primary resources
    """
    for entity, raw in index.resources():
        resolve(entity, raw.relationships, index, primary=raw.identifier in primary)
