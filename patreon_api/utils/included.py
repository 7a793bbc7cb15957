"""
Index of typed resources built from a document's ``included`` array.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from ..entities import Entity, decode_resource
from ..schemas.document import RawResource, ResourceIdentifier

logger = logging.getLogger(__name__)


class IncludedIndex:
    """
    Per-response table of decoded entities keyed by type and id.

    Entities are stored without resolved relationships; the raw resource
    is kept alongside so relationships can be wired once the index is
    complete. A later resource with the same (type, id) replaces the
    earlier one.
    """

    def __init__(self):
        self._entities: Dict[str, Dict[str, Entity]] = {}
        self._raw: Dict[Tuple[str, str], RawResource] = {}

    def add(self, raw: RawResource) -> Optional[Entity]:
        """
        Decode raw resource and store it in the index.

        Args:
            raw: Resource object

        Returns:
            Stored entity, or None if the resource type is unknown
        """
        entity = decode_resource(raw)
        if entity is None:
            return None

        by_id = self._entities.setdefault(raw.type, {})
        if raw.id in by_id:
            logger.debug(f"Duplicate included resource {raw.type} {raw.id}, keeping the later one")
        by_id[raw.id] = entity
        self._raw[(raw.type, raw.id)] = raw
        return entity

    def get(self, identifier: ResourceIdentifier) -> Optional[Entity]:
        """Look up entity by resource identifier."""
        return self._entities.get(identifier.type, {}).get(identifier.id)

    def of_type(self, resource_type: str) -> List[Entity]:
        """Get all entities of one type in document order."""
        return list(self._entities.get(resource_type, {}).values())

    def resources(self) -> Iterator[Tuple[Entity, RawResource]]:
        """Iterate over (entity, raw resource) pairs for every indexed resource."""
        for resource_type, by_id in self._entities.items():
            for resource_id, entity in by_id.items():
                yield entity, self._raw[(resource_type, resource_id)]

    def __contains__(self, identifier: ResourceIdentifier) -> bool:
        return self.get(identifier) is not None

    def __len__(self) -> int:
        return sum(len(by_id) for by_id in self._entities.values())


def build_index(included: Iterable[RawResource]) -> IncludedIndex:
    """
    Build index from the ``included`` side-table.

    Relationships are not resolved here; see ``utils.resolver.link_index``.

    Args:
        included: Resource objects in document order

    Returns:
        Populated index
    """
    index = IncludedIndex()
    for raw in included:
        index.add(raw)

    logger.debug(f"Indexed {len(index)} included resources")
    return index
