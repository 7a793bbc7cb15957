"""
Abstract base class for assembling typed entities from API documents.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Sequence
import logging

from ..entities import Entity
from ..errors import DecodeError
from ..schemas.document import RawResource
from ..utils.document import parse_document
from ..utils.included import IncludedIndex, build_index
from ..utils.resolver import link_index, resolve

logger = logging.getLogger(__name__)


class BaseProcessor(ABC):
    """
    Assembles the primary resource(s) of a compound document into entities.

    Assembly runs in two phases: every included and primary resource is
    decoded into the index first, then relationships are resolved by
    looking entities up in that index. List documents share one index for
    all primary resources.
    """

    @property
    @abstractmethod
    def resource_type(self) -> str:
        """Type tag of the primary resources this processor handles."""
        pass

    def assemble(self, payload: Any) -> Entity:
        """
        Assemble document whose ``data`` is a single resource.

        Args:
            payload: Decoded JSON body or raw body bytes

        Returns:
            Entity with resolved relationships
        """
        document = parse_document(payload)
        if not isinstance(document.data, RawResource):
            raise DecodeError(f"Expected a single {self.resource_type} resource in 'data'")

        entities = self._assemble(
            [document.data], build_index(document.included)
        )
        return entities[0]

    def assemble_list(self, payload: Any) -> List[Entity]:
        """
        Assemble document whose ``data`` is a list of resources.

        Args:
            payload: Decoded JSON body or raw body bytes

        Returns:
            Entities in ``data`` order
        """
        document = parse_document(payload)
        if not isinstance(document.data, list):
            raise DecodeError(f"Expected a list of {self.resource_type} resources in 'data'")

        return self._assemble(document.data, build_index(document.included))

    def _assemble(self, primary: Sequence[RawResource], index: IncludedIndex) -> List[Entity]:
        assembled = []
        for raw in primary:
            if raw.type != self.resource_type:
                raise DecodeError(
                    f"Expected primary resource of type '{self.resource_type}'", raw.type, raw.id
                )
            assembled.append((index.add(raw), raw))

        link_index(index, primary={raw.identifier for raw in primary})

        # a repeated primary is replaced in the index by the later one
        for entity, raw in assembled:
            if index.get(raw.identifier) is not entity:
                resolve(entity, raw.relationships, index, primary=True)

        logger.debug(f"Assembled {len(assembled)} {self.resource_type} resources")
        return [entity for entity, _ in assembled]
