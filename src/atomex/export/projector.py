"""Projection of Atomic resources into portable, local-id aware objects."""

from __future__ import annotations

from typing import Any

from loguru import logger

from ..atomic import ID_KEY, Datatype, Resource, ResourceStore, properties
from ..core.exceptions import FetchError
from .mapping import LocalIdMapper

LOCAL_ID_KEY = properties.LOCAL_ID

# Never exported: the resource's own identity and its commit bookkeeping
SKIPPED_PROPERTIES = frozenset({ID_KEY, properties.LAST_COMMIT})


class ResourceProjector:
    """Converts resources into plain objects keyed by (local) property ids.

    String values are only treated as references when the property's declared
    datatype says so, which requires loading every property resource. Values
    that reference members of the ontology are rewritten to local ids;
    references to anything else are kept as absolute subjects.

    Example:
        projector = ResourceProjector(store, mapper)
        obj = await projector.project("https://example.com/onto/Person")
        obj["https://atomicdata.dev/properties/localId"]  # "Person"
    """

    def __init__(self, store: ResourceStore, mapper: LocalIdMapper):
        """Initialize projector.

        Args:
            store: Store used to load resources and their properties.
            mapper: Fully populated mapper for the ontology being exported.
        """
        self._store = store
        self._mapper = mapper

    async def project(self, subject: str) -> dict[str, Any]:
        """Project one resource.

        Args:
            subject: Subject of a registered ontology member.

        Returns:
            Plain object with rewritten keys and values, with the local id
            key set last.

        Raises:
            FetchError: If the resource or one of its properties cannot be loaded.
            NotRegisteredError: If the subject was never registered.
        """
        resource = await self._fetch(subject)
        projected: dict[str, Any] = {}

        for prop, value in resource.get_propvals().items():
            if prop in SKIPPED_PROPERTIES:
                continue

            property_resource = await self._fetch(prop)
            key = self._mapper.rewrite_if_member(prop)
            projected[key] = self._rewrite_value(value, property_resource.datatype)

        # Always present and always the last key
        projected.pop(LOCAL_ID_KEY, None)
        projected[LOCAL_ID_KEY] = self._mapper.require_local_id(subject)
        logger.debug(f"Projected {subject} ({len(projected)} fields)")
        return projected

    def _rewrite_value(self, value: Any, datatype: Datatype) -> Any:
        """Rewrite reference values that point into the ontology."""
        if not datatype.is_reference:
            # Every other datatype, UNKNOWN included, holds no references
            return value
        if datatype is Datatype.ATOMIC_URL:
            if isinstance(value, str):
                return self._mapper.rewrite_if_member(value)
            return value
        if datatype is Datatype.RESOURCE_ARRAY:
            if isinstance(value, list):
                return [
                    self._mapper.rewrite_if_member(item) if isinstance(item, str) else item
                    for item in value
                ]
        return value

    async def _fetch(self, subject: str) -> Resource:
        resource = await self._store.get_resource(subject)
        if resource.error:
            logger.error(f"Could not fetch {subject}: {resource.error}")
            raise FetchError(subject, resource.error)
        return resource
