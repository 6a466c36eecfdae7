"""Ontology export orchestration."""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from loguru import logger

from ..atomic import Resource, ResourceStore, properties
from ..core.exceptions import FetchError
from .mapping import LocalIdMapper
from .projector import ResourceProjector


@dataclass
class ExportResult:
    """Result of exporting one ontology.

    Attributes:
        title: Title of the ontology root.
        objects: Projected objects: root, classes, properties, instances.
        class_count: Number of exported classes.
        property_count: Number of exported properties.
        instance_count: Number of exported instances.
    """

    title: str
    objects: list[dict[str, Any]] = field(default_factory=list)
    class_count: int = 0
    property_count: int = 0
    instance_count: int = 0


class OntologyExporter:
    """Exports an ontology and all of its members as portable objects.

    All members are registered with the mapper before any projection starts,
    so concurrent projections only ever read the mapping. Any fetch failure
    aborts the whole export.

    Example:
        async with HTTPStore(server_url, config.store, agent) as store:
            result = await OntologyExporter(store).export(ontology_url)
            write_export(result.objects, Path("ontology.json"))
    """

    def __init__(self, store: ResourceStore):
        """Initialize exporter.

        Args:
            store: Store the ontology is read from.
        """
        self._store = store

    async def export(self, url: str) -> ExportResult:
        """Export the ontology rooted at ``url``.

        Args:
            url: Subject of the ontology root.

        Returns:
            ExportResult with the ordered projected objects.

        Raises:
            FetchError: If the ontology or any member cannot be loaded.
            NotAMemberError: If a listed member lies outside the ontology.
        """
        logger.info("Fetching ontology...")
        ontology = await self._store.get_resource(url)
        if ontology.error:
            logger.error(f"Could not fetch ontology: {ontology.error}")
            raise FetchError(url, ontology.error)

        logger.info(f"Found {ontology.title}")

        class_subjects, property_subjects, instance_subjects = _member_groups(ontology)
        mapper = self._build_mapper(
            ontology.subject, [*class_subjects, *property_subjects, *instance_subjects]
        )
        projector = ResourceProjector(self._store, mapper)

        root_object = await projector.project(ontology.subject)
        # A relocated ontology has no parent
        root_object.pop(properties.PARENT, None)

        classes, props, instances = await asyncio.gather(
            self._project_all(projector, class_subjects),
            self._project_all(projector, property_subjects),
            self._project_all(projector, instance_subjects),
        )

        result = ExportResult(
            title=ontology.title,
            objects=[root_object, *classes, *props, *instances],
            class_count=len(classes),
            property_count=len(props),
            instance_count=len(instances),
        )
        logger.info(
            f"Exported {result.title}: {result.class_count} classes, "
            f"{result.property_count} properties, {result.instance_count} instances"
        )
        return result

    def _build_mapper(self, root: str, members: list[str]) -> LocalIdMapper:
        """Register the root and every member."""
        mapper = LocalIdMapper(root)
        for subject in (root, *members):
            mapper.register(subject)
        logger.debug(f"Registered {len(mapper)} members of {root}")
        return mapper

    async def _project_all(
        self, projector: ResourceProjector, subjects: list[str]
    ) -> list[dict[str, Any]]:
        return list(await asyncio.gather(*(projector.project(s) for s in subjects)))


def write_export(objects: list[dict[str, Any]], path: Path) -> None:
    """Write exported objects as a JSON array.

    The document is fully serialised before the file is opened, so a failure
    never leaves a partial file behind.

    Args:
        objects: Projected objects in export order.
        path: Output file path. Parent directories are created.
    """
    logger.info("Creating JSON file...")
    document = json.dumps(objects, indent=2, ensure_ascii=False)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(document, encoding="utf-8")
    logger.info(f"Done, created {path}")


def _member_groups(ontology: Resource) -> tuple[list[str], list[str], list[str]]:
    """Split the membership set into classes, properties and instances.

    A subject listed more than once, or in more than one group, is kept only
    at its first position. The root is never repeated as a member.
    """
    seen = {ontology.subject}
    groups: list[list[str]] = []
    for subjects in (ontology.classes, ontology.properties, ontology.instances):
        group = []
        for subject in subjects:
            if subject not in seen:
                seen.add(subject)
                group.append(subject)
        groups.append(group)
    return groups[0], groups[1], groups[2]
