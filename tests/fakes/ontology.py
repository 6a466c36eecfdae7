"""A small sample ontology served from an InMemoryStore."""

from __future__ import annotations

from atomex.atomic import Datatype, properties

from .store import InMemoryStore

ROOT = "https://x.test/onto"
ANIMAL = f"{ROOT}/Animal"
LEGS = f"{ROOT}/legs"
RELATED = f"{ROOT}/related"
REX = f"{ROOT}/rex"
EXTERNAL = "https://x.test/ext/Other"
DRIVE = "https://x.test/drive"

IS_A = "https://atomicdata.dev/properties/isA"
DESCRIPTION = "https://atomicdata.dev/properties/description"
RECOMMENDS = "https://atomicdata.dev/properties/recommends"
CLASSTYPE = "https://atomicdata.dev/properties/classtype"
ONTOLOGY_CLASS = "https://atomicdata.dev/class/ontology"
CLASS_CLASS = "https://atomicdata.dev/classes/Class"
PROPERTY_CLASS = "https://atomicdata.dev/classes/Property"


def add_core_properties(store: InMemoryStore) -> None:
    """Register the Atomic core properties the sample resources use."""
    for subject, datatype in {
        properties.NAME: Datatype.STRING,
        properties.SHORTNAME: Datatype.SLUG,
        properties.PARENT: Datatype.ATOMIC_URL,
        properties.LAST_COMMIT: Datatype.ATOMIC_URL,
        properties.DATATYPE: Datatype.ATOMIC_URL,
        properties.CLASSES: Datatype.RESOURCE_ARRAY,
        properties.PROPERTIES: Datatype.RESOURCE_ARRAY,
        properties.INSTANCES: Datatype.RESOURCE_ARRAY,
        IS_A: Datatype.RESOURCE_ARRAY,
        DESCRIPTION: Datatype.MARKDOWN,
        RECOMMENDS: Datatype.RESOURCE_ARRAY,
        CLASSTYPE: Datatype.ATOMIC_URL,
    }.items():
        store.add_property(subject, datatype)


def build_ontology_store() -> InMemoryStore:
    """Create a store holding one ontology with a class, two properties and an instance.

    ``Animal`` has a ``related`` resource array pointing at itself and at an
    external resource, and every member has the ontology as its parent.
    """
    store = InMemoryStore()
    add_core_properties(store)

    store.add(
        ROOT,
        {
            properties.NAME: "Onto",
            DESCRIPTION: "A sample ontology",
            properties.PARENT: DRIVE,
            IS_A: [ONTOLOGY_CLASS],
            properties.CLASSES: [ANIMAL],
            properties.PROPERTIES: [LEGS, RELATED],
            properties.INSTANCES: [REX],
            properties.LAST_COMMIT: "https://x.test/commits/1",
        },
    )
    store.add(
        ANIMAL,
        {
            properties.SHORTNAME: "animal",
            IS_A: [CLASS_CLASS],
            RECOMMENDS: [LEGS, RELATED],
            RELATED: [ANIMAL, EXTERNAL],
            properties.PARENT: ROOT,
        },
    )
    store.add(
        LEGS,
        {
            properties.SHORTNAME: "legs",
            properties.DATATYPE: Datatype.INTEGER.value,
            IS_A: [PROPERTY_CLASS],
            properties.PARENT: ROOT,
        },
    )
    store.add(
        RELATED,
        {
            properties.SHORTNAME: "related",
            properties.DATATYPE: Datatype.RESOURCE_ARRAY.value,
            CLASSTYPE: ANIMAL,
            IS_A: [PROPERTY_CLASS],
            properties.PARENT: ROOT,
        },
    )
    store.add(
        REX,
        {
            properties.NAME: "Rex",
            IS_A: [ANIMAL],
            LEGS: 4,
            properties.PARENT: ROOT,
        },
    )
    return store
