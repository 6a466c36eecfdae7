"""Client side of the Atomic Data protocol used by the exporter.

Quick Start
-----------

    from atomex.atomic import Agent, HTTPStore

    agent = Agent.from_secret(secret)
    async with HTTPStore("https://example.com", agent=agent) as store:
        ontology = await store.get_resource("https://example.com/my-ontology")
        print(ontology.title, ontology.classes)
"""

from .agent import Agent
from .resource import Resource
from .store import HTTPStore, ResourceStore, origin_of
from .urls import ID_KEY, Datatype, properties

__all__ = [
    "Agent",
    "Resource",
    "ResourceStore",
    "HTTPStore",
    "origin_of",
    "Datatype",
    "ID_KEY",
    "properties",
]
