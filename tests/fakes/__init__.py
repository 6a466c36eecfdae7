"""Test fakes for testing without real infrastructure.

Example:
    from tests.fakes import build_ontology_store

    store = build_ontology_store()
    result = await OntologyExporter(store).export(ROOT)
"""

from .ontology import build_ontology_store
from .store import InMemoryStore

__all__ = ["InMemoryStore", "build_ontology_store"]
