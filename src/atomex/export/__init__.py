"""Ontology export: local id mapping, resource projection, orchestration."""

from .exporter import ExportResult, OntologyExporter, write_export
from .mapping import LocalIdMapper
from .projector import LOCAL_ID_KEY, SKIPPED_PROPERTIES, ResourceProjector

__all__ = [
    "LocalIdMapper",
    "ResourceProjector",
    "OntologyExporter",
    "ExportResult",
    "write_export",
    "LOCAL_ID_KEY",
    "SKIPPED_PROPERTIES",
]
