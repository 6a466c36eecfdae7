"""Pytest configuration and fixtures."""

import sys

import pytest
from loguru import logger

from atomex.export import LocalIdMapper
from tests.fakes import InMemoryStore, build_ontology_store
from tests.fakes.ontology import ROOT


@pytest.fixture
def ontology_store() -> InMemoryStore:
    """Provide a store holding the sample ontology."""
    return build_ontology_store()


@pytest.fixture
def mapper() -> LocalIdMapper:
    """Provide a mapper for the sample ontology (nothing registered)."""
    return LocalIdMapper(ROOT)


@pytest.fixture(autouse=True)
def _clean_atomex_env(monkeypatch):
    """Keep the caller's environment out of config-dependent tests."""
    for name in ("ATOMIC_AGENT", "ATOMEX_TIMEOUT", "ATOMEX_MAX_RETRIES", "ATOMEX_MAX_CONNECTIONS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_loguru():
    """Undo sink changes made by the CLI's logging setup."""
    yield
    logger.remove()
    logger.add(sys.stderr)
