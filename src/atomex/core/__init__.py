"""Core configuration and exceptions for atomex."""

from .config import Config, StoreConfig
from .exceptions import (
    AgentError,
    AtomexError,
    ConfigError,
    FetchError,
    MappingError,
    NotAMemberError,
    NotRegisteredError,
)

__all__ = [
    "Config",
    "StoreConfig",
    "AtomexError",
    "FetchError",
    "MappingError",
    "NotAMemberError",
    "NotRegisteredError",
    "AgentError",
    "ConfigError",
]
