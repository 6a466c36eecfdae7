"""Configuration management for atomex."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import dotenv_values, find_dotenv

from .exceptions import ConfigError


@dataclass
class StoreConfig:
    """HTTP store configuration."""

    timeout_seconds: float = 30.0
    max_retries: int = 3
    # Upper bound on concurrent requests to the server
    max_connections: int = 10
    user_agent: str = "atomex/0.1 (Ontology Exporter)"


@dataclass
class Config:
    """Main application configuration."""

    agent_secret: str | None = None
    store: StoreConfig = field(default_factory=StoreConfig)

    @classmethod
    def from_env(cls, dotenv_path: Path | None = None) -> "Config":
        """Load configuration from environment variables.

        Values from a ``.env`` file (``dotenv_path`` or the one found from the
        current directory) are used as defaults. Variables already present in
        the environment win. The process environment is not modified.

        Args:
            dotenv_path: Optional explicit path to a ``.env`` file.

        Returns:
            Config populated from the environment.

        Raises:
            ConfigError: If a numeric variable cannot be parsed.
        """
        env = {
            key: value
            for key, value in dotenv_values(dotenv_path or find_dotenv(usecwd=True)).items()
            if value is not None
        }
        env.update(os.environ)
        config = cls()

        if secret := env.get("ATOMIC_AGENT"):
            config.agent_secret = secret

        if timeout := env.get("ATOMEX_TIMEOUT"):
            config.store.timeout_seconds = _parse_number("ATOMEX_TIMEOUT", timeout, float)
        if retries := env.get("ATOMEX_MAX_RETRIES"):
            config.store.max_retries = _parse_number("ATOMEX_MAX_RETRIES", retries, int)
        if connections := env.get("ATOMEX_MAX_CONNECTIONS"):
            config.store.max_connections = _parse_number(
                "ATOMEX_MAX_CONNECTIONS", connections, int
            )

        return config


def _parse_number(name: str, raw: str, kind):
    try:
        value = kind(raw)
    except ValueError as e:
        raise ConfigError(f"Invalid value for {name}: {raw!r}") from e
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {raw!r}")
    return value
