"""Export command for atomex CLI."""

import asyncio
from pathlib import Path
from urllib.parse import urlparse

from loguru import logger

from ...atomic import Agent, HTTPStore, origin_of
from ...core.config import Config
from ...core.exceptions import ConfigError
from ...export import OntologyExporter, write_export


def handle_export(args, config: Config) -> None:
    """Handle the export command.

    Args:
        args: Parsed command arguments (``input_url``, ``output``).
        config: Application configuration.
    """
    asyncio.run(_handle_export_async(args.input_url, Path(args.output), config))


async def _handle_export_async(url: str, output: Path, config: Config) -> None:
    """Export the ontology at ``url`` into ``output``.

    Args:
        url: Subject of the ontology root.
        output: Output file path.
        config: Application configuration.
    """
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"Input must be an absolute http(s) URL, got {url!r}")

    agent = Agent.from_secret(config.agent_secret) if config.agent_secret else None
    if agent is not None:
        logger.debug(f"Authenticating as {agent.subject}")

    async with HTTPStore(origin_of(url), config.store, agent) as store:
        result = await OntologyExporter(store).export(url)

    logger.info(f"Extracting {result.title} to {output}")
    write_export(result.objects, output)
