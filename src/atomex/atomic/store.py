"""Resource stores that load Atomic Data resources.

The exporter depends only on the ``ResourceStore`` protocol, so tests can swap
in an in-memory store. ``HTTPStore`` is the real implementation backed by an
Atomic server.
"""

from __future__ import annotations

import asyncio
from typing import Protocol, runtime_checkable
from urllib.parse import urlparse

import httpx
from loguru import logger

from ..core.config import StoreConfig
from .agent import Agent
from .resource import Resource

JSON_AD = "application/ad+json"


@runtime_checkable
class ResourceStore(Protocol):
    """Protocol for anything that can load resources by subject."""

    async def get_resource(self, subject: str) -> Resource:
        """Load a resource.

        Errors (not found, network failure, invalid body) are reported on the
        returned resource's ``error`` attribute instead of being raised.

        Args:
            subject: Absolute URL of the resource.

        Returns:
            The loaded Resource.
        """
        ...


def origin_of(url: str) -> str:
    """Return ``scheme://host[:port]`` for a URL."""
    parsed = urlparse(url)
    return f"{parsed.scheme}://{parsed.netloc}"


class HTTPStore:
    """Resource store backed by an Atomic server.

    Resources are cached per subject for the lifetime of the store, and
    concurrent requests for the same subject share a single fetch. The number
    of requests in flight is bounded by ``StoreConfig.max_connections``.

    Example:
        async with HTTPStore("https://atomicdata.dev", StoreConfig()) as store:
            resource = await store.get_resource("https://atomicdata.dev/ontology/core")
            print(resource.title)
    """

    def __init__(
        self,
        server_url: str,
        config: StoreConfig | None = None,
        agent: Agent | None = None,
    ) -> None:
        """Initialize HTTP store.

        Args:
            server_url: Base URL of the server. Agent headers are only sent
                to this origin.
            config: Store configuration.
            agent: Optional agent used to sign requests.
        """
        self._server_origin = origin_of(server_url)
        self._config = config or StoreConfig()
        self._agent = agent
        self._client: httpx.AsyncClient | None = None
        self._semaphore: asyncio.Semaphore | None = None
        self._cache: dict[str, asyncio.Task[Resource]] = {}

    async def __aenter__(self) -> "HTTPStore":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close HTTP client and drop pending fetches."""
        for task in self._cache.values():
            if not task.done():
                task.cancel()
        self._cache.clear()
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._config.timeout_seconds,
                follow_redirects=True,
                headers={
                    "User-Agent": self._config.user_agent,
                    "Accept": JSON_AD,
                },
            )
        return self._client

    def _get_semaphore(self) -> asyncio.Semaphore:
        if self._semaphore is None:
            self._semaphore = asyncio.Semaphore(self._config.max_connections)
        return self._semaphore

    async def get_resource(self, subject: str) -> Resource:
        """Load a resource, reusing a cached or in-flight fetch."""
        task = self._cache.get(subject)
        if task is None:
            task = asyncio.ensure_future(self._fetch(subject))
            self._cache[subject] = task
        return await asyncio.shield(task)

    def _headers_for(self, subject: str) -> dict[str, str]:
        if self._agent is None or origin_of(subject) != self._server_origin:
            return {}
        return self._agent.auth_headers(subject)

    async def _fetch(self, subject: str) -> Resource:
        """Fetch a resource over HTTP, retrying server errors and timeouts."""
        client = self._get_client()
        max_retries = self._config.max_retries

        async with self._get_semaphore():
            for attempt in range(max_retries):
                try:
                    logger.debug(f"GET {subject}")
                    response = await client.get(subject, headers=self._headers_for(subject))
                    response.raise_for_status()

                except httpx.HTTPStatusError as e:
                    status = e.response.status_code
                    if status >= 500 and attempt < max_retries - 1:
                        logger.warning(
                            f"HTTP {status} for {subject}, "
                            f"retrying ({attempt + 1}/{max_retries})"
                        )
                        continue
                    return Resource.failed(
                        subject, f"HTTP {status}: {_error_message(e.response)}"
                    )

                except httpx.TimeoutException:
                    if attempt < max_retries - 1:
                        logger.warning(
                            f"Timeout for {subject}, retrying ({attempt + 1}/{max_retries})"
                        )
                        continue
                    return Resource.failed(subject, "Request timed out")

                except httpx.RequestError as e:
                    return Resource.failed(subject, f"Request failed: {e}")

                try:
                    data = response.json()
                except ValueError as e:
                    return Resource.failed(subject, f"Invalid JSON-AD response: {e}")

                return Resource.from_json_ad(subject, data)

        return Resource.failed(subject, "Max retries exceeded")


def _error_message(response: httpx.Response) -> str:
    """Extract a readable error from an error response."""
    try:
        body = response.json()
    except ValueError:
        return response.text.strip() or response.reason_phrase
    if isinstance(body, dict):
        for key, value in body.items():
            if key.endswith("/error") and isinstance(value, str):
                return value
    return response.reason_phrase
