"""Atomic Data agents and request signing.

An agent secret is a base64 encoded JSON object holding the agent's subject
and its Ed25519 private key (itself base64). Requests are authenticated by
signing ``"{subject} {timestamp}"`` where ``subject`` is the requested URL and
``timestamp`` is milliseconds since the epoch.
"""

from __future__ import annotations

import base64
import binascii
import json
import time
from dataclasses import dataclass

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from ..core.exceptions import AgentError


@dataclass(frozen=True)
class Agent:
    """An Atomic Data agent able to sign requests.

    Attributes:
        subject: URL of the agent resource.
        private_key: Base64 encoded Ed25519 private key seed.
    """

    subject: str
    private_key: str

    @classmethod
    def from_secret(cls, secret: str) -> "Agent":
        """Decode an agent secret.

        Args:
            secret: Base64 encoded JSON with ``privateKey`` and ``subject``.

        Returns:
            Agent instance.

        Raises:
            AgentError: If the secret is malformed.
        """
        try:
            payload = json.loads(base64.b64decode(secret.strip(), validate=True))
        except (binascii.Error, ValueError) as e:
            raise AgentError(f"Agent secret is not valid base64 JSON: {e}") from e

        if not isinstance(payload, dict):
            raise AgentError("Agent secret must decode to a JSON object")

        subject = payload.get("subject")
        private_key = payload.get("privateKey")
        if not isinstance(subject, str) or not isinstance(private_key, str):
            raise AgentError("Agent secret must contain 'subject' and 'privateKey'")

        agent = cls(subject=subject, private_key=private_key)
        # Fail early on a key that cannot be loaded
        agent._signing_key()
        return agent

    @property
    def public_key(self) -> str:
        """Base64 encoded Ed25519 public key."""
        raw = self._signing_key().public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )
        return base64.b64encode(raw).decode("ascii")

    def sign(self, message: str) -> str:
        """Sign a message and return the base64 signature."""
        signature = self._signing_key().sign(message.encode("utf-8"))
        return base64.b64encode(signature).decode("ascii")

    def auth_headers(self, subject: str, timestamp_ms: int | None = None) -> dict[str, str]:
        """Build authentication headers for a request to ``subject``.

        Args:
            subject: URL being requested.
            timestamp_ms: Override for the signing timestamp.

        Returns:
            Header name -> value mapping.
        """
        if timestamp_ms is None:
            timestamp_ms = int(time.time() * 1000)
        return {
            "x-atomic-public-key": self.public_key,
            "x-atomic-signature": self.sign(f"{subject} {timestamp_ms}"),
            "x-atomic-timestamp": str(timestamp_ms),
            "x-atomic-agent": self.subject,
        }

    def _signing_key(self) -> Ed25519PrivateKey:
        try:
            seed = base64.b64decode(self.private_key)
            return Ed25519PrivateKey.from_private_bytes(seed)
        except (binascii.Error, ValueError) as e:
            raise AgentError(f"Invalid agent private key: {e}") from e
