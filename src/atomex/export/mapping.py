"""Mapping between absolute subjects and ontology-local ids."""

from __future__ import annotations

from typing import Iterator
from urllib.parse import urlparse

from loguru import logger

from ..core.exceptions import NotAMemberError, NotRegisteredError


class LocalIdMapper:
    """Maps member subjects of one ontology to local ids.

    A member is the ontology root itself or any subject prefixed by
    ``root + "/"``. The root's local id is its URL path without the leading
    slash; every other member's local id is the remainder after the root
    prefix. Because local ids are derived from distinct subjects the mapping
    is injective.

    The table is written only by ``register``. Once all members are
    registered it can be shared by concurrent readers.

    Example:
        >>> mapper = LocalIdMapper("https://x.test/onto")
        >>> mapper.register("https://x.test/onto/Person")
        'Person'
        >>> mapper.rewrite_if_member("https://x.test/onto/Person")
        'Person'
        >>> mapper.rewrite_if_member("https://x.test/ext/Other")
        'https://x.test/ext/Other'
    """

    def __init__(self, root: str):
        """Initialize mapper for an ontology.

        Args:
            root: Subject of the ontology root. A trailing slash is ignored.
        """
        self._subject = root
        self._root = root.rstrip("/")
        self._prefix = self._root + "/"
        self._mapping: dict[str, str] = {}

    @property
    def root(self) -> str:
        """Subject of the ontology root."""
        return self._root

    def register(self, subject: str) -> str:
        """Compute and store the local id of a member subject.

        Registering the same subject again stores the same value.

        Args:
            subject: Member subject.

        Returns:
            The subject's local id.

        Raises:
            NotAMemberError: If the subject does not belong to the ontology.
        """
        local_id = self._to_local_id(subject)
        self._mapping[subject] = local_id
        logger.debug(f"Mapped {subject} -> {local_id}")
        return local_id

    def rewrite_if_member(self, subject: str) -> str:
        """Return the local id of a registered subject, else the subject itself."""
        return self._mapping.get(subject, subject)

    def require_local_id(self, subject: str) -> str:
        """Return the local id of a subject that must already be registered.

        Raises:
            NotRegisteredError: If the subject was never registered.
        """
        try:
            return self._mapping[subject]
        except KeyError:
            raise NotRegisteredError(subject) from None

    def __contains__(self, subject: object) -> bool:
        return subject in self._mapping

    def __len__(self) -> int:
        return len(self._mapping)

    def __iter__(self) -> Iterator[str]:
        return iter(self._mapping)

    def _to_local_id(self, subject: str) -> str:
        if subject in (self._subject, self._root):
            local_id = urlparse(self._root).path.lstrip("/")
            if not local_id:
                raise NotAMemberError(
                    subject,
                    self._root,
                    f"Ontology {subject} has no URL path to derive a localId from",
                )
            return local_id

        if not subject.startswith(self._prefix):
            raise NotAMemberError(subject, self._root)

        local_id = subject[len(self._prefix):]
        if not local_id:
            raise NotAMemberError(subject, self._root)
        return local_id
