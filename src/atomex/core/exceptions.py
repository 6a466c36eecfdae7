"""Custom exceptions for atomex."""


class AtomexError(Exception):
    """Base exception for all atomex errors."""

    pass


class ConfigError(AtomexError):
    """Configuration is invalid."""

    pass


class AgentError(AtomexError):
    """Agent secret could not be decoded."""

    pass


class FetchError(AtomexError):
    """The store reported an error for a resource."""

    def __init__(self, subject: str, reason: str):
        """Initialize exception with subject and reason.

        Args:
            subject: Subject of the resource that could not be fetched.
            reason: Error reported by the store.
        """
        self.subject = subject
        self.reason = reason
        super().__init__(f"Could not fetch {subject}: {reason}")


class MappingError(AtomexError):
    """Local id mapping failed."""

    pass


class NotAMemberError(MappingError):
    """Subject is not part of the ontology and cannot get a local id."""

    def __init__(self, subject: str, root: str, reason: str | None = None):
        self.subject = subject
        self.root = root
        message = (
            reason
            or f"Resource {subject} is not a child of {root} and cannot be mapped to a localId"
        )
        super().__init__(message)


class NotRegisteredError(MappingError):
    """Subject was never registered in the mapping."""

    def __init__(self, subject: str):
        self.subject = subject
        super().__init__(f"Subject {subject} not found in mapping")
