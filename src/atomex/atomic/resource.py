"""Resource model for JSON-AD documents fetched from an Atomic server."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from . import urls
from .urls import ID_KEY, Datatype


@dataclass
class Resource:
    """A single Atomic Data resource.

    A resource either carries its property/value set or, when the store could
    not load it, an ``error`` message. Stores never raise for a missing or
    broken resource; callers decide whether an error is fatal.

    Attributes:
        subject: Absolute URL identifying the resource.
        propvals: Property URL -> value, in the order the server sent them.
        error: Error reported by the store, or None.
    """

    subject: str
    propvals: dict[str, Any] = field(default_factory=dict)
    error: str | None = None

    @classmethod
    def from_json_ad(cls, subject: str, data: Any) -> "Resource":
        """Build a resource from a decoded JSON-AD object.

        Nested resources that carry an ``@id`` are collapsed to their subject,
        so reference values are always plain strings.

        Args:
            subject: Subject the resource was requested as.
            data: Decoded JSON body.

        Returns:
            Parsed Resource, or an errored Resource if the body is not an object.
        """
        if not isinstance(data, dict):
            return cls.failed(subject, "Response is not a JSON-AD object")

        propvals = {key: _collapse_nested(value) for key, value in data.items()}
        resolved = propvals.get(ID_KEY)
        return cls(
            subject=resolved if isinstance(resolved, str) else subject,
            propvals=propvals,
        )

    @classmethod
    def failed(cls, subject: str, error: str) -> "Resource":
        """Create a resource that represents a failed fetch."""
        return cls(subject=subject, error=error)

    def get_propvals(self) -> dict[str, Any]:
        """Return the property/value set in server order."""
        return dict(self.propvals)

    def get(self, prop: str, default: Any = None) -> Any:
        """Get a single property value."""
        return self.propvals.get(prop, default)

    @property
    def title(self) -> str:
        """Human readable name, falling back to the subject."""
        for prop in (urls.properties.NAME, urls.properties.SHORTNAME):
            value = self.propvals.get(prop)
            if isinstance(value, str) and value:
                return value
        return self.subject

    @property
    def classes(self) -> list[str]:
        """Class subjects of an ontology resource."""
        return self._subject_list(urls.properties.CLASSES)

    @property
    def properties(self) -> list[str]:
        """Property subjects of an ontology resource."""
        return self._subject_list(urls.properties.PROPERTIES)

    @property
    def instances(self) -> list[str]:
        """Instance subjects of an ontology resource."""
        return self._subject_list(urls.properties.INSTANCES)

    @property
    def datatype(self) -> Datatype:
        """Declared datatype of a property resource."""
        return Datatype.from_url(self.propvals.get(urls.properties.DATATYPE))

    def _subject_list(self, prop: str) -> list[str]:
        value = self.propvals.get(prop)
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, str)]


def _collapse_nested(value: Any) -> Any:
    if isinstance(value, dict) and isinstance(value.get(ID_KEY), str):
        return value[ID_KEY]
    if isinstance(value, list):
        return [_collapse_nested(item) for item in value]
    return value
