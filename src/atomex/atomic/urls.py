"""Well-known Atomic Data property and datatype URLs."""

from __future__ import annotations

from enum import Enum

ID_KEY = "@id"


class properties:
    """Property subjects used by the exporter."""

    PARENT = "https://atomicdata.dev/properties/parent"
    LOCAL_ID = "https://atomicdata.dev/properties/localId"
    LAST_COMMIT = "https://atomicdata.dev/properties/lastCommit"
    DATATYPE = "https://atomicdata.dev/properties/datatype"
    NAME = "https://atomicdata.dev/properties/name"
    SHORTNAME = "https://atomicdata.dev/properties/shortname"
    CLASSES = "https://atomicdata.dev/properties/classes"
    PROPERTIES = "https://atomicdata.dev/properties/properties"
    INSTANCES = "https://atomicdata.dev/properties/instances"


class Datatype(Enum):
    """Datatypes a property can declare.

    Unrecognised or missing datatype URLs resolve to ``UNKNOWN``.
    """

    ATOMIC_URL = "https://atomicdata.dev/datatypes/atomicURL"
    RESOURCE_ARRAY = "https://atomicdata.dev/datatypes/resourceArray"
    STRING = "https://atomicdata.dev/datatypes/string"
    SLUG = "https://atomicdata.dev/datatypes/slug"
    MARKDOWN = "https://atomicdata.dev/datatypes/markdown"
    INTEGER = "https://atomicdata.dev/datatypes/integer"
    FLOAT = "https://atomicdata.dev/datatypes/float"
    BOOLEAN = "https://atomicdata.dev/datatypes/boolean"
    DATE = "https://atomicdata.dev/datatypes/date"
    TIMESTAMP = "https://atomicdata.dev/datatypes/timestamp"
    URI = "https://atomicdata.dev/datatypes/uri"
    JSON = "https://atomicdata.dev/datatypes/json"
    UNKNOWN = "unknown"

    @classmethod
    def from_url(cls, url: object) -> "Datatype":
        """Resolve a datatype URL, falling back to ``UNKNOWN``."""
        if not isinstance(url, str):
            return cls.UNKNOWN
        try:
            return cls(url)
        except ValueError:
            return cls.UNKNOWN

    @property
    def is_reference(self) -> bool:
        """True for datatypes whose values point at other resources."""
        return self in (Datatype.ATOMIC_URL, Datatype.RESOURCE_ARRAY)
