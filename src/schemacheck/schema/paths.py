"""Field paths shared by the validator and the field-rules lookup.

A dot path such as ``data.items.0.id`` mixes object keys and array indexes.
It is parsed once into typed segments so both notations used in reports
(dot fields and JSON pointers) come from a single representation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final, Union

from .node import SchemaNode, SchemaType


@dataclass(frozen=True)
class Name:
    """Object property segment."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Index:
    """Array element segment."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


Segment = Union[Name, Index]


@dataclass(frozen=True)
class FieldPath:
    """Immutable sequence of path segments."""

    segments: tuple[Segment, ...] = ()

    @classmethod
    def parse(cls, dot_path: str) -> FieldPath:
        """Parse a dot path. Non-negative integer segments become indexes."""
        if not dot_path:
            return cls()
        segments: list[Segment] = []
        for part in dot_path.split("."):
            if part.isdigit():
                segments.append(Index(int(part)))
            else:
                segments.append(Name(part))
        return cls(tuple(segments))

    def child(self, segment: str | int) -> FieldPath:
        if isinstance(segment, int):
            return FieldPath(self.segments + (Index(segment),))
        return FieldPath(self.segments + (Name(segment),))

    @property
    def dot(self) -> str:
        """Dot notation; the empty path renders as ``root``."""
        if not self.segments:
            return "root"
        return ".".join(str(s) for s in self.segments)

    @property
    def pointer(self) -> str:
        """JSON pointer notation, ``/`` for the empty path."""
        escaped = (str(s).replace("~", "~0").replace("/", "~1") for s in self.segments)
        return "/" + "/".join(escaped)

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return self.dot


class _Unresolved:
    """Sentinel returned when a field path does not exist in a schema."""

    _instance: _Unresolved | None = None

    def __new__(cls) -> _Unresolved:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNRESOLVED"


UNRESOLVED: Final = _Unresolved()


def get_field_schema(schema: Any, dot_path: str | FieldPath) -> SchemaNode | _Unresolved:
    """Fetch the sub-schema of one field.

    Args:
        schema: A SchemaNode or a raw schema mapping
        dot_path: Dot-notation path (``data.attributes.ssn``, ``items.0.id``)

    Returns:
        The SchemaNode at that path, or ``UNRESOLVED`` if any segment cannot
        be followed. Never raises.
    """
    node = schema if isinstance(schema, SchemaNode) else SchemaNode.from_dict(schema)
    path = dot_path if isinstance(dot_path, FieldPath) else FieldPath.parse(dot_path)

    current = node
    for segment in path.segments:
        if current.malformed or (current.ref is not None and not current.ref_resolved):
            return UNRESOLVED
        if isinstance(segment, Index):
            if current.type == SchemaType.ARRAY and current.items is not None:
                current = current.items
                continue
            # A numeric property name on an object schema is still a name
            segment = Name(str(segment.value))
        if segment.value in current.properties:
            current = current.properties[segment.value]
        else:
            return UNRESOLVED
    return current
