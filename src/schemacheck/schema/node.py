"""In-memory representation of a resolved JSON Schema fragment.

Raw schema mappings are parsed once into a tree of :class:`SchemaNode`
dataclasses. Parsing memoizes on the identity of every raw mapping, so a
cyclic document (as produced by an upstream dereferencer that inlines
self-references) becomes a cyclic node graph instead of recursing forever.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class SchemaType(str, Enum):
    """Closed set of schema type tags.

    ``UNKNOWN`` covers any type string outside the JSON Schema set; nodes with
    that tag are accepted permissively by the validator.
    """

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    NULL = "null"
    UNKNOWN = "unknown"

    @classmethod
    def from_tag(cls, tag: Any) -> SchemaType:
        try:
            return cls(tag)
        except ValueError:
            return cls.UNKNOWN


@dataclass(eq=False)
class SchemaNode:
    """One node of a resolved schema."""

    type: SchemaType | None = None
    format: str | None = None
    pattern: str | None = None
    enum: list[Any] | None = None
    description: str | None = None

    # String constraints
    min_length: int | None = None
    max_length: int | None = None

    # Numeric constraints
    minimum: int | float | None = None
    maximum: int | float | None = None
    exclusive_minimum: int | float | None = None
    exclusive_maximum: int | float | None = None
    multiple_of: int | float | None = None

    # Array constraints
    items: SchemaNode | None = None
    min_items: int | None = None
    max_items: int | None = None
    unique_items: bool = False

    # Object constraints
    properties: dict[str, SchemaNode] = field(default_factory=dict)
    required: list[str] = field(default_factory=list)
    additional_properties: bool | SchemaNode | None = None

    # OpenAPI extensions
    nullable: bool = False
    deprecated: bool = False
    example: Any = None
    has_example: bool = False
    default: Any = None
    has_default: bool = False

    # Combinators, only consumed by the example generator
    one_of: list[SchemaNode] = field(default_factory=list)
    any_of: list[SchemaNode] = field(default_factory=list)
    all_of: list[SchemaNode] = field(default_factory=list)
    not_: SchemaNode | None = None

    # A ``$ref`` left in the tree. ``ref_resolved`` is False when a local
    # pointer could not be found in the root document.
    ref: str | None = None
    ref_resolved: bool = True

    # Set when the raw value could not be interpreted as a schema at all
    malformed: str | None = None

    @property
    def has_combinator(self) -> bool:
        return bool(self.one_of or self.any_of or self.all_of or self.not_ is not None)

    def is_required(self, name: str) -> bool:
        return name in self.required

    @classmethod
    def from_dict(cls, data: Any) -> SchemaNode:
        """Parse a raw schema mapping into a node tree."""
        return SchemaParser(data).parse()


class SchemaParser:
    """Builds a :class:`SchemaNode` graph from a raw schema document.

    Local ``$ref`` pointers are resolved against the document root. Anything
    else (remote references, unresolvable pointers) is recorded on the node
    so the validator and the generator can decide how to treat it.
    """

    def __init__(self, root: Any):
        self.root = root
        self._seen: dict[int, SchemaNode] = {}
        self._resolving: set[str] = set()

    def parse(self) -> SchemaNode:
        return self._parse(self.root)

    def _parse(self, raw: Any) -> SchemaNode:
        if isinstance(raw, SchemaNode):
            return raw
        if isinstance(raw, bool):
            # ``true`` accepts anything; ``false`` is not interpretable here
            return SchemaNode() if raw else SchemaNode(malformed="boolean false schema")
        if not isinstance(raw, Mapping):
            return SchemaNode(malformed=f"expected a schema object, got {type(raw).__name__}")

        key = id(raw)
        if key in self._seen:
            return self._seen[key]

        if "$ref" in raw:
            node = self._parse_ref(raw["$ref"])
            self._seen[key] = node
            return node

        node = SchemaNode()
        self._seen[key] = node
        self._fill_type(node, raw)
        self._fill_constraints(node, raw)
        self._fill_children(node, raw)
        return node

    def _parse_ref(self, ref: Any) -> SchemaNode:
        if not isinstance(ref, str):
            return SchemaNode(malformed="$ref must be a string")
        if not ref.startswith("#"):
            logger.debug("Leaving non-local reference %s unresolved", ref)
            return SchemaNode(ref=ref)
        target = resolve_pointer(self.root, ref)
        if target is None:
            return SchemaNode(ref=ref, ref_resolved=False)
        # A target already parsed (or still under construction, for recursive
        # definitions) is shared; it is completed once parsing unwinds.
        if isinstance(target, Mapping) and id(target) in self._seen:
            return self._seen[id(target)]
        # Only a chain of bare $ref mappings can get here twice
        if ref in self._resolving:
            return SchemaNode(ref=ref, ref_resolved=False)
        self._resolving.add(ref)
        try:
            return self._parse(target)
        finally:
            self._resolving.discard(ref)

    def _fill_type(self, node: SchemaNode, raw: Mapping[str, Any]) -> None:
        type_tag = raw.get("type")
        if isinstance(type_tag, list):
            non_null = [t for t in type_tag if t != "null"]
            if "null" in type_tag:
                node.nullable = True
            if len(non_null) == 1:
                node.type = SchemaType.from_tag(non_null[0])
            elif not non_null:
                node.type = SchemaType.NULL
            else:
                # Multiple alternatives behave like an ``anyOf``
                node.any_of = [self._parse({**raw, "type": t}) for t in non_null]
        elif type_tag is not None:
            node.type = SchemaType.from_tag(type_tag)
        elif "properties" in raw:
            node.type = SchemaType.OBJECT
        elif "items" in raw:
            node.type = SchemaType.ARRAY

        node.nullable = node.nullable or raw.get("nullable") is True

    def _fill_constraints(self, node: SchemaNode, raw: Mapping[str, Any]) -> None:
        node.format = _as_str(raw.get("format"))
        node.pattern = _as_str(raw.get("pattern"))
        node.description = _as_str(raw.get("description"))

        enum = raw.get("enum")
        if isinstance(enum, list):
            node.enum = list(enum)
        elif "const" in raw:
            node.enum = [raw["const"]]

        node.min_length = _as_number(raw.get("minLength"))
        node.max_length = _as_number(raw.get("maxLength"))
        node.minimum = _as_number(raw.get("minimum"))
        node.maximum = _as_number(raw.get("maximum"))
        node.multiple_of = _as_number(raw.get("multipleOf"))
        node.min_items = _as_number(raw.get("minItems"))
        node.max_items = _as_number(raw.get("maxItems"))
        node.unique_items = raw.get("uniqueItems") is True

        # Draft-04 expresses exclusive bounds as booleans on minimum/maximum
        exclusive_min = raw.get("exclusiveMinimum")
        if exclusive_min is True:
            node.exclusive_minimum, node.minimum = node.minimum, None
        elif exclusive_min is not False:
            node.exclusive_minimum = _as_number(exclusive_min)
        exclusive_max = raw.get("exclusiveMaximum")
        if exclusive_max is True:
            node.exclusive_maximum, node.maximum = node.maximum, None
        elif exclusive_max is not False:
            node.exclusive_maximum = _as_number(exclusive_max)

        node.deprecated = raw.get("deprecated") is True
        if "example" in raw:
            node.example, node.has_example = raw["example"], True
        elif isinstance(raw.get("examples"), list) and raw["examples"]:
            node.example, node.has_example = raw["examples"][0], True
        if "default" in raw:
            node.default, node.has_default = raw["default"], True

        required = raw.get("required")
        if isinstance(required, list):
            node.required = [name for name in required if isinstance(name, str)]

    def _fill_children(self, node: SchemaNode, raw: Mapping[str, Any]) -> None:
        properties = raw.get("properties")
        if isinstance(properties, Mapping):
            node.properties = {str(k): self._parse(v) for k, v in properties.items()}
        elif properties is not None:
            node.malformed = "properties must be an object"

        items = raw.get("items")
        if isinstance(items, list):
            # Tuple validation: the first entry stands in for every element
            node.items = self._parse(items[0]) if items else None
        elif items is not None:
            node.items = self._parse(items)

        additional = raw.get("additionalProperties")
        if isinstance(additional, bool):
            node.additional_properties = additional
        elif isinstance(additional, Mapping):
            node.additional_properties = self._parse(additional)

        for keyword, attr in (("oneOf", "one_of"), ("anyOf", "any_of"), ("allOf", "all_of")):
            options = raw.get(keyword)
            if isinstance(options, list):
                setattr(node, attr, [self._parse(option) for option in options])
        if "not" in raw:
            node.not_ = self._parse(raw["not"])


def resolve_pointer(document: Any, ref: str) -> Any:
    """Resolve a local JSON pointer (``#/a/b``) inside ``document``.

    Returns None when any segment is missing.
    """
    if ref in ("#", "#/"):
        return document
    if not ref.startswith("#/"):
        return None

    current = document
    for raw_segment in ref[2:].split("/"):
        segment = raw_segment.replace("~1", "/").replace("~0", "~")
        if isinstance(current, Mapping) and segment in current:
            current = current[segment]
        elif isinstance(current, list) and segment.isdigit() and int(segment) < len(current):
            current = current[int(segment)]
        else:
            return None
    return current


def _as_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _as_number(value: Any) -> Any:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value
