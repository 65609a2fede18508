"""Synthesize example payloads from a schema."""

import copy
import logging
import math
import re
from collections.abc import Callable
from datetime import date, datetime, time
from typing import Any

from schemacheck.schema.formats import FORMAT_EXAMPLES, check_format, template_for_pattern
from schemacheck.schema.node import SchemaNode, SchemaType

from .models import ExampleOptionsModel
from .patterns import synthesize

logger = logging.getLogger(__name__)

SAMPLE_STRING = "string"

# Fallbacks for tight maxLength bounds
SHORT_FORMAT_EXAMPLES = {
    "email": "a@b.co",
    "uri": "http://a.co",
    "url": "http://a.co",
}


class ExampleGenerator:
    """Walks a SchemaNode graph and builds a representative JSON value.

    Every descent (object property, array item, combinator option) increases
    the depth; at ``options.max_depth`` objects become ``{}``, arrays ``[]``
    and everything else ``None``. That bound is what keeps self-referential
    schemas finite.
    """

    def __init__(self, options: ExampleOptionsModel | None = None):
        self.options = options or ExampleOptionsModel()

    def generate(self, node: SchemaNode, depth: int = 0) -> Any:
        if node.malformed:
            return None
        if node.ref is not None:
            return f"<unresolved reference: {node.ref}>"
        if node.has_example:
            return to_json_value(node.example)
        if node.has_default:
            return to_json_value(node.default)
        if node.enum:
            return to_json_value(node.enum[0])

        if node.one_of or node.any_of or node.all_of:
            return self._combinator(node, depth)

        if node.type == SchemaType.OBJECT:
            return self._object(node, depth)
        if node.type == SchemaType.ARRAY:
            return self._array(node, depth)
        if node.type == SchemaType.STRING:
            return self._string(node)
        if node.type == SchemaType.INTEGER:
            return self._number(node, integral=True)
        if node.type == SchemaType.NUMBER:
            return self._number(node, integral=False)
        if node.type == SchemaType.BOOLEAN:
            return True
        return None

    def _cut(self, depth: int) -> bool:
        if depth >= self.options.max_depth:
            logger.debug("Example generation reached max depth %d", self.options.max_depth)
            return True
        return False

    def _combinator(self, node: SchemaNode, depth: int) -> Any:
        if self._cut(depth):
            return None
        if node.one_of:
            return self.generate(node.one_of[0], depth + 1)
        if node.any_of:
            return self.generate(node.any_of[0], depth + 1)
        return self.generate(merge_all_of(node), depth + 1)

    def _object(self, node: SchemaNode, depth: int) -> dict[str, Any]:
        if self._cut(depth):
            return {}

        result: dict[str, Any] = {}
        for name, child in node.properties.items():
            required = node.is_required(name)
            if self.options.required_only and not required:
                continue
            if not name and not required:
                continue
            result[name] = self.generate(child, depth + 1)

        for name in node.required:
            if name not in result:
                extra = node.additional_properties
                if isinstance(extra, SchemaNode):
                    result[name] = self.generate(extra, depth + 1)
                else:
                    result[name] = None
        return result

    def _array(self, node: SchemaNode, depth: int) -> list[Any]:
        if self._cut(depth) or node.items is None:
            return []

        count = max(1, node.min_items or 0)
        if node.max_items is not None:
            count = min(count, node.max_items)
        if count == 0:
            return []
        item = self.generate(node.items, depth + 1)
        return [copy.deepcopy(item) for _ in range(count)]

    def _string(self, node: SchemaNode) -> str:
        if node.pattern:
            return _string_for_pattern(node.pattern, node.min_length, node.max_length)
        if node.format in FORMAT_EXAMPLES:
            return _string_for_format(node.format, node.min_length, node.max_length)
        return fit_length(SAMPLE_STRING, node.min_length, node.max_length) or SAMPLE_STRING

    def _number(self, node: SchemaNode, integral: bool) -> int | float:
        value: int | float = 0
        if node.minimum is not None:
            value = node.minimum
        elif node.exclusive_minimum is not None:
            value = node.exclusive_minimum + 1
        elif node.maximum is not None:
            value = node.maximum
        elif node.exclusive_maximum is not None:
            value = node.exclusive_maximum - 1

        if node.exclusive_maximum is not None and value >= node.exclusive_maximum:
            lower = node.minimum if node.minimum is not None else node.exclusive_minimum
            if lower is not None:
                value = (lower + node.exclusive_maximum) / 2
            else:
                value = node.exclusive_maximum - 1
        if node.maximum is not None and value > node.maximum:
            value = node.maximum

        if node.multiple_of:
            value = math.ceil(value / node.multiple_of) * node.multiple_of

        if integral:
            result = math.ceil(value)
            if node.maximum is not None and result > node.maximum:
                result = math.floor(node.maximum)
            if node.exclusive_maximum is not None and result >= node.exclusive_maximum:
                result = math.ceil(node.exclusive_maximum) - 1
            return int(result)
        return float(value)


def generate_example(
    schema: Any, options: ExampleOptionsModel | None = None, depth: int = 0
) -> Any:
    """Generate an example payload for ``schema``.

    Args:
        schema: A SchemaNode or a raw, dereferenced JSON Schema mapping
        options: Generation options (required-only mode, depth bound)
        depth: Starting depth, for callers generating a subtree

    Returns:
        A JSON-serializable value. Never raises for unsupported constructs;
        they degrade to placeholders.
    """
    if schema is None:
        return None
    node = schema if isinstance(schema, SchemaNode) else SchemaNode.from_dict(schema)
    return ExampleGenerator(options).generate(node, depth)


def merge_all_of(node: SchemaNode) -> SchemaNode:
    """Merge the ``allOf`` parts of a node into a single node.

    Properties and required names are concatenated in declaration order;
    for scalar keywords the first part that sets them wins.
    """
    merged = SchemaNode()
    for part in _flatten_all_of(node, set()):
        if merged.type is None and part.type is not None:
            merged.type = part.type
        for name, child in part.properties.items():
            merged.properties.setdefault(name, child)
        for name in part.required:
            if name not in merged.required:
                merged.required.append(name)
        for attr in (
            "format",
            "pattern",
            "enum",
            "items",
            "min_length",
            "max_length",
            "minimum",
            "maximum",
            "exclusive_minimum",
            "exclusive_maximum",
            "multiple_of",
            "min_items",
            "max_items",
            "additional_properties",
        ):
            if getattr(merged, attr) is None and getattr(part, attr) is not None:
                setattr(merged, attr, getattr(part, attr))
        if not merged.one_of and part.one_of:
            merged.one_of = part.one_of
        if not merged.any_of and part.any_of:
            merged.any_of = part.any_of
    if merged.type is None and merged.properties:
        merged.type = SchemaType.OBJECT
    return merged


def _flatten_all_of(node: SchemaNode, seen: set[int]) -> list[SchemaNode]:
    if id(node) in seen:
        return []
    seen.add(id(node))
    parts: list[SchemaNode] = [node] if node.type is not None or node.properties else []
    for part in node.all_of:
        parts.extend(_flatten_all_of(part, seen))
    return parts


def fit_length(
    value: str,
    min_length: int | None,
    max_length: int | None,
    accepts: Callable[[str], bool] | None = None,
) -> str | None:
    """Stretch or trim ``value`` into the length bounds.

    Padding is tried in a few shapes (trailing ``x``, repeating the last
    character, widening the local part of an address) and the first
    candidate that ``accepts`` approves wins. Returns None when none does.
    """
    accepts = accepts or (lambda candidate: True)
    low = int(min_length) if min_length is not None else 0
    high = int(max_length) if max_length is not None else None
    if high is not None and high < low:
        return None

    if len(value) < low:
        missing = low - len(value)
        candidates = [value + "x" * missing]
        if value:
            candidates.append(value + value[-1] * missing)
        if "@" in value:
            local, _, domain = value.partition("@")
            candidates.append(f"{local}{'x' * missing}@{domain}")
    elif high is not None and len(value) > high:
        candidates = [value[:high]]
    else:
        candidates = [value]

    for candidate in candidates:
        if accepts(candidate):
            return candidate
    return None


def _string_for_pattern(
    pattern: str, min_length: int | None = None, max_length: int | None = None
) -> str:
    placeholder = f"<string matching {pattern}>"
    try:
        regex = re.compile(pattern)
    except re.error:
        return placeholder

    def matches(candidate: str) -> bool:
        return regex.search(candidate) is not None

    candidates = []
    template = template_for_pattern(pattern)
    if template:
        candidates.append(template[1])
    synthesized = synthesize(pattern)
    if synthesized is not None:
        candidates.append(synthesized)

    for candidate in candidates:
        fitted = fit_length(candidate, min_length, max_length, matches)
        if fitted is not None:
            return fitted
    logger.debug("Could not synthesize a string for pattern %s", pattern)
    return placeholder


def _string_for_format(
    format_name: str, min_length: int | None = None, max_length: int | None = None
) -> str:
    def valid(candidate: str) -> bool:
        return check_format(format_name, candidate)

    for candidate in (FORMAT_EXAMPLES[format_name], SHORT_FORMAT_EXAMPLES.get(format_name)):
        if candidate is None:
            continue
        fitted = fit_length(candidate, min_length, max_length, valid)
        if fitted is not None:
            return fitted
    logger.debug("No %s example fits the length bounds", format_name)
    return FORMAT_EXAMPLES[format_name]


def to_json_value(obj: Any) -> Any:
    """Convert schema-supplied literals (examples, defaults) to JSON values."""
    if isinstance(obj, dict):
        return {str(k): to_json_value(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple, set, frozenset)):
        return [to_json_value(item) for item in obj]
    if isinstance(obj, (datetime, date, time)):
        return obj.isoformat()
    if obj is None or isinstance(obj, (str, int, float, bool)):
        return obj
    return str(obj)
