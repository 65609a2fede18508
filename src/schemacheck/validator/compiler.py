"""Compile a SchemaNode tree into a tree of check closures.

Every node becomes one ``Check`` callable that inspects a value, reports
violations into a :class:`Collector` and recurses into the compiled checks
of its children. Nothing is generated or evaluated as source code.
"""

import logging
import re
from collections.abc import Callable, Mapping
from typing import Any

from schemacheck.schema.formats import check_format
from schemacheck.schema.node import SchemaNode, SchemaType
from schemacheck.schema.paths import FieldPath

from .formatter import ErrorFormatter
from .models import (
    ErrorKind,
    ValidationErrorModel,
    ValidationResultModel,
    ValidationWarningModel,
    WarningKind,
)

logger = logging.getLogger(__name__)

HINT_WORDS = ("recommended", "should")


class SchemaError(ValueError):
    """Raised when a schema cannot be interpreted at all."""

    pass


class Collector:
    """Accumulates errors and warnings for one validation pass."""

    def __init__(self) -> None:
        self.errors: list[ValidationErrorModel] = []
        self.warnings: list[ValidationWarningModel] = []

    def error(
        self,
        path: FieldPath,
        kind: ErrorKind,
        message: str,
        expected: Any = None,
        received: Any = None,
    ) -> None:
        field = path.dot
        self.errors.append(
            ValidationErrorModel(
                field=field,
                path=path.pointer,
                message=message,
                kind=kind,
                expected=expected,
                received=received,
                fix_suggestion=ErrorFormatter.fix_suggestion(kind, expected, field),
            )
        )

    def warning(
        self, path: FieldPath, kind: WarningKind, message: str, suggestion: str | None
    ) -> None:
        self.warnings.append(
            ValidationWarningModel(
                field=path.dot, kind=kind, message=message, suggestion=suggestion
            )
        )

    def result(self) -> ValidationResultModel:
        return ValidationResultModel(
            valid=not self.errors,
            errors=self.errors,
            warnings=self.warnings,
            summary=summarize(len(self.errors)),
        )


Check = Callable[[Any, FieldPath, Collector], None]


def summarize(error_count: int) -> str:
    if error_count == 0:
        return "Payload is valid"
    noun = "error" if error_count == 1 else "errors"
    return f"Found {error_count} validation {noun}"


def json_type_name(value: Any) -> str:
    """Name of the JSON type of a Python value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, int) or (isinstance(value, float) and value.is_integer())


def json_equal(left: Any, right: Any) -> bool:
    """JSON equality: booleans never equal numbers, 1 equals 1.0."""
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if is_number(left) and is_number(right):
        return bool(left == right)
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        return left.keys() == right.keys() and all(json_equal(left[k], right[k]) for k in left)
    if isinstance(left, (list, tuple)) and isinstance(right, (list, tuple)):
        return len(left) == len(right) and all(json_equal(a, b) for a, b in zip(left, right))
    return type(left) is type(right) and bool(left == right)


TYPE_MATCHERS: dict[SchemaType, Callable[[Any], bool]] = {
    SchemaType.OBJECT: lambda value: isinstance(value, Mapping),
    SchemaType.ARRAY: lambda value: isinstance(value, (list, tuple)),
    SchemaType.STRING: lambda value: isinstance(value, str),
    SchemaType.NUMBER: is_number,
    SchemaType.INTEGER: is_integer,
    SchemaType.BOOLEAN: lambda value: isinstance(value, bool),
    SchemaType.NULL: lambda value: value is None,
}


def _accept(value: Any, path: FieldPath, sink: Collector) -> None:
    return None


class SchemaCompiler:
    """Compiles SchemaNode trees into check closures.

    A compiler instance memoizes compiled nodes by identity, so a cyclic
    node graph compiles to a cyclic closure graph. Instances are meant to be
    used for a single compilation.
    """

    def __init__(self, collect_warnings: bool = True):
        self.collect_warnings = collect_warnings
        self._compiled: dict[int, Check] = {}

    def compile(self, node: SchemaNode) -> Check:
        key = id(node)
        if key in self._compiled:
            return self._compiled[key]

        slot: list[Check] = []

        def deferred(value: Any, path: FieldPath, sink: Collector) -> None:
            slot[0](value, path, sink)

        self._compiled[key] = deferred
        check = self._build(node)
        slot.append(check)
        self._compiled[key] = check
        return check

    def _build(self, node: SchemaNode) -> Check:
        if node.malformed:
            raise SchemaError(node.malformed)
        if node.ref is not None:
            if not node.ref_resolved:
                raise SchemaError(f"Unresolvable reference: {node.ref}")
            logger.debug("Accepting subtree behind external reference %s", node.ref)
            return _accept
        if node.has_combinator or node.type == SchemaType.UNKNOWN:
            # Combinators and unknown types are not validated
            return _accept

        matches = TYPE_MATCHERS.get(node.type) if node.type is not None else None
        constraints = self._constraints(node)
        nullable = node.nullable
        expected_type = node.type.value if node.type is not None else None

        def check(value: Any, path: FieldPath, sink: Collector) -> None:
            if value is None and nullable:
                return
            if matches is not None and not matches(value):
                received = json_type_name(value)
                sink.error(
                    path,
                    "type",
                    f"Invalid type: expected {expected_type}, received {received}",
                    expected=expected_type,
                    received=received,
                )
                return
            for constraint in constraints:
                constraint(value, path, sink)

        return check

    def _constraints(self, node: SchemaNode) -> list[Check]:
        constraints: list[Check] = []
        constraints.extend(self._string_constraints(node))
        if node.enum is not None:
            constraints.append(_enum_check(list(node.enum)))
        constraints.extend(_numeric_constraints(node))
        constraints.extend(self._array_constraints(node))
        if node.properties or node.required or node.additional_properties is not None:
            constraints.append(self._object_check(node))
        return constraints

    def _string_constraints(self, node: SchemaNode) -> list[Check]:
        constraints: list[Check] = []

        if node.format:
            format_name = node.format

            def check_string_format(value: Any, path: FieldPath, sink: Collector) -> None:
                if isinstance(value, str) and not check_format(format_name, value):
                    sink.error(
                        path,
                        "format",
                        f"Invalid {format_name} format",
                        expected=format_name,
                        received=value,
                    )

            constraints.append(check_string_format)

        if node.pattern is not None:
            pattern = node.pattern
            try:
                regex = re.compile(pattern)
            except re.error as e:
                raise SchemaError(f"Invalid pattern {pattern!r}: {e}") from e

            def check_pattern(value: Any, path: FieldPath, sink: Collector) -> None:
                if isinstance(value, str) and regex.search(value) is None:
                    sink.error(
                        path,
                        "pattern",
                        f"Value does not match pattern: {pattern}",
                        expected=pattern,
                        received=value,
                    )

            constraints.append(check_pattern)

        min_length, max_length = node.min_length, node.max_length
        if min_length is not None or max_length is not None:

            def check_length(value: Any, path: FieldPath, sink: Collector) -> None:
                if not isinstance(value, str):
                    return
                if min_length is not None and len(value) < min_length:
                    sink.error(
                        path,
                        "minLength",
                        f"String must be at least {min_length} characters long",
                        expected=min_length,
                        received=len(value),
                    )
                if max_length is not None and len(value) > max_length:
                    sink.error(
                        path,
                        "maxLength",
                        f"String must be at most {max_length} characters long",
                        expected=max_length,
                        received=len(value),
                    )

            constraints.append(check_length)

        return constraints

    def _array_constraints(self, node: SchemaNode) -> list[Check]:
        constraints: list[Check] = []
        min_items, max_items = node.min_items, node.max_items

        if min_items is not None or max_items is not None or node.unique_items:
            unique = node.unique_items

            def check_array_bounds(value: Any, path: FieldPath, sink: Collector) -> None:
                if not isinstance(value, (list, tuple)):
                    return
                if min_items is not None and len(value) < min_items:
                    sink.error(
                        path,
                        "minLength",
                        f"Array must have at least {min_items} items",
                        expected=min_items,
                        received=len(value),
                    )
                if max_items is not None and len(value) > max_items:
                    sink.error(
                        path,
                        "maxLength",
                        f"Array must have at most {max_items} items",
                        expected=max_items,
                        received=len(value),
                    )
                if unique:
                    if any(
                        json_equal(item, other)
                        for i, item in enumerate(value)
                        for other in value[i + 1 :]
                    ):
                        sink.error(path, "custom", "Array must contain unique items")

            constraints.append(check_array_bounds)

        if node.items is not None:
            item_check = self.compile(node.items)

            def check_items(value: Any, path: FieldPath, sink: Collector) -> None:
                if isinstance(value, (list, tuple)):
                    for i, item in enumerate(value):
                        item_check(item, path.child(i), sink)

            constraints.append(check_items)

        return constraints

    def _object_check(self, node: SchemaNode) -> Check:
        properties = [(name, child, self.compile(child)) for name, child in node.properties.items()]
        required = set(node.required)
        undeclared_required = [name for name in node.required if name not in node.properties]
        declared = set(node.properties)
        collect_warnings = self.collect_warnings

        additional = node.additional_properties
        additional_check: Check | None = None
        if isinstance(additional, SchemaNode):
            additional_check = self.compile(additional)

        def check_object(value: Any, path: FieldPath, sink: Collector) -> None:
            if not isinstance(value, Mapping):
                return

            for name, child, child_check in properties:
                child_path = path.child(name)
                if name in value:
                    child_check(value[name], child_path, sink)
                    if collect_warnings and child.deprecated:
                        sink.warning(
                            child_path,
                            "deprecated",
                            f'Field "{child_path.dot}" is deprecated',
                            child.description,
                        )
                elif name in required:
                    _missing(child_path, sink)
                elif collect_warnings and _has_hint(child.description):
                    sink.warning(
                        child_path,
                        "optional",
                        f'Optional field "{child_path.dot}" is not provided but may be useful',
                        child.description,
                    )

            for name in undeclared_required:
                if name not in value:
                    _missing(path.child(name), sink)

            for key in value:
                if key in declared:
                    continue
                if additional is False:
                    sink.error(
                        path.child(str(key)),
                        "custom",
                        f"Unexpected property: {key}",
                        received=key,
                    )
                elif additional_check is not None:
                    additional_check(value[key], path.child(str(key)), sink)

        return check_object


def _missing(path: FieldPath, sink: Collector) -> None:
    sink.error(path, "required", f"Missing required field: {path.dot}")


def _has_hint(description: str | None) -> bool:
    if not description:
        return False
    lowered = description.lower()
    return any(word in lowered for word in HINT_WORDS)


def _enum_check(allowed: list[Any]) -> Check:
    def check_enum(value: Any, path: FieldPath, sink: Collector) -> None:
        if not any(json_equal(value, option) for option in allowed):
            sink.error(
                path,
                "enum",
                f"Invalid enum value. Allowed values: {', '.join(str(v) for v in allowed)}",
                expected=allowed,
                received=value,
            )

    return check_enum


def _numeric_constraints(node: SchemaNode) -> list[Check]:
    bounds: list[tuple[ErrorKind, Any, Callable[[Any, Any], bool], str]] = []
    if node.minimum is not None:
        bounds.append(("minimum", node.minimum, lambda v, b: v < b, ">="))
    if node.exclusive_minimum is not None:
        bounds.append(("minimum", node.exclusive_minimum, lambda v, b: v <= b, ">"))
    if node.maximum is not None:
        bounds.append(("maximum", node.maximum, lambda v, b: v > b, "<="))
    if node.exclusive_maximum is not None:
        bounds.append(("maximum", node.exclusive_maximum, lambda v, b: v >= b, "<"))

    constraints: list[Check] = []
    if bounds:

        def check_bounds(value: Any, path: FieldPath, sink: Collector) -> None:
            if not is_number(value):
                return
            for kind, bound, violates, symbol in bounds:
                if violates(value, bound):
                    sink.error(
                        path,
                        kind,
                        f"Value must be {symbol} {bound}",
                        expected=bound,
                        received=value,
                    )

        constraints.append(check_bounds)

    multiple_of = node.multiple_of
    if multiple_of:

        def check_multiple(value: Any, path: FieldPath, sink: Collector) -> None:
            if not is_number(value):
                return
            quotient = value / multiple_of
            if abs(quotient - round(quotient)) > 1e-9:
                sink.error(
                    path,
                    "custom",
                    f"Value must be multiple of {multiple_of}",
                    expected=multiple_of,
                    received=value,
                )

        constraints.append(check_multiple)

    return constraints
