"""Fix suggestions and human-readable rendering of validation output."""

import json
from typing import Any

from schemacheck.schema.formats import (
    FORMAT_EXAMPLES,
    FORMAT_LABELS,
    FORMAT_TEMPLATES,
    template_for_pattern,
)
from schemacheck.schema.node import SchemaNode

from .models import (
    ErrorKind,
    ValidationErrorModel,
    ValidationResultModel,
    ValidationWarningModel,
)

NO_RULES_MESSAGE = "No additional rules available for this field"


class ErrorFormatter:
    """Maps violations to fix suggestions and renders results as text."""

    @staticmethod
    def fix_suggestion(kind: ErrorKind, constraint: Any, field: str) -> str | None:
        """Return the fix suggestion for a violation.

        Args:
            kind: Violated constraint kind
            constraint: The constraint value (format name, regex, bound, enum list, type)
            field: Dot path of the offending field

        Returns:
            Suggestion text, or None when nothing concrete can be suggested
        """
        if kind == "required":
            return f'Add the required field "{field}" to the payload'
        if kind == "type":
            return f"Change the field type to {constraint}"
        if kind == "format":
            return ErrorFormatter.format_suggestion(str(constraint))
        if kind == "pattern":
            return ErrorFormatter.pattern_suggestion(str(constraint))
        if kind == "enum":
            return f"Change the value to one of the allowed values: {_join(constraint)}"
        if kind == "minLength":
            return f"Value must be at least {constraint} characters long"
        if kind == "maxLength":
            return f"Value must be at most {constraint} characters long"
        if kind == "minimum":
            return f"Value must be at least {constraint}"
        if kind == "maximum":
            return f"Value must be at most {constraint}"
        return None

    @staticmethod
    def format_suggestion(format_name: str) -> str:
        if format_name in FORMAT_TEMPLATES:
            template, example = FORMAT_TEMPLATES[format_name]
            label = "SSN" if format_name == "ssn" else "phone number"
            return f'Provide a valid {label} in format "{template}" (e.g., "{example}")'
        if format_name in FORMAT_LABELS:
            return (
                f"Provide a valid {FORMAT_LABELS[format_name]} "
                f'(e.g., "{FORMAT_EXAMPLES[format_name]}")'
            )
        return f"Provide a valid {format_name} format"

    @staticmethod
    def pattern_suggestion(pattern: str) -> str:
        template = template_for_pattern(pattern)
        if template:
            return f'Use format "{template[0]}" (e.g., "{template[1]}")'
        return f"Ensure the value matches the pattern: {pattern}"

    @staticmethod
    def format_errors(errors: list[ValidationErrorModel]) -> str:
        if not errors:
            return "No errors"

        noun = "error" if len(errors) == 1 else "errors"
        lines = [f"Found {len(errors)} validation {noun}:", ""]
        for i, error in enumerate(errors, 1):
            lines.append(f"{i}. Field: {error.field}")
            lines.append(f"   Error: {error.message}")
            if error.expected is not None:
                lines.append(f"   Expected: {_render_value(error.expected)}")
            if error.received is not None:
                lines.append(f"   Received: {_render_value(error.received)}")
            if error.fix_suggestion:
                lines.append(f"   Fix: {error.fix_suggestion}")
            lines.append("")
        return "\n".join(lines).rstrip()

    @staticmethod
    def format_warnings(warnings: list[ValidationWarningModel]) -> str:
        if not warnings:
            return ""

        noun = "warning" if len(warnings) == 1 else "warnings"
        lines = [f"{len(warnings)} {noun}:", ""]
        for i, warning in enumerate(warnings, 1):
            lines.append(f"{i}. Field: {warning.field}")
            lines.append(f"   {warning.message}")
            if warning.suggestion:
                lines.append(f"   Suggestion: {warning.suggestion}")
            lines.append("")
        return "\n".join(lines).rstrip()

    @staticmethod
    def format_validation_result(result: ValidationResultModel) -> str:
        if result.valid:
            parts = [f"✓ {result.summary}"]
            if result.warnings:
                parts.append(ErrorFormatter.format_warnings(result.warnings))
            return "\n\n".join(parts)

        parts = [
            "✗ Payload validation failed",
            ErrorFormatter.format_errors(result.errors),
        ]
        if result.warnings:
            parts.append(ErrorFormatter.format_warnings(result.warnings))
        return "\n\n".join(parts)

    @staticmethod
    def format_field_rules(node: SchemaNode | None, title: str) -> str:
        """Render the rules of one schema node, one ``Label: value`` per line."""
        lines = [title, ""]
        if node is None:
            lines.append(NO_RULES_MESSAGE)
            return "\n".join(lines)

        if node.type is not None:
            lines.append(f"Type: {node.type.value}")
        if node.nullable:
            lines.append("Nullable: yes")
        if node.description:
            lines.append(f"Description: {node.description}")
        if node.format:
            lines.append(f"Format: {node.format}")
        if node.pattern:
            lines.append(f"Pattern: {node.pattern}")
        if node.enum is not None:
            lines.append(f"Allowed values: {_join(node.enum)}")
        for label, value in (
            ("Minimum length", node.min_length),
            ("Maximum length", node.max_length),
            ("Minimum value", node.minimum),
            ("Maximum value", node.maximum),
            ("Exclusive minimum", node.exclusive_minimum),
            ("Exclusive maximum", node.exclusive_maximum),
            ("Multiple of", node.multiple_of),
            ("Minimum items", node.min_items),
            ("Maximum items", node.max_items),
        ):
            if value is not None:
                lines.append(f"{label}: {value}")
        if node.required:
            lines.append(f"Required fields: {', '.join(node.required)}")
        if node.properties:
            names = list(node.properties)
            lines.append(f"Properties ({len(names)}): {', '.join(names)}")
        if node.items is not None and node.items.type is not None:
            lines.append(f"Items: {node.items.type.value}")
        if node.has_combinator:
            lines.append("Combinators: oneOf/anyOf/allOf/not are not validated")
        if node.deprecated:
            lines.append("Deprecated: yes")
        if node.has_example:
            lines.append(f"Example: {json.dumps(node.example, default=str)}")

        if len(lines) == 2:
            lines.append(NO_RULES_MESSAGE)
        return "\n".join(lines)


def _join(values: Any) -> str:
    if isinstance(values, list):
        return ", ".join(str(v) for v in values)
    return str(values)


def _render_value(value: Any) -> str:
    return json.dumps(value, default=str)
