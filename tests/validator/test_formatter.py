"""Tests for fix suggestions and text rendering."""

import pytest

from schemacheck.schema.node import SchemaNode
from schemacheck.validator import (
    NO_RULES_MESSAGE,
    ErrorFormatter,
    ValidationErrorModel,
    ValidationResultModel,
    ValidationWarningModel,
    validate,
)


class TestFixSuggestion:
    @pytest.mark.parametrize(
        "kind,constraint,expected",
        [
            ("required", None, 'Add the required field "user.email" to the payload'),
            ("type", "integer", "Change the field type to integer"),
            ("format", "email", 'Provide a valid email address (e.g., "user@example.com")'),
            ("format", "phone", 'Provide a valid phone number in format "XXX-XXX-XXXX" (e.g., "555-123-4567")'),
            ("format", "color", "Provide a valid color format"),
            ("pattern", r"^\d{3}-\d{2}-\d{4}$", 'Use format "XXX-XX-XXXX" (e.g., "123-45-6789")'),
            ("pattern", "^[A-Z]+$", "Ensure the value matches the pattern: ^[A-Z]+$"),
            ("enum", ["a", "b"], "Change the value to one of the allowed values: a, b"),
            ("minLength", 3, "Value must be at least 3 characters long"),
            ("maximum", 10, "Value must be at most 10"),
            ("custom", None, None),
        ],
    )
    def test_suggestion_table(self, kind, constraint, expected):
        assert ErrorFormatter.fix_suggestion(kind, constraint, "user.email") == expected


class TestResultRendering:
    def test_no_errors(self):
        assert ErrorFormatter.format_errors([]) == "No errors"
        assert ErrorFormatter.format_warnings([]) == ""

    def test_numbered_errors(self):
        error = ValidationErrorModel(
            field="age",
            path="/age",
            message="Invalid type: expected integer, received string",
            kind="type",
            expected="integer",
            received="string",
            fix_suggestion="Change the field type to integer",
        )

        text = ErrorFormatter.format_errors([error])

        assert text.splitlines() == [
            "Found 1 validation error:",
            "",
            "1. Field: age",
            "   Error: Invalid type: expected integer, received string",
            '   Expected: "integer"',
            '   Received: "string"',
            "   Fix: Change the field type to integer",
        ]

    def test_warnings(self):
        warning = ValidationWarningModel(
            field="phone", kind="optional", message="Optional field", suggestion="Add it"
        )

        text = ErrorFormatter.format_warnings([warning])

        assert text.startswith("1 warning:")
        assert "   Suggestion: Add it" in text

    def test_valid_result(self):
        result = ValidationResultModel(valid=True, summary="Payload is valid")
        assert ErrorFormatter.format_validation_result(result) == "✓ Payload is valid"

    def test_invalid_result(self, user_schema):
        result = validate({"name": "Al"}, user_schema)

        text = ErrorFormatter.format_validation_result(result)

        assert text.startswith("✗ Payload validation failed")
        assert "Found 1 validation error:" in text
        assert "1. Field: email" in text
        assert "1 warning:" in text


class TestFieldRules:
    def test_string_rules(self):
        node = SchemaNode.from_dict(
            {"type": "string", "format": "email", "minLength": 3, "description": "Login"}
        )

        text = ErrorFormatter.format_field_rules(node, "Validation rules for email")

        lines = text.splitlines()
        assert lines[0] == "Validation rules for email"
        assert "Type: string" in lines
        assert "Format: email" in lines
        assert "Minimum length: 3" in lines
        assert "Description: Login" in lines

    def test_object_overview(self, user_schema):
        text = ErrorFormatter.format_field_rules(SchemaNode.from_dict(user_schema), "Schema overview")

        assert "Required fields: email, name" in text
        assert "Properties (7): email, name, age, ssn, status, tags, phone" in text

    def test_no_rules(self):
        assert NO_RULES_MESSAGE in ErrorFormatter.format_field_rules(None, "Rules")
        assert NO_RULES_MESSAGE in ErrorFormatter.format_field_rules(SchemaNode(), "Rules")
