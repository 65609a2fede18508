"""Tests for payload validation."""

import pytest

from schemacheck.validator import PayloadValidator, validate


@pytest.fixture
def valid_user():
    return {
        "email": "jane@example.com",
        "name": "Jane",
        "age": 34,
        "ssn": "123-45-6789",
        "status": "active",
        "tags": ["admin"],
        "phone": "555-123-4567",
    }


class TestValidPayloads:
    """Test payloads that satisfy their schema."""

    def test_valid_payload(self, user_schema, valid_user):
        result = validate(valid_user, user_schema)

        assert result.valid
        assert result.errors == []
        assert result.warnings == []
        assert result.summary == "Payload is valid"

    def test_integral_float_is_integer(self, user_schema, valid_user):
        valid_user["age"] = 30.0
        assert validate(valid_user, user_schema).valid

    def test_nullable_accepts_none(self):
        assert validate(None, {"type": ["string", "null"]}).valid
        assert validate(None, {"type": "string", "nullable": True}).valid
        assert not validate(None, {"type": "string"}).valid

    def test_unknown_format_passes(self):
        assert validate("4111-1111", {"type": "string", "format": "credit-card"}).valid


class TestCollectAllErrors:
    """Test that every violation is reported in one pass."""

    def test_all_violations_in_declaration_order(self, user_schema):
        payload = {"name": "J", "age": -1, "ssn": "123456789", "status": "unknown"}

        result = validate(payload, user_schema)

        assert not result.valid
        assert [(e.field, e.kind) for e in result.errors] == [
            ("email", "required"),
            ("name", "minLength"),
            ("age", "minimum"),
            ("ssn", "pattern"),
            ("status", "enum"),
        ]
        assert result.summary == "Found 5 validation errors"

    def test_single_error_summary(self, user_schema, valid_user):
        del valid_user["email"]
        assert validate(valid_user, user_schema).summary == "Found 1 validation error"

    def test_validation_is_idempotent(self, user_schema):
        payload = {"name": 42, "tags": ["a", "b", "c", "d"]}
        assert validate(payload, user_schema) == validate(payload, user_schema)


class TestErrorDetails:
    """Test the fields of individual errors."""

    def test_missing_required_field(self, user_schema, valid_user):
        del valid_user["email"]

        error = validate(valid_user, user_schema).errors[0]

        assert error.field == "email"
        assert error.path == "/email"
        assert error.kind == "required"
        assert error.message == "Missing required field: email"
        assert "email" in error.fix_suggestion

    def test_type_mismatch_skips_other_checks(self, user_schema, valid_user):
        valid_user["name"] = 42

        errors = validate(valid_user, user_schema).errors

        assert len(errors) == 1
        assert errors[0].kind == "type"
        assert errors[0].expected == "string"
        assert errors[0].received == "integer"
        assert errors[0].fix_suggestion == "Change the field type to string"

    @pytest.mark.parametrize("age,received", [(30.5, "number"), (True, "boolean"), ("30", "string")])
    def test_integer_rejects_non_integers(self, user_schema, valid_user, age, received):
        valid_user["age"] = age

        error = validate(valid_user, user_schema).errors[0]

        assert error.kind == "type"
        assert error.expected == "integer"
        assert error.received == received

    def test_pattern_error_suggests_template(self, user_schema, valid_user):
        valid_user["ssn"] = "123456789"

        error = validate(valid_user, user_schema).errors[0]

        assert error.kind == "pattern"
        assert error.expected == r"^\d{3}-\d{2}-\d{4}$"
        assert "XXX-XX-XXXX" in error.fix_suggestion

    def test_enum_error_lists_allowed_values(self, user_schema, valid_user):
        valid_user["status"] = "deleted"

        error = validate(valid_user, user_schema).errors[0]

        assert error.kind == "enum"
        assert error.expected == ["active", "inactive"]
        assert "active, inactive" in error.message
        assert error.received == "deleted"

    def test_enum_uses_json_equality(self):
        schema = {"enum": [1, "a"]}
        assert validate(1.0, schema).valid
        assert not validate(True, schema).valid
        assert not validate("1", schema).valid

    def test_format_error(self, user_schema, valid_user):
        valid_user["email"] = "not-an-email"

        error = validate(valid_user, user_schema).errors[0]

        assert error.kind == "format"
        assert error.expected == "email"
        assert error.message == "Invalid email format"
        assert "user@example.com" in error.fix_suggestion

    def test_trailing_newline_fails_format(self):
        result = validate("123-45-6789\n", {"type": "string", "format": "ssn"})
        assert [e.kind for e in result.errors] == ["format"]

    def test_ssn_format_suggestion(self):
        error = validate("123456789", {"type": "string", "format": "ssn"}).errors[0]
        assert error.fix_suggestion == 'Provide a valid SSN in format "XXX-XX-XXXX" (e.g., "123-45-6789")'

    def test_length_bounds(self):
        schema = {"type": "string", "minLength": 3, "maxLength": 5}

        short = validate("ab", schema).errors[0]
        long = validate("abcdef", schema).errors[0]

        assert (short.kind, short.expected) == ("minLength", 3)
        assert (long.kind, long.expected) == ("maxLength", 5)
        assert long.fix_suggestion == "Value must be at most 5 characters long"

    def test_numeric_bounds(self):
        schema = {"type": "number", "minimum": 1, "maximum": 10}

        low = validate(0, schema).errors[0]
        high = validate(11, schema).errors[0]

        assert (low.kind, low.message) == ("minimum", "Value must be >= 1")
        assert (high.kind, high.message) == ("maximum", "Value must be <= 10")

    def test_exclusive_bounds(self):
        schema = {"type": "number", "exclusiveMinimum": 0, "exclusiveMaximum": 1}

        assert validate(0.5, schema).valid
        assert validate(0, schema).errors[0].message == "Value must be > 0"
        assert validate(1, schema).errors[0].kind == "maximum"

    def test_draft4_exclusive_bounds(self):
        schema = {"type": "integer", "minimum": 0, "exclusiveMinimum": True}
        assert validate(1, schema).valid
        assert validate(0, schema).errors[0].kind == "minimum"

    def test_multiple_of(self):
        schema = {"type": "integer", "multipleOf": 5}
        assert validate(10, schema).valid
        assert validate(7, schema).errors[0].kind == "custom"

    def test_array_bounds_and_uniqueness(self, user_schema, valid_user):
        valid_user["tags"] = ["a", "b", "c", "d"]
        error = validate(valid_user, user_schema).errors[0]
        assert error.kind == "maxLength"
        assert error.message == "Array must have at most 3 items"

        unique = {"type": "array", "uniqueItems": True, "minItems": 1}
        assert validate([1, 2], unique).valid
        assert validate([1, 1], unique).errors[0].kind == "custom"
        assert validate([1, 1.0], unique).errors[0].message == "Array must contain unique items"
        assert validate([{"a": 1}, {"a": 1.0}], unique).errors[0].kind == "custom"
        assert validate([True, 1], unique).valid
        assert validate([], unique).errors[0].kind == "minLength"

    def test_additional_properties_false(self):
        schema = {
            "type": "object",
            "properties": {"id": {"type": "integer"}},
            "additionalProperties": False,
        }

        errors = validate({"id": 1, "extra": True}, schema).errors

        assert [(e.field, e.kind) for e in errors] == [("extra", "custom")]

    def test_additional_properties_schema(self):
        schema = {"type": "object", "additionalProperties": {"type": "string"}}

        errors = validate({"a": "x", "b": 2}, schema).errors

        assert [(e.field, e.kind) for e in errors] == [("b", "type")]

    def test_undeclared_required_field(self):
        result = validate({}, {"type": "object", "required": ["token"]})
        assert result.errors[0].field == "token"

    def test_root_type_error(self):
        error = validate("text", {"type": "object"}).errors[0]
        assert error.field == "root"
        assert error.path == "/"


class TestNestedPayloads:
    """Test field paths of nested violations."""

    def test_array_item_paths(self):
        schema = {
            "type": "object",
            "properties": {
                "items": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "required": ["id"],
                        "properties": {"id": {"type": "integer"}},
                    },
                }
            },
        }

        errors = validate({"items": [{"id": 1}, {}, {"id": "x"}]}, schema).errors

        assert [(e.field, e.path, e.kind) for e in errors] == [
            ("items.1.id", "/items/1/id", "required"),
            ("items.2.id", "/items/2/id", "type"),
        ]

    def test_self_referential_schema(self):
        schema = {
            "type": "object",
            "properties": {
                "name": {"type": "string"},
                "children": {"type": "array", "items": {"$ref": "#"}},
            },
        }
        payload = {"name": "root", "children": [{"name": "a", "children": [{"name": 1}]}]}

        errors = validate(payload, schema).errors

        assert [e.field for e in errors] == ["children.0.children.0.name"]


    def test_recursive_definition(self):
        schema = {
            "definitions": {
                "Node": {
                    "type": "object",
                    "properties": {
                        "value": {"type": "integer"},
                        "next": {"$ref": "#/definitions/Node"},
                    },
                }
            },
            "type": "object",
            "properties": {"head": {"$ref": "#/definitions/Node"}},
        }

        assert validate({"head": {"value": 1, "next": {"value": 2}}}, schema).valid
        errors = validate({"head": {"value": 1, "next": {"value": "x"}}}, schema).errors
        assert [e.field for e in errors] == ["head.next.value"]
        assert [e.field for e in validate({"head": {"value": "x"}}, schema).errors] == [
            "head.value"
        ]


class TestPermissiveConstructs:
    """Test constructs that are accepted without validation."""

    @pytest.mark.parametrize(
        "schema",
        [
            {"oneOf": [{"type": "string"}, {"type": "integer"}]},
            {"anyOf": [{"type": "string"}]},
            {"allOf": [{"type": "string"}]},
            {"not": {"type": "integer"}},
            {"type": ["string", "integer"]},
            {"type": "file"},
            {"$ref": "https://example.com/schemas/pet.json"},
        ],
    )
    def test_subtree_passes(self, schema):
        assert validate({"any": "value"}, schema).valid


class TestMalformedSchemas:
    """Test that broken schemas produce a single schema error."""

    @pytest.mark.parametrize(
        "schema",
        [
            {"$ref": "#/definitions/nonexistent"},
            {"type": "string", "pattern": "[unclosed"},
            {"type": "object", "properties": "not-a-mapping"},
            {"type": "object", "properties": {"a": False}},
            {"type": "object", "properties": {"a": "string"}},
        ],
    )
    def test_single_schema_error(self, schema):
        result = validate({"a": "x"}, schema)

        assert not result.valid
        assert len(result.errors) == 1
        error = result.errors[0]
        assert (error.field, error.path, error.kind) == ("schema", "$", "custom")
        assert result.summary == "Found 1 validation error"

    def test_validator_keeps_schema_error(self):
        validator = PayloadValidator.from_dict({"$ref": "#/nowhere"})

        assert validator.schema_error is not None
        assert validator.validate({}).errors[0].field == "schema"


class TestWarnings:
    """Test advisory warnings."""

    def test_recommended_optional_field(self, user_schema):
        result = validate({"email": "a@b.co", "name": "Al"}, user_schema)

        assert result.valid
        assert len(result.warnings) == 1
        warning = result.warnings[0]
        assert warning.field == "phone"
        assert warning.kind == "optional"
        assert warning.suggestion == "Contact phone number, recommended for notifications"

    def test_should_keyword_is_case_insensitive(self):
        schema = {
            "type": "object",
            "properties": {"locale": {"type": "string", "description": "Clients SHOULD send this"}},
        }
        assert validate({}, schema).warnings[0].field == "locale"

    def test_warnings_reported_with_errors(self, user_schema):
        result = validate({"name": "Al"}, user_schema)

        assert not result.valid
        assert [w.field for w in result.warnings] == ["phone"]

    def test_deprecated_field(self):
        schema = {
            "type": "object",
            "properties": {"legacy_id": {"type": "string", "deprecated": True}},
        }

        result = validate({"legacy_id": "x"}, schema)

        assert result.valid
        assert result.warnings[0].kind == "deprecated"

    def test_warnings_can_be_disabled(self, user_schema):
        result = validate({"email": "a@b.co", "name": "Al"}, user_schema, collect_warnings=False)
        assert result.warnings == []


class TestPayloadValidator:
    def test_reusable_across_payloads(self, user_schema, valid_user):
        validator = PayloadValidator.from_dict(user_schema)

        assert validator.schema_error is None
        assert validator.validate(valid_user).valid
        assert not validator.validate({}).valid
        assert validator.validate(valid_user).valid

    def test_camel_case_serialisation(self, user_schema):
        dumped = validate({}, user_schema).model_dump(by_alias=True)
        assert "fixSuggestion" in dumped["errors"][0]
