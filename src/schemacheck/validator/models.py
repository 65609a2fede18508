"""Pydantic models for validation results and example options."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from schemacheck.models import EngineBaseModel

ErrorKind = Literal[
    "required",
    "type",
    "format",
    "pattern",
    "enum",
    "minLength",
    "maxLength",
    "minimum",
    "maximum",
    "custom",
]
WarningKind = Literal["optional", "best-practice", "deprecated"]


class ValidationErrorModel(EngineBaseModel):
    """A single field-scoped violation.

    Attributes:
        field: Dot-notation path (``data.attributes.ssn``), ``root`` for the
            payload itself and ``schema`` when the schema could not be compiled.
        path: JSON-pointer path (``/data/attributes/ssn``).
        message: Human-readable description of the violation.
        kind: Violated constraint.
        expected: The constraint value (type name, bound, enum list, ...).
        received: The offending value or its type, where useful.
        fix_suggestion: Concrete advice, when one is derivable.
    """

    field: str
    path: str
    message: str
    kind: ErrorKind
    expected: Any = None
    received: Any = None
    fix_suggestion: str | None = None


class ValidationWarningModel(EngineBaseModel):
    """Advisory finding that does not make the payload invalid."""

    field: str
    kind: WarningKind
    message: str
    suggestion: str | None = None


class ValidationResultModel(EngineBaseModel):
    """Outcome of validating one payload against one schema.

    Example:
        >>> result = ValidationResultModel(valid=True, summary="Payload is valid")
        >>> result.model_dump(by_alias=True)["errors"]
        []
    """

    valid: bool
    errors: list[ValidationErrorModel] = Field(default_factory=list)
    warnings: list[ValidationWarningModel] = Field(default_factory=list)
    summary: str


class ExampleOptionsModel(EngineBaseModel):
    """Options for example payload generation.

    Attributes:
        required_only: Omit optional object properties.
        max_depth: Object/array nesting depth at which generation stops and
            emits a terminal placeholder.
    """

    required_only: bool = False
    max_depth: int = Field(default=10, ge=0)
