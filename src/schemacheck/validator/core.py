"""Payload validation entry points."""

import logging
from typing import Any

from schemacheck.schema.node import SchemaNode
from schemacheck.schema.paths import FieldPath

from .compiler import Check, Collector, SchemaCompiler, SchemaError, summarize
from .models import ValidationErrorModel, ValidationResultModel

logger = logging.getLogger(__name__)


class PayloadValidator:
    """Validator compiled from one schema.

    Compilation happens once in the constructor; :meth:`validate` can then be
    called for any number of payloads. A schema that cannot be compiled does
    not raise: every validation reports the single schema error instead.

    Example:
        >>> validator = PayloadValidator.from_dict({
        ...     "type": "object",
        ...     "required": ["email"],
        ...     "properties": {"email": {"type": "string", "format": "email"}},
        ... })
        >>> validator.validate({}).errors[0].kind
        'required'
    """

    def __init__(self, schema: SchemaNode, collect_warnings: bool = True):
        """Initialize the validator with a parsed schema.

        Args:
            schema: The root schema node
            collect_warnings: Whether to report optional-field and deprecation warnings
        """
        self.schema = schema
        self._check: Check | None = None
        self._schema_error: str | None = None
        try:
            self._check = SchemaCompiler(collect_warnings=collect_warnings).compile(schema)
        except SchemaError as e:
            logger.debug("Schema could not be compiled: %s", e)
            self._schema_error = str(e)

    @classmethod
    def from_dict(cls, schema: Any, collect_warnings: bool = True) -> "PayloadValidator":
        """Create a PayloadValidator from a raw schema mapping."""
        return cls(SchemaNode.from_dict(schema), collect_warnings=collect_warnings)

    @property
    def schema_error(self) -> str | None:
        return self._schema_error

    def validate(self, payload: Any) -> ValidationResultModel:
        """Validate a payload, collecting every violation.

        Args:
            payload: Any JSON-compatible value

        Returns:
            The validation result; never raises for invalid payloads
        """
        if self._check is None:
            return _schema_error_result(self._schema_error or "unknown error")

        sink = Collector()
        self._check(payload, FieldPath(), sink)
        return sink.result()


def validate(payload: Any, schema: Any, collect_warnings: bool = True) -> ValidationResultModel:
    """Validate ``payload`` against ``schema``.

    Args:
        payload: Any JSON-compatible value
        schema: A SchemaNode or a raw, dereferenced JSON Schema mapping
        collect_warnings: Whether to report optional-field and deprecation warnings

    Returns:
        ValidationResultModel listing every violation in schema declaration order
    """
    node = schema if isinstance(schema, SchemaNode) else SchemaNode.from_dict(schema)
    return PayloadValidator(node, collect_warnings=collect_warnings).validate(payload)


def _schema_error_result(reason: str) -> ValidationResultModel:
    error = ValidationErrorModel(
        field="schema",
        path="$",
        message=f"Invalid schema: the schema could not be compiled ({reason})",
        kind="custom",
    )
    return ValidationResultModel(valid=False, errors=[error], summary=summarize(1))
