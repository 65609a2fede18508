"""schemacheck - schema-driven payload validation and example generation.

Validate JSON payloads against resolved JSON Schema / OpenAPI schemas with
field-level errors and fix suggestions, generate example payloads, and look
up the rules of individual fields.

Example:
    >>> from schemacheck import generate_example, validate
    >>> schema = {"type": "object", "required": ["id"], "properties": {"id": {"type": "integer"}}}
    >>> validate({"id": "7"}, schema).errors[0].kind
    'type'
    >>> generate_example(schema)
    {'id': 0}
"""

from schemacheck.schema.paths import UNRESOLVED, get_field_schema
from schemacheck.validator import (
    ExampleOptionsModel,
    ValidationErrorModel,
    ValidationResultModel,
    ValidationWarningModel,
    generate_example,
    validate,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "validate",
    "generate_example",
    "get_field_schema",
    "UNRESOLVED",
    "ExampleOptionsModel",
    "ValidationErrorModel",
    "ValidationWarningModel",
    "ValidationResultModel",
]
