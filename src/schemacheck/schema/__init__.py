"""Schema model, field paths and format tables."""

from .formats import FORMAT_EXAMPLES, FORMAT_TEMPLATES, check_format, template_for_pattern
from .loaders import load_payload, load_schema, load_schema_from_file
from .node import SchemaNode, SchemaParser, SchemaType, resolve_pointer
from .paths import UNRESOLVED, FieldPath, Index, Name, get_field_schema

__all__ = [
    # Model
    "SchemaNode",
    "SchemaParser",
    "SchemaType",
    "resolve_pointer",
    # Paths
    "FieldPath",
    "Name",
    "Index",
    "UNRESOLVED",
    "get_field_schema",
    # Formats
    "FORMAT_EXAMPLES",
    "FORMAT_TEMPLATES",
    "check_format",
    "template_for_pattern",
    # Loaders
    "load_schema",
    "load_schema_from_file",
    "load_payload",
]
