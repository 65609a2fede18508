"""Reading schema documents and payloads from text and files."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any, NamedTuple

import yaml


class _Parser(NamedTuple):
    parse: Callable[[str], Any]
    errors: tuple[type[Exception], ...]


_PARSERS: dict[str, _Parser] = {
    "yaml": _Parser(yaml.safe_load, (yaml.YAMLError,)),
    "json": _Parser(json.loads, (json.JSONDecodeError,)),
}

_SUFFIX_FORMATS = {".yaml": "yaml", ".yml": "yaml", ".json": "json"}


def load_schema(content: str, format: str = "yaml") -> dict[str, Any]:
    """Parse a schema document. Raises ValueError unless it is a YAML or JSON mapping."""
    parser = _PARSERS.get(format)
    if parser is None:
        raise ValueError(f"Unsupported format: {format}. Use 'yaml' or 'json'")
    try:
        document = parser.parse(content)
    except parser.errors as e:
        raise ValueError(f"Failed to parse {format.upper()}: {e}") from e

    if not isinstance(document, dict):
        raise ValueError(f"Schema document must be a mapping, got {type(document).__name__}")
    return document


def load_schema_from_file(path: str | Path) -> dict[str, Any]:
    """Load a schema document, picking the parser from the file suffix."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Schema file not found: {path}")

    format = _SUFFIX_FORMATS.get(path.suffix.lower())
    if format is None:
        raise ValueError(f"Unsupported file extension: {path.suffix}. Use .yaml, .yml, or .json")
    return load_schema(path.read_text(encoding="utf-8"), format=format)


def load_payload(content: str) -> Any:
    # Non-JSON text is an error, never a bare string payload
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON payload: {e}") from e
