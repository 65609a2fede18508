"""Schema providers.

A provider hands out the resolved schema of one operation's request body or
response. The validator and the example generator never depend on where a
schema comes from; the CLI uses :class:`OpenAPIDocumentProvider` to pull
schemas out of an already-dereferenced OpenAPI 3 or Swagger 2 document.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal, Protocol

from schemacheck.models import EngineBaseModel
from schemacheck.schema.loaders import load_schema_from_file

logger = logging.getLogger(__name__)

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")
PREFERRED_CONTENT_TYPE = "application/json"

Direction = Literal["request", "response"]
NoSchemaReason = Literal[
    "endpoint-not-found",
    "no-request-body",
    "response-not-defined",
    "no-response-schema",
]


class NoSchema(EngineBaseModel):
    """Sentinel returned when an operation has no schema to offer.

    Falsy, so callers can write ``if not schema: ...``.
    """

    reason: NoSchemaReason
    message: str

    def __bool__(self) -> bool:
        return False


class SchemaProvider(Protocol):
    """Anything that can look up the schema of an operation."""

    def get_schema(
        self,
        path: str,
        method: str,
        request_or_response: Direction,
        status_code: str | None = None,
    ) -> dict[str, Any] | NoSchema: ...


class OpenAPIDocumentProvider:
    """SchemaProvider over an in-memory, already-dereferenced API document.

    Example:
        >>> provider = OpenAPIDocumentProvider({
        ...     "openapi": "3.0.0",
        ...     "paths": {"/pets": {"post": {"requestBody": {"content": {
        ...         "application/json": {"schema": {"type": "object"}}}}}}},
        ... })
        >>> provider.get_schema("/pets", "POST", "request")
        {'type': 'object'}
    """

    def __init__(self, document: Mapping[str, Any]):
        self.document = document

    @classmethod
    def from_file(cls, path: Path) -> "OpenAPIDocumentProvider":
        """Load a YAML or JSON API document."""
        return cls(load_schema_from_file(path))

    @property
    def is_swagger2(self) -> bool:
        return "swagger" in self.document and "openapi" not in self.document

    def operations(self) -> list[tuple[str, str]]:
        """List ``(path, METHOD)`` pairs in document order."""
        result = []
        for path, item in (self.document.get("paths") or {}).items():
            if not isinstance(item, Mapping):
                continue
            for method in item:
                if method.lower() in HTTP_METHODS:
                    result.append((path, method.upper()))
        return result

    def get_schema(
        self,
        path: str,
        method: str,
        request_or_response: Direction,
        status_code: str | None = None,
    ) -> dict[str, Any] | NoSchema:
        operation = self._operation(path, method)
        if operation is None:
            return NoSchema(
                reason="endpoint-not-found",
                message=f"Endpoint not found: {method.upper()} {path}",
            )

        if request_or_response == "request":
            schema = self._request_schema(operation)
            if schema is None:
                return NoSchema(
                    reason="no-request-body",
                    message=f"Endpoint {method.upper()} {path} does not have a request body",
                )
            return schema

        status = str(status_code or "200")
        responses = {str(k): v for k, v in (operation.get("responses") or {}).items()}
        if status not in responses:
            return NoSchema(
                reason="response-not-defined",
                message=f"Response {status} not defined for {method.upper()} {path}",
            )
        schema = self._response_schema(responses[status])
        if schema is None:
            return NoSchema(
                reason="no-response-schema",
                message=f"Response {status} for {method.upper()} {path} has no schema defined",
            )
        return schema

    def _operation(self, path: str, method: str) -> Mapping[str, Any] | None:
        item = (self.document.get("paths") or {}).get(path)
        if not isinstance(item, Mapping):
            return None
        operation = item.get(method.lower())
        return operation if isinstance(operation, Mapping) else None

    def _request_schema(self, operation: Mapping[str, Any]) -> dict[str, Any] | None:
        if self.is_swagger2:
            for parameter in operation.get("parameters") or []:
                if isinstance(parameter, Mapping) and parameter.get("in") == "body":
                    return _as_schema(parameter.get("schema"))
            return None

        body = operation.get("requestBody")
        if not isinstance(body, Mapping):
            return None
        return _content_schema(body.get("content"))

    def _response_schema(self, response: Any) -> dict[str, Any] | None:
        if not isinstance(response, Mapping):
            return None
        if self.is_swagger2:
            return _as_schema(response.get("schema"))
        return _content_schema(response.get("content"))


def _content_schema(content: Any) -> dict[str, Any] | None:
    if not isinstance(content, Mapping) or not content:
        return None
    if PREFERRED_CONTENT_TYPE in content:
        media = content[PREFERRED_CONTENT_TYPE]
    else:
        content_type = next(iter(content))
        logger.debug("No %s content, using %s", PREFERRED_CONTENT_TYPE, content_type)
        media = content[content_type]
    if not isinstance(media, Mapping):
        return None
    return _as_schema(media.get("schema"))


def _as_schema(value: Any) -> dict[str, Any] | None:
    return dict(value) if isinstance(value, Mapping) else None
