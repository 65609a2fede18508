import json
import logging
import logging.handlers
import os
import sys
import traceback
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import click

from schemacheck.config.models import SettingsModel
from schemacheck.providers import NoSchema, OpenAPIDocumentProvider
from schemacheck.schema.loaders import load_schema_from_file

F = TypeVar("F", bound=Callable[..., Any])


def get_env_flag(env_var: str, default: bool = False) -> bool:
    """Get a boolean flag from an environment variable.

    Args:
        env_var: Name of the environment variable
        default: Default value if environment variable is not set

    Returns:
        True if the environment variable is set to "1", "true", or "yes" (case insensitive)
        False otherwise
    """
    value = os.environ.get(env_var, "").lower()
    return value in ("1", "true", "yes") if value else default


def configure_logging(
    debug: bool = False,
    log_file: Path | None = None,
    log_level: str | None = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> None:
    """Configure logging for all modules.

    Args:
        debug: Whether to enable debug logging (overrides log_level if True)
        log_file: Optional path to log file for persistent logging
        log_level: Log level string ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        max_bytes: Maximum log file size in bytes before rotation (default: 10MB)
        backup_count: Number of rotated log files to keep (default: 5)
    """
    if not debug:
        debug = get_env_flag("SCHEMACHECK_DEBUG")

    if debug:
        level = logging.DEBUG
    elif log_level:
        level = getattr(logging, log_level.upper(), logging.WARNING)
    else:
        level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove any existing handlers to avoid duplicate messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    simple_formatter = logging.Formatter("%(levelname)s:%(name)s:%(message)s")

    if log_file:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(detailed_formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            # If file logging fails, warn but continue
            print(f"Warning: Failed to setup file logging to {log_file}: {e}", file=sys.stderr)

    # stderr keeps stdout clean for JSON output
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(simple_formatter)
    root_logger.addHandler(stream_handler)

    logging.getLogger("schemacheck").setLevel(level)


def configure_logging_from_settings(settings: SettingsModel, debug: bool = False) -> None:
    """Configure logging from the ``logging`` section of the settings."""
    logging_config = settings.logging
    log_file = Path(logging_config.path).expanduser() if logging_config.path else None
    configure_logging(
        debug=debug,
        log_file=log_file,
        log_level=logging_config.level,
        max_bytes=logging_config.max_bytes,
        backup_count=logging_config.backup_count,
    )


def format_error(error: Exception, debug: bool = False) -> dict[str, Any]:
    """Format an error for output.

    Args:
        error: The exception that occurred
        debug: Whether to include debug information

    Returns:
        Dict containing error information
    """
    error_info = {"error": str(error)}

    if debug:
        error_info["traceback"] = traceback.format_exc()
        error_info["type"] = error.__class__.__name__

    return error_info


def output_result(result: Any, json_output: bool = False, debug: bool = False) -> None:
    """Output a result in either JSON or human-readable format.

    Args:
        result: The result to output
        json_output: Whether to output in JSON format
        debug: Whether to include debug information
    """
    if json_output:
        click.echo(json.dumps({"status": "ok", "result": result}, indent=2, default=str))
    else:
        click.echo(result)


def output_error(error: Exception, json_output: bool = False, debug: bool = False) -> None:
    """Output an error in either JSON or human-readable format.

    Args:
        error: The exception that occurred
        json_output: Whether to output in JSON format
        debug: Whether to include debug information
    """
    error_info = format_error(error, debug)

    if json_output:
        click.echo(json.dumps({"status": "error", **error_info}, indent=2))
    else:
        click.echo(f"Error: {error_info['error']}", err=True)
        if debug and "traceback" in error_info:
            click.echo("\nTraceback:", err=True)
            click.echo(error_info["traceback"], err=True)

    raise click.Abort()


def schema_source_options(func: F) -> F:
    """Options selecting the schema: a schema file, or an operation of an API document."""
    options = [
        click.option(
            "--schema",
            "schema_file",
            type=click.Path(dir_okay=False),
            help="JSON Schema file (.json, .yaml, .yml)",
        ),
        click.option(
            "--spec",
            "spec_file",
            type=click.Path(dir_okay=False),
            help="Dereferenced OpenAPI/Swagger document",
        ),
        click.option("--path", "api_path", help="Operation path in the API document, e.g. /pets"),
        click.option("--method", help="HTTP method of the operation, e.g. POST"),
        click.option(
            "--response",
            is_flag=True,
            help="Use the response schema instead of the request body",
        ),
        click.option("--status", default="200", show_default=True, help="Response status code"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def resolve_schema(
    schema_file: str | None,
    spec_file: str | None,
    api_path: str | None,
    method: str | None,
    response: bool,
    status: str,
) -> dict[str, Any]:
    """Load the schema selected by :func:`schema_source_options`.

    Raises:
        click.UsageError: If the options do not select exactly one schema
        click.ClickException: If the API document has no schema for the operation
    """
    if schema_file and spec_file:
        raise click.UsageError("Use either --schema or --spec, not both")

    if schema_file:
        return load_schema_from_file(Path(schema_file))

    if spec_file:
        if not api_path or not method:
            raise click.UsageError("--spec requires --path and --method")
        provider = OpenAPIDocumentProvider.from_file(Path(spec_file))
        schema = provider.get_schema(
            api_path, method, "response" if response else "request", status
        )
        if isinstance(schema, NoSchema):
            raise click.ClickException(schema.message)
        return schema

    raise click.UsageError("Provide a schema with --schema or --spec")


def read_payload(source: str) -> str:
    """Read payload text from ``-`` (stdin), a file path, or a literal JSON string."""
    if source == "-":
        return click.get_text_stream("stdin").read()
    if os.path.isfile(source):
        return Path(source).read_text(encoding="utf-8")
    return source
