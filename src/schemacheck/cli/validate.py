import sys

import click

from schemacheck.cli.utils import (
    configure_logging_from_settings,
    output_error,
    output_result,
    read_payload,
    resolve_schema,
    schema_source_options,
)
from schemacheck.config.settings import load_settings
from schemacheck.schema.loaders import load_payload
from schemacheck.validator.core import validate as validate_payload
from schemacheck.validator.formatter import ErrorFormatter
from schemacheck.validator.models import ValidationResultModel


def format_validation_result(result: ValidationResultModel) -> str:
    text = ErrorFormatter.format_validation_result(result)
    header, _, rest = text.partition("\n")
    if result.valid:
        header = click.style(header, fg="green", bold=True)
    else:
        header = click.style(header, fg="red", bold=True)
    return f"{header}\n{rest}" if rest else header


@click.command(name="validate")
@click.argument("payload")
@schema_source_options
@click.option("--no-warnings", is_flag=True, help="Do not report advisory warnings")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def validate(
    payload: str,
    schema_file: str | None,
    spec_file: str | None,
    api_path: str | None,
    method: str | None,
    response: bool,
    status: str,
    no_warnings: bool,
    json_output: bool,
    debug: bool,
) -> None:
    """Validate a JSON payload against a schema.

    PAYLOAD is a file path, a JSON string, or - to read from stdin.
    Exits with status 1 when the payload is invalid.

    \b
    Examples:
        schemacheck validate body.json --schema user.yml
        schemacheck validate body.json --spec api.yml --path /users --method POST
        schemacheck validate - --spec api.yml --path /users --method GET --response
        schemacheck validate '{"email": "x"}' --schema user.yml --json-output
    """
    try:
        settings = load_settings()
        configure_logging_from_settings(settings, debug=debug)

        schema = resolve_schema(schema_file, spec_file, api_path, method, response, status)
        data = load_payload(read_payload(payload))
        collect_warnings = settings.validation.warnings and not no_warnings
        result = validate_payload(data, schema, collect_warnings=collect_warnings)
    except click.ClickException:
        # Let Click exceptions propagate - they have their own formatting
        raise
    except Exception as e:
        output_error(e, json_output, debug)
        return

    if json_output:
        output_result(result.model_dump(mode="json", by_alias=True, exclude_none=True), True)
    else:
        click.echo(format_validation_result(result))

    if not result.valid:
        sys.exit(1)
