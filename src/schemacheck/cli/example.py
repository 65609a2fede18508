import json

import click

from schemacheck.cli.utils import (
    configure_logging_from_settings,
    output_error,
    output_result,
    resolve_schema,
    schema_source_options,
)
from schemacheck.config.settings import load_settings
from schemacheck.validator.examples import generate_example
from schemacheck.validator.models import ExampleOptionsModel


@click.command(name="example")
@schema_source_options
@click.option(
    "--required-only/--all-fields",
    default=None,
    help="Only include required fields (default from config: all fields)",
)
@click.option("--max-depth", type=click.IntRange(min=0), help="Maximum nesting depth")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def example(
    schema_file: str | None,
    spec_file: str | None,
    api_path: str | None,
    method: str | None,
    response: bool,
    status: str,
    required_only: bool | None,
    max_depth: int | None,
    json_output: bool,
    debug: bool,
) -> None:
    """Generate an example payload from a schema.

    \b
    Examples:
        schemacheck example --schema user.yml
        schemacheck example --schema user.yml --required-only
        schemacheck example --spec api.yml --path /users --method POST --max-depth 3
    """
    try:
        settings = load_settings()
        configure_logging_from_settings(settings, debug=debug)

        schema = resolve_schema(schema_file, spec_file, api_path, method, response, status)
        options = ExampleOptionsModel(
            required_only=(
                settings.examples.required_only if required_only is None else required_only
            ),
            max_depth=settings.examples.max_depth if max_depth is None else max_depth,
        )
        payload = generate_example(schema, options)
    except click.ClickException:
        raise
    except Exception as e:
        output_error(e, json_output, debug)
        return

    if json_output:
        output_result(payload, True)
    else:
        click.echo(json.dumps(payload, indent=2))
