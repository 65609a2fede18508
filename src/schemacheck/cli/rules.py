import click

from schemacheck.cli.utils import (
    configure_logging_from_settings,
    output_error,
    output_result,
    resolve_schema,
    schema_source_options,
)
from schemacheck.config.settings import load_settings
from schemacheck.schema.node import SchemaNode
from schemacheck.schema.paths import get_field_schema
from schemacheck.validator.formatter import ErrorFormatter


@click.command(name="rules")
@schema_source_options
@click.option("--field", help="Dot path of one field, e.g. data.items.0.id")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def rules(
    schema_file: str | None,
    spec_file: str | None,
    api_path: str | None,
    method: str | None,
    response: bool,
    status: str,
    field: str | None,
    json_output: bool,
    debug: bool,
) -> None:
    """Show the validation rules of a schema or of one field.

    \b
    Examples:
        schemacheck rules --schema user.yml
        schemacheck rules --schema user.yml --field address.zip
    """
    try:
        settings = load_settings()
        configure_logging_from_settings(settings, debug=debug)

        root = SchemaNode.from_dict(
            resolve_schema(schema_file, spec_file, api_path, method, response, status)
        )
        if field:
            target = get_field_schema(root, field)
            node = target if isinstance(target, SchemaNode) else None
            title = f"Validation rules for {field}"
        else:
            node = root
            title = "Schema overview"
        text = ErrorFormatter.format_field_rules(node, title)
    except click.ClickException:
        raise
    except Exception as e:
        output_error(e, json_output, debug)
        return

    if json_output:
        output_result({"field": field or "root", "found": node is not None, "rules": text}, True)
    else:
        click.echo(text)
