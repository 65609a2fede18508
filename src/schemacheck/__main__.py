import click

from schemacheck import __version__
from schemacheck.cli import example, rules, validate


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="schemacheck")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """schemacheck - validate payloads against API schemas and generate examples"""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(validate)
cli.add_command(example)
cli.add_command(rules)


if __name__ == "__main__":
    cli()
