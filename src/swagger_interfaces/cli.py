"""CLI entry point for swagger-interfaces."""

from pathlib import Path

import click

from swagger_interfaces.config import DEFAULT_DOCS_PATH, DEFAULT_OUTPUT, load_config
from swagger_interfaces.errors import SwaggerInterfaceError
from swagger_interfaces.generator.interface import compose, generate_declarations
from swagger_interfaces.generator.naming import format_interface_name
from swagger_interfaces.generator.validator import validate_declarations
from swagger_interfaces.generator.writer import write_interface_file
from swagger_interfaces.parser.loader import load_document
from swagger_interfaces.parser.swagger import classify_shape, get_success_schema, iter_operations


def _load(source: str | None, config_path: Path | None, root: Path, docs_path: str) -> dict:
    """Load the Swagger document from --source, or from the configured base URL."""
    try:
        if source is not None:
            api_key = load_config(config_path).api_key if config_path else None
            click.echo(f"Loading {source}...")
            return load_document(source, api_key=api_key)

        config = load_config(config_path, root=root)
        url = config.swagger_url(docs_path)
        click.echo(f"Fetching {url}...")
        return load_document(url, api_key=config.api_key)
    except SwaggerInterfaceError as e:
        raise click.ClickException(str(e)) from e


@click.group()
def main():
    """Generate TypeScript interfaces from Swagger response schemas."""
    pass


@main.command()
@click.option("--source", default=None, help="Swagger document path or URL. Defaults to the configured baseURL.")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Path to client.json.")
@click.option("--root", default=Path("."), type=click.Path(exists=True, file_okay=False, path_type=Path), help="Workspace root searched for client.json.")
@click.option("--docs-path", default=DEFAULT_DOCS_PATH, show_default=True, help="Swagger docs path appended to baseURL.")
@click.option("-o", "--output", default=None, type=click.Path(dir_okay=False, path_type=Path), help=f"Output file. Defaults to ROOT/{DEFAULT_OUTPUT.as_posix()}.")
def generate(source: str | None, config_path: Path | None, root: Path, docs_path: str, output: Path | None):
    """Generate the interface file for every operation with a response schema."""
    document = _load(source, config_path, root, docs_path)

    declarations = generate_declarations(document)
    click.echo(f"Found {len(declarations)} operations with response schemas.")

    for name, error in validate_declarations(declarations).items():
        click.echo(f"  Warning: {name}: {error}", err=True)

    output = output or root / DEFAULT_OUTPUT
    write_interface_file(compose(declarations), output)
    click.echo(f"Interfaces saved to {output}")


@main.command()
@click.option("--source", default=None, help="Swagger document path or URL. Defaults to the configured baseURL.")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Path to client.json.")
@click.option("--root", default=Path("."), type=click.Path(exists=True, file_okay=False, path_type=Path), help="Workspace root searched for client.json.")
@click.option("--docs-path", default=DEFAULT_DOCS_PATH, show_default=True, help="Swagger docs path appended to baseURL.")
def inspect(source: str | None, config_path: Path | None, root: Path, docs_path: str):
    """List each operation's verb, response shape and interface name."""
    document = _load(source, config_path, root, docs_path)

    operations = iter_operations(document)
    click.echo(f"Found {len(operations)} operations.")
    for op in operations:
        shape = classify_shape(get_success_schema(op))
        click.echo(f"  {op.verb.upper():6} {op.path}  [{shape.value}]  {format_interface_name(op.operation_id)}")
