"""Command-line interface for rendering list views."""

from __future__ import annotations

import dataclasses
import logging
import sys
from typing import TextIO

import click

from .exceptions import ListViewError
from .manifest import ListViewManifest
from .text_table import TextTable

MANIFEST_OPTION_HELP = "YAML or JSON list view manifest."


def _load_manifest(file_path: str) -> ListViewManifest:
    """Load a manifest, exiting with an error message when it is invalid."""
    try:
        return ListViewManifest.load(file_path)
    except ListViewError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(package_name="listview")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Render HTML list views from YAML manifests."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


@cli.command()
@click.option(
    "--file",
    "-f",
    "file_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help=MANIFEST_OPTION_HELP,
)
@click.option(
    "--output",
    "-o",
    type=click.File("w"),
    default="-",
    help="Output file (default: stdout).",
)
@click.option(
    "--empty-message",
    help="Notice rendered when there is no record (overrides the manifest).",
)
def render(file_path: str, output: TextIO, empty_message: str | None) -> None:
    """Render a manifest as HTML."""
    manifest = _load_manifest(file_path)
    if empty_message:
        manifest = dataclasses.replace(manifest, empty_message=empty_message)

    try:
        html = manifest.build().render()
    except ListViewError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    output.write(html + "\n")


@cli.command()
@click.option(
    "--file",
    "-f",
    "file_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help=MANIFEST_OPTION_HELP,
)
def columns(file_path: str) -> None:
    """Show the resolved columns of a manifest."""
    manifest = _load_manifest(file_path)

    try:
        view = manifest.build()
        resolved = view.columns
        classes = view.resolve_columns_classes()
    except ListViewError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    rows = []
    for column_id, column in resolved.items():
        column_class = type(column)
        rows.append(
            [
                str(column_id),
                f"{column_class.__module__}:{column_class.__qualname__}",
                column.title or "",
                classes[column_id],
            ]
        )

    click.echo(TextTable().render(["Id", "Column", "Title", "Classes"], rows))


if __name__ == "__main__":
    cli()
