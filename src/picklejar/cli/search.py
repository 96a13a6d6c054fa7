"""pjar search command - find step definitions by text."""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from picklejar.cli.utils import (
    display_path,
    load_workspace_config,
    make_scanner,
    resolve_workspace,
    run_scan,
)
from picklejar.steps import search_steps


@click.command()
@click.argument("query")
@click.argument("path", default=".", type=click.Path(exists=True, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def search_command(query: str, path: Path, as_json: bool) -> None:
    """Search step definitions for QUERY.

    Matches pattern, display text and file path, ignoring case.
    """
    root = resolve_workspace(path)
    config = load_workspace_config(root)
    result = run_scan(make_scanner(config), root, config, quiet=as_json)
    matches = search_steps(result.step_definitions, query)

    if as_json:
        click.echo(json.dumps([m.to_dict() for m in matches], indent=2))
        return

    if not matches:
        click.echo(f"No step definitions match '{query}'.")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Type")
    table.add_column("Step")
    table.add_column("Location", style="dim")

    for step_def in matches:
        table.add_row(
            str(step_def.type),
            Text(step_def.display_text),
            Text(f"{display_path(step_def.file_path, root)}:{step_def.line_number}"),
        )

    Console(highlight=False).print(table)
