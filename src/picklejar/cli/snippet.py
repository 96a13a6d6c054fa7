"""pjar snippet command - insertion text for one step definition."""

from pathlib import Path

import click

from picklejar.cli.utils import load_workspace_config, make_scanner, resolve_workspace
from picklejar.core.errors import PickleJarError, ScanError
from picklejar.steps import StepDefinition, StepScanner, example_text, step_text, to_snippet


def parse_location(location: str) -> tuple[str, int]:
    """Split ``path:line`` into its parts.

    Raises:
        ScanError: If the line part is missing or not a positive integer
    """
    file_part, sep, line_part = location.rpartition(":")
    if not sep or not file_part:
        raise ScanError.location_invalid(location, "expected PATH:LINE")
    try:
        line = int(line_part)
    except ValueError as e:
        raise ScanError.location_invalid(location, "line must be an integer") from e
    if line < 1:
        raise ScanError.location_invalid(location, "line numbers start at 1")
    return file_part, line


def find_definition(scanner: StepScanner, file_path: Path, line: int) -> StepDefinition:
    """Return the step definition declared on ``line`` of ``file_path``.

    Raises:
        ScanError: If the file is unreadable or declares no step on that line
    """
    for step_def in scanner.scan_file(file_path):
        if step_def.line_number == line:
            return step_def
    raise ScanError.location_invalid(f"{file_path}:{line}", "no step definition on that line")


@click.command()
@click.argument("location")
@click.argument("root", default=".", type=click.Path(exists=True, path_type=Path))
def snippet_command(location: str, root: Path) -> None:
    """Print insertion text for the step declared at LOCATION (PATH:LINE).

    Relative paths are resolved against ROOT (default: current directory).
    """
    workspace = resolve_workspace(root)
    config = load_workspace_config(workspace)

    try:
        file_part, line = parse_location(location)
        step_def = find_definition(make_scanner(config), workspace / file_part, line)
    except PickleJarError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Step:    {step_text(step_def)}")
    click.echo(f"Snippet: {to_snippet(step_def)}")
    click.echo(f"Example: {example_text(step_def)}")
