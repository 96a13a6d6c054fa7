"""PickleJar CLI - pjar command."""

from pathlib import Path

import click

from picklejar import __version__
from picklejar.cli.init import init_command
from picklejar.cli.listing import list_command
from picklejar.cli.search import search_command
from picklejar.cli.snippet import snippet_command
from picklejar.cli.watch import watch_command
from picklejar.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="pjar")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Config file to use instead of the workspace .picklejar/config.yaml",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_file: Path | None) -> None:
    """PickleJar - browse Cucumber and SpecFlow step definitions."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_file"] = config_file
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(init_command, name="init")
cli.add_command(list_command, name="list")
cli.add_command(search_command, name="search")
cli.add_command(snippet_command, name="snippet")
cli.add_command(watch_command, name="watch")


if __name__ == "__main__":
    cli()
