"""pjar init command - write a starter workspace config."""

from pathlib import Path

import click

from picklejar.cli.utils import resolve_workspace
from picklejar.config import config_path, write_config_template
from picklejar.core.progress import status


def initialize_workspace(root: Path, *, force: bool = False) -> bool:
    """Write ``.picklejar/config.yaml``, returning True if it was written.

    Args:
        root: Workspace root
        force: Overwrite an existing config file
    """
    target = config_path(root)

    if target.exists() and not force:
        status(f"Already initialized: {target}", style="info")
        status("Use --force to overwrite", style="info")
        return False

    write_config_template(target)
    status(f"Wrote {target}", style="success")
    return True


@click.command()
@click.argument("path", default=".", type=click.Path(exists=True, path_type=Path))
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing config")
def init_command(path: Path, force: bool) -> None:
    """Create a PickleJar config for a workspace.

    PATH is the workspace root (default: current directory).
    """
    initialize_workspace(resolve_workspace(path), force=force)
