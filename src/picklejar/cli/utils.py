"""CLI utilities."""

from pathlib import Path
from typing import Any

import click
from rich.markup import escape

from picklejar.config import PickleJarConfig, load_config
from picklejar.core.errors import PickleJarError
from picklejar.core.logging import configure_logging
from picklejar.core.progress import pluralize, spinner, status
from picklejar.steps import ScanResult, StepScanner


def resolve_workspace(path: Path) -> Path:
    """Resolve PATH to a workspace directory.

    Raises:
        click.ClickException: If PATH is not a directory
    """
    root = path.resolve()
    if not root.is_dir():
        raise click.ClickException(f"'{root}' is not a directory.")
    return root


def load_workspace_config(root: Path) -> PickleJarConfig:
    """Load config for a workspace and apply its logging section.

    Config errors are reported as CLI errors. The global ``--config`` option
    replaces the workspace file and ``-v`` raises the configured level to DEBUG.
    """
    try:
        config = load_config(root, config_file=_global_option("config_file"))
    except PickleJarError as e:
        raise click.ClickException(str(e)) from e

    logging_config = config.logging
    if _global_option("verbose"):
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    configure_logging(config=logging_config)
    return config


def _global_option(name: str) -> Any:
    ctx = click.get_current_context(silent=True)
    if ctx is None or not isinstance(ctx.obj, dict):
        return None
    return ctx.obj.get(name)


def make_scanner(config: PickleJarConfig) -> StepScanner:
    return StepScanner(
        lookahead=config.scan.signature_lookahead,
        max_workers=config.scan.max_workers,
    )


def run_scan(
    scanner: StepScanner,
    root: Path,
    config: PickleJarConfig,
    *,
    quiet: bool = False,
) -> ScanResult:
    """Scan a workspace with console feedback on stderr.

    Unreadable files are reported as warnings; the scan itself only fails
    when the workspace root is unusable.
    """
    try:
        if quiet:
            result = _scan(scanner, root, config)
        else:
            with spinner(f"Scanning {root.name or root}"):
                result = _scan(scanner, root, config)
    except PickleJarError as e:
        raise click.ClickException(str(e)) from e

    if not quiet:
        for error in result.errors:
            status(escape(error.message), style="warning")
        status(
            f"{pluralize(len(result.step_definitions), 'step definition')} in "
            f"{pluralize(result.files_with_steps, 'file')}",
            style="success",
        )
    return result


def _scan(scanner: StepScanner, root: Path, config: PickleJarConfig) -> ScanResult:
    discovery = config.discovery
    return scanner.scan_workspace(
        root,
        discovery.include_patterns,
        discovery.exclude_patterns,
        max_file_size_bytes=discovery.max_file_size_mb * 1024 * 1024,
    )


def display_path(file_path: str, root: Path) -> str:
    """Path relative to the workspace when possible."""
    try:
        return Path(file_path).relative_to(root).as_posix()
    except ValueError:
        return file_path
