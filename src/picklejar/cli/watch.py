"""pjar watch command - rescan step files as they change."""

import asyncio
from collections.abc import Callable
from pathlib import Path

import click

from picklejar.cli.utils import (
    load_workspace_config,
    make_scanner,
    resolve_workspace,
    run_scan,
)
from picklejar.core.progress import pluralize, status
from picklejar.steps import StepScanner
from picklejar.watcher import StepFileWatcher


def make_change_handler(
    scanner: StepScanner, rescan: Callable[[], None]
) -> Callable[[list[Path]], None]:
    """Invalidate changed files in the scanner cache, then rescan."""

    def _on_change(paths: list[Path]) -> None:
        for path in paths:
            scanner.invalidate(path)
        status(f"{pluralize(len(paths), 'step file')} changed", style="info")
        rescan()

    return _on_change


@click.command()
@click.argument("path", default=".", type=click.Path(exists=True, path_type=Path))
def watch_command(path: Path) -> None:
    """Watch a workspace and report step definition counts on change.

    PATH is the workspace root (default: current directory). Stop with Ctrl+C.
    """
    root = resolve_workspace(path)
    config = load_workspace_config(root)
    scanner = make_scanner(config)

    def _rescan() -> None:
        run_scan(scanner, root, config)

    _rescan()

    watcher = StepFileWatcher(
        root=root,
        on_change=make_change_handler(scanner, _rescan),
        include_patterns=config.discovery.include_patterns,
        exclude_patterns=config.discovery.exclude_patterns,
        debounce_window=config.watch.debounce_sec,
        max_debounce_wait=config.watch.max_debounce_wait_sec,
    )

    status(f"Watching {root} (Ctrl+C to stop)", style="info")
    try:
        asyncio.run(watcher.run())
    except KeyboardInterrupt:
        status("Stopped", style="info")
