"""File watcher using watchfiles for async filesystem monitoring.

Design:
- One recursive awatch over the workspace root
- Changes are kept only when the root-relative path matches the include
  globs and no exclude glob; hardcoded and pruned directories never match
- Sliding-window debounce batches rapid saves into one callback
"""

from __future__ import annotations

import asyncio
import contextlib
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import structlog
from watchfiles import Change, awatch

from picklejar.core.excludes import (
    DEFAULT_EXCLUDE_PATTERNS,
    DEFAULT_INCLUDE_PATTERNS,
    is_hardcoded_dir,
    prunable_dir_names,
)
from picklejar.core.progress import pluralize
from picklejar.steps.discovery import matches_any

logger = structlog.get_logger()

# Debouncing configuration
DEBOUNCE_WINDOW_SEC = 0.5  # Sliding window for batching rapid changes
MAX_DEBOUNCE_WAIT_SEC = 2.0  # Maximum wait before forcing flush


@dataclass
class StepFileWatcher:
    """
    Async step file watcher with sliding-window debouncing.

    - Changes are buffered until ``debounce_window`` of quiet time
    - ``max_debounce_wait`` caps the delay under a steady stream of changes
    - ``on_change`` receives absolute paths, each at most once per batch
    """

    root: Path
    on_change: Callable[[list[Path]], None]
    include_patterns: Sequence[str] = DEFAULT_INCLUDE_PATTERNS
    exclude_patterns: Sequence[str] = DEFAULT_EXCLUDE_PATTERNS
    debounce_window: float = DEBOUNCE_WINDOW_SEC
    max_debounce_wait: float = MAX_DEBOUNCE_WAIT_SEC

    _pruned_dirs: frozenset[str] = field(init=False)
    _watch_task: asyncio.Task[None] | None = field(default=None, init=False)
    _stop_event: asyncio.Event = field(default_factory=asyncio.Event, init=False)
    # Debouncing state
    _pending_changes: set[Path] = field(default_factory=set, init=False)
    _last_change_time: float = field(default=0.0, init=False)
    _first_change_time: float = field(default=0.0, init=False)
    _debounce_task: asyncio.Task[None] | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.root = Path(self.root).resolve()
        self._pruned_dirs = prunable_dir_names(tuple(self.exclude_patterns))

    async def start(self) -> None:
        """Start watching for file changes."""
        if self._watch_task is not None:
            return

        self._stop_event.clear()
        self._watch_task = asyncio.create_task(self._watch_loop())
        logger.info(
            "file_watcher_started",
            root=str(self.root),
            debounce_window=self.debounce_window,
        )

    async def stop(self) -> None:
        """Stop watching, delivering any changes still pending."""
        self._stop_event.set()

        if self._debounce_task is not None and not self._debounce_task.done():
            self._debounce_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._debounce_task
            self._debounce_task = None

        if self._pending_changes:
            self._flush_pending()

        if self._watch_task is not None:
            self._watch_task.cancel()
            with contextlib.suppress(asyncio.CancelledError, asyncio.TimeoutError):
                await asyncio.wait_for(self._watch_task, timeout=2.0)
            self._watch_task = None

        logger.info("file_watcher_stopped")

    async def run(self) -> None:
        """Watch until ``stop()`` is called or the task is cancelled."""
        await self.start()
        try:
            await self._stop_event.wait()
        finally:
            await self.stop()

    def is_relevant(self, path: Path) -> bool:
        """Whether a changed path could hold step definitions."""
        try:
            rel_path = path.relative_to(self.root)
        except ValueError:
            return False

        if any(is_hardcoded_dir(p) or p in self._pruned_dirs for p in rel_path.parts[:-1]):
            return False

        rel = rel_path.as_posix()
        return matches_any(rel, self.include_patterns) and not matches_any(
            rel, self.exclude_patterns
        )

    def _queue_change(self, path: Path) -> None:
        """Queue a change for debounced delivery."""
        now = time.monotonic()

        if not self._pending_changes:
            self._first_change_time = now

        self._pending_changes.add(path)
        self._last_change_time = now

    def _should_flush(self) -> bool:
        if not self._pending_changes:
            return False

        now = time.monotonic()
        time_since_last = now - self._last_change_time
        time_since_first = now - self._first_change_time

        # Quiet window elapsed or max wait exceeded
        return time_since_last >= self.debounce_window or time_since_first >= self.max_debounce_wait

    def _flush_pending(self) -> None:
        if not self._pending_changes:
            return

        paths = sorted(self._pending_changes)
        self._pending_changes.clear()
        self._first_change_time = 0.0
        self._last_change_time = 0.0

        logger.info("changes_detected", count=len(paths), summary=pluralize(len(paths), "step file"))
        self.on_change(paths)

    async def _debounce_flush_loop(self) -> None:
        """Background task that flushes when the debounce window elapses."""
        try:
            while not self._stop_event.is_set():
                await asyncio.sleep(0.1)

                if self._should_flush():
                    self._flush_pending()
        except asyncio.CancelledError:
            pass

    async def _watch_loop(self) -> None:
        self._debounce_task = asyncio.create_task(self._debounce_flush_loop())

        try:
            while not self._stop_event.is_set():
                try:
                    async for changes in awatch(
                        self.root,
                        stop_event=self._stop_event,
                        ignore_permission_denied=True,
                    ):
                        self._handle_changes(changes)
                except asyncio.CancelledError:
                    raise
                except Exception as e:
                    if self._stop_event.is_set():
                        return
                    logger.error("watcher_error", error=str(e))
                    # Brief backoff before retry
                    await asyncio.sleep(1.0)
        except asyncio.CancelledError:
            pass
        finally:
            if self._debounce_task:
                self._debounce_task.cancel()

    def _handle_changes(self, changes: set[tuple[Change, str]]) -> int:
        """Queue relevant changes for debouncing. Returns how many were queued."""
        queued = 0
        for change_type, path_str in changes:
            path = Path(path_str)
            if not self.is_relevant(path):
                continue

            self._queue_change(path)
            queued += 1
            logger.debug("path_queued", path=str(path), change_type=change_type.name)

        return queued
