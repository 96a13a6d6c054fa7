"""Scan orchestration: discovery, cache checks, parsing, error collection."""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from picklejar.core.errors import InternalError, ScanError
from picklejar.core.logging import clear_scan_id, set_scan_id
from picklejar.steps.cache import ScannerCache
from picklejar.steps.discovery import discover_files
from picklejar.steps.models import StepDefinition
from picklejar.steps.parser import StepDefinitionParser
from picklejar.steps.signature import DEFAULT_LOOKAHEAD

log = structlog.get_logger(__name__)

DEFAULT_MAX_WORKERS = 4


@dataclass
class ScanResult:
    """Outcome of a workspace scan."""

    step_definitions: list[StepDefinition] = field(default_factory=list)
    files_scanned: int = 0
    errors: list[ScanError] = field(default_factory=list)

    @property
    def files_with_steps(self) -> int:
        return len({d.file_path for d in self.step_definitions})


class StepScanner:
    """Cache-backed step definition scanner.

    Owns its cache; there is no process-wide instance. Parsing is pure, so
    files are parsed concurrently and only the cache is shared.
    """

    def __init__(
        self,
        cache: ScannerCache | None = None,
        *,
        lookahead: int = DEFAULT_LOOKAHEAD,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        self.cache = cache if cache is not None else ScannerCache()
        self._parser = StepDefinitionParser(lookahead=lookahead)
        self._max_workers = max_workers

    def scan(self, file_path: str, mtime: int, text: str) -> list[StepDefinition]:
        """Parse ``text`` unless the cache holds records for this exact mtime."""
        cached = self.cache.get(file_path, mtime)
        if cached is not None:
            return cached

        step_defs = self._parser.parse(text, file_path)
        self.cache.set(file_path, mtime, step_defs)
        return step_defs

    def scan_file(self, path: Path | str) -> list[StepDefinition]:
        """Stat, read and scan one file.

        The mtime is taken before reading, so a write racing the read leaves a
        stale mtime in the cache and forces a reparse next time. A failed stat
        is a cache miss; the read decides whether the file is unreadable.

        Raises:
            ScanError: The file could not be read.
        """
        file_path = str(path)
        try:
            mtime: int | None = Path(file_path).stat().st_mtime_ns
        except OSError as e:
            log.debug("file_stat_failed", path=file_path, reason=str(e))
            mtime = None

        if mtime is not None:
            cached = self.cache.get(file_path, mtime)
            if cached is not None:
                return cached

        try:
            text = Path(file_path).read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise ScanError.unreadable(file_path, str(e)) from e

        if mtime is None:
            return self._parser.parse(text, file_path)
        return self.scan(file_path, mtime, text)

    def scan_files(self, paths: Sequence[Path | str]) -> ScanResult:
        """Scan ``paths`` concurrently, preserving their order in the result.

        Raises:
            InternalError: A worker failed with anything other than a read error.
        """
        result = ScanResult(files_scanned=len(paths))
        if not paths:
            return result

        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            futures = [executor.submit(self.scan_file, path) for path in paths]

            for path, future in zip(paths, futures, strict=True):
                try:
                    result.step_definitions.extend(future.result())
                except ScanError as e:
                    log.warning("file_scan_failed", path=str(path), reason=e.details.get("reason"))
                    result.errors.append(e)
                except Exception as e:
                    raise InternalError.unexpected(str(e), path=str(path)) from e

        return result

    def scan_workspace(
        self,
        root: Path | str,
        include_patterns: Sequence[str],
        exclude_patterns: Sequence[str],
        *,
        max_file_size_bytes: int | None = None,
    ) -> ScanResult:
        """Discover and scan every candidate file under ``root``.

        Raises:
            ScanError: ``root`` is not a directory.
        """
        root_path = Path(root)
        if not root_path.is_dir():
            raise ScanError.root_not_found(str(root_path))

        set_scan_id()
        try:
            paths = discover_files(
                root_path,
                include_patterns,
                exclude_patterns,
                max_file_size_bytes=max_file_size_bytes,
            )
            log.debug("workspace_scan_started", root=str(root_path), files=len(paths))
            result = self.scan_files(paths)
            log.info(
                "workspace_scan_done",
                files=result.files_scanned,
                steps=len(result.step_definitions),
                errors=len(result.errors),
            )
            return result
        finally:
            clear_scan_id()

    def invalidate(self, file_path: Path | str) -> bool:
        return self.cache.invalidate(str(file_path))

    def clear_cache(self) -> None:
        self.cache.clear()
