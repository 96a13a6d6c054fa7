"""Per-file memo of parse results, keyed by path and modification time."""

from __future__ import annotations

import threading
from dataclasses import dataclass

from picklejar.steps.models import StepDefinition


@dataclass(frozen=True, slots=True)
class CacheEntry:
    file_path: str
    mtime: int
    step_defs: tuple[StepDefinition, ...]


class ScannerCache:
    """Thread-safe cache of parsed step definitions.

    An entry is valid only while its stored mtime equals the file's current
    mtime. Entries are replaced whole under the lock, so readers never see a
    half-updated entry and the last writer for a path wins.
    """

    def __init__(self) -> None:
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, file_path: str, current_mtime: int) -> list[StepDefinition] | None:
        """Return cached records, or None on a miss (unknown path or stale mtime)."""
        with self._lock:
            entry = self._entries.get(file_path)
        if entry is None or entry.mtime != current_mtime:
            return None
        return list(entry.step_defs)

    def set(self, file_path: str, mtime: int, step_defs: list[StepDefinition]) -> None:
        entry = CacheEntry(file_path=file_path, mtime=mtime, step_defs=tuple(step_defs))
        with self._lock:
            self._entries[file_path] = entry

    def invalidate(self, file_path: str) -> bool:
        """Drop one entry. Returns True if it was present."""
        with self._lock:
            return self._entries.pop(file_path, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def paths(self) -> list[str]:
        with self._lock:
            return sorted(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, file_path: object) -> bool:
        with self._lock:
            return file_path in self._entries
