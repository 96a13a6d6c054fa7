"""Workspace file discovery for step definition sources."""

from __future__ import annotations

import fnmatch
import os
from collections.abc import Sequence
from pathlib import Path

import structlog

from picklejar.core.excludes import is_hardcoded_dir, prunable_dir_names

log = structlog.get_logger(__name__)


def _pattern_variants(pattern: str) -> list[str]:
    """Expand ``**`` so it can also match zero directories."""
    variants = [pattern]
    if pattern.startswith("**/"):
        variants.append(pattern[3:])
    for variant in list(variants):
        if "/**/" in variant:
            variants.append(variant.replace("/**/", "/"))
    return variants


def matches_glob(rel_path: str, pattern: str) -> bool:
    """Check if a POSIX relative path matches a glob pattern, with ** support."""
    return any(fnmatch.fnmatchcase(rel_path, variant) for variant in _pattern_variants(pattern))


def matches_any(rel_path: str, patterns: Sequence[str]) -> bool:
    return any(matches_glob(rel_path, pattern) for pattern in patterns)


def discover_files(
    root: Path | str,
    include_patterns: Sequence[str],
    exclude_patterns: Sequence[str],
    *,
    max_file_size_bytes: int | None = None,
) -> list[Path]:
    """Find candidate step definition files under ``root``.

    A file is a candidate when its root-relative path matches at least one
    include pattern and no exclude pattern. Hardcoded directories and
    directories named by ``**/<name>/**`` excludes are not traversed.

    Returns:
        Absolute paths, sorted.
    """
    root_path = Path(root).resolve()
    pruned = prunable_dir_names(tuple(exclude_patterns))
    found: list[Path] = []

    for dirpath, dirnames, filenames in os.walk(root_path):
        dirnames[:] = [d for d in dirnames if not is_hardcoded_dir(d) and d not in pruned]

        for filename in filenames:
            full_path = Path(dirpath) / filename
            rel_path = full_path.relative_to(root_path).as_posix()
            if not matches_any(rel_path, include_patterns):
                continue
            if matches_any(rel_path, exclude_patterns):
                continue
            if max_file_size_bytes is not None and _too_large(full_path, max_file_size_bytes):
                log.debug("file_skipped_size", path=rel_path)
                continue
            found.append(full_path)

    found.sort()
    log.debug("files_discovered", root=str(root_path), count=len(found))
    return found


def _too_large(path: Path, limit: int) -> bool:
    try:
        return path.stat().st_size > limit
    except OSError:
        # Vanished between listing and stat; the scan reports it if still listed
        return False
