"""Canonical exclude patterns for step definition discovery.

Tier 0 (HARDCODED_DIRS): Never traversed, not user-configurable.
    - VCS internals, PickleJar data directory

Tier 1 (DEFAULT_EXCLUDE_PATTERNS): Excluded by default, replaced wholesale
    when the user configures ``discovery.exclude_patterns``.
"""

from __future__ import annotations

HARDCODED_DIRS: frozenset[str] = frozenset(
    (
        # VCS internals
        ".git",
        ".svn",
        ".hg",
        ".bzr",
        # PickleJar data
        ".picklejar",
    )
)

DEFAULT_INCLUDE_PATTERNS: tuple[str, ...] = (
    "**/*.steps.ts",
    "**/*.steps.js",
    "**/*Steps.cs",
    "**/*StepDefinitions.cs",
    "**/step_definitions/**/*.ts",
    "**/step_definitions/**/*.js",
    "**/StepDefinitions/**/*.cs",
    "**/steps/**/*.ts",
    "**/steps/**/*.js",
    "**/Steps/**/*.cs",
)

DEFAULT_EXCLUDE_PATTERNS: tuple[str, ...] = (
    "**/node_modules/**",
    "**/dist/**",
    "**/out/**",
    "**/.git/**",
)


def is_hardcoded_dir(dirname: str) -> bool:
    """Check if directory is in the hardcoded (never traverse) tier."""
    return dirname in HARDCODED_DIRS


def prunable_dir_names(exclude_patterns: list[str] | tuple[str, ...]) -> frozenset[str]:
    """Directory names that whole-directory exclude globs name.

    ``**/node_modules/**`` -> ``node_modules``. Patterns with any other glob
    syntax in the directory part are left to per-file matching.
    """
    names: set[str] = set()
    for pattern in exclude_patterns:
        if not (pattern.startswith("**/") and pattern.endswith("/**")):
            continue
        base = pattern[3:-3]
        if base and not any(ch in base for ch in "*?[]/"):
            names.add(base)
    return frozenset(names)
