"""Catalog view over parsed step definitions: filter, group, sort.

A fresh tree is built on every query; the records in the scanner cache are
the only retained state.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from picklejar.steps.models import STEP_TYPE_ORDER, StepDefinition, basename


@dataclass(frozen=True, slots=True)
class Group:
    """Labelled container node: ``"{name} ({count})"``."""

    label: str
    children: tuple[TreeNode, ...]


@dataclass(frozen=True, slots=True)
class Leaf:
    """One step definition, labelled with its display text."""

    label: str
    definition: StepDefinition


TreeNode = Group | Leaf


def normalize_filter(filter_text: str) -> str:
    return filter_text.strip().lower()


def matches_filter(step_def: StepDefinition, needle: str) -> bool:
    """``needle`` must already be normalized; empty matches everything."""
    if not needle:
        return True
    return (
        needle in step_def.pattern.lower()
        or needle in step_def.display_text.lower()
        or needle in step_def.file_path.lower()
    )


def filter_steps(records: Iterable[StepDefinition], filter_text: str = "") -> list[StepDefinition]:
    needle = normalize_filter(filter_text)
    return [r for r in records if matches_filter(r, needle)]


def search_steps(records: Iterable[StepDefinition], query: str) -> list[StepDefinition]:
    """Like ``filter_steps`` but an empty query finds nothing."""
    if not normalize_filter(query):
        return []
    return filter_steps(records, query)


def build_tree(
    records: Iterable[StepDefinition],
    filter_text: str = "",
    *,
    group_by_type: bool = True,
    sort: bool = True,
) -> list[TreeNode]:
    """Build the catalog view.

    Args:
        records: Parsed step definitions, in scan order.
        filter_text: Case-insensitive substring of pattern, display text or
            path. Surrounding whitespace is ignored.
        group_by_type: Group by file basename, then by step type. When off,
            the result is a flat list of leaves.
        sort: Sort each innermost leaf list by display text.

    Returns:
        Top-level nodes. A filter that matches nothing yields ``[]``.
    """
    filtered = filter_steps(records, filter_text)
    if not group_by_type:
        return list(_to_leaves(filtered, sort))
    return _build_grouped(filtered, sort)


def count_leaves(nodes: Iterable[TreeNode]) -> int:
    total = 0
    for node in nodes:
        if isinstance(node, Leaf):
            total += 1
        else:
            total += count_leaves(node.children)
    return total


def _build_grouped(records: Sequence[StepDefinition], sort: bool) -> list[TreeNode]:
    by_file: dict[str, list[StepDefinition]] = {}
    for record in records:
        by_file.setdefault(basename(record.file_path), []).append(record)

    groups: list[TreeNode] = []
    for file_name in sorted(by_file):
        file_records = by_file[file_name]
        groups.append(
            Group(
                label=_group_label(file_name, len(file_records)),
                children=tuple(_build_type_groups(file_records, sort)),
            )
        )
    return groups


def _build_type_groups(records: Sequence[StepDefinition], sort: bool) -> list[TreeNode]:
    by_type: dict[str, list[StepDefinition]] = {}
    for record in records:
        by_type.setdefault(record.type, []).append(record)

    return [
        Group(
            label=_group_label(str(step_type), len(by_type[step_type])),
            children=_to_leaves(by_type[step_type], sort),
        )
        for step_type in STEP_TYPE_ORDER
        if step_type in by_type
    ]


def _to_leaves(records: Sequence[StepDefinition], sort: bool) -> tuple[Leaf, ...]:
    leaves = [Leaf(label=r.display_text, definition=r) for r in records]
    if sort:
        # Stable: equal labels keep scan order
        leaves.sort(key=lambda leaf: (leaf.label.casefold(), leaf.label))
    return tuple(leaves)


def _group_label(name: str, count: int) -> str:
    return f"{name} ({count})"
