"""Step definition recognition, parameter inference and cataloguing."""

from picklejar.steps.cache import CacheEntry, ScannerCache
from picklejar.steps.discovery import discover_files, matches_glob
from picklejar.steps.models import (
    STEP_TYPE_ORDER,
    Dialect,
    StepDefinition,
    StepParameter,
    StepType,
)
from picklejar.steps.parser import StepDefinitionParser, parse_file
from picklejar.steps.scanner import ScanResult, StepScanner
from picklejar.steps.snippets import example_text, location, step_text, to_snippet
from picklejar.steps.tree import (
    Group,
    Leaf,
    TreeNode,
    build_tree,
    count_leaves,
    filter_steps,
    search_steps,
)

__all__ = [
    "CacheEntry",
    "Dialect",
    "Group",
    "Leaf",
    "STEP_TYPE_ORDER",
    "ScanResult",
    "ScannerCache",
    "StepDefinition",
    "StepDefinitionParser",
    "StepParameter",
    "StepScanner",
    "StepType",
    "TreeNode",
    "build_tree",
    "count_leaves",
    "discover_files",
    "example_text",
    "filter_steps",
    "location",
    "matches_glob",
    "parse_file",
    "search_steps",
    "step_text",
    "to_snippet",
]
