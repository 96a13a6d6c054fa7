"""Tests for the catalog tree builder."""

import pytest

from picklejar.steps.models import StepDefinition, StepType
from picklejar.steps.tree import (
    Group,
    Leaf,
    TreeNode,
    build_tree,
    count_leaves,
    filter_steps,
    search_steps,
)


def _step(
    step_type: StepType,
    display: str,
    file_path: str,
    line: int = 1,
    pattern: str | None = None,
) -> StepDefinition:
    return StepDefinition(
        type=step_type,
        pattern=pattern if pattern is not None else display,
        display_text=display,
        file_path=file_path,
        line_number=line,
    )


@pytest.fixture
def records() -> list[StepDefinition]:
    return [
        _step(StepType.THEN, "the total is <total>", "src/steps/cart.steps.ts", 9),
        _step(StepType.GIVEN, "an empty cart", "src/steps/cart.steps.ts", 1),
        _step(StepType.GIVEN, "a cart with <count> items", "src/steps/cart.steps.ts", 4),
        _step(StepType.WHEN, "I log in as <user>", "C:\\repo\\Steps\\LoginSteps.cs", 12),
        _step(StepType.AND, "Banner is shown", "src/steps/cart.steps.ts", 15),
    ]


def _labels(nodes: tuple[TreeNode, ...] | list[TreeNode]) -> list[str]:
    return [n.label for n in nodes]


class TestBuildTreeGrouped:
    """File then step-type grouping."""

    def test_given_records_when_grouped_then_files_sorted_by_basename(
        self, records: list[StepDefinition]
    ) -> None:
        # Given
        steps = records

        # When
        tree = build_tree(steps)

        # Then
        assert _labels(tree) == ["LoginSteps.cs (1)", "cart.steps.ts (4)"]

    def test_given_file_group_when_built_then_types_in_fixed_order(
        self, records: list[StepDefinition]
    ) -> None:
        tree = build_tree(records)

        cart = tree[1]
        assert isinstance(cart, Group)
        assert _labels(cart.children) == ["Given (2)", "Then (1)", "And (1)"]

    def test_given_sort_when_built_then_leaves_sorted_by_display_text(
        self, records: list[StepDefinition]
    ) -> None:
        tree = build_tree(records, sort=True)

        given = tree[1].children[0]  # type: ignore[union-attr]
        assert _labels(given.children) == ["a cart with <count> items", "an empty cart"]

    def test_given_no_sort_when_built_then_scan_order_kept(
        self, records: list[StepDefinition]
    ) -> None:
        tree = build_tree(records, sort=False)

        given = tree[1].children[0]  # type: ignore[union-attr]
        assert _labels(given.children) == ["an empty cart", "a cart with <count> items"]

    def test_given_leaves_when_built_then_each_carries_its_definition(
        self, records: list[StepDefinition]
    ) -> None:
        tree = build_tree(records)

        login_when = tree[0].children[0]  # type: ignore[union-attr]
        leaf = login_when.children[0]
        assert isinstance(leaf, Leaf)
        assert leaf.definition is records[3]
        assert leaf.label == "I log in as <user>"

    def test_given_same_basename_in_two_dirs_when_grouped_then_merged(self) -> None:
        steps = [
            _step(StepType.GIVEN, "a", "web/steps/common.steps.js"),
            _step(StepType.GIVEN, "b", "api/steps/common.steps.js"),
        ]

        tree = build_tree(steps)

        assert _labels(tree) == ["common.steps.js (2)"]

    def test_given_grouped_tree_when_counted_then_labels_sum_to_records(
        self, records: list[StepDefinition]
    ) -> None:
        """Group counts add up to the number of filtered records."""
        tree = build_tree(records)

        label_total = sum(int(n.label.rsplit("(", 1)[1].rstrip(")")) for n in tree)
        assert label_total == len(records) == count_leaves(tree)

    def test_given_mixed_case_labels_when_sorted_then_case_insensitive(self) -> None:
        steps = [
            _step(StepType.GIVEN, "beta", "a.steps.js"),
            _step(StepType.GIVEN, "Alpha", "a.steps.js"),
            _step(StepType.GIVEN, "alpha", "a.steps.js"),
        ]

        tree = build_tree(steps)

        given = tree[0].children[0]  # type: ignore[union-attr]
        assert _labels(given.children) == ["Alpha", "alpha", "beta"]


class TestBuildTreeFlat:
    """Grouping disabled."""

    def test_given_no_grouping_when_built_then_flat_sorted_leaves(
        self, records: list[StepDefinition]
    ) -> None:
        tree = build_tree(records, group_by_type=False)

        assert all(isinstance(n, Leaf) for n in tree)
        assert _labels(tree) == [
            "a cart with <count> items",
            "an empty cart",
            "Banner is shown",
            "I log in as <user>",
            "the total is <total>",
        ]

    def test_given_no_grouping_no_sort_when_built_then_input_order(
        self, records: list[StepDefinition]
    ) -> None:
        tree = build_tree(records, group_by_type=False, sort=False)

        assert [n.definition for n in tree] == records  # type: ignore[union-attr]


class TestFiltering:
    """Filter and search."""

    def test_given_empty_filter_when_built_then_full_tree(
        self, records: list[StepDefinition]
    ) -> None:
        assert build_tree(records, "") == build_tree(records)
        assert count_leaves(build_tree(records, "   ")) == len(records)

    def test_given_non_matching_filter_when_built_then_empty(
        self, records: list[StepDefinition]
    ) -> None:
        assert build_tree(records, "no such step") == []

    @pytest.mark.parametrize(
        ("filter_text", "expected"),
        [
            ("CART", 4),  # file path, case-insensitive
            ("<user>", 1),  # display text
            ("  empty  ", 1),  # trimmed
            ("loginsteps", 1),  # Windows path
        ],
    )
    def test_given_filter_when_applied_then_matches_pattern_display_or_path(
        self, records: list[StepDefinition], filter_text: str, expected: int
    ) -> None:
        assert len(filter_steps(records, filter_text)) == expected

    @pytest.mark.parametrize(
        ("filter_text", "extra"),
        [
            ("cart", " with"),
            ("CART", ".steps"),
            ("the", " total"),
            ("<", "user>"),
            ("", "banner"),
            ("log", "zzz"),
        ],
    )
    def test_given_longer_filter_when_applied_then_subset_of_shorter(
        self, records: list[StepDefinition], filter_text: str, extra: str
    ) -> None:
        """Extending a filter never brings back a record the shorter one dropped."""
        broad = filter_steps(records, filter_text)
        narrow = filter_steps(records, filter_text + extra)

        assert all(record in broad for record in narrow)
        assert len(narrow) <= len(broad)

    def test_given_filter_matching_pattern_only_when_applied_then_kept(self) -> None:
        step = _step(
            StepType.GIVEN, "I have <n> cukes", "a.steps.js", pattern="I have (\\d+) cukes"
        )

        assert filter_steps([step], "\\d+") == [step]

    def test_given_filter_when_grouped_then_counts_reflect_filter(
        self, records: list[StepDefinition]
    ) -> None:
        tree = build_tree(records, "cart")

        assert _labels(tree) == ["cart.steps.ts (4)"]

    def test_given_empty_query_when_searched_then_nothing(
        self, records: list[StepDefinition]
    ) -> None:
        assert search_steps(records, "") == []
        assert search_steps(records, "  ") == []

    def test_given_query_when_searched_then_filter_semantics(
        self, records: list[StepDefinition]
    ) -> None:
        assert search_steps(records, "total") == [records[0]]
