"""Tests for the step definition data model."""

import dataclasses

import pytest

from picklejar.steps.models import (
    STEP_TYPE_ORDER,
    Dialect,
    StepDefinition,
    StepParameter,
    StepType,
    basename,
)


class TestStepType:
    """Keyword normalization."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("given", StepType.GIVEN),
            ("WHEN", StepType.WHEN),
            ("@then", StepType.THEN),
            ("[And", StepType.AND),
            (" but ", StepType.BUT),
            ("Scenario", None),
        ],
    )
    def test_parse(self, token: str, expected: StepType | None) -> None:
        assert StepType.parse(token) is expected

    def test_order_is_gherkin_order(self) -> None:
        assert [str(t) for t in STEP_TYPE_ORDER] == ["Given", "When", "Then", "And", "But"]


class TestDialect:
    def test_language_by_dialect(self) -> None:
        assert Dialect.ATTRIBUTE.language == "csharp"
        assert Dialect.CALL.language == "javascript"
        assert Dialect.DECORATOR.language == "javascript"


class TestStepDefinition:
    """Immutable records and serialization."""

    @pytest.fixture
    def step(self) -> StepDefinition:
        return StepDefinition(
            type=StepType.GIVEN,
            pattern="I have {int} items",
            display_text="I have <items> items",
            file_path="C:\\repo\\steps\\cart.steps.ts",
            line_number=3,
            parameters=(StepParameter(name="items", type="int", index=0),),
            raw_match="Given('I have {int} items'",
        )

    def test_given_record_when_assigned_then_frozen(self, step: StepDefinition) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            step.pattern = "changed"  # type: ignore[misc]

    def test_file_name_splits_both_separators(self, step: StepDefinition) -> None:
        assert step.file_name == "cart.steps.ts"

    def test_to_dict_serializes_all_fields(self, step: StepDefinition) -> None:
        assert step.to_dict() == {
            "type": "Given",
            "pattern": "I have {int} items",
            "display_text": "I have <items> items",
            "file_path": "C:\\repo\\steps\\cart.steps.ts",
            "line_number": 3,
            "parameters": [{"name": "items", "type": "int", "index": 0}],
            "is_regex": False,
            "raw_match": "Given('I have {int} items'",
            "dialect": "call",
        }


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("a/b/c.steps.js", "c.steps.js"),
        ("a\\b\\Steps.cs", "Steps.cs"),
        ("plain.ts", "plain.ts"),
    ],
)
def test_basename(path: str, expected: str) -> None:
    assert basename(path) == expected
