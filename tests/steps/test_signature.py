"""Tests for signature parameter-name extraction."""

import pytest

from picklejar.steps.signature import (
    extract_signature_names,
    parse_csharp_signature,
    parse_javascript_signature,
)


class TestCSharpSignature:
    """C# method signatures after SpecFlow attributes."""

    def test_given_typed_params_when_parsed_then_names_only(self) -> None:
        names = parse_csharp_signature(
            "public async Task GoShopping(string shoppingCentre, int count)"
        )

        assert names == ["shoppingCentre", "count"]

    def test_given_irregular_spacing_when_parsed_then_last_token(self) -> None:
        names = parse_csharp_signature("public void Given(Table table, decimal  amount)")

        assert names == ["table", "amount"]

    def test_given_empty_param_list_when_parsed_then_no_override(self) -> None:
        assert parse_csharp_signature("public void GivenNothing()") == []

    def test_given_no_method_when_parsed_then_no_override(self) -> None:
        assert parse_csharp_signature("{ }") == []


class TestJavaScriptSignature:
    """Cucumber.js callbacks, arrows and decorated methods."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("function(name, age) {", ["name", "age"]),
            ("async function (name) {", ["name"]),
            ("(name, age) => {", ["name", "age"]),
            ("(name: string, age: number) => {", ["name", "age"]),
            ("(name = 'x') => {", ["name"]),
            ("async goShopping(shoppingCentre: string) {", ["shoppingCentre"]),
        ],
    )
    def test_given_signature_when_parsed_then_names(self, text: str, expected: list[str]) -> None:
        assert parse_javascript_signature(text) == expected

    def test_given_return_type_annotation_when_parsed_then_method_names(self) -> None:
        """A method with a return annotation is not a callback but still parses."""
        names = parse_javascript_signature("async goShopping(centre: string): Promise<void> {")

        assert names == ["centre"]

    def test_given_nothing_parenthesized_when_parsed_then_no_override(self) -> None:
        assert parse_javascript_signature("this.count = 1;") == []


class TestExtractSignatureNames:
    """Language dispatch over the look-ahead window."""

    def test_given_csharp_lines_when_extracted_then_joined_and_parsed(self) -> None:
        lines = ["    public void GivenIHaveItems(", "        int count)", "    {"]

        assert extract_signature_names(lines, "csharp") == ["count"]

    def test_given_javascript_lines_when_extracted_then_callback_names(self) -> None:
        lines = ["  function (count, label) {", "    return;", "  });"]

        assert extract_signature_names(lines, "javascript") == ["count", "label"]

    def test_given_empty_window_when_extracted_then_no_override(self) -> None:
        assert extract_signature_names([], "javascript") == []
        assert extract_signature_names([], "csharp") == []
