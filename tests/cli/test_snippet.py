"""Tests for pjar snippet command."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from picklejar.cli.main import cli
from picklejar.cli.snippet import parse_location
from picklejar.core.errors import ErrorCode, ScanError

runner = CliRunner()


class TestParseLocation:
    def test_given_path_and_line_then_split(self) -> None:
        assert parse_location("features/steps/a.steps.js:12") == ("features/steps/a.steps.js", 12)

    def test_given_windows_drive_then_last_colon_used(self) -> None:
        assert parse_location("C:\\repo\\Steps.cs:4") == ("C:\\repo\\Steps.cs", 4)

    @pytest.mark.parametrize(
        ("location", "reason"),
        [
            ("a.steps.js", "expected PATH:LINE"),
            (":5", "expected PATH:LINE"),
            ("a.steps.js:x", "line must be an integer"),
            ("a.steps.js:0", "line numbers start at 1"),
        ],
    )
    def test_given_bad_location_then_location_invalid(self, location: str, reason: str) -> None:
        with pytest.raises(ScanError) as exc_info:
            parse_location(location)

        assert exc_info.value.code == ErrorCode.SCAN_LOCATION_INVALID
        assert exc_info.value.details["reason"] == reason


class TestSnippetCommand:
    """pjar snippet command tests."""

    def test_given_js_step_when_snippet_then_three_renderings(self, workspace: Path) -> None:
        # Given
        location = "features/step_definitions/cart.steps.js:8"

        # When
        result = runner.invoke(cli, ["snippet", location, str(workspace)])

        # Then
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "Step:    When I add the product <productName>",
            "Snippet: When I add the product ${1:(productName)}$0",
            "Example: When I add the product text",
        ]

    def test_given_csharp_step_when_snippet_then_typed_example(self, workspace: Path) -> None:
        result = runner.invoke(cli, ["snippet", "Specs/Steps/ShoppingSteps.cs:6", str(workspace)])

        assert result.exit_code == 0
        assert "Example: Given I have 0 items in my basket" in result.stdout

    def test_given_line_without_step_when_snippet_then_error(self, workspace: Path) -> None:
        result = runner.invoke(cli, ["snippet", "Specs/Steps/ShoppingSteps.cs:7", str(workspace)])

        assert result.exit_code == 1
        assert "no step definition on that line" in result.output

    def test_given_missing_file_when_snippet_then_unreadable(self, workspace: Path) -> None:
        result = runner.invoke(cli, ["snippet", "missing.steps.js:1", str(workspace)])

        assert result.exit_code == 1
        assert "SCAN_FILE_UNREADABLE" in result.output
