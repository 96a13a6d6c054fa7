"""Step definition parser: one file's text to a list of StepDefinition records.

Per line:
1. Recognizers in priority order; the first structural match wins.
2. Step type from the keyword matcher; no keyword means no declaration.
3. Regex vs Cucumber-expression classification.
4. Signature look-ahead: the rest of the line, then the following lines up
   to the next call declaration.
5. Parameter extraction with signature names as overrides.

Parsing is pure: the same text and path always give equal records.
"""

from __future__ import annotations

from dataclasses import dataclass

from picklejar.steps.models import Dialect, StepDefinition
from picklejar.steps.params import extract_parameters
from picklejar.steps.patterns import extract_step_type, is_regex_pattern, recognize
from picklejar.steps.signature import DEFAULT_LOOKAHEAD, extract_signature_names


def parse_file(
    text: str, file_path: str, *, lookahead: int = DEFAULT_LOOKAHEAD
) -> list[StepDefinition]:
    """Parse every step definition declared in ``text``.

    Args:
        text: File content.
        file_path: Path recorded on each definition.
        lookahead: Lines after a declaration searched for its signature.

    Returns:
        Definitions in line order, at most one per line.
    """
    lines = text.split("\n")
    step_defs: list[StepDefinition] = []

    for line_index, line in enumerate(lines):
        step_def = parse_line(
            line,
            file_path=file_path,
            line_number=line_index + 1,
            following_lines=lines[line_index + 1 : line_index + 1 + lookahead],
        )
        if step_def is not None:
            step_defs.append(step_def)

    return step_defs


def parse_line(
    line: str,
    *,
    file_path: str,
    line_number: int,
    following_lines: list[str] | None = None,
) -> StepDefinition | None:
    """Parse a single source line, or return None if it declares no step."""
    line = line.rstrip("\r")
    declaration = recognize(line)
    if declaration is None:
        return None

    step_type = extract_step_type(line[declaration.start :])
    if step_type is None:
        return None

    is_regex = is_regex_pattern(declaration.dialect, declaration.delimiter, declaration.body)
    window = signature_window(
        line[declaration.start + len(declaration.raw_match) :],
        following_lines or [],
        declaration.dialect,
    )
    signature_names = extract_signature_names(window, declaration.dialect.language)
    parameters, display_text = extract_parameters(declaration.body, is_regex, signature_names)

    return StepDefinition(
        type=step_type,
        pattern=declaration.body,
        display_text=display_text,
        file_path=file_path,
        line_number=line_number,
        parameters=tuple(parameters),
        is_regex=is_regex,
        raw_match=declaration.raw_match,
        dialect=declaration.dialect,
    )


def signature_window(tail: str, following_lines: list[str], dialect: Dialect) -> list[str]:
    """Lines that may hold the signature bound to one declaration.

    The window starts with the rest of the declaration line and never reaches
    into another call declaration. Stacked attributes and decorators share
    the method below them, so those lines are skipped instead.
    """
    next_on_line = recognize(tail)
    if next_on_line is not None:
        return [tail[: next_on_line.start]]

    window = [tail]
    for line in following_lines:
        if recognize(line) is not None:
            if dialect is Dialect.CALL:
                break
            continue
        window.append(line)
    return window


@dataclass(frozen=True)
class StepDefinitionParser:
    """Parser bound to a signature look-ahead window."""

    lookahead: int = DEFAULT_LOOKAHEAD

    def parse(self, text: str, file_path: str) -> list[StepDefinition]:
        return parse_file(text, file_path, lookahead=self.lookahead)
