"""Pattern catalog: dialect recognizers and the step-type keyword matcher.

Recognizers are tried in table order and the first match wins for a line.
The attribute recognizer must stay ahead of the call recognizer: a line like
``[When("x")]`` also has the ``When("x"`` call shape.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from picklejar.steps.models import Dialect, StepType


@dataclass(frozen=True, slots=True)
class Recognizer:
    """A dialect tag with the regex that recognizes its declarations.

    Attribute patterns capture the body in group 1. Call and decorator
    patterns capture the delimiter in group 1 and the body in group 2.
    """

    dialect: Dialect
    regex: re.Pattern[str]


@dataclass(frozen=True, slots=True)
class RecognizedDeclaration:
    """Structural match of one declaration on one line."""

    dialect: Dialect
    body: str
    delimiter: str
    raw_match: str
    start: int


RECOGNIZERS: tuple[Recognizer, ...] = (
    # C# SpecFlow: [Given("pattern")] or [When(@"pattern")]
    Recognizer(
        Dialect.ATTRIBUTE,
        re.compile(r'\[\s*(?:Given|When|Then|And|But)\s*\(\s*@?"(.+?)"\s*\)\s*\]'),
    ),
    # Cucumber.js: Given('pattern', callback) or Given(/regex/, callback)
    Recognizer(
        Dialect.CALL,
        re.compile(r"\b(?:Given|When|Then|And|But)\s*\(\s*(['\"`/])(.+?)\1"),
    ),
    # Decorators: @given('pattern')
    Recognizer(
        Dialect.DECORATOR,
        re.compile(r"@(?:given|when|then|and|but)\s*\(\s*(['\"`/])(.+?)\1", re.IGNORECASE),
    ),
)

STEP_TYPE_PATTERN = re.compile(r"[@\[]?\b(?:given|when|then|and|but)\b", re.IGNORECASE)

CUCUMBER_EXPRESSION_PARAM = re.compile(r"\{([^}]+)\}")

# Parenthesized group, \d, \w, .* or .+
REGEX_HINT_PATTERN = re.compile(r"\([^)]*\)|\\d|\\w|\.\*|\.\+")


def recognize(line: str) -> RecognizedDeclaration | None:
    """Match a line against the recognizers in priority order."""
    for recognizer in RECOGNIZERS:
        match = recognizer.regex.search(line)
        if match is None:
            continue
        if recognizer.dialect is Dialect.ATTRIBUTE:
            body, delimiter = match.group(1), '"'
        else:
            delimiter, body = match.group(1), match.group(2)
        return RecognizedDeclaration(
            dialect=recognizer.dialect,
            body=body,
            delimiter=delimiter,
            raw_match=match.group(0),
            start=match.start(),
        )
    return None


def extract_step_type(text: str) -> StepType | None:
    """Find the first step keyword in ``text`` and normalize it."""
    match = STEP_TYPE_PATTERN.search(text)
    if match is None:
        return None
    return StepType.parse(match.group(0))


def has_regex_constructs(body: str) -> bool:
    return REGEX_HINT_PATTERN.search(body) is not None


def is_regex_pattern(dialect: Dialect, delimiter: str, body: str) -> bool:
    """Classify a declaration body as a regex or a Cucumber expression.

    Attribute bodies are regex only when they contain regex constructs;
    call and decorator bodies are also regex when written as ``/.../``.
    """
    if dialect is not Dialect.ATTRIBUTE and delimiter == "/":
        return True
    return has_regex_constructs(body)
