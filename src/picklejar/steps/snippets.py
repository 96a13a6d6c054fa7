"""Text renderings of a step definition for insertion into feature files."""

from __future__ import annotations

import itertools
import re

from picklejar.steps.models import StepDefinition

PARAM_TOKEN_PATTERN = re.compile(r"<([^<>]+)>")

PLACEHOLDERS: dict[str, str] = {
    "int": "0",
    "float": "0.0",
    "string": "text",
    "word": "word",
    "byte": "0",
    "short": "0",
    "long": "0",
    "double": "0.0",
    "bigdecimal": "0.0",
    "biginteger": "0",
}
DEFAULT_PLACEHOLDER = "value"


def placeholder_for(param_type: str) -> str:
    return PLACEHOLDERS.get(param_type.lower(), DEFAULT_PLACEHOLDER)


def step_text(step_def: StepDefinition) -> str:
    """Plain Gherkin line, e.g. ``Given I have <items> items``."""
    return f"{step_def.type} {step_def.display_text}"


def to_snippet(step_def: StepDefinition) -> str:
    """Editor snippet with numbered tab stops.

    ``Given I have <items> items`` -> ``Given I have ${1:(items)} items$0``
    """
    counter = itertools.count(1)
    body = PARAM_TOKEN_PATTERN.sub(
        lambda m: f"${{{next(counter)}:({m.group(1)})}}", step_text(step_def)
    )
    return body + "$0"


def example_text(step_def: StepDefinition) -> str:
    """Step line with each parameter replaced by a sample value of its type."""
    types = [p.type for p in step_def.parameters]
    counter = itertools.count()

    def _replace(_match: re.Match[str]) -> str:
        index = next(counter)
        return placeholder_for(types[index]) if index < len(types) else DEFAULT_PLACEHOLDER

    return PARAM_TOKEN_PATTERN.sub(_replace, step_text(step_def))


def location(step_def: StepDefinition) -> str:
    return f"{step_def.file_path}:{step_def.line_number}"
