"""Step definition data model.

All records are frozen: a file rescan replaces its records wholesale
instead of mutating them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Literal

Language = Literal["csharp", "javascript"]


class StepType(StrEnum):
    """Gherkin step keyword, normalized to title case."""

    GIVEN = "Given"
    WHEN = "When"
    THEN = "Then"
    AND = "And"
    BUT = "But"

    @classmethod
    def parse(cls, token: str) -> StepType | None:
        """Normalize a source token (``@given``, ``[When``, ``THEN``) to a member."""
        cleaned = token.strip().lstrip("@[").strip()
        normalized = cleaned[:1].upper() + cleaned[1:].lower()
        try:
            return cls(normalized)
        except ValueError:
            return None


STEP_TYPE_ORDER: tuple[StepType, ...] = (
    StepType.GIVEN,
    StepType.WHEN,
    StepType.THEN,
    StepType.AND,
    StepType.BUT,
)


class Dialect(StrEnum):
    """Source syntax a declaration was recognized in."""

    ATTRIBUTE = "attribute"  # C# SpecFlow: [Given("...")]
    CALL = "call"  # Cucumber.js: Given('...', fn)
    DECORATOR = "decorator"  # @given('...')

    @property
    def language(self) -> Language:
        return "csharp" if self is Dialect.ATTRIBUTE else "javascript"


@dataclass(frozen=True, slots=True)
class StepParameter:
    """One formal parameter of a step definition."""

    name: str
    type: str
    index: int

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "type": self.type, "index": self.index}


@dataclass(frozen=True, slots=True)
class StepDefinition:
    """A recognized step definition declaration.

    ``pattern`` is the literal body from source with its delimiters removed;
    ``display_text`` is the pattern with every parameter shown as ``<name>``;
    ``raw_match`` is the full text the recognizer matched.
    """

    type: StepType
    pattern: str
    display_text: str
    file_path: str
    line_number: int  # 1-based
    parameters: tuple[StepParameter, ...] = field(default_factory=tuple)
    is_regex: bool = False
    raw_match: str = ""
    dialect: Dialect = Dialect.CALL

    @property
    def file_name(self) -> str:
        """Path component after the last ``/`` or ``\\``."""
        return basename(self.file_path)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "type": str(self.type),
            "pattern": self.pattern,
            "display_text": self.display_text,
            "file_path": self.file_path,
            "line_number": self.line_number,
            "parameters": [p.to_dict() for p in self.parameters],
            "is_regex": self.is_regex,
            "raw_match": self.raw_match,
            "dialect": str(self.dialect),
        }


def basename(path: str) -> str:
    """Last path component, splitting on both separators."""
    name = path.replace("\\", "/").rsplit("/", 1)[-1]
    return name or path
