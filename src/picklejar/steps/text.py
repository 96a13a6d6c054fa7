"""Word-level helpers shared by the parameter extractors."""

from __future__ import annotations

import re
from collections.abc import Sequence

DELIMITER_PATTERN = re.compile(r"^[/^]+|[/$]+$")
WORD_PATTERN = re.compile(r"\b\w+\b")

FILLER_WORDS: frozenset[str] = frozenset(
    ("the", "a", "an", "is", "are", "was", "were", "has", "have", "i", "we", "they")
)
ARTICLES: frozenset[str] = frozenset(("the", "a", "an"))
COPULAS: frozenset[str] = frozenset(("is", "are", "was", "were"))
POSSESSIVES: frozenset[str] = frozenset(("has", "have"))


def strip_delimiters(pattern: str) -> str:
    """Remove leading ``/``/``^`` and trailing ``/``/``$`` from a regex body."""
    return DELIMITER_PATTERN.sub("", pattern)


def extract_words(text: str) -> list[str]:
    return WORD_PATTERN.findall(text)


def to_camel_case(name: str) -> str:
    """Lower-case the first character only (``Items`` -> ``items``)."""
    return name[:1].lower() + name[1:]


def is_filler(word: str) -> bool:
    return word.lower() in FILLER_WORDS


def is_article(word: str) -> bool:
    return word.lower() in ARTICLES


def signature_name(names: Sequence[str], index: int) -> str:
    """Name bound at ``index`` by the step function, or ``""`` past the end."""
    return names[index] if index < len(names) else ""
