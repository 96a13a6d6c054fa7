"""Parameter extraction for regex step patterns (capture groups)."""

from __future__ import annotations

import re
from collections.abc import Sequence

from picklejar.steps.models import StepParameter
from picklejar.steps.text import (
    COPULAS,
    POSSESSIVES,
    extract_words,
    is_article,
    signature_name,
    strip_delimiters,
    to_camel_case,
)

# An unescaped "(...)" that is not (?:...), (?=...), (?!...), (?<=...) or (?<!...).
# Named groups (?<name>...) and (?P<name>...) still capture.
CAPTURE_GROUP_PATTERN = re.compile(r"(?<!\\)\((?!\?(?!P?<\w))[^)]*\)")

_ESCAPE_PATTERN = re.compile(r"\\.")
_COMPOUND_COPULAS = frozenset(("is", "are"))


def infer_capture_type(group: str) -> str:
    """Semantic type tag for a capture group's own text."""
    if "\\d" in group:
        return "int"
    if "float" in group or "decimal" in group:
        return "float"
    if "\\w" in group:
        return "word"
    if ".*" in group:
        return "string"
    return "value"


def extract_capture_parameters(
    pattern: str, signature_names: Sequence[str] = ()
) -> tuple[list[StepParameter], str]:
    """Extract capture-group parameters and render the display text.

    Args:
        pattern: Regex body, optionally with ``/``/``^``/``$`` delimiters.
        signature_names: Positional names from the bound function; a name
            present at an index wins over the inferred one.

    Returns:
        ``(parameters, display_text)``.
    """
    clean = strip_delimiters(pattern)
    parameters: list[StepParameter] = []
    spans: list[tuple[int, int]] = []

    for index, match in enumerate(CAPTURE_GROUP_PATTERN.finditer(clean)):
        param_type = infer_capture_type(match.group(0))
        name = signature_name(signature_names, index) or infer_capture_name(
            clean, match.start(), match.end(), param_type
        )
        parameters.append(StepParameter(name=name, type=param_type, index=index))
        spans.append(match.span())

    display_text = clean
    for param, (start, end) in zip(reversed(parameters), reversed(spans), strict=True):
        display_text = f"{display_text[:start]}<{param.name}>{display_text[end:]}"

    return parameters, display_text.replace("\\", "")


def infer_capture_name(pattern: str, start: int, end: int, param_type: str) -> str:
    """Infer a parameter name from the words around a capture group.

    ``pattern`` must already have its delimiters stripped.

    Examples:
        "the http response is (.*)" -> "httpResponse"
        "the response is (.*)"      -> "response"
        "I have (\\d+) items"       -> "items"
        "the (.*) button"           -> "button"
    """
    context = _words(pattern[:start])[-3:]
    following = _words(pattern[end:])[:2]

    name = ""
    if context:
        nearest = context[-1]
        if nearest.lower() in COPULAS:
            # "the response is (.*)" -> subject of the copula
            if len(context) >= 2:
                name = context[-2]
        elif nearest.lower() in POSSESSIVES:
            # "I have (\d+) items" -> the counted noun
            if following:
                name = following[0]
        else:
            name = nearest

    if is_article(name):
        name = ""
    if not name and following and not is_article(following[0]):
        name = following[0]

    # "W1 W2 is (...)" -> "w1W2"
    if (
        len(context) == 3
        and context[-1].lower() in _COMPOUND_COPULAS
        and not is_article(context[0])
    ):
        first, second = context[0], context[1]
        name = first + second[:1].upper() + second[1:]

    if not name:
        return param_type
    return to_camel_case(name)


def _words(text: str) -> list[str]:
    # Escapes like \d or \s are regex syntax, not prose
    return extract_words(_ESCAPE_PATTERN.sub(" ", text))
