"""Parameter extraction for Cucumber expressions (``{int}``, ``{string}``, ...)."""

from __future__ import annotations

from collections.abc import Sequence

from picklejar.steps.models import StepParameter
from picklejar.steps.patterns import CUCUMBER_EXPRESSION_PARAM
from picklejar.steps.text import extract_words, is_filler, signature_name, to_camel_case


def extract_expression_parameters(
    pattern: str, signature_names: Sequence[str] = ()
) -> tuple[list[StepParameter], str]:
    """Extract ``{type}`` parameters and render the display text.

    Args:
        pattern: Cucumber expression body.
        signature_names: Positional names from the bound function; a name
            present at an index wins over the inferred one.

    Returns:
        ``(parameters, display_text)``.
    """
    parameters: list[StepParameter] = []
    spans: list[tuple[int, int]] = []

    for index, match in enumerate(CUCUMBER_EXPRESSION_PARAM.finditer(pattern)):
        param_type = match.group(1)
        name = signature_name(signature_names, index) or infer_expression_name(
            pattern, match.start(), param_type
        )
        parameters.append(StepParameter(name=name, type=param_type, index=index))
        spans.append(match.span())

    display_text = pattern
    for param, (start, end) in zip(reversed(parameters), reversed(spans), strict=True):
        display_text = f"{display_text[:start]}<{param.name}>{display_text[end:]}"

    return parameters, display_text


def infer_expression_name(pattern: str, offset: int, param_type: str) -> str:
    """Infer a parameter name from the words around a ``{type}`` token.

    Examples:
        "I have {int} items"   -> "items"
        "the {string} button"  -> "button"
        "user enters {string}" -> "enters"
    """
    before = pattern[:offset]
    after = pattern[offset:]
    closing = after.find("}")
    text_after = after[closing + 1 :] if closing >= 0 else ""

    words_before = extract_words(before)
    words_after = extract_words(text_after)
    last_before = words_before[-1] if words_before else ""
    first_after = words_after[0] if words_after else ""

    if first_after and not is_filler(first_after):
        return to_camel_case(first_after)
    if last_before and not is_filler(last_before):
        return to_camel_case(last_before)
    return param_type
