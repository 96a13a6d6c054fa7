"""Parameter extraction strategies.

Two strategies share one contract: given a pattern body and optional
signature names, return the ordered parameters and the display text.
"""

from __future__ import annotations

from collections.abc import Sequence

from picklejar.steps.models import StepParameter
from picklejar.steps.params.capture import (
    extract_capture_parameters,
    infer_capture_name,
    infer_capture_type,
)
from picklejar.steps.params.expression import (
    extract_expression_parameters,
    infer_expression_name,
)


def extract_parameters(
    pattern: str, is_regex: bool, signature_names: Sequence[str] = ()
) -> tuple[list[StepParameter], str]:
    """Dispatch to the regex-capture or Cucumber-expression strategy."""
    if is_regex:
        return extract_capture_parameters(pattern, signature_names)
    return extract_expression_parameters(pattern, signature_names)


__all__ = [
    "extract_parameters",
    "extract_capture_parameters",
    "extract_expression_parameters",
    "infer_capture_name",
    "infer_capture_type",
    "infer_expression_name",
]
