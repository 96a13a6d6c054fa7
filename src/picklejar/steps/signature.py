"""Parameter names from the function or method bound to a step.

Supports:
- C# methods:        public async Task GoShopping(string shoppingCentre, int count)
- JS/TS callbacks:   Given('pattern', function(name, age) {
- JS/TS arrows:      Given('pattern', (name, age) => {
- TS typed params:   (name: string, age: number) => {
- Decorator methods: async goShopping(shoppingCentre: string) {

An empty result means "no override": callers fall back to inferred names.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from picklejar.steps.models import Language

DEFAULT_LOOKAHEAD = 5

# Task MethodName(string param1, int param2)
CSHARP_METHOD_PATTERN = re.compile(r"\w+\s+\w+\s*\(([^)]*)\)")

# function(param1, param2) { or (param1, param2) =>
JS_CALLBACK_PATTERN = re.compile(r"(?:function\s*)?\(([^)]*)\)\s*(?:=>|\{)")

# async methodName(param1: string) or methodName(param1, param2)
JS_METHOD_PATTERN = re.compile(r"(?:async\s+)?\w+\s*\(([^)]*)\)")

_WHITESPACE = re.compile(r"\s+")
_TS_SUFFIX = re.compile(r"[=:]")


def extract_signature_names(following_lines: Sequence[str], language: Language) -> list[str]:
    """Extract parameter names from the lines after a declaration.

    Args:
        following_lines: Source lines after the declaration line (the window).
        language: ``"csharp"`` or ``"javascript"``.

    Returns:
        Names in positional order, or an empty list if no signature is found.
    """
    combined = " ".join(following_lines)
    if language == "csharp":
        return parse_csharp_signature(combined)
    return parse_javascript_signature(combined)


def parse_csharp_signature(text: str) -> list[str]:
    match = CSHARP_METHOD_PATTERN.search(text)
    if match is None or not match.group(1).strip():
        return []
    return _parse_param_list(match.group(1), typed_prefix=True)


def parse_javascript_signature(text: str) -> list[str]:
    # The first callback is the bound one, even with no parameters
    callback = JS_CALLBACK_PATTERN.search(text)
    if callback is not None:
        return _parse_param_list(callback.group(1), typed_prefix=False)

    method = JS_METHOD_PATTERN.search(text)
    if method is not None and method.group(1).strip():
        return _parse_param_list(method.group(1), typed_prefix=False)

    return []


def _parse_param_list(params: str, *, typed_prefix: bool) -> list[str]:
    """Split a parameter list into names.

    ``typed_prefix`` is the C# convention ("string name" -> "name");
    otherwise the TS convention ("name: string = x" -> "name").
    """
    names: list[str] = []
    for raw in params.split(","):
        param = raw.strip()
        if not param:
            continue
        if typed_prefix:
            name = _WHITESPACE.split(param)[-1]
        else:
            name = _TS_SUFFIX.split(param, maxsplit=1)[0].strip()
        if name:
            names.append(name)
    return names
