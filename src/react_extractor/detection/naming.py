"""Default identifiers for extracted components and hooks."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from react_extractor.models import Category, PatternKind

if TYPE_CHECKING:
    from react_extractor.detection.types import ClassificationResult

DEFAULT_COMPONENT_NAME = "ExtractedComponent"
DEFAULT_HOOK_NAME = "useExtractedHook"

# Checked in order against the raw fragment text
_ELEMENT_NAMES: tuple[tuple[str, str], ...] = (
    ("<form", "CustomForm"),
    ("<input", "CustomInput"),
    ("<button", "CustomButton"),
    ("<div", "CustomDiv"),
)

_NESTED_COMPONENT_RE = re.compile(r"<([A-Z]\w*)")
_ARRAY_DESTRUCTURE_RE = re.compile(r"\b(?:const|let|var)\s*\[\s*([A-Za-z_$][\w$]*)")
_RETURN_IDENT_RE = re.compile(r"\breturn\s*[({\[]?\s*([A-Za-z_$][\w$]*)")
_FUNCTION_NAME_RE = re.compile(r"\bfunction\s*\*?\s*([A-Za-z_$][\w$]*)")
_HOOK_NAME_RE = re.compile(r"^use[A-Z]")

# Literals that can follow ``return`` but never name a value worth exposing
_RETURN_KEYWORDS: frozenset[str] = frozenset(
    {"null", "undefined", "true", "false", "this", "new", "await", "typeof", "void"}
)


def _capitalize(name: str) -> str:
    return name[:1].upper() + name[1:]


def _hook_name(base: str) -> str:
    if _HOOK_NAME_RE.match(base):
        return base
    return "use" + _capitalize(base.lstrip("_$") or base)


def suggest_component_name(code: str, result: ClassificationResult) -> str:
    """Nested component tag + "Wrapper", else a known element, else the default."""
    for pattern in result.patterns:
        if pattern.kind != PatternKind.JSX:
            continue
        match = _NESTED_COMPONENT_RE.search(code, pattern.start, pattern.end)
        if match:
            return f"{match.group(1)}Wrapper"

    for needle, name in _ELEMENT_NAMES:
        if needle in code:
            return name

    return DEFAULT_COMPONENT_NAME


def suggest_hook_name(code: str) -> str:
    """Name a hook after its first state variable, return value or function."""
    match = _ARRAY_DESTRUCTURE_RE.search(code)
    if match:
        return _hook_name(match.group(1))

    for match in _RETURN_IDENT_RE.finditer(code):
        if match.group(1) not in _RETURN_KEYWORDS:
            return _hook_name(match.group(1))

    match = _FUNCTION_NAME_RE.search(code)
    if match:
        return _hook_name(match.group(1))

    return DEFAULT_HOOK_NAME


def suggest_name(code: str, result: ClassificationResult) -> str | None:
    """Suggest a name for the result's category; ``None`` when unknown."""
    if result.category == Category.COMPONENT:
        return suggest_component_name(code, result)
    if result.category == Category.HOOK:
        return suggest_hook_name(code)
    return None
