"""Custom hook module templating."""

from __future__ import annotations

import re

from react_extractor.detection.scanner import HOOK_PRIMITIVES
from react_extractor.generator.component import indent_code

_PRIMITIVE_RES: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (hook, re.compile(rf"\b{hook}\b")) for hook in HOOK_PRIMITIVES
)


def react_imports(code: str) -> list[str]:
    """Built-in hooks mentioned in ``code``, in catalog order."""
    return [hook for hook, regex in _PRIMITIVE_RES if regex.search(code)]


def render_hook(name: str, code: str, returns: list[str], *, indent: int = 2) -> str:
    """Render a hook module wrapping ``code`` and returning ``returns``."""
    lines: list[str] = []
    imports = react_imports(code)
    if imports:
        lines.append(f"import {{ {', '.join(imports)} }} from 'react';")
        lines.append("")

    lines.append(f"export const {name} = () => {{")
    lines.append(indent_code(code, indent))
    lines.append("")
    if returns:
        lines.append("  return {")
        lines.extend(f"    {value}," for value in returns)
        lines.append("  };")
    else:
        lines.append("  return {};")
    lines.append("};")

    return "\n".join(lines) + "\n"


def hook_usage(name: str, returns: list[str]) -> str:
    """Replacement text for the original selection."""
    if not returns:
        return f"{name}();"
    return f"const {{ {', '.join(returns)} }} = {name}();"
