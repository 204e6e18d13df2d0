"""Component module templating."""

from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING

from react_extractor.models import PropType

if TYPE_CHECKING:
    from react_extractor.dependencies.types import DetectedProp

_PROP_TYPES: dict[PropType, str] = {
    PropType.FUNCTION: "func",
    PropType.OBJECT: "object",
    PropType.ARRAY: "array",
}


def indent_code(code: str, spaces: int) -> str:
    """Dedent a selection, then indent every non-blank line by ``spaces``."""
    body = textwrap.dedent(code.strip("\n"))
    return textwrap.indent(body, " " * spaces, lambda line: bool(line.strip()))


def prop_type_validator(prop: DetectedProp) -> str:
    """PropTypes validator for a detected prop, e.g. ``PropTypes.func.isRequired``."""
    if prop.inferred_type == "boolean":
        kind = "bool"
    else:
        kind = _PROP_TYPES.get(prop.type, "any")
    suffix = ".isRequired" if prop.required else ""
    return f"PropTypes.{kind}{suffix}"


def render_component(
    name: str,
    jsx: str,
    props: list[DetectedProp],
    *,
    typed: bool,
    indent: int = 4,
) -> str:
    """Render a component module wrapping ``jsx``."""
    lines: list[str] = ["import React from 'react';"]
    if props and not typed:
        lines.append("import PropTypes from 'prop-types';")
    lines.append("")

    destructuring = "{ " + ", ".join(p.name for p in props) + " }" if props else ""

    if typed and props:
        lines.append("type Props = {")
        lines.extend(f"  {p.name}: {p.inferred_type};" for p in props)
        lines.append("};")
        lines.append("")

    if typed:
        generic = "<Props>" if props else ""
        lines.append(f"export const {name}: React.FC{generic} = ({destructuring}) => {{")
    else:
        lines.append(f"export const {name} = ({destructuring}) => {{")

    lines.append("  return (")
    lines.append(indent_code(jsx, indent))
    lines.append("  );")
    lines.append("};")

    if props and not typed:
        lines.append("")
        lines.append(f"{name}.propTypes = {{")
        lines.extend(f"  {p.name}: {prop_type_validator(p)}," for p in props)
        lines.append("};")

    return "\n".join(lines) + "\n"


def component_usage(name: str, props: list[DetectedProp]) -> str:
    """Replacement text for the original selection."""
    if not props:
        return f"<{name} />"
    attributes = " ".join(f"{p.name}={{{p.name}}}" for p in props)
    return f"<{name} {attributes} />"
