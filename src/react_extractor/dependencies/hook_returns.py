"""Names a hook fragment declares and should hand back to its caller."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from react_extractor.dependencies.extractor import FUNCTION_TYPES
from react_extractor.dependencies.parser import node_text, parse_fragment

if TYPE_CHECKING:
    from tree_sitter import Node

_STATE_DESTRUCTURE_RE = re.compile(r"\bconst\s+\[([^,\]]+)(?:,\s*([^,\]]+))?\]\s*=")


def _scope_root(root: Node) -> Node:
    """A selection holding exactly one function declaration is scoped to its body."""
    statements = [c for c in root.named_children if c.type != "comment"]
    if len(statements) == 1:
        only = statements[0]
        if only.type == "export_statement":
            only = only.child_by_field_name("declaration") or only
        if only.type in ("function_declaration", "generator_function_declaration"):
            body = only.child_by_field_name("body")
            if body is not None:
                return body
    return root


def _declared_names(scope: Node) -> list[str]:
    """Declarator names in ``scope``, not descending into nested functions."""
    names: list[str] = []
    stack = [scope]
    while stack:
        node = stack.pop()
        if node.type == "variable_declarator":
            name = node.child_by_field_name("name")
            if name is not None:
                if name.type == "array_pattern":
                    names.extend(
                        node_text(el) for el in name.named_children if el.type == "identifier"
                    )
                elif name.type == "identifier":
                    names.append(node_text(name))
        if node.type in FUNCTION_TYPES and node is not scope:
            continue
        stack.extend(reversed(node.named_children))
    return names


def _fallback_names(code: str) -> list[str]:
    names: list[str] = []
    for match in _STATE_DESTRUCTURE_RE.finditer(code):
        names.extend(group.strip() for group in match.groups() if group and group.strip())
    return names


def extract_hook_returns(code: str) -> list[str]:
    """Return state and local variable names in declaration order, deduplicated."""
    outcome = parse_fragment(code)
    if outcome.ok:
        names = _declared_names(_scope_root(outcome.tree.root_node))
    else:
        names = _fallback_names(code)
    return list(dict.fromkeys(names))
