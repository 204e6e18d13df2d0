"""PropExtractor: infer the props a JSX fragment depends on."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from react_extractor.dependencies.parser import node_text, parse_fragment
from react_extractor.dependencies.types import (
    ComplexExpression,
    PropAnalysis,
    PropEntry,
    PropUsage,
)
from react_extractor.models import PropType, UsageKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tree_sitter import Node

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Filters: names never reported as props
# ---------------------------------------------------------------------------

# Common callback parameter names, skipped inside inline functions
INLINE_PARAM_STOPLIST: frozenset[str] = frozenset(
    {"e", "event", "item", "index", "key", "value"}
)

# Browser/JS globals that are never passed in as props
GLOBAL_NAMES: frozenset[str] = frozenset(
    {
        "console",
        "window",
        "document",
        "navigator",
        "Math",
        "JSON",
        "Object",
        "Array",
        "Number",
        "String",
        "Boolean",
        "Date",
        "Promise",
        "Symbol",
        "Error",
        "NaN",
        "Infinity",
        "undefined",
        "fetch",
        "alert",
        "setTimeout",
        "clearTimeout",
        "setInterval",
        "clearInterval",
        "parseInt",
        "parseFloat",
    }
)

EVENT_ATTRIBUTE_RE = re.compile(r"^on[A-Z]")
LOGICAL_OPERATORS: frozenset[str] = frozenset({"&&", "||", "??"})

CALLBACK_TYPE = "() => void"

FUNCTION_TYPES: frozenset[str] = frozenset(
    {
        "arrow_function",
        "function_expression",
        "function",
        "function_declaration",
        "generator_function",
        "generator_function_declaration",
        "method_definition",
    }
)
INLINE_FUNCTION_TYPES: frozenset[str] = frozenset(
    {"arrow_function", "function_expression", "function"}
)
# Left-spine links of an access chain: a.b, a[b], a.b(), (a), a!
_CHAIN_LINKS: dict[str, str | None] = {
    "member_expression": "object",
    "subscript_expression": "object",
    "call_expression": "function",
    "parenthesized_expression": None,
    "non_null_expression": None,
}
_JSX_TAG_TYPES: frozenset[str] = frozenset(
    {"jsx_opening_element", "jsx_closing_element", "jsx_self_closing_element"}
)
_TYPE_ONLY_TYPES: frozenset[str] = frozenset(
    {"type_annotation", "type_arguments", "type_parameters", "type_alias_declaration"}
)

# Lexical fallback
_IDENT = r"[a-zA-Z_$][a-zA-Z0-9_$]*"
FALLBACK_SIMPLE_RE = re.compile(r"\{(" + _IDENT + r")\}")
FALLBACK_MEMBER_RE = re.compile(r"\{(" + _IDENT + r")\.[a-zA-Z_$][a-zA-Z0-9_$.]*\}")
FALLBACK_CALL_RE = re.compile(r"\{(" + _IDENT + r")\(\)\}")

# Complexity weights per usage kind
USAGE_WEIGHTS: dict[UsageKind, int] = {
    UsageKind.SIMPLE: 1,
    UsageKind.OBJECT_ACCESS: 2,
    UsageKind.FUNCTION_CALL: 2,
    UsageKind.CONDITIONAL: 3,
    UsageKind.ARRAY_METHOD: 3,
}
COMPLEX_EXPRESSION_WEIGHT = 2


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


def merge_prop(
    props: dict[str, PropEntry],
    name: str,
    prop_type: PropType,
    inferred_type: str,
    usage: PropUsage,
) -> PropEntry:
    """Register one usage of ``name``.

    First registration creates the entry. Later ones append only new
    (expression, kind) pairs and may upgrade the type away from ``unknown``;
    a specific type is never replaced.
    """
    entry = props.get(name)
    if entry is None:
        entry = PropEntry(name=name, type=prop_type, inferred_type=inferred_type, usages=[usage])
        props[name] = entry
        return entry

    if not any(
        u.expression == usage.expression and u.kind == usage.kind for u in entry.usages
    ):
        entry.usages.append(usage)

    if entry.type == PropType.UNKNOWN and prop_type != PropType.UNKNOWN:
        entry.type = prop_type
        entry.inferred_type = inferred_type

    return entry


def calculate_complexity(
    props: Iterable[PropEntry], complex_expressions: Iterable[ComplexExpression]
) -> int:
    """Prop count + weighted usages + 2 per complex expression."""
    complexity = 0
    for prop in props:
        complexity += 1
        complexity += sum(USAGE_WEIGHTS[u.kind] for u in prop.usages)
    complexity += COMPLEX_EXPRESSION_WEIGHT * sum(1 for _ in complex_expressions)
    return complexity


# ---------------------------------------------------------------------------
# Tree helpers
# ---------------------------------------------------------------------------


def _unwrap(node: Node) -> Node:
    """Strip parentheses and TS non-null assertions."""
    while node.type in ("parenthesized_expression", "non_null_expression"):
        inner = node.named_children
        if not inner:
            break
        node = inner[0]
    return node


def _first_expression(node: Node) -> Node | None:
    """First named, non-comment child (the payload of a ``{...}`` slot)."""
    for child in node.named_children:
        if child.type != "comment":
            return child
    return None


def root_identifier(node: Node) -> str | None:
    """Walk the left spine of an access chain down to its root identifier."""
    while node.type in _CHAIN_LINKS:
        field_name = _CHAIN_LINKS[node.type]
        nxt = node.child_by_field_name(field_name) if field_name else _first_expression(node)
        if nxt is None:
            return None
        node = nxt
    if node.type == "identifier":
        return node_text(node)
    return None


def expression_text(node: Node) -> str:
    """Compact rendering: ``a.b.c``, ``a?.b``, ``a[computed]``, ``fn()``."""
    node = _unwrap(node)
    if node.type == "identifier":
        return node_text(node)
    if node.type == "member_expression":
        obj = node.child_by_field_name("object")
        prop = node.child_by_field_name("property")
        obj_text = expression_text(obj) if obj is not None else "[complex-expression]"
        prop_text = node_text(prop) if prop is not None else "[computed]"
        link = "?." if any(c.type == "optional_chain" for c in node.children) else "."
        return f"{obj_text}{link}{prop_text}"
    if node.type == "subscript_expression":
        obj = node.child_by_field_name("object")
        obj_text = expression_text(obj) if obj is not None else "[complex-expression]"
        return f"{obj_text}[computed]"
    if node.type == "call_expression":
        callee = node.child_by_field_name("function")
        callee_text = expression_text(callee) if callee is not None else "[complex]"
        return f"{callee_text}()"
    return "[complex-expression]"


def pattern_names(node: Node) -> list[str]:
    """Names bound by a parameter list or destructuring pattern."""
    names: list[str] = []
    stack = [node]
    while stack:
        current = stack.pop()
        kind = current.type
        if kind in ("identifier", "shorthand_property_identifier_pattern"):
            names.append(node_text(current))
            continue
        if kind in _TYPE_ONLY_TYPES:
            continue
        if kind in ("required_parameter", "optional_parameter"):
            inner = current.child_by_field_name("pattern")
        elif kind == "pair_pattern":
            inner = current.child_by_field_name("value")
        elif kind in ("assignment_pattern", "object_assignment_pattern"):
            inner = current.child_by_field_name("left")
        else:
            stack.extend(reversed(current.named_children))
            continue
        if inner is not None:
            stack.append(inner)
    return names


def function_params(node: Node) -> list[str]:
    """Parameter names of a function-like node."""
    single = node.child_by_field_name("parameter")
    if single is not None:
        return pattern_names(single)
    params = node.child_by_field_name("parameters")
    if params is None:
        return []
    return pattern_names(params)


def _is_same(a: Node, b: Node) -> bool:
    return a.start_byte == b.start_byte and a.end_byte == b.end_byte and a.type == b.type


def function_references(fn: Node) -> list[str]:
    """Identifiers an inline function reads but does not declare, in order."""
    body = fn.child_by_field_name("body")
    if body is None:
        return []

    declared: set[str] = set(function_params(fn))
    candidates: list[str] = []
    stack = [body]
    while stack:
        node = stack.pop()
        kind = node.type

        if kind in ("identifier", "shorthand_property_identifier"):
            candidates.append(node_text(node))
            continue
        if kind in _TYPE_ONLY_TYPES:
            continue

        children = node.named_children
        if kind == "variable_declarator":
            name = node.child_by_field_name("name")
            if name is not None:
                declared.update(pattern_names(name))
                children = [c for c in children if not _is_same(c, name)]
        elif kind in FUNCTION_TYPES:
            declared.update(function_params(node))
            name = node.child_by_field_name("name")
            if name is not None and kind != "method_definition":
                declared.add(node_text(name))
            inner = node.child_by_field_name("body")
            children = [inner] if inner is not None else []
        elif kind == "catch_clause":
            param = node.child_by_field_name("parameter")
            if param is not None:
                declared.update(pattern_names(param))
            inner = node.child_by_field_name("body")
            children = [inner] if inner is not None else []
        elif kind in _JSX_TAG_TYPES:
            # Tag names are elements, not variable reads
            name = node.child_by_field_name("name")
            if name is not None:
                children = [c for c in children if not _is_same(c, name)]

        stack.extend(reversed(children))

    seen: set[str] = set()
    references: list[str] = []
    for name in candidates:
        if name in declared or name in seen:
            continue
        seen.add(name)
        references.append(name)
    return references


# ---------------------------------------------------------------------------
# Extractor
# ---------------------------------------------------------------------------


class PropExtractor:
    """Extract props, complex expressions and conditional names from a fragment.

    Primary path walks a tree-sitter TSX tree. When the fragment does not
    parse cleanly, a three-pass regex scan over ``{...}`` slots runs instead.

    Usage:
        extractor = PropExtractor(source)
        analysis = extractor.extract()
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self._props: dict[str, PropEntry] = {}
        self._complex: dict[str, ComplexExpression] = {}
        self._conditional: list[str] = []
        self._bound: frozenset[str] = frozenset()

    def extract(self) -> PropAnalysis:
        """Parse and walk the fragment, falling back to regex. Never raises."""
        outcome = parse_fragment(self.source)
        if outcome.ok:
            self._walk(outcome.tree.root_node)
        else:
            logger.debug("Structural parse failed (%s); using lexical fallback", outcome.error)
            self._fallback()

        complex_expressions = tuple(self._complex.values())
        return PropAnalysis(
            props=tuple(entry.freeze() for entry in self._props.values()),
            complex_expressions=complex_expressions,
            conditional_props=tuple(self._conditional),
            total_complexity=calculate_complexity(self._props.values(), complex_expressions),
            parse_error=outcome.error,
        )

    # -- registration -------------------------------------------------------

    def _add(
        self,
        name: str,
        prop_type: PropType,
        inferred_type: str,
        kind: UsageKind,
        expression: str,
        context: str,
    ) -> bool:
        """Register a usage unless ``name`` is local to the fragment or a global."""
        if name in self._bound or name in GLOBAL_NAMES:
            return False
        usage = PropUsage(kind=kind, expression=expression, context=context)
        merge_prop(self._props, name, prop_type, inferred_type, usage)
        return True

    def _add_conditional(self, name: str) -> None:
        if name not in self._conditional:
            self._conditional.append(name)

    # -- traversal ----------------------------------------------------------

    def _walk(self, root: Node) -> None:
        """Pre-order walk, tracking parameter names bound by enclosing functions."""
        stack: list[tuple[Node, frozenset[str]]] = [(root, frozenset())]
        while stack:
            node, bound = stack.pop()
            self._bound = bound
            visitor = getattr(self, f"visit_{node.type}", None)
            if visitor is not None:
                visitor(node)
            if node.type in FUNCTION_TYPES:
                bound = bound | frozenset(function_params(node))
            stack.extend((child, bound) for child in reversed(node.named_children))
        self._bound = frozenset()

    def visit_jsx_expression(self, node: Node) -> None:
        """``{expr}`` in element children. Attribute values are handled by the attribute."""
        if node.parent is not None and node.parent.type == "jsx_attribute":
            return
        expression = _first_expression(node)
        if expression is None or expression.type == "spread_element":
            return
        self._analyze_expression(expression, "jsx-expression")

    def visit_jsx_attribute(self, node: Node) -> None:
        """``name={expr}``. Bare identifiers on ``onXxx`` attributes are callbacks."""
        children = [c for c in node.named_children if c.type != "comment"]
        if len(children) < 2 or children[-1].type != "jsx_expression":
            return
        expression = _first_expression(children[-1])
        if expression is None or expression.type == "spread_element":
            return

        expression = _unwrap(expression)
        if expression.type != "identifier":
            self._analyze_expression(expression, "jsx-attribute")
            return

        name = node_text(expression)
        if EVENT_ATTRIBUTE_RE.match(node_text(children[0])):
            self._add(
                name, PropType.FUNCTION, CALLBACK_TYPE, UsageKind.FUNCTION_CALL, name, "jsx-attribute"
            )
        else:
            self._add(name, PropType.PRIMITIVE, "any", UsageKind.SIMPLE, name, "jsx-attribute")

    def visit_ternary_expression(self, node: Node) -> None:
        condition = node.child_by_field_name("condition")
        if condition is not None:
            condition = _unwrap(condition)
            if condition.type == "identifier":
                name = node_text(condition)
                if self._add(
                    name, PropType.PRIMITIVE, "boolean", UsageKind.CONDITIONAL, name, "conditional-test"
                ):
                    self._add_conditional(name)

        for field_name in ("consequence", "alternative"):
            branch = node.child_by_field_name(field_name)
            if branch is None:
                continue
            branch = _unwrap(branch)
            if branch.type == "identifier":
                name = node_text(branch)
                self._add(
                    name, PropType.UNKNOWN, "any", UsageKind.CONDITIONAL, name, "conditional-branch"
                )

    def visit_binary_expression(self, node: Node) -> None:
        """``a && b``, ``a || b``, ``a ?? b``."""
        operator = node.child_by_field_name("operator")
        if operator is None or operator.type not in LOGICAL_OPERATORS:
            return

        left = node.child_by_field_name("left")
        if left is not None:
            left = _unwrap(left)
            if left.type == "identifier":
                name = node_text(left)
                if self._add(
                    name, PropType.PRIMITIVE, "boolean", UsageKind.CONDITIONAL, name, "logical-expression"
                ):
                    self._add_conditional(name)

        right = node.child_by_field_name("right")
        if right is not None:
            right = _unwrap(right)
            if right.type == "identifier":
                name = node_text(right)
                self._add(
                    name, PropType.UNKNOWN, "any", UsageKind.CONDITIONAL, name, "logical-expression"
                )

    # -- expressions --------------------------------------------------------

    def _analyze_expression(self, node: Node, context: str) -> None:
        node = _unwrap(node)
        kind = node.type

        if kind == "identifier":
            name = node_text(node)
            self._add(name, PropType.PRIMITIVE, "any", UsageKind.SIMPLE, name, context)

        elif kind in ("member_expression", "subscript_expression"):
            root = root_identifier(node)
            if root is None:
                return
            text = expression_text(node)
            if self._add(root, PropType.OBJECT, "any", UsageKind.OBJECT_ACCESS, text, context):
                self._complex.setdefault(
                    text,
                    ComplexExpression(
                        expression=text,
                        variables=(root,),
                        kind=UsageKind.OBJECT_ACCESS,
                        suggested_prop_name=root,
                    ),
                )

        elif kind == "call_expression":
            callee = node.child_by_field_name("function")
            if callee is None:
                return
            callee = _unwrap(callee)
            if callee.type == "identifier":
                self._add(
                    node_text(callee),
                    PropType.FUNCTION,
                    CALLBACK_TYPE,
                    UsageKind.FUNCTION_CALL,
                    expression_text(node),
                    context,
                )
            elif callee.type in ("member_expression", "subscript_expression"):
                root = root_identifier(callee)
                if root is not None:
                    self._add(
                        root,
                        PropType.OBJECT,
                        "any",
                        UsageKind.ARRAY_METHOD,
                        expression_text(node),
                        context,
                    )

        elif kind in INLINE_FUNCTION_TYPES:
            for name in function_references(node):
                if name in INLINE_PARAM_STOPLIST:
                    continue
                self._add(
                    name, PropType.FUNCTION, "any", UsageKind.FUNCTION_CALL, name, "inline-function"
                )

    # -- lexical fallback ---------------------------------------------------

    def _fallback(self) -> None:
        """Three regex passes over ``{...}`` slots of the raw text."""
        text = self.source

        for match in FALLBACK_SIMPLE_RE.finditer(text):
            name = match.group(1)
            self._add(name, PropType.UNKNOWN, "any", UsageKind.SIMPLE, name, "lexical-fallback")

        for match in FALLBACK_MEMBER_RE.finditer(text):
            self._add(
                match.group(1),
                PropType.OBJECT,
                "any",
                UsageKind.OBJECT_ACCESS,
                match.group(0)[1:-1],
                "lexical-fallback",
            )

        for match in FALLBACK_CALL_RE.finditer(text):
            name = match.group(1)
            self._add(
                name,
                PropType.FUNCTION,
                CALLBACK_TYPE,
                UsageKind.FUNCTION_CALL,
                f"{name}()",
                "lexical-fallback",
            )
