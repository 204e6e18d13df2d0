"""Tree-sitter parse of a TSX fragment, reported as a value instead of an exception."""

from __future__ import annotations

from dataclasses import dataclass

from tree_sitter import Node, Tree
from tree_sitter_language_pack import Error as LanguagePackError
from tree_sitter_language_pack import get_parser

# TSX is a superset of the JS/JSX syntax seen in selections
GRAMMAR = "tsx"

# Failures constructing the parser (grammar download, missing binary, bad name)
PARSE_INIT_ERRORS: tuple[type[Exception], ...] = (
    LanguagePackError,
    LookupError,
    OSError,
    ValueError,
    RuntimeError,
)


@dataclass(frozen=True, slots=True)
class ParseOutcome:
    """Either a clean syntax tree or the reason there is none."""

    source: bytes
    tree: Tree | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.tree is not None


def node_text(node: Node) -> str:
    """Get text from a node as a str."""
    text = node.text
    if isinstance(text, bytes):
        return text.decode("utf-8", errors="replace")
    return str(text)


def _first_error(root: Node) -> Node | None:
    """Depth-first search for the first ERROR or MISSING node."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node
        if node.has_error:
            stack.extend(reversed(node.children))
    return None


def _describe_error(root: Node) -> str:
    node = _first_error(root)
    if node is None:
        return "syntax error"
    row, column = node.start_point
    what = f"missing {node.type}" if node.is_missing else "unexpected input"
    return f"syntax error: {what} at line {row + 1}, column {column + 1}"


def parse_fragment(text: str) -> ParseOutcome:
    """Parse a fragment as TSX. A tree containing any error node counts as a failure."""
    source = text.encode("utf-8", errors="replace")
    try:
        parser = get_parser(GRAMMAR)
    except PARSE_INIT_ERRORS as exc:
        return ParseOutcome(source=source, tree=None, error=f"parser unavailable: {exc}")

    tree = parser.parse(source)
    if tree.root_node.has_error:
        return ParseOutcome(source=source, tree=None, error=_describe_error(tree.root_node))
    return ParseOutcome(source=source, tree=tree)
