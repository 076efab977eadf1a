"""Syntax tree traversal and function site extraction."""

from collections.abc import Iterator
from pathlib import Path

from csweep.core.models import SourcePosition
from csweep.core.protocols import SyntaxNode
from csweep.core.registry import FunctionRegistry

FUNCTION_DECLARATOR = "function_declarator"
CALL_EXPRESSION = "call_expression"


def iter_nodes(root: SyntaxNode) -> Iterator[SyntaxNode]:
    """
    Yield every node of the tree exactly once, in pre-order.

    Uses an explicit work-stack, so deeply nested input cannot exhaust the
    interpreter's recursion limit. Siblings come out left to right.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def node_text(node: SyntaxNode, source: bytes) -> str | None:
    """Return the UTF-8 text a node spans, or None if it does not decode."""
    try:
        return source[node.start_byte : node.end_byte].decode("utf-8")
    except UnicodeDecodeError:
        return None


def _position(node: SyntaxNode, path: Path) -> SourcePosition:
    point = node.start_point
    return SourcePosition(file=path, row=point.row, column=point.column)


def extract_site(
    node: SyntaxNode,
    source: bytes,
    path: Path,
    registry: FunctionRegistry,
) -> bool:
    """
    Record a node into the registry if it is a declaration or call site.

    Function declarators register the text of their ``declarator`` field,
    call expressions the text of their ``function`` field. The callee is not
    required to be a plain identifier: ``(*fp)(x)`` registers ``(*fp)``.

    Returns:
        True if the registry was updated, False if the node was skipped
    """
    if node.type == FUNCTION_DECLARATOR:
        field = "declarator"
    elif node.type == CALL_EXPRESSION:
        field = "function"
    else:
        return False

    name_node = node.child_by_field_name(field)
    if name_node is None:
        return False

    name = node_text(name_node, source)
    if not name:
        return False

    position = _position(name_node, path)
    if field == "declarator":
        registry.add_declaration(name, position)
    else:
        registry.add_call(name, position)
    return True


def collect_sites(
    root: SyntaxNode,
    source: bytes,
    path: Path,
    registry: FunctionRegistry,
) -> int:
    """Walk a parsed file and record all its sites. Returns the number recorded."""
    recorded = 0
    for node in iter_nodes(root):
        if extract_site(node, source, path, registry):
            recorded += 1
    return recorded
