"""Protocols for the syntax tree provider and progress reporting."""

from collections.abc import Sequence
from typing import Any, Protocol


class ProgressCallback(Protocol):
    """Protocol defining a progress callback function."""

    def update(self, message: str, **fields: Any) -> None:
        """Update progress with a message."""
        ...


class SyntaxPoint(Protocol):
    """A (row, column) position, both 0-based."""

    @property
    def row(self) -> int: ...

    @property
    def column(self) -> int: ...


class SyntaxNode(Protocol):
    """
    Protocol defining the syntax tree node surface needed by the walker.

    Mirrors the subset of ``tree_sitter.Node`` the sweeper relies on, so any
    conforming parser binding can be substituted.
    """

    @property
    def type(self) -> str:
        """Node kind, e.g. ``function_declarator``."""
        ...

    @property
    def start_byte(self) -> int: ...

    @property
    def end_byte(self) -> int: ...

    @property
    def start_point(self) -> SyntaxPoint: ...

    @property
    def children(self) -> Sequence["SyntaxNode"]:
        """Direct children in left-to-right order."""
        ...

    def child_by_field_name(self, name: str) -> "SyntaxNode | None":
        """Get the child stored under a grammar field, if any."""
        ...
