from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import NamedTuple

import pytest

from csweep.core.registry import FunctionRegistry
from csweep.core.sweeper import FunctionSweeper


class Point(NamedTuple):
    row: int
    column: int


@dataclass
class FakeNode:
    """Minimal SyntaxNode for exercising the walker without a grammar."""

    type: str
    children: list["FakeNode"] = field(default_factory=list)
    fields: dict[str, "FakeNode"] = field(default_factory=dict)
    start_byte: int = 0
    end_byte: int = 0
    start_point: Point = Point(0, 0)

    def child_by_field_name(self, name: str) -> "FakeNode | None":
        return self.fields.get(name)


@pytest.fixture
def sweeper() -> FunctionSweeper:
    return FunctionSweeper()


@pytest.fixture
def registry() -> FunctionRegistry:
    return FunctionRegistry()


@pytest.fixture
def write_c(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a C file under tmp_path and return its path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
