"""Data models for C function sweeping."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class SourcePosition(BaseModel):
    """A single textual occurrence of a function name. Row and column are 0-based."""

    model_config = ConfigDict(frozen=True)

    file: Path
    row: int
    column: int


class FunctionRecord(BaseModel):
    """Declaration and call sites seen for one function name."""

    name: str
    declarations: list[SourcePosition] = Field(default_factory=list)
    calls: list[SourcePosition] = Field(default_factory=list)


class Category(str, Enum):
    UNUSED = "unused"
    UNDECLARED = "undeclared"


class Finding(BaseModel):
    """A function flagged under one category, with every contributing site."""

    name: str
    category: Category
    positions: list[SourcePosition] = Field(default_factory=list)


class FileError(BaseModel):
    """A file skipped during a scan."""

    file: Path
    reason: str


class ScanResult(BaseModel):
    """Results of sweeping a set of C files."""

    findings: list[Finding]
    files_scanned: int
    total_functions: int
    scan_duration: float
    failed_files: list[FileError] = Field(default_factory=list)

    @property
    def unused(self) -> list[Finding]:
        return [f for f in self.findings if f.category == Category.UNUSED]

    @property
    def undeclared(self) -> list[Finding]:
        return [f for f in self.findings if f.category == Category.UNDECLARED]
