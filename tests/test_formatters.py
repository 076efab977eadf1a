import csv
import json
from io import StringIO
from pathlib import Path

import pytest

from csweep.core.models import Category, FileError, Finding, ScanResult, SourcePosition
from csweep.output.formatters.csv_formatter import CsvFormatter
from csweep.output.formatters.enums import OutputFormat
from csweep.output.formatters.formatter_factory import get_formatter
from csweep.output.formatters.json_formatter import JsonFormatter
from csweep.output.formatters.text_formatter import TextFormatter
from csweep.output.formatters.tree_formatter import TreeFormatter


@pytest.fixture
def result() -> ScanResult:
    pos = SourcePosition(file=Path("src/a.c"), row=0, column=4)
    return ScanResult(
        findings=[
            Finding(name="helper", category=Category.UNUSED, positions=[pos]),
            Finding(name="helper", category=Category.UNDECLARED, positions=[pos]),
            Finding(name="printf", category=Category.UNDECLARED, positions=[]),
        ],
        files_scanned=2,
        total_functions=3,
        scan_duration=0.25,
        failed_files=[FileError(file=Path("src/bad.c"), reason="Could not read file")],
    )


class TestFormatterFactory:
    @pytest.mark.parametrize(
        ("output_format", "formatter_type"),
        [
            (OutputFormat.TREE, TreeFormatter),
            (OutputFormat.TEXT, TextFormatter),
            (OutputFormat.JSON, JsonFormatter),
            (OutputFormat.CSV, CsvFormatter),
        ],
    )
    def test_get_formatter(self, output_format: OutputFormat, formatter_type: type) -> None:
        assert isinstance(get_formatter(output_format), formatter_type)


class TestTextFormatter:
    def test_layout(self, result: ScanResult) -> None:
        assert TextFormatter().format(result).splitlines() == [
            "Unused Function 'helper':",
            f"-> {Path('src/a.c')} 1:4",
            "Undeclared Function 'helper':",
            f"-> {Path('src/a.c')} 1:4",
            "Undeclared Function 'printf':",
        ]


class TestJsonFormatter:
    def test_structure(self, result: ScanResult) -> None:
        data = json.loads(JsonFormatter().format(result))

        assert data["summary"]["files_scanned"] == 2
        assert data["summary"]["files_failed"] == 1
        assert data["summary"]["unused_functions_count"] == 1
        assert data["summary"]["undeclared_functions_count"] == 2
        assert data["findings"][0] == {
            "name": "helper",
            "category": "unused",
            "positions": [{"file": str(Path("src/a.c")), "line": 1, "column": 4}],
        }
        assert data["findings"][2]["positions"] == []
        assert data["errors"] == [{"file": str(Path("src/bad.c")), "reason": "Could not read file"}]


class TestCsvFormatter:
    def test_rows(self, result: ScanResult) -> None:
        rows = list(csv.reader(StringIO(CsvFormatter().format(result))))

        assert rows[0] == ["Category", "Function", "File", "Line", "Column"]
        assert rows[1] == ["unused", "helper", str(Path("src/a.c")), "1", "4"]
        assert rows[3] == ["undeclared", "printf", "", "", ""]
        assert len(rows) == 4

    def test_save(self, result: ScanResult, tmp_path: Path) -> None:
        output_file = tmp_path / "out.csv"

        CsvFormatter().save(result, output_file)

        assert output_file.read_text(encoding="utf-8").startswith("Category,Function")


class TestTreeFormatter:
    def test_prints_tree(self, result: ScanResult, capsys: pytest.CaptureFixture[str]) -> None:
        assert TreeFormatter().format(result) == ""

        out = capsys.readouterr().out
        assert "Unused functions" in out
        assert "printf" in out
        assert "no declaration found" in out

    def test_empty_result(self) -> None:
        empty = ScanResult(findings=[], files_scanned=1, total_functions=1, scan_duration=0.0)
        assert "No unused or undeclared functions" in TreeFormatter().format(empty)
