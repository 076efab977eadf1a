"""Plain text formatter, one block per finding."""

from csweep.core.models import Category, ScanResult
from csweep.output.formatters.protocols import BaseFormatter

HEADINGS = {
    Category.UNUSED: "Unused Function",
    Category.UNDECLARED: "Undeclared Function",
}


class TextFormatter(BaseFormatter):
    """Format results as plain text suitable for grepping."""

    def format(self, result: ScanResult) -> str:
        lines: list[str] = []
        for finding in result.findings:
            lines.append(f"{HEADINGS[finding.category]} '{finding.name}':")
            for pos in finding.positions:
                lines.append(f"-> {pos.file} {pos.row + 1}:{pos.column}")
        return "\n".join(lines)
