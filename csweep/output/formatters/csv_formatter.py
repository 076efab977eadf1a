"""CSV formatter for spreadsheet-compatible output."""

import csv
from io import StringIO

from csweep.core.models import ScanResult
from csweep.output.formatters.protocols import BaseFormatter


class CsvFormatter(BaseFormatter):
    """Format results as CSV, one row per site."""

    def format(self, result: ScanResult) -> str:
        """Format scan results as CSV."""
        output = StringIO()
        writer = csv.writer(output)

        writer.writerow(["Category", "Function", "File", "Line", "Column"])

        for finding in result.findings:
            if not finding.positions:
                # e.g. a library function that is only ever called
                writer.writerow([finding.category.value, finding.name, "", "", ""])
                continue
            for pos in finding.positions:
                writer.writerow(
                    [
                        finding.category.value,
                        finding.name,
                        str(pos.file),
                        pos.row + 1,  # Convert to 1-based
                        pos.column,
                    ]
                )

        return output.getvalue()
