"""JSON formatter for structured output."""

import json

from csweep.core.models import ScanResult
from csweep.output.formatters.protocols import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Format results as JSON."""

    def format(self, result: ScanResult) -> str:
        """Format scan results as JSON."""
        data = {
            "summary": {
                "files_scanned": result.files_scanned,
                "files_failed": len(result.failed_files),
                "total_functions": result.total_functions,
                "unused_functions_count": len(result.unused),
                "undeclared_functions_count": len(result.undeclared),
                "scan_duration": result.scan_duration,
            },
            "findings": [
                {
                    "name": finding.name,
                    "category": finding.category.value,
                    "positions": [
                        {
                            "file": str(pos.file),
                            "line": pos.row + 1,  # Convert to 1-based
                            "column": pos.column,
                        }
                        for pos in finding.positions
                    ],
                }
                for finding in result.findings
            ],
            "errors": [
                {"file": str(err.file), "reason": err.reason} for err in result.failed_files
            ],
        }
        return json.dumps(data, indent=2, ensure_ascii=False)
