from csweep.output.formatters.csv_formatter import CsvFormatter
from csweep.output.formatters.enums import OutputFormat
from csweep.output.formatters.json_formatter import JsonFormatter
from csweep.output.formatters.protocols import BaseFormatter
from csweep.output.formatters.text_formatter import TextFormatter
from csweep.output.formatters.tree_formatter import TreeFormatter


def get_formatter(output_format: OutputFormat) -> BaseFormatter:
    """Get the appropriate formatter for the output format."""
    formatters = {
        OutputFormat.TREE: TreeFormatter(),
        OutputFormat.TEXT: TextFormatter(),
        OutputFormat.JSON: JsonFormatter(),
        OutputFormat.CSV: CsvFormatter(),
    }

    return formatters[output_format]
