"""Tree formatter for rich terminal output."""

from collections import defaultdict

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from csweep.core.models import Category, Finding, ScanResult
from csweep.output.formatters.protocols import BaseFormatter

console = Console()

CATEGORY_LABELS = {
    Category.UNUSED: "[bold yellow]Unused functions[/bold yellow]",
    Category.UNDECLARED: "[bold blue]Undeclared functions[/bold blue]",
}


class TreeFormatter(BaseFormatter):
    """Format results as a rich tree for terminal output."""

    def format(self, result: ScanResult) -> str:
        """Format scan results as a rich tree."""
        if not result.findings:
            return "✅ No unused or undeclared functions found!"

        # Print tree directly to console
        self._print_tree(result)
        return ""  # Return empty string since we printed directly

    def _print_tree(self, result: ScanResult) -> None:
        """Print the tree structure to console."""
        by_category: dict[Category, list[Finding]] = defaultdict(list)
        for finding in result.findings:
            by_category[finding.category].append(finding)

        root_tree = Tree(
            f"🔍 Findings by category (total {len(result.findings)})",
            guide_style="dim",
        )

        for category in Category:
            findings = by_category.get(category)
            if not findings:
                continue

            category_node = root_tree.add(
                f"{CATEGORY_LABELS[category]} ({len(findings)})", guide_style="dim"
            )
            for finding in findings:
                func_node = category_node.add(Text(finding.name, style="magenta"))
                if not finding.positions:
                    func_node.add(Text("no declaration found", style="grey50"))
                for pos in finding.positions:
                    location = Text(f"{pos.file} ", style="green")
                    location.append(f"(line {pos.row + 1}, col {pos.column})", style="grey50")
                    func_node.add(location)

        console.print(root_tree)

        # Print summary
        console.print("\n📊 Summary:")
        console.print(f"   Files scanned: {result.files_scanned}")
        if result.failed_files:
            console.print(f"   Files skipped: {len(result.failed_files)}")
        console.print(f"   Functions seen: {result.total_functions}")
        console.print(f"   Unused functions: {len(result.unused)}")
        console.print(f"   Undeclared functions: {len(result.undeclared)}")
        console.print(f"   Scan duration: {result.scan_duration:.2f}s")
