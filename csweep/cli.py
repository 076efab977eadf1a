"""CLI interface for the C function sweeper."""

import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TextColumn,
)

from csweep.core.models import ScanResult
from csweep.core.parser import get_language
from csweep.core.sweeper import FunctionSweeper
from csweep.output.formatters.enums import OutputFormat
from csweep.output.formatters.formatter_factory import get_formatter
from csweep.output.progress.callbacks import RichProgressCallback

app = typer.Typer(
    name="csweep",
    help="🧹 Find unused or undeclared C functions",
    no_args_is_help=True,
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def _report_skipped(result: ScanResult) -> None:
    for err in result.failed_files:
        err_console.print(
            f"[yellow]{err.reason}: {err.file}[/yellow]", highlight=False, soft_wrap=True
        )


@app.command()
def check(
    path: Annotated[
        Path,
        typer.Argument(
            file_okay=True,
            dir_okay=True,
            help="C file or directory to sweep",
        ),
    ],
    recursive: Annotated[
        bool,
        typer.Option(
            "--recursive",
            "-r",
            help="Search folders recursively",
        ),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--output",
            "-o",
            help="Output format: tree, text, json, csv",
        ),
    ] = OutputFormat.TREE,
    output_file: Annotated[
        Path | None,
        typer.Option(
            "--output-file",
            "-f",
            help="Save results to file",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose output",
        ),
    ] = False,
) -> None:
    """
    Sweep C sources and headers for unused or undeclared functions.

    A function is unused when it is never called, and undeclared when it
    has fewer than two declarations (no separate prototype). `main` is
    never reported. Only files ending in .c or .h are considered.

    Examples:
        csweep check src/
        csweep check -r . --output json
        csweep check main.c -o csv -f results.csv
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)

    with Progress(
        MofNCompleteColumn(),
        BarColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task_id = progress.add_task("Sweeping C files...", total=None)
        progress_callback = RichProgressCallback(progress, task_id)

        try:
            sweeper = FunctionSweeper(verbose=verbose)
            result = sweeper.scan(
                path=path,
                recursive=recursive,
                progress_callback=progress_callback,
            )
        except Exception as e:
            err_console.print(f"[red]Error during scan: {e}[/red]", soft_wrap=True)
            if verbose:
                err_console.print_exception()
            raise typer.Exit(1)

    _report_skipped(result)

    formatter = get_formatter(output_format)

    if output_format == OutputFormat.TREE:
        message = formatter.format(result)
        if message:
            console.print(f"[green]{message}[/green]")
        if output_file:
            # The tree is terminal-only, so save the plain text report instead
            get_formatter(OutputFormat.TEXT).save(result, output_file)
            console.print(f"[green]Text report saved to {output_file}[/green]")
    elif output_file:
        formatter.save(result, output_file)
        console.print(f"[green]Results saved to {output_file}[/green]")
    else:
        console.print(formatter.format(result), markup=False, highlight=False, soft_wrap=True)

    if result.findings:
        if output_format == OutputFormat.TREE:
            console.print(
                f"[yellow]⚠️  Found {len(result.unused)} unused and "
                f"{len(result.undeclared)} undeclared function(s)[/yellow]"
            )
        raise typer.Exit(1)


@app.command("version")
def cli_version() -> None:
    """Show version information."""
    try:
        console.print(version("c-function-sweeper"))
    except PackageNotFoundError:
        console.print("unknown")


@app.command()
def doctor() -> None:
    """Check system requirements and setup."""
    console.print("🔧 Checking system requirements...")

    python_version = sys.version_info
    if python_version >= (3, 10):
        console.print(f"[green]✓ Python {python_version.major}.{python_version.minor}[/green]")
    else:
        console.print(
            f"[red]✗ Python {python_version.major}.{python_version.minor} (requires 3.10+)[/red]"
        )
        raise typer.Exit(1)

    try:
        get_language()
    except Exception as e:
        console.print(f"[red]✗ tree-sitter C grammar failed to load: {e}[/red]")
        console.print("Install with: pip install tree-sitter tree-sitter-c")
        raise typer.Exit(1)
    console.print("[green]✓ tree-sitter C grammar loaded[/green]")

    console.print("\n[green]✓ System check complete[/green]")


if __name__ == "__main__":
    app()
