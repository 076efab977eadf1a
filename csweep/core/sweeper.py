"""Main C function sweeper."""

import logging
import time
from pathlib import Path

from csweep.core.classifier import classify
from csweep.core.errors import SweepFileError, UnreadableFileError
from csweep.core.models import FileError, ScanResult
from csweep.core.parser import create_parser, parse_source
from csweep.core.protocols import ProgressCallback
from csweep.core.registry import FunctionRegistry
from csweep.core.utils import iter_source_files
from csweep.core.walker import collect_sites

logger = logging.getLogger(__name__)


class FunctionSweeper:
    """Main class for finding unused and undeclared C functions."""

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose
        self.parser = create_parser()

        logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    def scan(
        self,
        path: Path,
        recursive: bool = False,
        progress_callback: ProgressCallback | None = None,
    ) -> ScanResult:
        """
        Sweep a file or directory for unused and undeclared functions.

        Args:
            path: C file or directory to sweep
            recursive: Whether to descend into subdirectories
            progress_callback: Receives one update per processed file

        Returns:
            ScanResult with findings and any files that had to be skipped
        """
        start_time = time.time()

        files = iter_source_files(path, recursive=recursive)
        logger.debug(f"Found {len(files)} C files to sweep")
        if progress_callback:
            progress_callback.update("Sweeping C files...", total=len(files))

        registry = FunctionRegistry()
        failed_files: list[FileError] = []

        for file_path in files:
            logger.debug(f"Processing {file_path}")
            try:
                self.process_file(file_path, registry)
            except SweepFileError as e:
                logger.debug(str(e))
                failed_files.append(FileError(file=e.path, reason=e.reason))

            if progress_callback:
                progress_callback.update(f"Swept {file_path.name}", advance=1)

        findings = classify(registry)
        logger.debug(f"Registered {len(registry)} function names, {len(findings)} findings")

        return ScanResult(
            findings=findings,
            files_scanned=len(files),
            total_functions=len(registry),
            scan_duration=time.time() - start_time,
            failed_files=failed_files,
        )

    def process_file(self, path: Path, registry: FunctionRegistry) -> int:
        """Read one file and record its sites. Raises SweepFileError on failure."""
        try:
            source = path.read_bytes()
            source.decode("utf-8")
        except OSError as e:
            raise UnreadableFileError(path, e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise UnreadableFileError(path, "not valid UTF-8") from e

        return self.analyze_source(path, source, registry)

    def analyze_source(self, path: Path, source: bytes, registry: FunctionRegistry) -> int:
        """Parse source bytes and record its sites. Returns the number recorded."""
        tree = parse_source(self.parser, source, path)
        recorded = collect_sites(tree.root_node, source, path, registry)
        logger.debug(f"Recorded {recorded} sites in {path}")
        return recorded
