"""
Command orchestrator for building a content report.
Used by the CLI; has no console dependencies of its own.
"""
import logging
import time
from typing import Callable, Optional, TextIO, Tuple

from uniquefiles.core.grouper import FileGrouperImpl
from uniquefiles.core.hasher import HasherImpl, get_algorithm
from uniquefiles.core.models import Bucket, ScanParams, ScanStats
from uniquefiles.core.scanner import FileScannerImpl
from uniquefiles.core.serializer import ReportSerializer

logger = logging.getLogger(__name__)


class UniqueFilesCommand:
    """
    Orchestrates the whole workflow:
    1. Resolve the hash algorithm (fails before any traversal)
    2. For each root in order: scan, then hash every file into one shared Bucket
    3. Serialize the Bucket once, after all roots are done

    Usage:
        params = ScanParams(roots=["~/Pictures", "/mnt/backup"])
        command = UniqueFilesCommand()
        stats = command.run(params, sys.stdout, progress_callback=print_comment)
    """

    def execute(
            self,
            params: ScanParams,
            progress_callback: Optional[Callable[[str], None]] = None
    ) -> Tuple[Bucket, ScanStats]:
        """
        Build the bucket for all roots.

        Args:
            params: Validated run parameters
            progress_callback: (message: str) -> None, one call per progress line

        Returns:
            Tuple of (bucket, statistics)

        Raises:
            UnknownAlgorithmError: If params.algorithm is not available
            UnreadableFileError: If any discovered file cannot be read
        """
        start_time = time.time()
        notify = progress_callback or (lambda message: None)

        algorithm = get_algorithm(params.algorithm)
        logger.debug(f"Using hash algorithm: {algorithm.name}")

        scanner = FileScannerImpl()
        grouper = FileGrouperImpl(HasherImpl(algorithm, chunk_size=params.chunk_size))
        stats = ScanStats()

        for root in params.roots:
            notify(f"Reading arg: {root}")
            files = scanner.scan(root, progress_callback=notify)
            notify(f"- Files found for arg: {len(files)}")
            notify("- Calculating hashes.")
            grouper.add_files(files)
            stats.roots += 1
            stats.files += len(files)

        bucket = grouper.bucket
        stats.directories = scanner.directories_visited
        stats.groups = len(bucket)
        stats.duplicate_groups = len(bucket.duplicate_groups())
        stats.total_time = time.time() - start_time
        logger.debug(stats.summary())
        return bucket, stats

    def run(
            self,
            params: ScanParams,
            out: TextIO,
            progress_callback: Optional[Callable[[str], None]] = None
    ) -> ScanStats:
        """Execute and write the report to out. Nothing is written if execution fails."""
        bucket, stats = self.execute(params, progress_callback=progress_callback)
        serializer = ReportSerializer(escaper=params.escaper, delimiter=params.delimiter)
        serializer.write(bucket, out)
        return stats
