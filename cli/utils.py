"""Utility functions for CLI operations."""

import sys
from typing import Optional, TextIO

from common.logging_config import get_logger
from cli.constants import GREEN, RESET

logger = get_logger(__name__)


class ProgressReporter:
    """Progress and message sink that renders split/restore progress to a stream."""

    def __init__(self, label: str, stream: Optional[TextIO] = None):
        """
        Initialize the progress reporter.

        Args:
            label: Display name for the file being processed
            stream: Output stream (defaults to stdout)
        """
        self.label = label
        self.stream = stream if stream is not None else sys.stdout
        self.last_message: Optional[str] = None
        self._displayed = False

    def update(self, done: int, total: int) -> None:
        """
        Render the current byte count.

        Args:
            done: Bytes processed so far
            total: Total bytes of the original file
        """
        progress = (done / total) * 100 if total > 0 else 100.0
        self.stream.write(
            f"\r{self.label}: {format_file_size(done)} / {format_file_size(total)} "
            f"({GREEN}{progress:.1f}%{RESET})"
        )
        self.stream.flush()
        self._displayed = True

    def message(self, text: str) -> None:
        """Record a status line from the engine and log it below the progress line."""
        self.finish()
        self.last_message = text
        logger.info(text)

    def finish(self) -> None:
        """Finalize progress display with newline."""
        if self._displayed:
            self.stream.write('\n')
            self.stream.flush()
            self._displayed = False


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in bytes to human-readable format with appropriate unit.
    
    Uses binary units (1024-based) and automatically selects the most
    appropriate unit (B, KiB, MiB, GiB, TiB).
    
    Args:
        size_bytes: File size in bytes
        
    Returns:
        Formatted string with size and unit (e.g., "1.50 MiB", "512 B")
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    
    units = ['KiB', 'MiB', 'GiB', 'TiB']
    size = size_bytes / 1024.0
    
    for unit in units:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0
    
    return f"{size:.2f} PiB"
