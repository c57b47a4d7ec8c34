"""Shared type aliases for the notification hooks exposed by the engine."""

from typing import Callable

ProgressCallback = Callable[[int, int], None]
"""Called with (bytes_done, bytes_total) after each completed chunk."""

MessageCallback = Callable[[str], None]
"""Called with a human-readable status line at coarse milestones."""
