"""Command request and result data types for CLI."""

from dataclasses import dataclass
from typing import Literal, Optional


@dataclass(frozen=True)
class SplitCommand:
    """Split one or more files into chunks."""

    files: tuple[str, ...]
    size_limit: Optional[int] = None
    output_dir: Optional[str] = None
    compress: bool = False
    command: Literal["split"] = "split"


@dataclass(frozen=True)
class RestoreCommand:
    """Restore one or more files from their manifests."""

    info_files: tuple[str, ...]
    input_dir: Optional[str] = None
    output_dir: Optional[str] = None
    strict: bool = False
    command: Literal["restore"] = "restore"


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a command handler."""

    success: bool
    message: str


CommandRequest = SplitCommand | RestoreCommand
