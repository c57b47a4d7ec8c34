"""Command handler functions for CLI operations."""

import zlib
from pathlib import Path
from typing import Optional

from common.logging_config import get_logger
from cli.config import Config
from cli.models import CommandResult, RestoreCommand, SplitCommand
from cli.utils import ProgressReporter
from splitter.exceptions import SplitterError
from splitter.manifest import load_manifest
from splitter.restore import restore_file
from splitter.split import split_file

logger = get_logger(__name__)


_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get or create global Config instance.

    Returns:
        Config instance
    """
    global _config
    if _config is None:
        logger.debug("Loading CLI configuration")
        _config = Config()
    return _config


def handle_split(cmd: SplitCommand, config: Optional[Config] = None) -> CommandResult:
    """
    Handle 'split' command.

    Files are processed one after another. The first failure stops the
    batch, later files are not split.

    Args:
        cmd: SplitCommand with files and optional overrides
        config: Optional Config for dependency injection (testing)

    Returns:
        CommandResult with a summary of the split files or the error
    """
    if config is None:
        config = get_config()

    size_limit = cmd.size_limit if cmd.size_limit is not None else config.get_chunk_limit()
    output_dir = Path(cmd.output_dir if cmd.output_dir is not None else config.get_output_dir())
    compress = cmd.compress or config.get_compress()

    logger.info(
        f"Executing split command: {len(cmd.files)} files, size_limit={size_limit}, "
        f"output_dir={output_dir}, compress={compress}"
    )
    lines = [f"Starting to process {len(cmd.files)} file(s) for splitting..."]

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        lines.append(f"Error: failed to create output directory {output_dir}: {e}")
        return CommandResult(success=False, message="\n".join(lines))

    for file_path in cmd.files:
        reporter = ProgressReporter(Path(file_path).name)
        try:
            manifest = split_file(
                file_path,
                size_limit,
                output_dir,
                compress=compress,
                progress_callback=reporter.update,
                message_callback=reporter.message,
            )
        except (SplitterError, OSError) as e:
            reporter.finish()
            logger.debug(f"Split of {file_path} failed", exc_info=True)
            lines.append(f"Error: file splitting failed for '{file_path}': {e}")
            return CommandResult(success=False, message="\n".join(lines))
        reporter.finish()
        lines.append(
            f"'{file_path}' split into {len(manifest.chunks)} chunk(s) in "
            f"{output_dir / manifest.chunks_sub_dir}"
        )

    lines.append("All files split successfully!")
    lines.append(
        "Each original file's split info (e.g., 'filename.json') is saved within "
        "its dedicated subdirectory (e.g., 'output_dir/filename_parts/')."
    )
    return CommandResult(success=True, message="\n".join(lines))


def handle_restore(cmd: RestoreCommand, config: Optional[Config] = None) -> CommandResult:
    """
    Handle 'restore' command.

    Args:
        cmd: RestoreCommand with manifest paths and optional overrides
        config: Optional Config for dependency injection (testing)

    Returns:
        CommandResult with a summary of the restored files or the error
    """
    if config is None:
        config = get_config()

    input_dir = Path(cmd.input_dir if cmd.input_dir is not None else config.get_input_dir())
    output_dir = Path(cmd.output_dir if cmd.output_dir is not None else config.get_output_dir())
    strict = cmd.strict or config.get_strict_checksums()

    logger.info(
        f"Executing restore command: {len(cmd.info_files)} files, input_dir={input_dir}, "
        f"output_dir={output_dir}, strict={strict}"
    )
    lines = [f"Starting to restore {len(cmd.info_files)} file(s)..."]

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        lines.append(f"Error: failed to create output directory {output_dir}: {e}")
        return CommandResult(success=False, message="\n".join(lines))

    for info_file in cmd.info_files:
        reporter = None
        try:
            manifest = load_manifest(info_file)
            reporter = ProgressReporter(manifest.original_filename)
            restored_path = restore_file(
                manifest,
                input_dir,
                output_dir,
                progress_callback=reporter.update,
                message_callback=reporter.message,
                strict=strict,
            )
        except (SplitterError, OSError, EOFError, zlib.error) as e:
            if reporter is not None:
                reporter.finish()
            logger.debug(f"Restore from {info_file} failed", exc_info=True)
            lines.append(f"Error: file restoration failed for '{info_file}': {e}")
            return CommandResult(success=False, message="\n".join(lines))
        reporter.finish()
        lines.append(f"'{manifest.original_filename}' restored to {restored_path}")

    lines.append("All files restored successfully!")
    return CommandResult(success=True, message="\n".join(lines))
