"""Rebuilds an original file from its manifest and chunk files."""

from pathlib import Path
from typing import Optional, Union

from common.logging_config import get_logger
from common.types import MessageCallback, ProgressCallback
from splitter.checksum import compute_checksum, compute_file_checksum
from splitter.chunk_storage import get_chunk_path, read_chunk
from splitter.exceptions import (
    ChecksumMismatchError,
    ChunkDirectoryNotFoundError,
    SizeMismatchError,
)
from splitter.manifest import Manifest

logger = get_logger(__name__)


def _report_checksum_mismatch(message: str, expected: str, actual: str, strict: bool) -> None:
    """Log a checksum mismatch, or raise it when running strict."""
    if strict:
        raise ChecksumMismatchError(message, expected=expected, actual=actual)
    logger.warning(message)


def restore_file(
    manifest: Manifest,
    chunks_root: Union[str, Path],
    output_dir: Union[str, Path],
    progress_callback: Optional[ProgressCallback] = None,
    message_callback: Optional[MessageCallback] = None,
    strict: bool = False,
) -> Path:
    """
    Concatenate the chunks listed in a manifest back into the original file.

    Checksum mismatches, per chunk or for the whole file, are logged as
    warnings and the restore carries on unless ``strict`` is set. A restored
    size that differs from the manifest is always an error.

    Args:
        manifest: Parsed manifest of the file to restore
        chunks_root: Directory containing ``manifest.chunks_sub_dir``
        output_dir: Directory that receives the restored file
        progress_callback: Called with (bytes_written, original_size) after each chunk
        message_callback: Called with status lines at start and finish
        strict: Raise ChecksumMismatchError instead of warning

    Returns:
        Path of the restored file

    Raises:
        ChunkDirectoryNotFoundError: If the chunk subdirectory is missing
        SizeMismatchError: If the restored file size differs from the manifest
        ChecksumMismatchError: On any checksum mismatch when strict is set
        OSError: If a chunk cannot be read or the output cannot be written
    """
    name = manifest.original_filename
    output_path = Path(output_dir) / name
    chunks_dir = Path(chunks_root) / manifest.chunks_sub_dir

    with open(output_path, 'wb') as output:
        if message_callback:
            message_callback(f"Restoring '{name}'")

        if not chunks_dir.is_dir():
            raise ChunkDirectoryNotFoundError(
                f"Chunk directory for file '{name}' not found: {chunks_dir}"
            )

        logger.info(
            f"Restoring {name} from {len(manifest.chunks)} chunk(s) in {chunks_dir} "
            f"to {output_path}"
        )

        total_written = 0
        for record in manifest.chunks:
            chunk_path = get_chunk_path(chunks_dir, record.chunk_filename)
            data, stored_size = read_chunk(chunk_path, compressed=manifest.is_compressed)
            if stored_size != record.chunk_size:
                logger.warning(
                    f"Stored size of chunk '{record.chunk_filename}' is {stored_size}, "
                    f"manifest records {record.chunk_size}"
                )

            if record.chunk_checksum is not None:
                actual = compute_checksum(data)
                if actual != record.chunk_checksum:
                    _report_checksum_mismatch(
                        f"Checksum mismatch for chunk '{record.chunk_filename}'! "
                        f"Expected: {record.chunk_checksum}, Actual: {actual}",
                        expected=record.chunk_checksum,
                        actual=actual,
                        strict=strict,
                    )

            output.write(data)
            total_written += len(data)
            logger.debug(f"Appended chunk {record.chunk_filename}: {len(data)} bytes")

            if progress_callback:
                progress_callback(total_written, manifest.original_file_size)

    if message_callback:
        message_callback(f"'{name}' restoration complete")

    restored_size = output_path.stat().st_size
    if restored_size != manifest.original_file_size:
        raise SizeMismatchError(
            f"Restored file size mismatch: expected {manifest.original_file_size}, "
            f"actual {restored_size}",
            expected=manifest.original_file_size,
            actual=restored_size,
        )

    actual_checksum = compute_file_checksum(output_path)
    if actual_checksum != manifest.original_checksum:
        _report_checksum_mismatch(
            f"Original checksum mismatch for restored file '{name}'! "
            f"Expected: {manifest.original_checksum}, Actual: {actual_checksum}",
            expected=manifest.original_checksum,
            actual=actual_checksum,
            strict=strict,
        )

    logger.info(f"Restored {name} ({restored_size} bytes) to {output_path}")
    return output_path
