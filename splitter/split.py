"""Splits one file into bounded-size chunks and writes its manifest."""

import os
from pathlib import Path
from typing import List, Optional, Union

from common.logging_config import get_logger
from common.types import MessageCallback, ProgressCallback
from splitter.checksum import compute_checksum, compute_file_checksum
from splitter.chunk_storage import (
    chunk_filename,
    chunks_dir_name,
    ensure_chunks_directory,
    get_chunk_path,
    manifest_filename,
    write_chunk,
)
from splitter.exceptions import InvalidChunkLimitError, SizeMismatchError
from splitter.manifest import ChunkRecord, Manifest, save_manifest

logger = get_logger(__name__)


def split_file(
    file_path: Union[str, Path],
    chunk_limit: int,
    output_root: Union[str, Path],
    compress: bool = False,
    progress_callback: Optional[ProgressCallback] = None,
    message_callback: Optional[MessageCallback] = None,
) -> Manifest:
    """
    Split a file into chunks under ``<output_root>/<name>_parts``.

    Every chunk holds at most ``chunk_limit`` plaintext bytes and is named
    ``<name>-001``, ``<name>-002``, ... A zero-byte file still yields one
    empty chunk. The manifest is written to ``<name>_parts/<name>.json``
    only after every chunk has been written.

    Args:
        file_path: Regular file to split
        chunk_limit: Maximum plaintext bytes per chunk, must be positive
        output_root: Directory that receives the chunk subdirectory
        compress: Whether to Gzip each chunk
        progress_callback: Called with (bytes_processed, original_size) after each chunk
        message_callback: Called with status lines at start, finish and manifest save

    Returns:
        The manifest that was written

    Raises:
        InvalidChunkLimitError: If chunk_limit is not positive
        FileNotFoundError: If file_path is not an existing regular file
        SizeMismatchError: If the bytes read do not add up to the file size
        OSError: If reading the source or writing chunks fails
    """
    if chunk_limit <= 0:
        raise InvalidChunkLimitError(f"Chunk limit must be a positive byte count, got {chunk_limit}")

    file_path = Path(file_path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Source file not found or not a regular file: {file_path}")

    original_name = file_path.name
    chunks: List[ChunkRecord] = []
    total_bytes_processed = 0

    with open(file_path, 'rb') as source:
        original_size = os.fstat(source.fileno()).st_size

        sub_dir = chunks_dir_name(original_name)
        chunks_dir = Path(output_root) / sub_dir
        ensure_chunks_directory(chunks_dir)

        original_checksum = compute_file_checksum(file_path)

        logger.info(
            f"Splitting {file_path} ({original_size} bytes) into {chunks_dir} "
            f"with chunk limit {chunk_limit}, compress={compress}"
        )
        if message_callback:
            message_callback(f"Splitting '{original_name}'")

        sequence = 0
        while True:
            # read(n) reserves n bytes up front; never ask for more than remains
            remaining = original_size - total_bytes_processed
            data = source.read(max(1, min(chunk_limit, remaining)))
            if not data and chunks:
                break

            sequence += 1
            name = chunk_filename(original_name, sequence)
            stored_size = write_chunk(get_chunk_path(chunks_dir, name), data, compress)
            chunks.append(
                ChunkRecord(
                    chunk_filename=name,
                    chunk_size=stored_size,
                    chunk_checksum=compute_checksum(data),
                )
            )
            total_bytes_processed += len(data)
            logger.debug(f"Wrote chunk {name}: {len(data)} bytes read, {stored_size} bytes stored")

            if progress_callback:
                progress_callback(total_bytes_processed, original_size)

            if len(data) < chunk_limit:
                break

    if message_callback:
        message_callback(f"'{original_name}' splitting complete")

    if total_bytes_processed != original_size:
        raise SizeMismatchError(
            f"File size mismatch during splitting: expected {original_size}, "
            f"actual {total_bytes_processed}",
            expected=original_size,
            actual=total_bytes_processed,
        )

    manifest = Manifest(
        original_filename=original_name,
        original_file_size=original_size,
        chunk_limit=chunk_limit,
        chunks_sub_dir=sub_dir,
        chunks=chunks,
        original_checksum=original_checksum,
        is_compressed=compress,
    )

    manifest_path = chunks_dir / manifest_filename(original_name)
    save_manifest(manifest, manifest_path)
    logger.info(f"Split {original_name} into {len(chunks)} chunk(s), manifest saved to {manifest_path}")

    if message_callback:
        message_callback(f"Split info for file '{original_name}' saved to: {manifest_path}")

    return manifest
