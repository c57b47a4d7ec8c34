"""Manages physical chunk files on disk: naming, layout, read/write."""

import gzip
import os
from pathlib import Path
from typing import Tuple, Union

from common.constants import CHUNKS_DIR_SUFFIX, MANIFEST_SUFFIX, SEQUENCE_WIDTH

GZIP_COMPRESS_LEVEL = 6


def chunks_dir_name(original_name: str) -> str:
    """Name of the subdirectory holding every chunk of ``original_name``."""
    return f"{original_name}{CHUNKS_DIR_SUFFIX}"


def manifest_filename(original_name: str) -> str:
    return f"{original_name}{MANIFEST_SUFFIX}"


def chunk_filename(original_name: str, sequence: int) -> str:
    """
    Build the on-disk name of a chunk.

    Sequence numbers start at 1 and are zero-padded to three digits. Numbers
    above 999 are rendered in full, never wrapped.

    Args:
        original_name: Basename of the original file
        sequence: 1-based chunk sequence number

    Returns:
        Chunk filename (e.g., "report.txt-001")
    """
    return f"{original_name}-{sequence:0{SEQUENCE_WIDTH}d}"


def ensure_chunks_directory(chunks_dir: Path) -> None:
    """Ensure chunks directory exists."""
    chunks_dir.mkdir(parents=True, exist_ok=True)


def get_chunk_path(chunks_dir: Union[str, Path], name: str) -> Path:
    return Path(chunks_dir) / name


def write_chunk(chunk_path: Path, data: bytes, compress: bool = False) -> int:
    """
    Write chunk data to disk, verbatim or Gzip-framed.
    
    Args:
        chunk_path: Destination file, created or truncated
        data: Plaintext chunk bytes
        compress: Whether to write the bytes through a Gzip encoder
        
    Returns:
        Number of bytes the chunk occupies on disk
        
    Raises:
        OSError: If write operation fails
    """
    if compress:
        with gzip.open(chunk_path, 'wb', compresslevel=GZIP_COMPRESS_LEVEL) as f:
            f.write(data)
        return chunk_path.stat().st_size

    chunk_path.write_bytes(data)
    return len(data)


def read_chunk(chunk_path: Path, compressed: bool = False) -> Tuple[bytes, int]:
    """
    Read an entire chunk from disk and return its plaintext bytes.

    The stored size comes from the same open handle the data is read from.
    
    Args:
        chunk_path: Chunk file to read
        compressed: Whether the chunk is Gzip-framed
        
    Returns:
        Tuple of (decoded chunk data, bytes the chunk occupies on disk)
        
    Raises:
        FileNotFoundError: If chunk does not exist
        gzip.BadGzipFile: If a compressed chunk is not valid Gzip data
        OSError: If read operation fails
    """
    with open(chunk_path, 'rb') as f:
        stored_size = os.fstat(f.fileno()).st_size
        if compressed:
            with gzip.GzipFile(fileobj=f, mode='rb') as gz:
                return gz.read(), stored_size
        return f.read(), stored_size
