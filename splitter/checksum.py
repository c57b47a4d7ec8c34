"""Provides SHA-256 checksum calculation and verification helpers."""

import hashlib
from pathlib import Path
from typing import Union

from common.constants import CHECKSUM_BLOCK_SIZE

EMPTY_CHECKSUM = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def compute_checksum(data: bytes) -> str:
    """
    Compute SHA-256 checksum for given data.
    
    Args:
        data: Bytes to compute checksum for
        
    Returns:
        Hexadecimal string representation of SHA-256 hash
    """
    return hashlib.sha256(data).hexdigest()


def compute_file_checksum(
    file_path: Union[str, Path], block_size: int = CHECKSUM_BLOCK_SIZE
) -> str:
    """
    Compute SHA-256 checksum of a file's full contents.

    The file is read in fixed-size blocks, so memory use does not depend on
    the file size.

    Args:
        file_path: Path to an existing, readable file
        block_size: Number of bytes hashed per read

    Returns:
        Hexadecimal string representation of SHA-256 hash

    Raises:
        FileNotFoundError: If the file does not exist
        OSError: If the file cannot be read
    """
    calculator = IncrementalChecksumCalculator()
    with open(file_path, 'rb') as f:
        while True:
            block = f.read(block_size)
            if not block:
                break
            calculator.update(block)
    return calculator.finalize()


class IncrementalChecksumCalculator:
    """
    Calculate SHA-256 checksum incrementally for streaming data.
    
    Usage:
        calculator = IncrementalChecksumCalculator()
        calculator.update(block1)
        calculator.update(block2)
        final_checksum = calculator.finalize()
    """
    
    def __init__(self):
        self._hasher = hashlib.sha256()
        self._finalized = False
    
    def update(self, data: bytes) -> None:
        if self._finalized:
            raise ValueError("Cannot update after finalization")
        self._hasher.update(data)
    
    def finalize(self) -> str:
        """Finalize the calculation and return the hex digest."""
        self._finalized = True
        return self._hasher.hexdigest()
