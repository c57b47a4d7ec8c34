"""Pydantic models for the split manifest and its JSON persistence.

Field names are the keys of the manifest file, so a model dump is the wire
format and previously written manifests load unchanged.
"""

from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from splitter.exceptions import ManifestError


def _require_basename(value: str) -> str:
    """Reject names that would resolve outside the directory they are joined to."""
    if value in ("", ".", ".."):
        raise ValueError(f"'{value}' is not a file name")
    if PurePosixPath(value).name != value or PureWindowsPath(value).name != value:
        raise ValueError(f"'{value}' must be a bare file name without directory parts")
    return value


class ChunkRecord(BaseModel):
    """One stored chunk of an original file."""
    model_config = ConfigDict(frozen=True)

    chunk_filename: str
    chunk_size: int = Field(ge=0)
    chunk_checksum: Optional[str] = None

    @field_validator('chunk_filename')
    @classmethod
    def _chunk_filename_is_basename(cls, value: str) -> str:
        return _require_basename(value)


class Manifest(BaseModel):
    """Everything needed to rebuild one original file from its chunks."""
    model_config = ConfigDict(frozen=True)

    original_filename: str
    original_file_size: int = Field(ge=0)
    chunk_limit: int = Field(gt=0)
    chunks_sub_dir: str
    chunks: List[ChunkRecord] = Field(min_length=1)
    original_checksum: str
    is_compressed: bool

    @field_validator('original_filename', 'chunks_sub_dir')
    @classmethod
    def _names_are_basenames(cls, value: str) -> str:
        return _require_basename(value)


def save_manifest(manifest: Manifest, path: Path) -> None:
    """
    Write manifest as pretty-printed JSON.

    Args:
        manifest: Manifest to persist
        path: Destination file, created or truncated

    Raises:
        OSError: If write operation fails
    """
    path.write_text(manifest.model_dump_json(indent=2), encoding='utf-8')


def load_manifest(path: Union[str, Path]) -> Manifest:
    """
    Read and validate a manifest file.

    Args:
        path: Manifest JSON file

    Returns:
        Parsed manifest

    Raises:
        FileNotFoundError: If the file does not exist
        ManifestError: If the content is not a valid manifest
    """
    content = Path(path).read_bytes()
    try:
        return Manifest.model_validate_json(content)
    except ValueError as e:
        # pydantic's ValidationError and UnicodeDecodeError are both ValueErrors
        raise ManifestError(f"Failed to parse manifest {path}: {e}") from e
