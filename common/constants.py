"""Project-wide constants (default chunk limit, naming, buffer sizes)."""

DEFAULT_CHUNK_LIMIT_BYTES: int = 100 * 1024 * 1024  # 100 MiB, 104857600 bytes
CHECKSUM_BLOCK_SIZE: int = 8 * 1024

CHUNKS_DIR_SUFFIX: str = "_parts"
MANIFEST_SUFFIX: str = ".json"
SEQUENCE_WIDTH: int = 3
