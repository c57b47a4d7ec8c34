"""Configuration management for the file splitter CLI."""

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional

from common.constants import DEFAULT_CHUNK_LIMIT_BYTES
from common.logging_config import get_logger
from cli.constants import DEFAULT_CONFIG_DIR

logger = get_logger(__name__)


def default_config_path() -> Path:
    """
    Resolve the config file location.

    Returns:
        FILE_SPLITTER_CONFIG if set, otherwise ~/.file-splitter/config.json
    """
    override = os.environ.get("FILE_SPLITTER_CONFIG")
    if override:
        return Path(override)
    return Path.home() / DEFAULT_CONFIG_DIR / 'config.json'


class Config:
    """Manages CLI defaults stored in a JSON file."""

    DEFAULT_CONFIG = {
        "chunk_limit": DEFAULT_CHUNK_LIMIT_BYTES,
        "output_dir": ".",
        "input_dir": ".",
        "compress": False,
        "strict_checksums": False,
    }

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to config JSON file (defaults to default_config_path())
        """
        self.config_path = config_path if config_path is not None else default_config_path()
        self.data = self._load()

    def _defaults(self) -> dict:
        """
        Build the default configuration, honouring FILE_SPLITTER_CHUNK_LIMIT.

        Returns:
            Fresh defaults dictionary
        """
        config = self.DEFAULT_CONFIG.copy()
        override = os.environ.get("FILE_SPLITTER_CHUNK_LIMIT")
        if override is not None:
            try:
                config["chunk_limit"] = int(override)
            except ValueError:
                logger.warning(
                    f"Ignoring non-numeric FILE_SPLITTER_CHUNK_LIMIT={override!r}, "
                    f"using {DEFAULT_CHUNK_LIMIT_BYTES}"
                )
        return config

    def _load(self) -> dict:
        """
        Load configuration from file, creating defaults if necessary.

        Returns:
            Configuration dictionary
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            self.config_path = Path(tempfile.gettempdir()) / DEFAULT_CONFIG_DIR / 'config.json'
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError("config root must be a JSON object")
                config = self._defaults()
                config.update(data)
                return config
            except (json.JSONDecodeError, ValueError, OSError) as e:
                logger.warning(f"Ignoring unreadable config {self.config_path}: {e}")
                backup_path = self.config_path.with_suffix('.json.bak')
                try:
                    shutil.copy(self.config_path, backup_path)
                except OSError as copy_error:
                    logger.warning(f"Could not back up config to {backup_path}: {copy_error}")
                return self._defaults()
        else:
            config = self._defaults()
            try:
                with open(self.config_path, 'w') as f:
                    json.dump(config, f, indent=2)
            except OSError as e:
                logger.warning(f"Could not write default config to {self.config_path}: {e}")
            return config

    def get_chunk_limit(self) -> int:
        """
        Get default maximum bytes per chunk.

        Returns:
            Chunk limit in bytes
        """
        return int(self.data.get('chunk_limit', DEFAULT_CHUNK_LIMIT_BYTES))

    def get_output_dir(self) -> str:
        return self.data.get('output_dir', '.')

    def get_input_dir(self) -> str:
        return self.data.get('input_dir', '.')

    def get_compress(self) -> bool:
        return bool(self.data.get('compress', False))

    def get_strict_checksums(self) -> bool:
        """
        Whether restores fail on checksum mismatch by default.

        Returns:
            True to raise on mismatch, False to only warn
        """
        return bool(self.data.get('strict_checksums', False))
