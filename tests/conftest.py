"""Shared pytest fixtures for all tests."""

import random

import pytest
from cli.config import Config


@pytest.fixture
def make_file(tmp_path):
    """
    Factory creating a source file with deterministic pseudo-random content.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Callable (name, size) -> Path
    """
    source_dir = tmp_path / 'source'
    source_dir.mkdir()

    def _make(name: str, size: int, seed: int = 1234):
        path = source_dir / name
        path.write_bytes(random.Random(seed).randbytes(size))
        return path

    return _make


@pytest.fixture
def sample_file(make_file):
    """A 10000-byte source file named report.txt."""
    return make_file('report.txt', 10000)


@pytest.fixture
def parts_root(tmp_path):
    """Root directory receiving <name>_parts subdirectories."""
    root = tmp_path / 'parts'
    root.mkdir()
    return root


@pytest.fixture
def restored_dir(tmp_path):
    """Directory receiving restored files."""
    out = tmp_path / 'restored'
    out.mkdir()
    return out


@pytest.fixture
def temp_config(tmp_path):
    """
    Create temporary config instance.

    Returns:
        Config instance with temp config file
    """
    return Config(tmp_path / '.file-splitter' / 'config.json')
