"""Tests for CLI configuration module."""

import json

from cli.config import Config, default_config_path


def test_config_creates_default_file(tmp_path):
    """Test that config file is created with defaults if missing."""
    config_path = tmp_path / '.file-splitter' / 'config.json'
    config = Config(config_path)

    assert config_path.exists()

    assert config.data['chunk_limit'] == 104857600
    assert config.data['output_dir'] == '.'
    assert config.data['input_dir'] == '.'
    assert config.data['compress'] is False
    assert config.data['strict_checksums'] is False


def test_config_loads_existing_file(tmp_path):
    """Test loading existing config file."""
    config_path = tmp_path / '.file-splitter' / 'config.json'
    config_path.parent.mkdir(parents=True)

    with open(config_path, 'w') as f:
        json.dump({'chunk_limit': 1024, 'compress': True}, f)

    config = Config(config_path)

    assert config.get_chunk_limit() == 1024
    assert config.get_compress() is True
    assert config.get_output_dir() == '.'
    assert config.get_strict_checksums() is False


def test_config_handles_corrupted_file(tmp_path):
    """Test recovery from corrupted config file."""
    config_path = tmp_path / '.file-splitter' / 'config.json'
    config_path.parent.mkdir(parents=True)

    with open(config_path, 'w') as f:
        f.write('{ invalid json content')

    config = Config(config_path)
    assert config.get_chunk_limit() == 104857600

    backup_path = config_path.with_suffix('.json.bak')
    assert backup_path.exists()


def test_config_rejects_non_object_root(tmp_path):
    config_path = tmp_path / 'config.json'
    config_path.write_text('[1, 2, 3]')

    config = Config(config_path)
    assert config.data == Config.DEFAULT_CONFIG


def test_config_directory_created_if_missing(tmp_path):
    """Test that config directory is created if it doesn't exist."""
    config_path = tmp_path / 'nested' / 'deep' / '.file-splitter' / 'config.json'

    assert not config_path.parent.exists()

    Config(config_path)
    assert config_path.parent.exists()
    assert config_path.exists()


def test_default_config_path_env_override(tmp_path, monkeypatch):
    override = tmp_path / 'custom.json'
    monkeypatch.setenv('FILE_SPLITTER_CONFIG', str(override))
    assert default_config_path() == override


def test_default_config_path_in_home(tmp_path, monkeypatch):
    monkeypatch.delenv('FILE_SPLITTER_CONFIG', raising=False)
    monkeypatch.setenv('HOME', str(tmp_path))
    assert default_config_path() == tmp_path / '.file-splitter' / 'config.json'


def test_chunk_limit_env_override(tmp_path, monkeypatch):
    monkeypatch.setenv('FILE_SPLITTER_CHUNK_LIMIT', '2048')
    config = Config(tmp_path / 'config.json')
    assert config.get_chunk_limit() == 2048


def test_non_numeric_chunk_limit_env_falls_back(tmp_path, monkeypatch):
    """A bad environment value is ignored instead of breaking config loading."""
    monkeypatch.setenv('FILE_SPLITTER_CHUNK_LIMIT', 'lots')
    config = Config(tmp_path / 'config.json')
    assert config.get_chunk_limit() == 104857600
