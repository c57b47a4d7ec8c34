"""Tests for CLI command handlers."""

import json
from unittest.mock import patch

import pytest

from cli.commands import handle_restore, handle_split
from cli.main import main, run_once
from cli.models import RestoreCommand, SplitCommand


@pytest.fixture
def config(temp_config, tmp_path):
    """Config pointing default directories inside tmp_path."""
    temp_config.data['chunk_limit'] = 4000
    temp_config.data['output_dir'] = str(tmp_path / 'parts')
    temp_config.data['input_dir'] = str(tmp_path / 'parts')
    return temp_config


def test_handle_split_uses_config_defaults(sample_file, config, tmp_path):
    result = handle_split(SplitCommand(files=(str(sample_file),)), config=config)

    assert result.success
    assert "All files split successfully!" in result.message
    manifest_path = tmp_path / 'parts' / 'report.txt_parts' / 'report.txt.json'
    data = json.loads(manifest_path.read_text())
    assert data['chunk_limit'] == 4000
    assert len(data['chunks']) == 3
    assert data['is_compressed'] is False


def test_handle_split_options_override_config(sample_file, config, tmp_path):
    cmd = SplitCommand(
        files=(str(sample_file),),
        size_limit=5000,
        output_dir=str(tmp_path / 'custom'),
        compress=True,
    )
    result = handle_split(cmd, config=config)

    assert result.success
    data = json.loads((tmp_path / 'custom' / 'report.txt_parts' / 'report.txt.json').read_text())
    assert data['chunk_limit'] == 5000
    assert data['is_compressed'] is True


def test_handle_split_stops_at_first_failure(make_file, config, tmp_path):
    first = make_file('first.bin', 100)
    last = make_file('last.bin', 100)
    missing = tmp_path / 'missing.bin'

    cmd = SplitCommand(files=(str(first), str(missing), str(last)))
    result = handle_split(cmd, config=config)

    assert not result.success
    assert "file splitting failed" in result.message
    assert (tmp_path / 'parts' / 'first.bin_parts').exists()
    assert not (tmp_path / 'parts' / 'last.bin_parts').exists()


def test_handle_restore_round_trip(sample_file, config, tmp_path):
    handle_split(SplitCommand(files=(str(sample_file),), compress=True), config=config)
    manifest_path = tmp_path / 'parts' / 'report.txt_parts' / 'report.txt.json'

    cmd = RestoreCommand(info_files=(str(manifest_path),), output_dir=str(tmp_path / 'restored'))
    result = handle_restore(cmd, config=config)

    assert result.success
    assert "All files restored successfully!" in result.message
    assert (tmp_path / 'restored' / 'report.txt').read_bytes() == sample_file.read_bytes()


def test_handle_restore_reports_missing_chunk_dir(sample_file, config, tmp_path):
    handle_split(SplitCommand(files=(str(sample_file),)), config=config)
    manifest_path = tmp_path / 'parts' / 'report.txt_parts' / 'report.txt.json'
    empty_root = tmp_path / 'empty'
    empty_root.mkdir()

    cmd = RestoreCommand(
        info_files=(str(manifest_path),),
        input_dir=str(empty_root),
        output_dir=str(tmp_path / 'restored'),
    )
    result = handle_restore(cmd, config=config)

    assert not result.success
    assert "not found" in result.message


def test_handle_restore_reports_invalid_manifest(config, tmp_path):
    bad = tmp_path / 'bad.json'
    bad.write_text('{"original_filename": "x"}')

    result = handle_restore(RestoreCommand(info_files=(str(bad),)), config=config)

    assert not result.success
    assert "file restoration failed" in result.message


def test_handle_restore_reports_binary_manifest(make_file, config):
    binary = make_file('somefile.bin', 0)
    binary.write_bytes(b"\xff\xfe\x00garbage")

    result = handle_restore(RestoreCommand(info_files=(str(binary),)), config=config)

    assert not result.success
    assert "file restoration failed" in result.message


def test_handle_restore_rejects_escaping_filename(sample_file, config, tmp_path):
    handle_split(SplitCommand(files=(str(sample_file),)), config=config)
    manifest_path = tmp_path / 'parts' / 'report.txt_parts' / 'report.txt.json'
    data = json.loads(manifest_path.read_text())
    data['original_filename'] = '../escaped.txt'
    manifest_path.write_text(json.dumps(data))

    cmd = RestoreCommand(info_files=(str(manifest_path),), output_dir=str(tmp_path / 'restored'))
    result = handle_restore(cmd, config=config)

    assert not result.success
    assert not (tmp_path / 'escaped.txt').exists()


def test_handle_restore_strict_from_config(sample_file, config, tmp_path):
    handle_split(SplitCommand(files=(str(sample_file),)), config=config)
    chunk = tmp_path / 'parts' / 'report.txt_parts' / 'report.txt-001'
    data = bytearray(chunk.read_bytes())
    data[0] ^= 0xFF
    chunk.write_bytes(bytes(data))
    config.data['strict_checksums'] = True

    manifest_path = tmp_path / 'parts' / 'report.txt_parts' / 'report.txt.json'
    cmd = RestoreCommand(info_files=(str(manifest_path),), output_dir=str(tmp_path / 'restored'))
    result = handle_restore(cmd, config=config)

    assert not result.success
    assert "Checksum mismatch" in result.message


def test_run_once_exit_codes(sample_file, config, tmp_path, capsys):
    with patch('cli.commands.get_config', return_value=config):
        assert run_once(['split', str(sample_file)]) == 0
        assert run_once(['restore', str(tmp_path / 'nope.json')]) == 1
    assert run_once(['split']) == 2

    captured = capsys.readouterr()
    assert "All files split successfully!" in captured.out
    assert "split requires at least one file" in captured.err


def test_main_help(capsys):
    with patch('cli.main.setup_logging'):
        assert main(['help']) == 0
    assert "Available commands" in capsys.readouterr().out


def test_main_debug_flag_only_before_command(capsys, monkeypatch):
    monkeypatch.delenv('LOG_LEVEL', raising=False)
    with patch('cli.main.setup_logging') as mock_setup:
        assert main(['--debug', 'help']) == 0
    mock_setup.assert_called_once_with('cli', log_level='DEBUG')

    with patch('cli.main.setup_logging') as mock_setup:
        assert main(['split', '--debug']) == 2
    assert mock_setup.call_args.kwargs['log_level'] != 'DEBUG'
    assert "Unknown option for split: --debug" in capsys.readouterr().err
