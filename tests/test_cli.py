"""
Tests for the command-line interface.
"""

import io
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from hexdumper.cli import main, offset_arg
from hexdumper.dumper import hexdump


def test_dump_file(tmp_path, capsys):
    """Test dumping a whole file."""
    test_file = tmp_path / "test.bin"
    test_file.write_bytes(b'This is a test message.')

    assert main([str(test_file)]) == 0
    captured = capsys.readouterr()
    assert captured.out == hexdump(b'This is a test message.')
    assert captured.err == ''


def test_skip_and_length(tmp_path, capsys):
    """Test that the offset column starts at the skipped position."""
    test_file = tmp_path / "test.bin"
    test_file.write_bytes(bytes(range(64)))

    assert main(['-s', '0x10', '-n', '4', str(test_file)]) == 0
    captured = capsys.readouterr()
    assert captured.out == '000010  10 11 12 13' + ' ' * 38 + '|....|\n'


def test_empty_file(tmp_path, capsys):
    """Test that an empty file produces no output."""
    test_file = tmp_path / "empty.bin"
    test_file.write_bytes(b'')

    assert main([str(test_file)]) == 0
    assert capsys.readouterr().out == ''


def test_stdin(monkeypatch, capsys):
    """Test reading standard input when no file is given."""
    monkeypatch.setattr(sys, 'stdin', io.TextIOWrapper(io.BytesIO(b'A')))
    assert main([]) == 0
    assert capsys.readouterr().out == hexdump(b'A')


def test_dash_means_stdin(monkeypatch, capsys):
    """Test that '-' reads standard input."""
    monkeypatch.setattr(sys, 'stdin', io.TextIOWrapper(io.BytesIO(b'xyz')))
    assert main(['-']) == 0
    assert capsys.readouterr().out == hexdump(b'xyz')


def test_missing_file(tmp_path, capsys):
    """Test the exit status for an unreadable input."""
    assert main([str(tmp_path / "missing.bin")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'Cannot read' in captured.err


def test_broken_output(tmp_path, monkeypatch, capsys):
    """Test the exit status when stdout cannot be written."""
    test_file = tmp_path / "test.bin"
    test_file.write_bytes(b'abc')
    closed = io.StringIO()
    closed.close()
    monkeypatch.setattr(sys, 'stdout', closed)

    assert main([str(test_file)]) == 1
    assert 'Failed to write line at offset 000000' in capsys.readouterr().err


def test_verbose_logs_to_stderr(tmp_path, capsys):
    """Test that debug logging goes to stderr, not into the dump."""
    test_file = tmp_path / "test.bin"
    test_file.write_bytes(b'abc')

    assert main(['-v', str(test_file)]) == 0
    captured = capsys.readouterr()
    assert captured.out == hexdump(b'abc')
    assert 'Shipped 3 bytes' in captured.err


@pytest.mark.parametrize('value,expected', [('0', 0), ('16', 16), ('0x10', 16), ('0o20', 16)])
def test_offset_arg(value, expected):
    """Test parsing of offsets and lengths."""
    assert offset_arg(value) == expected


@pytest.mark.parametrize('argv', [['-s', '-1'], ['-n', 'abc']])
def test_bad_numbers_rejected(argv):
    """Test that the argument parser rejects invalid numbers."""
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2


if __name__ == '__main__':
    pytest.main([__file__])
