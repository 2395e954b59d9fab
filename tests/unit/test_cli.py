"""Tests for CLI tool."""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path

import pytest
from pydantic import ValidationError

from wscodec import __version__, encode
from wscodec.cli.main import main
from wscodec.cli.options import CliOptions, Mode


def test_cli_help(run_cli) -> None:
    """Test CLI --help flag."""
    result = run_cli("--help")
    assert result.returncode == 0
    assert b"wscodec: Whitespace Binary Codec" in result.stdout
    assert b"encode" in result.stdout
    assert b"decode" in result.stdout


def test_cli_version(run_cli) -> None:
    """Test CLI --version flag."""
    result = run_cli("--version")
    assert result.returncode == 0
    assert f"wscodec {__version__}".encode() in result.stdout


def test_cli_no_args(run_cli) -> None:
    """Test CLI with no arguments (should show help)."""
    result = run_cli()
    assert result.returncode == 0
    assert b"wscodec: Whitespace Binary Codec" in result.stdout


def test_cli_encode_stdin(run_cli) -> None:
    """Test encoding from stdin to stdout."""
    result = run_cli("encode", stdin=b"\x0a\x02")
    assert result.returncode == 0
    assert result.stdout.decode("utf-8") == encode(b"\x0a\x02")


def test_cli_decode_stdin(run_cli, encoded_ten_ten: str) -> None:
    """Test decoding from stdin to stdout."""
    result = run_cli("decode", stdin=encoded_ten_ten.encode("utf-8"))
    assert result.returncode == 0
    assert result.stdout == b"\x0a\x0a"


def test_cli_decode_invalid_character(run_cli) -> None:
    """Test decode errors are reported on stderr with exit code 1."""
    result = run_cli("decode", stdin="  yeet".encode("utf-8"))
    assert result.returncode == 1
    assert b"Error: Invalid character 'y' at position 2" in result.stderr
    assert result.stdout == b""


def test_cli_decode_invalid_length(run_cli) -> None:
    """Test length errors are reported on stderr."""
    result = run_cli("decode", stdin=b" " * 15)
    assert result.returncode == 1
    assert b"Invalid input length 15" in result.stderr


def test_cli_decode_trailing_newline(run_cli, encoded_ten_ten: str) -> None:
    """Test a trailing newline fails unless --strip is given."""
    data = (encoded_ten_ten + "\n").encode("utf-8")

    strict = run_cli("decode", stdin=data)
    assert strict.returncode == 1
    assert b"position 16" in strict.stderr

    stripped = run_cli("decode", "--strip", stdin=data)
    assert stripped.returncode == 0
    assert stripped.stdout == b"\x0a\x0a"


def test_cli_decode_not_utf8(run_cli) -> None:
    """Test undecodable input is reported, not raised."""
    result = run_cli("decode", stdin=b"\xff\xfe")
    assert result.returncode == 1
    assert b"Error:" in result.stderr


def test_cli_missing_input_file(run_cli) -> None:
    """Test CLI with missing input file."""
    result = run_cli("encode", "-i", "nonexistent.bin")
    assert result.returncode == 1
    assert b"File not found" in result.stderr
    assert b"Value error" not in result.stderr


def test_cli_verbose_logs_to_stderr(run_cli) -> None:
    """Test -v logs progress on stderr and keeps stdout clean."""
    result = run_cli("encode", "-v", stdin=b"hi")
    assert result.returncode == 0
    assert b"Encoded 2 bytes into 16 characters" in result.stderr
    assert result.stdout.decode("utf-8") == encode(b"hi")


def test_cli_debug_logs_io(run_cli) -> None:
    """Test -vv adds debug records for reads and writes."""
    result = run_cli("decode", "-vv", stdin=b" " * 8)
    assert result.returncode == 0
    assert b"DEBUG" in result.stderr
    assert b"Read 8 bytes from stdin" in result.stderr
    assert b"Decoded 8 characters into 1 bytes" in result.stderr
    assert result.stdout == b"\xff"


class TestMainInProcess:
    """Test main() with file arguments."""

    def test_encode_decode_files(self, tmp_path: Path, sample_payload: bytes) -> None:
        """Test a file round-trip through both commands."""
        source = tmp_path / "payload.bin"
        hidden = tmp_path / "hidden.txt"
        restored = tmp_path / "restored.bin"
        source.write_bytes(sample_payload)

        assert main(["encode", "-i", str(source), "-o", str(hidden)]) == 0
        assert hidden.read_text(encoding="utf-8") == encode(sample_payload)

        assert main(["decode", "-i", str(hidden), "-o", str(restored)]) == 0
        assert restored.read_bytes() == sample_payload

    def test_decode_error(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test main() returns 1 and leaves no output file on decode errors."""
        hidden = tmp_path / "hidden.txt"
        restored = tmp_path / "restored.bin"
        hidden.write_text(" " * 9, encoding="utf-8")

        assert main(["decode", "-i", str(hidden), "-o", str(restored)]) == 1
        assert "Invalid input length 9" in capsys.readouterr().err
        assert not restored.exists()

    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="named pipes not supported")
    def test_encode_from_named_pipe(self, tmp_path: Path, sample_payload: bytes) -> None:
        """Test a named pipe is accepted as input."""
        fifo = tmp_path / "payload.pipe"
        hidden = tmp_path / "hidden.txt"
        os.mkfifo(fifo)

        writer = threading.Thread(target=fifo.write_bytes, args=(sample_payload,))
        writer.start()
        try:
            assert main(["encode", "-i", str(fifo), "-o", str(hidden)]) == 0
        finally:
            writer.join(timeout=5)

        assert hidden.read_text(encoding="utf-8") == encode(sample_payload)

    def test_directory_input(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a directory is rejected with a plain message."""
        assert main(["encode", "-i", str(tmp_path)]) == 1

        err = capsys.readouterr().err
        assert f"Error: Input is a directory: {tmp_path}" in err
        assert "Value error" not in err


class TestCliOptions:
    """Test option validation."""

    def test_defaults(self) -> None:
        """Test default options read stdin and write stdout."""
        options = CliOptions(mode="encode")

        assert options.mode is Mode.ENCODE
        assert options.input_path is None
        assert options.output_path is None
        assert options.strip is False
        assert options.log_level == logging.WARNING

    @pytest.mark.parametrize(
        ("verbose", "level"),
        [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
    )
    def test_log_level(self, verbose: int, level: int) -> None:
        """Test -v count maps to a logging level."""
        assert CliOptions(mode="decode", verbose=verbose).log_level == level

    def test_missing_input(self, tmp_path: Path) -> None:
        """Test a nonexistent input path is rejected."""
        with pytest.raises(ValidationError, match="File not found"):
            CliOptions(mode="decode", input_path=tmp_path / "missing.txt")

    def test_unknown_mode(self) -> None:
        """Test only encode and decode are accepted."""
        with pytest.raises(ValidationError):
            CliOptions(mode="compress")

    def test_frozen(self) -> None:
        """Test options are immutable."""
        options = CliOptions(mode="encode")
        with pytest.raises(ValidationError):
            options.strip = True  # type: ignore[misc]
