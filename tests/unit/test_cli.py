"""Tests for CLI tool."""

from __future__ import annotations

import random
import subprocess
import sys
from pathlib import Path


def run_cli(*args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-m", "blobpack.cli.main", *args],
        capture_output=True,
        text=True,
    )


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = run_cli("--help")
    assert result.returncode == 0
    assert "blobpack: pack bytes into EIP-4844 style blobs" in result.stdout
    assert "--strategy" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = run_cli("--version")
    assert result.returncode == 0
    assert "blobpack 0.1.0" in result.stdout


def test_cli_info() -> None:
    """Test CLI --info for the tight strategy."""
    result = run_cli("--strategy", "tight", "--info")
    assert result.returncode == 0
    assert "tight packing" in result.stdout
    assert "130048" in result.stdout
    assert "260095" in result.stdout


def test_cli_pack_unpack(tmp_path: Path) -> None:
    """Test packing a file and unpacking it again."""
    source = tmp_path / "batch.bin"
    blobs = tmp_path / "blobs.bin"
    restored = tmp_path / "restored.bin"
    source.write_bytes(random.Random(7).randbytes(40000))

    result = run_cli("pack", str(source), str(blobs))
    assert result.returncode == 0
    assert "2 naive blob(s)" in result.stdout
    assert blobs.stat().st_size == 2 * 32512

    result = run_cli("unpack", str(blobs), str(restored))
    assert result.returncode == 0
    assert restored.read_bytes() == source.read_bytes()


def test_cli_pack_empty_file(tmp_path: Path) -> None:
    """Test packing an empty file fails."""
    source = tmp_path / "empty.bin"
    source.write_bytes(b"")

    result = run_cli("pack", str(source), str(tmp_path / "out.bin"))
    assert result.returncode == 1
    assert "Error" in result.stderr


def test_cli_unpack_truncated(tmp_path: Path) -> None:
    """Test unpacking a truncated blob file fails."""
    source = tmp_path / "short.bin"
    source.write_bytes(b"\x80" + bytes(99))

    result = run_cli("--strategy", "tight", "unpack", str(source), str(tmp_path / "out.bin"))
    assert result.returncode == 1
    assert "expected 131072" in result.stderr


def test_cli_missing_file() -> None:
    """Test CLI with a missing input file."""
    result = run_cli("pack", "nonexistent.bin", "out.bin")
    assert result.returncode == 1
    assert "not found" in result.stderr.lower()


def test_cli_no_args() -> None:
    """Test CLI with no arguments (should show help)."""
    result = run_cli()
    assert result.returncode == 0
    assert "blobpack: pack bytes into EIP-4844 style blobs" in result.stdout


def test_cli_output_in_missing_directory(tmp_path: Path) -> None:
    """Test writing blobs under a directory that doesn't exist."""
    source = tmp_path / "batch.bin"
    source.write_bytes(b"payload")

    result = run_cli("pack", str(source), str(tmp_path / "nodir" / "out.bin"))
    assert result.returncode == 1
    assert result.stderr.startswith("Error:")
    assert "Traceback" not in result.stderr


def test_cli_directory_as_input(tmp_path: Path) -> None:
    """Test passing a directory where an input file is expected."""
    result = run_cli("pack", str(tmp_path), str(tmp_path / "out.bin"))
    assert result.returncode == 1
    assert result.stderr.startswith("Error:")
    assert "Traceback" not in result.stderr
