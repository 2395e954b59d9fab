"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parent.parent / "src"

ZWSP = "\u200b"


@pytest.fixture
def sample_payload() -> bytes:
    """Sample binary payload for testing."""
    return b"Hello, invisible world!\x00\xff"


@pytest.fixture
def encoded_ten_ten() -> str:
    """Encoding of bytes [10, 10] (bit pattern 00001010 00001010)."""
    byte = ZWSP * 4 + " " + ZWSP + " " + ZWSP
    return byte * 2


@pytest.fixture
def run_cli() -> Callable[..., subprocess.CompletedProcess[bytes]]:
    """Run the wscodec CLI in a subprocess with the source tree importable."""
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))

    def _run(*args: str, stdin: bytes = b"") -> subprocess.CompletedProcess[bytes]:
        return subprocess.run(
            [sys.executable, "-m", "wscodec.cli.main", *args],
            input=stdin,
            capture_output=True,
            env=env,
        )

    return _run
