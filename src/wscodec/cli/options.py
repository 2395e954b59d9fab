"""Validated command-line options.

Parsed argparse namespaces are turned into a CliOptions model before any
file is touched, so bad arguments are reported the same way as codec errors.
"""

from __future__ import annotations

import enum
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError


class Mode(str, enum.Enum):
    """Direction of the conversion."""

    ENCODE = "encode"
    DECODE = "decode"


class CliOptions(BaseModel):
    """Options for a single CLI run.

    Attributes:
        mode: encode (bytes to whitespace) or decode (whitespace to bytes)
        input_path: File to read, or None for stdin
        output_path: File to write, or None for stdout
        strip: Drop trailing line terminators before decoding
        verbose: Verbosity count from -v flags
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    mode: Mode
    input_path: Path | None = None
    output_path: Path | None = None
    strip: bool = False
    verbose: int = Field(default=0, ge=0)

    @field_validator("input_path")
    @classmethod
    def _input_must_exist(cls, value: Path | None) -> Path | None:
        # Pipes and character devices are readable inputs too
        if value is None:
            return value
        if not value.exists():
            raise PydanticCustomError(
                "file_not_found", "File not found: {path}", {"path": str(value)}
            )
        if value.is_dir():
            raise PydanticCustomError(
                "is_a_directory", "Input is a directory: {path}", {"path": str(value)}
            )
        return value

    @property
    def log_level(self) -> int:
        """Logging level selected by the -v count."""
        if self.verbose >= 2:
            return logging.DEBUG
        if self.verbose == 1:
            return logging.INFO
        return logging.WARNING
