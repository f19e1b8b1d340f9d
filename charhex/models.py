# charhex/models.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class CharhexError(Exception):
    """Base error for charhex runs."""


class ConfigError(CharhexError):
    """Invalid flag combination. Raised before any stream is opened."""


class ResourceError(CharhexError):
    """Input or output file could not be opened."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass(frozen=True)
class TranscodeOptions:
    """
    Immutable run configuration, built once from the command line.

    input_path:  None = read standard input
    output_path: None = write standard output
    overwrite:   truncate an existing output file instead of refusing it
    """
    input_path: Optional[Path] = None
    output_path: Optional[Path] = None
    overwrite: bool = False

    @classmethod
    def from_args(
        cls,
        input_file: Optional[str] = None,
        output_file: Optional[str] = None,
        overwrite: bool = False,
    ) -> "TranscodeOptions":
        # Empty strings mean "use the standard stream"
        in_path = Path(input_file).expanduser() if input_file else None
        out_path = Path(output_file).expanduser() if output_file else None
        return cls(input_path=in_path, output_path=out_path, overwrite=bool(overwrite))

    def validate(self) -> "TranscodeOptions":
        if self.overwrite and self.output_path is None:
            raise ConfigError("Flag -overwrite is invalid without flag -output.")
        return self
