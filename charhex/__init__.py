"""
charhex: line-by-line character and code point listing.

Each input line becomes two records:
  C0000000001: a      b      c
  X0000000001: 0x0061 0x0062 0x0063
"""
from __future__ import annotations

from charhex.models import CharhexError, ConfigError, ResourceError, TranscodeOptions
from charhex.streams import open_input, open_output
from charhex.transcode import (
    format_char_record,
    format_counter,
    format_hex_record,
    iter_lines,
    transcode,
)

__all__ = [
    "CharhexError",
    "ConfigError",
    "ResourceError",
    "TranscodeOptions",
    "format_char_record",
    "format_counter",
    "format_hex_record",
    "iter_lines",
    "open_input",
    "open_output",
    "transcode",
]
