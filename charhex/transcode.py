# charhex/transcode.py
from __future__ import annotations

import logging
from typing import Iterator, TextIO

log = logging.getLogger(__name__)

COUNTER_WIDTH = 10
CHAR_FIELD_WIDTH = 6
HEX_DIGITS = 4


def format_counter(count: int) -> str:
    # Minimum width only; wider counters are never cut
    return f"{count:0{COUNTER_WIDTH}d}"


def format_char_record(count: int, line: str) -> str:
    """
    C<counter>: then each character left-justified in a 6-column field.
      format_char_record(1, "ab") -> "C0000000001: a      b     \\n"
    """
    fields = "".join(f" {ch:<{CHAR_FIELD_WIDTH}}" for ch in line)
    return f"C{format_counter(count)}:{fields}\n"


def format_hex_record(count: int, line: str) -> str:
    """
    X<counter>: then each code point as 0x + uppercase hex (4 digits minimum).
      format_hex_record(1, "ab") -> "X0000000001: 0x0061 0x0062\\n"
    """
    fields = "".join(f" 0x{ord(ch):0{HEX_DIGITS}X}" for ch in line)
    return f"X{format_counter(count)}:{fields}\n"


def iter_lines(reader: TextIO) -> Iterator[str]:
    """
    Yield newline-terminated lines with trailing CR/LF characters removed.

    A last fragment with no terminating newline is not yielded.
    The reader must split on "\\n" only (open with newline="\\n").
    """
    for raw in reader:
        if not raw.endswith("\n"):
            if raw:
                log.debug("dropping unterminated final fragment (%d chars)", len(raw))
            break
        yield raw.rstrip("\r\n")


def transcode(reader: TextIO, writer: TextIO) -> int:
    """Write a character record and a hex record per input line. Returns the line count."""
    count = 0
    for line in iter_lines(reader):
        count += 1
        writer.write(format_char_record(count, line))
        writer.write(format_hex_record(count, line))
    return count
