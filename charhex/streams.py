# charhex/streams.py
from __future__ import annotations

import codecs
import io
import logging
import os
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, TextIO, Tuple

from charhex.models import ResourceError, TranscodeOptions

log = logging.getLogger(__name__)

ENCODING = "utf-8"
DECODE_ERRORS = "charhex.replace_per_byte"
OUTPUT_FILE_MODE = 0o644


def replace_per_byte(exc: UnicodeError) -> Tuple[str, int]:
    """
    One U+FFFD for each undecodable byte, resuming at the next byte.

    The built-in "replace" handler collapses a truncated multi-byte sequence
    (b"\\xe4\\xbd") into a single U+FFFD; this one yields one per byte.
    """
    if not isinstance(exc, UnicodeDecodeError):
        raise exc
    return "\ufffd", exc.start + 1


codecs.register_error(DECODE_ERRORS, replace_per_byte)


def _wrap_std(buffer: BinaryIO) -> io.TextIOWrapper:
    # newline="\n": split on LF only, never translate
    return io.TextIOWrapper(buffer, encoding=ENCODING, errors=DECODE_ERRORS, newline="\n")


@contextmanager
def _borrowed(buffer: BinaryIO) -> Iterator[TextIO]:
    """Text view over a process stream. Detached on exit so the stream stays open."""
    stream = _wrap_std(buffer)
    try:
        yield stream
    finally:
        stream.flush()
        stream.detach()
        buffer.flush()


@contextmanager
def open_input(opts: TranscodeOptions) -> Iterator[TextIO]:
    if opts.input_path is None:
        log.debug("input: <stdin>")
        with _borrowed(sys.stdin.buffer) as stream:
            yield stream
        return

    path = opts.input_path
    try:
        f = open(path, "r", encoding=ENCODING, errors=DECODE_ERRORS, newline="\n")
    except OSError as e:
        raise ResourceError(path, e.strerror or str(e)) from e

    log.debug("input: %s", path)
    with f:
        yield f


def _open_output_fd(path: Path, overwrite: bool) -> int:
    flags = os.O_WRONLY | os.O_CREAT
    flags |= os.O_TRUNC if overwrite else os.O_EXCL
    return os.open(path, flags, OUTPUT_FILE_MODE)


@contextmanager
def open_output(opts: TranscodeOptions) -> Iterator[TextIO]:
    """
    Writable text stream for the run.

    File targets are created exclusively unless opts.overwrite is set,
    in which case existing content is truncated.
    """
    if opts.output_path is None:
        log.debug("output: <stdout>")
        with _borrowed(sys.stdout.buffer) as stream:
            yield stream
        return

    path = opts.output_path
    try:
        fd = _open_output_fd(path, opts.overwrite)
    except OSError as e:
        raise ResourceError(path, e.strerror or str(e)) from e

    try:
        f = open(fd, "w", encoding=ENCODING, newline="\n")
    except BaseException:
        os.close(fd)
        raise

    log.debug("output: %s (overwrite=%s)", path, opts.overwrite)
    with f:
        yield f
