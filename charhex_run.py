from __future__ import annotations

import argparse
import sys
from contextlib import ExitStack
from typing import List, Optional

from charhex import ConfigError, ResourceError, TranscodeOptions, open_input, open_output, transcode
from charhex.log import setup_logging

EXIT_OK = 0
EXIT_RESOURCE = 1
EXIT_CONFIG = 2


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="charhex",
        description="List every character of each input line, then its code point in hex.",
    )
    # Single-dash spellings kept for existing scripts
    p.add_argument("-input", "--input", default="", help="Input file (default stdin).")
    p.add_argument("-output", "--output", default="", help="Output file (default stdout).")
    p.add_argument(
        "-overwrite",
        "--overwrite",
        action="store_true",
        help="Whether output file can be overwritten (default false).",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log diagnostics to stderr (records are unchanged).")
    return p


def run(opts: TranscodeOptions) -> int:
    """Open both streams, transcode, release them. Returns the line count."""
    with ExitStack() as stack:
        reader = stack.enter_context(open_input(opts))
        writer = stack.enter_context(open_output(opts))
        return transcode(reader, writer)


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    log = setup_logging(args.verbose)

    opts = TranscodeOptions.from_args(args.input, args.output, args.overwrite)
    try:
        opts.validate()
    except ConfigError as e:
        print(e, file=sys.stderr)
        parser.print_help(sys.stderr)
        return EXIT_CONFIG

    try:
        count = run(opts)
    except ResourceError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_RESOURCE

    log.debug("transcoded %d line(s)", count)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
