from __future__ import annotations

import argparse
import fileinput
import json
import logging
import sys
from collections.abc import Iterable, Iterator

from .element import element_at, element_at_or_default
from .errors import IndexOutOfRangeError
from .index import Index, Range
from .slicing import slice_range


def _lines(files: list[str]) -> Iterator[str]:
    # FileInput reads lazily and treats "-" as stdin.
    with fileinput.FileInput(files=files or ("-",), encoding="utf-8") as fh:
        for line in fh:
            yield line.rstrip("\r\n")


def _index_arg(text: str) -> Index:
    try:
        return Index.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _range_arg(text: str) -> Range:
    try:
        return Range.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="seqindex",
        description="Pick lines by from-start or from-end position (e.g. ^3, 2..^1)",
    )
    ap.add_argument("files", nargs="*", help="Input files (default: stdin)")
    mode = ap.add_mutually_exclusive_group(required=True)
    mode.add_argument("--at", type=_index_arg, metavar="INDEX", help="Print the line at INDEX (3 or ^3)")
    mode.add_argument("--slice", type=_range_arg, metavar="RANGE", help="Print the lines in RANGE (a..b)")
    ap.add_argument("--default", help="With --at, print this instead of failing when out of range")
    ap.add_argument(
        "--materialize",
        action="store_true",
        help="Read all input into memory first (uses direct access instead of a single pass)",
    )
    ap.add_argument("--json", action="store_true", help="Print output as JSON")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log which access path is used")
    args = ap.parse_args(argv)
    if args.default is not None and args.at is None:
        ap.error("--default can only be used with --at")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    source: Iterable[str] = _lines(args.files)
    if args.materialize:
        source = list(source)

    if args.slice is not None:
        out = list(slice_range(source, args.slice))
        if args.json:
            print(json.dumps(out, indent=2))
        else:
            for line in out:
                print(line)
        return 0

    if args.default is not None:
        value = element_at_or_default(source, args.at, default=args.default)
    else:
        try:
            value = element_at(source, args.at)
        except IndexOutOfRangeError as e:
            print(f"seqindex: {e}", file=sys.stderr)
            return 1
    print(json.dumps(value) if args.json else value)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
