"""Parse DID URLs from the command line and print their components."""

import argparse
import asyncio
import json
import sys
from typing import Optional, Sequence

import orjson

from .batch import ParsedLine, parse_file, parse_line
from .errors import ParseError


def format_result(result: ParsedLine, *, base_only: bool = False) -> dict:
    """Convert a parse result into a JSON-compatible entry."""
    if result.error:
        return {"input": result.text, "error": result.error.serialize()}
    did = result.did
    if base_only and not did.is_base:
        err = ParseError(
            len(did.did), "Expected a DID without URL components", value=result.text
        )
        return {"input": result.text, "error": err.serialize()}
    return {"input": result.text, "did": did.serialize()}


def format_compact(entry: dict) -> str:
    """Format an entry as key-sorted JSON on a single line."""
    try:
        return orjson.dumps(entry, option=orjson.OPT_SORT_KEYS).decode("utf-8")
    except orjson.JSONEncodeError:
        # undecodable command-line bytes arrive as lone surrogates
        return json.dumps(entry, sort_keys=True, separators=(",", ":"))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="did_parser", description="parse DID URLs into their components"
    )
    parser.add_argument("-f", "--file", help="the path to a file of DID URLs, one per line")
    parser.add_argument("--max-length", type=int, help="reject DID URLs longer than this")
    parser.add_argument(
        "--base-only",
        action="store_true",
        help="reject DID URLs with parameters, a path, query or fragment",
    )
    parser.add_argument(
        "--canonical",
        action="store_true",
        help="print each result as compact, key-sorted JSON on a single line",
    )
    parser.add_argument("didurl", nargs="*", help="the DID URL(s) to parse")
    args = parser.parse_args(argv)

    if not args.didurl and not args.file:
        parser.error("a DID URL or --file is required")

    results = [
        parse_line(idx, value, max_length=args.max_length)
        for idx, value in enumerate(args.didurl, 1)
    ]
    if args.file:
        try:
            results.extend(asyncio.run(parse_file(args.file, max_length=args.max_length)))
        except OSError as err:
            parser.error(f"unable to read {args.file}: {err.strerror}")
        except UnicodeDecodeError as err:
            parser.error(f"unable to read {args.file}: {err.reason} at byte {err.start}")

    failed = 0
    for result in results:
        entry = format_result(result, base_only=args.base_only)
        if "error" in entry:
            failed += 1
        if args.canonical:
            print(format_compact(entry))
        else:
            print(json.dumps(entry, indent=2))

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
