"""Methods to parse a stream of DID URLs, one per line."""

from collections.abc import AsyncIterator
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import aiofiles

from .did import Did
from .errors import ParseError
from .parser import parse

COMMENT_PREFIX = "#"


@dataclass
class ParsedLine:
    """The outcome of parsing a single input line."""

    line_number: int
    text: str
    did: Optional[Did] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_line(
    line_number: int, text: str, *, max_length: Optional[int] = None
) -> ParsedLine:
    """Parse a single DID URL, capturing any parse error in the result."""
    try:
        return ParsedLine(line_number, text, did=parse(text, max_length=max_length))
    except ParseError as err:
        return ParsedLine(line_number, text, error=err)


async def iter_parsed(
    lines: AsyncIterator[str],
    *,
    max_length: Optional[int] = None,
) -> AsyncIterator[ParsedLine]:
    """Parse each DID URL from an async line iterator.

    Blank lines and lines beginning with `#` are skipped. A line which fails
    to parse is reported with its error and iteration continues.

    Params:
        lines: an async string iterator, such as an open `aiofiles` file
        max_length: reject lines longer than this many characters
    """
    line_number = 0
    async for line in lines:
        line_number += 1
        text = line.strip()
        if not text or text.startswith(COMMENT_PREFIX):
            continue
        yield parse_line(line_number, text, max_length=max_length)


async def parse_file(
    path: Union[str, Path],
    *,
    max_length: Optional[int] = None,
) -> list[ParsedLine]:
    """Parse every DID URL listed in a text file."""
    async with aiofiles.open(path, "r", encoding="utf-8") as lines:
        return [line async for line in iter_parsed(lines, max_length=max_length)]
