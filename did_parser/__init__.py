"""Parsing of DIDs and DID URLs."""

from .batch import ParsedLine, iter_parsed, parse_file
from .did import Did
from .errors import (
    InputTooLong,
    InvalidFragment,
    InvalidId,
    InvalidMethod,
    InvalidParam,
    InvalidPath,
    InvalidQuery,
    InvalidScheme,
    ParseError,
    TrailingInput,
)
from .parser import is_valid_base_did, parse

__all__ = [
    "Did",
    "InputTooLong",
    "InvalidFragment",
    "InvalidId",
    "InvalidMethod",
    "InvalidParam",
    "InvalidPath",
    "InvalidQuery",
    "InvalidScheme",
    "ParseError",
    "ParsedLine",
    "TrailingInput",
    "is_valid_base_did",
    "iter_parsed",
    "parse",
    "parse_file",
]
