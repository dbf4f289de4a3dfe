"""Parser for DIDs and DID URLs.

Grammar handled here::

    did-url            = "did:" method-name ":" method-specific-id
                         *( ";" param ) path-abempty [ "?" query ] [ "#" fragment ]
    method-name        = 1*( %x61-7A / DIGIT )
    method-specific-id = 1*idchar *( ":" 1*idchar )
    idchar             = ALPHA / DIGIT / "." / "-" / "_" / pct-encoded
    param              = 1*idchar [ "=" *idchar ]

Each stage accepts the full input and the position to start from, and returns
its result together with the position of the unconsumed remainder. Stages are
applied once each, in grammar order, without backtracking.
"""

from typing import Optional, Tuple, Type

from .const import (
    DID_SCHEME,
    FRAGMENT_START,
    ID_CHARS,
    METHOD_CHARS,
    METHOD_SEP,
    PARAM_ASSIGN,
    PARAM_SEP,
    PATH_SEGMENT,
    PATH_SEP,
    PCT_ENCODED,
    QUERY_ASSIGN,
    QUERY_SEP,
    QUERY_START,
    QUERY_TEXT,
)
from .did import Did
from .errors import (
    InputTooLong,
    InvalidId,
    InvalidMethod,
    InvalidParam,
    InvalidScheme,
    ParseError,
    TrailingInput,
)


def _idchar_run(value: str, pos: int, error: Type[ParseError]) -> int:
    """Find the end of a run of idchars, validating percent-escapes."""
    while True:
        pos = ID_CHARS.match(value, pos).end()
        if not value.startswith("%", pos):
            return pos
        if not PCT_ENCODED.match(value, pos):
            raise error(pos, "Invalid percent-encoding", value=value)
        pos += 3


def parse_method(value: str, pos: int = 0) -> Tuple[str, int]:
    """Parse the `did:` scheme and the method name, including its `:` terminator."""
    if not value.startswith(DID_SCHEME, pos):
        offset = pos
        for expect in DID_SCHEME:
            if value[offset : offset + 1] != expect:
                break
            offset += 1
        raise InvalidScheme(offset, value=value)
    pos += len(DID_SCHEME)
    end = METHOD_CHARS.match(value, pos).end()
    if end == pos:
        raise InvalidMethod(pos, "Missing method name", value=value)
    if not value.startswith(METHOD_SEP, end):
        raise InvalidMethod(end, "Expected ':' after method name", value=value)
    return value[pos:end], end + 1


def parse_identifier(value: str, pos: int) -> Tuple[str, int]:
    """Parse the method-specific identifier, leaving percent-escapes intact."""
    start = pos
    while True:
        end = _idchar_run(value, pos, InvalidId)
        if end == pos:
            if pos == start:
                raise InvalidId(pos, "Missing method-specific identifier", value=value)
            raise InvalidId(pos, "Empty identifier segment", value=value)
        pos = end
        if not value.startswith(METHOD_SEP, pos):
            return value[start:pos], pos
        pos += 1


def parse_params(value: str, pos: int) -> Tuple[Optional[dict], int]:
    """Parse a list of `;name` or `;name=value` method parameters."""
    if not value.startswith(PARAM_SEP, pos):
        return None, pos
    params = {}
    while value.startswith(PARAM_SEP, pos):
        pos += 1
        end = _idchar_run(value, pos, InvalidParam)
        if end == pos:
            raise InvalidParam(pos, "Missing parameter name", value=value)
        name = value[pos:end]
        pos = end
        if value.startswith(PARAM_ASSIGN, pos):
            end = _idchar_run(value, pos + 1, InvalidParam)
            params[name] = value[pos + 1 : end]
            pos = end
        else:
            params[name] = None
    return params, pos


def parse_path(value: str, pos: int) -> Tuple[Optional[list], int]:
    """Parse `/`-prefixed path segments, keeping empty segments."""
    if not value.startswith(PATH_SEP, pos):
        return None, pos
    segments = []
    while value.startswith(PATH_SEP, pos):
        end = PATH_SEGMENT.match(value, pos + 1).end()
        segments.append(value[pos + 1 : end])
        pos = end
    return segments, pos


def parse_query(value: str, pos: int) -> Tuple[Optional[dict], int]:
    """Parse a `?` query of `&`-separated pairs, up to the fragment or end."""
    if not value.startswith(QUERY_START, pos):
        return None, pos
    end = QUERY_TEXT.match(value, pos + 1).end()
    query = {}
    for pair in value[pos + 1 : end].split(QUERY_SEP):
        if not pair:
            continue
        name, assign, val = pair.partition(QUERY_ASSIGN)
        query[name] = val if assign else None
    return query, end


def parse_fragment(value: str, pos: int) -> Tuple[Optional[str], int]:
    """Parse a `#` fragment, which runs to the end of the input."""
    if not value.startswith(FRAGMENT_START, pos):
        return None, pos
    return value[pos + 1 :], len(value)


URL_STAGES = (
    ("method_params", parse_params),
    ("path", parse_path),
    ("query", parse_query),
    ("frag", parse_fragment),
)


def parse(value: str, *, max_length: Optional[int] = None) -> Did:
    """Parse a DID or DID URL.

    Params:
        value: the DID URL text
        max_length: reject inputs longer than this many characters

    Raises:
        ParseError: a subclass identifying the rejecting stage, with the
            offset of the problem
        TypeError: if the value is not a string
    """
    if not isinstance(value, str):
        raise TypeError(f"Expected str, got {type(value).__name__}")
    if max_length is not None and len(value) > max_length:
        raise InputTooLong(max_length, value=value)

    method, pos = parse_method(value)
    ident, pos = parse_identifier(value, pos)

    parts = {}
    components = []
    for name, stage in URL_STAGES:
        start = pos
        parts[name], pos = stage(value, pos)
        if pos > start:
            components.append(value[start:pos])

    if pos < len(value):
        raise TrailingInput(pos, f"Unexpected character {value[pos]!r}", value=value)

    return Did(method=method, id=ident, components=tuple(components), **parts)


def is_valid_base_did(value: str) -> bool:
    """Check that a value is a plain DID (`did:method:id`) with no URL components."""
    try:
        return parse(value).is_base
    except ParseError:
        return False
