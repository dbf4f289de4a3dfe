"""Errors raised while parsing DID URLs."""

from typing import ClassVar, Optional


class ParseError(ValueError):
    """A DID URL could not be parsed.

    Each subclass identifies the grammar stage which rejected the input, and
    every instance records the character offset where the problem was found.
    """

    error: ClassVar[str] = "invalidDid"
    default_message: ClassVar[str] = "Invalid DID URL"

    def __init__(
        self,
        offset: int,
        message: str = None,
        *,
        value: Optional[str] = None,
    ):
        self.offset = offset
        self.message = message or self.default_message
        self.value = value
        super().__init__(f"{self.message} at offset {offset}")

    def serialize(self) -> dict:
        return {
            "error": self.error,
            "errorMessage": self.message,
            "offset": self.offset,
        }


class InvalidScheme(ParseError):
    error = "invalidScheme"
    default_message = "Expected 'did:' prefix"


class InvalidMethod(ParseError):
    error = "invalidMethod"
    default_message = "Invalid method name"


class InvalidId(ParseError):
    error = "invalidId"
    default_message = "Invalid method-specific identifier"


class InvalidParam(ParseError):
    error = "invalidParam"
    default_message = "Invalid method parameter"


# the path, query and fragment grammars currently accept any character;
# these are raised by no stage yet
class InvalidPath(ParseError):
    error = "invalidPath"
    default_message = "Invalid path"


class InvalidQuery(ParseError):
    error = "invalidQuery"
    default_message = "Invalid query"


class InvalidFragment(ParseError):
    error = "invalidFragment"
    default_message = "Invalid fragment"


class TrailingInput(ParseError):
    error = "trailingInput"
    default_message = "Unexpected character"


class InputTooLong(ParseError):
    error = "inputTooLong"
    default_message = "Input exceeds maximum length"
