import pytest

from did_parser import errors
from did_parser.parser import parse


def test_error_details():
    with pytest.raises(ValueError) as exc:
        parse("did::123")
    err = exc.value
    assert isinstance(err, errors.InvalidMethod)
    assert str(err) == "Missing method name at offset 4"
    assert err.serialize() == {
        "error": "invalidMethod",
        "errorMessage": "Missing method name",
        "offset": 4,
    }


def test_trailing_input_message():
    with pytest.raises(errors.TrailingInput) as exc:
        parse("did:example:abc&def")
    assert exc.value.message == "Unexpected character '&'"
    assert exc.value.offset == 15


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (errors.InvalidScheme, "invalidScheme"),
        (errors.InvalidMethod, "invalidMethod"),
        (errors.InvalidId, "invalidId"),
        (errors.InvalidParam, "invalidParam"),
        (errors.InvalidPath, "invalidPath"),
        (errors.InvalidQuery, "invalidQuery"),
        (errors.InvalidFragment, "invalidFragment"),
        (errors.TrailingInput, "trailingInput"),
        (errors.InputTooLong, "inputTooLong"),
    ],
)
def test_error_codes(error: type, code: str):
    err = error(3)
    assert isinstance(err, errors.ParseError)
    assert err.error == code
    assert err.message == error.default_message
    assert err.serialize()["offset"] == 3
