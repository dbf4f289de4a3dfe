from unittest import mock

from did_parser.batch import ParsedLine, iter_parsed, parse_file
from did_parser.errors import InvalidId, InvalidScheme

mock_lines = [
    "# DIDs under test\n",
    "did:example:21tDAKCERh95uGgKbJNHYp\n",
    "\n",
    "  did:example:1?a=1&a=2  \n",
    "example:123\n",
    "did:example:abc:\n",
]


async def test_iter_parsed():
    lines = mock.AsyncMock()
    lines.__aiter__.return_value = iter(mock_lines)
    results = [result async for result in iter_parsed(lines)]

    assert [r.line_number for r in results] == [2, 4, 5, 6]
    assert all(isinstance(r, ParsedLine) for r in results)

    assert results[0].ok
    assert results[0].did.id == "21tDAKCERh95uGgKbJNHYp"
    assert results[1].text == "did:example:1?a=1&a=2"
    assert results[1].did.query == {"a": "2"}

    # failures are reported without stopping the iteration
    assert not results[2].ok
    assert results[2].did is None
    assert isinstance(results[2].error, InvalidScheme)
    assert isinstance(results[3].error, InvalidId)


async def test_iter_parsed_max_length():
    lines = mock.AsyncMock()
    lines.__aiter__.return_value = iter(["did:example:1\n", "did:example:12345\n"])
    results = [result async for result in iter_parsed(lines, max_length=15)]
    assert results[0].ok
    assert results[1].error.error == "inputTooLong"


async def test_parse_file(tmp_path):
    path = tmp_path / "dids.txt"
    path.write_text("".join(mock_lines))
    results = await parse_file(path)
    assert len(results) == 4
    assert [r.ok for r in results] == [True, True, False, False]
