import pytest

from tinylinks.utils.encoding import (
    ALPHABET,
    format_uptime,
    generate_code,
    is_reserved_code,
    is_valid_code,
    is_valid_url,
)


def test_alphabet_is_base62():
    assert len(ALPHABET) == 62
    assert len(set(ALPHABET)) == 62
    assert ALPHABET.isalnum()


def test_generate_code_default_length():
    code = generate_code()
    assert len(code) == 6
    assert all(ch in ALPHABET for ch in code)


@pytest.mark.parametrize("length", [6, 7, 8])
def test_generate_code_custom_length(length):
    assert len(generate_code(length)) == length


@pytest.mark.parametrize("code", ["abc123", "ABCdef12", "zzzzzzz"])
def test_valid_codes(code):
    assert is_valid_code(code)


@pytest.mark.parametrize("code", ["", "abc12", "abcdefghi", "abc-12", "abc 12", "abc123\n", None, 123456])
def test_invalid_codes(code):
    assert not is_valid_code(code)


def test_reserved_codes():
    for code in ("api", "stats", "health"):
        assert is_reserved_code(code)
    assert not is_reserved_code("abc123")


@pytest.mark.parametrize("url", [
    "https://example.com",
    "http://localhost:3000/path?q=1",
    "https://github.com/user/repo#readme",
    # dotless hosts are accepted
    "http://foo",
])
def test_valid_urls(url):
    assert is_valid_url(url)


@pytest.mark.parametrize("url", [
    "", "   ", "not a url", "example", "http://", None, 42,
    "javascript://x.com/%0aalert(document.domain)",
    "javascript:alert(1)",
    "data:text/html,<script>alert(1)</script>",
    "ftp://example.com/file",
])
def test_invalid_urls(url):
    assert not is_valid_url(url)


def test_format_uptime():
    assert format_uptime(0) == "0h 0m 0s"
    assert format_uptime(3725) == "1h 2m 5s"
    assert format_uptime(90061) == "25h 1m 1s"
