"""Tests for crumb.http.grammar — token classes and header patterns."""

import re

import pytest

from crumb.http.grammar import (
    ATTRIBUTE_VALUE,
    COOKIE_NAME,
    COOKIE_STRING,
    COOKIE_VALUE,
    FLAGS,
    SANE_COOKIE_DATE,
    SET_COOKIE_PAIR,
)


def _full(pattern: str, text: str) -> bool:
    return re.fullmatch(pattern, text, FLAGS) is not None


class TestTokens:
    @pytest.mark.parametrize("name", ["foo", "session_id", "a.b-c", "__Host-id", "x!#$%&'*+^`|~"])
    def test_valid_names(self, name: str) -> None:
        assert _full(COOKIE_NAME, name)

    @pytest.mark.parametrize("name", ["", "a b", "a=b", "a;b", 'a"b', "a\tb", "a\x01b", "a/b", "a{b}"])
    def test_invalid_names(self, name: str) -> None:
        assert not _full(COOKIE_NAME, name)

    @pytest.mark.parametrize("value", ["", "bar", "a=b", '"quoted"', '""', "%20+", "!#$&'()*+-./:<>?@[]^_`{|}~"])
    def test_valid_values(self, value: str) -> None:
        assert _full(COOKIE_VALUE, value)

    @pytest.mark.parametrize("value", ["a b", "a,b", "a;b", "a\\b", 'a"b', '"open'])
    def test_invalid_values(self, value: str) -> None:
        assert not _full(COOKIE_VALUE, value)

    def test_dates(self) -> None:
        assert _full(SANE_COOKIE_DATE, "Wed, 09 Jun 2021 10:18:14 GMT")
        assert _full(SANE_COOKIE_DATE, "Wed Jun  9 10:18:14 2021")
        assert not _full(SANE_COOKIE_DATE, "2021-06-09")


class TestCookieString:
    def test_pairs_at_start_and_after_separator(self) -> None:
        found = [(m["name"], m["value"]) for m in COOKIE_STRING.finditer("a=1; b=2; c=3")]
        assert found == [("a", "1"), ("b", "2"), ("c", "3")]

    def test_requires_space_after_semicolon(self) -> None:
        found = [m["name"] for m in COOKIE_STRING.finditer("a=1;b=2")]
        assert found == ["a"]


class TestSetCookiePair:
    def test_leading_pair(self) -> None:
        match = SET_COOKIE_PAIR.match("foo=bar; Path=/")
        assert match is not None
        assert (match["name"], match["value"]) == ("foo", "bar")
        assert match.end() == len("foo=bar")

    def test_empty_name(self) -> None:
        assert SET_COOKIE_PAIR.match("=bar") is None


class TestAttributeValue:
    def test_known_attribute_must_cover_segment(self) -> None:
        av = ATTRIBUTE_VALUE.fullmatch("SecureX")
        assert av is not None
        assert av["secure"] is None
        assert av["extension"] == "SecureX"

    def test_attribute_names_case_insensitive(self) -> None:
        av = ATTRIBUTE_VALUE.fullmatch("pAtH=/x")
        assert av is not None
        assert av["path"] == "/x"

    def test_empty_path(self) -> None:
        av = ATTRIBUTE_VALUE.fullmatch("Path=")
        assert av is not None
        assert av["path"] == ""

    @pytest.mark.parametrize("segment", ["", " Secure", "a\x01b", "a;b"])
    def test_rejected_segments(self, segment: str) -> None:
        assert ATTRIBUTE_VALUE.fullmatch(segment) is None

    @pytest.mark.parametrize("domain", ["example.com", ".example.com", "www.example.co.uk", "127.0.0.1", "localhost"])
    def test_domains(self, domain: str) -> None:
        av = ATTRIBUTE_VALUE.fullmatch(f"Domain={domain}")
        assert av is not None
        assert av["domain"] == domain
