"""Tests for crumb.http.headers — mutable, case-insensitive MutableHeaders."""

import pytest

from crumb._internal.multimap import HeaderStore, MultiValueMapping
from crumb.http.headers import MutableHeaders


def _h(*pairs: tuple[str, str]) -> MutableHeaders:
    """Shorthand: build MutableHeaders from string pairs."""
    return MutableHeaders(pairs)


class TestLookup:
    def test_getitem(self) -> None:
        h = _h(("Content-Type", "text/html"))
        assert h["Content-Type"] == "text/html"

    def test_case_insensitive(self) -> None:
        h = _h(("Content-Type", "text/html"))
        assert h["content-type"] == "text/html"
        assert h["CONTENT-TYPE"] == "text/html"

    def test_missing_key_raises(self) -> None:
        h = _h(("Accept", "*/*"))
        with pytest.raises(KeyError):
            h["X-Missing"]

    def test_contains(self) -> None:
        h = _h(("Accept", "*/*"))
        assert "accept" in h
        assert "Accept" in h
        assert "x-missing" not in h

    def test_contains_rejects_non_str(self) -> None:
        h = _h(("Accept", "*/*"))
        assert 42 not in h  # type: ignore[operator]

    def test_len_deduplicates(self) -> None:
        h = _h(("Set-Cookie", "a=1"), ("Set-Cookie", "b=2"), ("Accept", "*/*"))
        assert len(h) == 2

    def test_iter_yields_unique_lowercase_keys(self) -> None:
        h = _h(("Accept", "*/*"), ("Content-Type", "text/html"), ("Accept", "text/xml"))
        assert list(h) == ["accept", "content-type"]

    def test_get_with_default(self) -> None:
        h = _h(("Accept", "*/*"))
        assert h.get("accept") == "*/*"
        assert h.get("x-missing") is None
        assert h.get("x-missing", "fallback") == "fallback"

    def test_get_list(self) -> None:
        h = _h(("Set-Cookie", "a=1"), ("set-cookie", "b=2"), ("Accept", "*/*"))
        assert h.get_list("Set-Cookie") == ["a=1", "b=2"]
        assert h.get_list("Accept") == ["*/*"]
        assert h.get_list("X-Missing") == []

    def test_empty_headers(self) -> None:
        h = MutableHeaders()
        assert len(h) == 0
        assert list(h) == []


class TestMutation:
    def test_add_appends(self) -> None:
        h = _h(("Set-Cookie", "a=1"))
        h.add("Set-Cookie", "b=2")
        assert h.get_list("set-cookie") == ["a=1", "b=2"]

    def test_delete_removes_every_value(self) -> None:
        h = _h(("Set-Cookie", "a=1"), ("Accept", "*/*"), ("SET-COOKIE", "b=2"))
        h.delete("set-cookie")
        assert "Set-Cookie" not in h
        assert h.raw == (("Accept", "*/*"),)

    def test_delete_missing_is_noop(self) -> None:
        h = _h(("Accept", "*/*"))
        h.delete("Cookie")
        assert h.raw == (("Accept", "*/*"),)

    def test_raw_keeps_order_and_duplicates(self) -> None:
        h = MutableHeaders()
        h.add("Cookie", "a=1")
        h.add("Accept", "*/*")
        h.add("Cookie", "b=2")
        assert h.raw == (("Cookie", "a=1"), ("Accept", "*/*"), ("Cookie", "b=2"))


class TestProtocols:
    def test_satisfies_multivalue_mapping(self) -> None:
        assert isinstance(_h(("A", "1")), MultiValueMapping)

    def test_satisfies_header_store(self) -> None:
        assert isinstance(_h(("A", "1")), HeaderStore)

    def test_repr(self) -> None:
        assert "Accept" in repr(_h(("Accept", "*/*")))
