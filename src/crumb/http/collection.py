"""CookieCollection — the cookies of one request or response.

Ordered by insertion, unique by name. Fills itself from ``Cookie`` and
``Set-Cookie`` headers and writes itself back to a header store.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TypeVar

from crumb._internal.multimap import HeaderStore, MultiValueMapping
from crumb.config import DEFAULT_CONFIG, CookieConfig
from crumb.errors import CookieNameMismatch, CookieNotFound
from crumb.http.cookie import Cookie
from crumb.http.parser import parse_cookie_header, parse_set_cookie_header

logger = logging.getLogger("crumb.cookies")

H = TypeVar("H", bound=HeaderStore)


class CookieCollection:
    """An ordered, name-keyed set of cookies.

    Setting an existing name replaces its cookie in place; iteration order
    stays the order names were first added. Iterating yields Cookie
    objects, not names::

        cookies = CookieCollection()
        cookies["session"] = "abc"
        cookies.add(Cookie("theme", "dark", http_only=True))
        [c.name for c in cookies]  # ['session', 'theme']

    Not synchronized; share across threads only behind a lock.
    """

    __slots__ = ("_config", "_cookies")

    def __init__(self, *, config: CookieConfig = DEFAULT_CONFIG) -> None:
        self._config = config
        self._cookies: dict[str, Cookie] = {}

    @classmethod
    def from_headers(cls, headers: MultiValueMapping, *, config: CookieConfig = DEFAULT_CONFIG) -> CookieCollection:
        """Build a collection from the ``Cookie`` and ``Set-Cookie`` headers."""
        return cls(config=config).fill_from_headers(headers)

    # -- Lookup --

    def get(self, name: str) -> Cookie:
        """Return the cookie for *name*. Raises ``CookieNotFound`` if absent."""
        try:
            return self._cookies[name]
        except KeyError:
            raise CookieNotFound(name) from None

    def get_optional(self, name: str) -> Cookie | None:
        """Return the cookie for *name*, or ``None``."""
        return self._cookies.get(name)

    def has(self, name: str) -> bool:
        return name in self._cookies

    def is_empty(self) -> bool:
        return not self._cookies

    # -- Mutation --

    def set_by_name(self, name: str, value: str | Cookie) -> None:
        """Store a cookie under *name*.

        A string *value* creates a default cookie (path ``/``, no expiry,
        no flags). A Cookie must carry the same name, else
        ``CookieNameMismatch`` is raised.
        """
        if isinstance(value, str):
            value = Cookie(name, value)
        elif value.name != name:
            raise CookieNameMismatch(name, value.name)
        self._cookies[name] = value

    def add(self, cookie: Cookie) -> None:
        """Add *cookie*, replacing any cookie with the same name."""
        self.set_by_name(cookie.name, cookie)

    def delete(self, name: str) -> Cookie | None:
        """Remove and return the cookie for *name*, or ``None`` if absent."""
        return self._cookies.pop(name, None)

    def clear(self) -> None:
        self._cookies.clear()

    # -- Conversion --

    def to_mapping(self) -> dict[str, Cookie]:
        """Return a detached ``name -> Cookie`` dict."""
        return dict(self._cookies)

    # -- Headers --

    def fill_from_headers(self, headers: MultiValueMapping) -> CookieCollection:
        """Add every cookie found in the ``Cookie`` and ``Set-Cookie`` headers.

        ``Cookie`` values are read first, then ``Set-Cookie`` values; a later
        cookie overwrites an earlier one with the same name. Malformed
        ``Set-Cookie`` values are skipped.
        """
        for header in headers.get_list("Cookie"):
            for cookie in parse_cookie_header(header):
                self.add(cookie)

        for header in headers.get_list("Set-Cookie"):
            cookie = parse_set_cookie_header(header, config=self._config)
            if cookie is None:
                logger.debug("Skipped Set-Cookie header that did not parse")
                continue
            self.add(cookie)
        return self

    def add_request_headers(self, headers: H) -> H:
        """Replace any ``Cookie`` headers with one holding this collection."""
        headers.delete("Cookie")
        if self._cookies:
            headers.add("Cookie", "; ".join(cookie.to_cookie_header() for cookie in self))
        return headers

    def add_response_headers(self, headers: H) -> H:
        """Replace any ``Set-Cookie`` headers with one per cookie, in order."""
        headers.delete("Set-Cookie")
        for cookie in self:
            headers.add("Set-Cookie", cookie.to_set_cookie_header())
        return headers

    # -- Dunder --

    def __getitem__(self, name: str) -> Cookie:
        return self.get(name)

    def __setitem__(self, name: str, value: str | Cookie) -> None:
        self.set_by_name(name, value)

    def __delitem__(self, name: str) -> None:
        if self.delete(name) is None:
            raise CookieNotFound(name)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return name in self._cookies

    def __iter__(self) -> Iterator[Cookie]:
        return iter(list(self._cookies.values()))

    def __len__(self) -> int:
        return len(self._cookies)

    def __repr__(self) -> str:
        return f"CookieCollection({list(self._cookies.values())!r})"
