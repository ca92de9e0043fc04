"""Crumb — HTTP cookie header parsing and serialization.

Reads ``Cookie`` and ``Set-Cookie`` header text into Cookie objects and
writes them back, including the legacy ``Expires`` date formats.

Basic usage::

    from crumb import CookieCollection, MutableHeaders

    headers = MutableHeaders([("Cookie", "session=abc; theme=dark")])
    cookies = CookieCollection.from_headers(headers)
    cookies["theme"].value  # 'dark'

    cookies.add_response_headers(MutableHeaders())

Single headers::

    from crumb import parse_set_cookie_header

    cookie = parse_set_cookie_header("id=1; Path=/app; Secure; SameSite=Lax")
"""

__version__ = "0.1.0-dev"
__all__ = [
    "Cookie",
    "CookieCollection",
    "CookieConfig",
    "CookieNameMismatch",
    "CookieNotFound",
    "CrumbError",
    "MutableHeaders",
    "SameSite",
    "format_http_date",
    "parse_cookie_date",
    "parse_cookie_header",
    "parse_set_cookie_header",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import crumb`` cheap: the grammar is only compiled on first use.
    """
    if name in ("Cookie", "SameSite"):
        from crumb.http import cookie as _cookie

        return getattr(_cookie, name)

    if name == "CookieCollection":
        from crumb.http.collection import CookieCollection

        return CookieCollection

    if name == "CookieConfig":
        from crumb.config import CookieConfig

        return CookieConfig

    if name == "MutableHeaders":
        from crumb.http.headers import MutableHeaders

        return MutableHeaders

    if name in ("parse_cookie_header", "parse_set_cookie_header"):
        from crumb.http import parser as _parser

        return getattr(_parser, name)

    if name in ("format_http_date", "parse_cookie_date"):
        from crumb.http import dates as _dates

        return getattr(_dates, name)

    if name in ("CrumbError", "CookieNameMismatch", "CookieNotFound"):
        from crumb import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
