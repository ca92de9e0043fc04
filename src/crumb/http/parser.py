"""Header parsing — ``Cookie`` into many cookies, ``Set-Cookie`` into one.

Both parsers are permissive. ``parse_cookie_header`` skips what it cannot
read; ``parse_set_cookie_header`` discards a header that does not match the
grammar as a whole. Neither raises on malformed input.
"""

import logging
import re
from collections.abc import Iterator
from datetime import UTC, datetime, timedelta

from crumb.config import DEFAULT_CONFIG, CookieConfig
from crumb.http.cookie import Cookie, SameSite
from crumb.http.dates import parse_cookie_date
from crumb.http.encoding import decode_www_form
from crumb.http.grammar import ATTRIBUTE_VALUE, COOKIE_STRING, SET_COOKIE_PAIR, WSP

logger = logging.getLogger("crumb.parser")


class CookieHeaderPairs:
    """Lazy view over the ``name=value`` pairs of a ``Cookie`` header.

    Every iteration rescans the header, so the view can be consumed
    any number of times. Only ``name`` and ``value`` are set on the
    cookies it yields.
    """

    __slots__ = ("_header",)

    def __init__(self, header: str) -> None:
        self._header = header

    def __iter__(self) -> Iterator[Cookie]:
        for match in COOKIE_STRING.finditer(self._header):
            yield Cookie(decode_www_form(match["name"]), decode_www_form(match["value"]))

    def __repr__(self) -> str:
        return f"CookieHeaderPairs({self._header!r})"


def parse_cookie_header(header: str) -> CookieHeaderPairs:
    """Parse a ``Cookie`` header value into its cookies.

    Pairs must sit at the start of the header or follow ``"; "``.
    Anything else is skipped::

        >>> [(c.name, c.value) for c in parse_cookie_header("foo=bar; baz=qux")]
        [('foo', 'bar'), ('baz', 'qux')]
    """
    return CookieHeaderPairs(header)


def parse_set_cookie_header(header: str, *, config: CookieConfig = DEFAULT_CONFIG) -> Cookie | None:
    """Parse a ``Set-Cookie`` header value into a Cookie.

    Returns ``None`` unless the whole value is a ``cookie-pair`` followed
    by ``;``-separated attributes. Each attribute segment is matched on
    its own, so parsing time stays linear in the header length.
    Resolution rules:

    - ``Max-Age`` beats ``Expires``; the expiry becomes ``config.clock()``
      plus that many seconds.
    - A well-formed ``Expires`` naming an impossible date gives no expiry.
    - A repeated attribute keeps its last occurrence.
    - Unrecognized segments are kept in order, joined by ``"; "``.
    """
    match = SET_COOKIE_PAIR.match(header)
    segments = _attribute_segments(header[match.end() :]) if match is not None else None
    if match is None or segments is None:
        logger.debug("Discarding malformed Set-Cookie header: %r", header)
        return None

    attrs: dict[str, str] = {}
    extensions: list[str] = []
    for av in segments:
        if av["extension"] is not None:
            extensions.append(av["extension"])
            continue
        for key, value in av.groupdict().items():
            if value is not None:
                attrs[key] = value

    samesite = attrs.get("samesite")
    return Cookie(
        decode_www_form(match["name"]),
        decode_www_form(match["value"]),
        path=attrs.get("path", config.default_path),
        expires=_resolve_expires(attrs, config),
        domain=attrs.get("domain"),
        secure="secure" in attrs,
        http_only="http_only" in attrs,
        samesite=SameSite.parse(samesite) if samesite is not None else None,
        extension="; ".join(extensions) or None,
    )


def _attribute_segments(tail: str) -> list[re.Match[str]] | None:
    """Match every ``;``-separated segment after the cookie-pair, or ``None``."""
    if tail and not tail.startswith(";"):
        return None
    segments = []
    for segment in tail.split(";")[1:]:
        av = ATTRIBUTE_VALUE.fullmatch(segment.lstrip(WSP))
        if av is None:
            return None
        segments.append(av)
    return segments


def _resolve_expires(attrs: dict[str, str], config: CookieConfig) -> datetime | None:
    max_age = attrs.get("max_age")
    if max_age is not None:
        now = config.clock()
        try:
            return now + timedelta(seconds=int(max_age))
        except (OverflowError, ValueError):
            # Past the representable range (or too many digits for int())
            return datetime.max.replace(tzinfo=UTC)

    expires = attrs.get("expires")
    if expires is None:
        return None
    parsed = parse_cookie_date(expires)
    if parsed is None:
        logger.debug("Ignoring unparseable Expires date: %r", expires)
    return parsed
