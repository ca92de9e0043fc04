"""Cookie — one cookie and its attributes, serializable to header text.

The read side lives in ``crumb.http.parser``; this module is the value
object both parsers produce and ``CookieCollection`` stores.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from crumb._internal.types import Clock
from crumb.http.dates import as_utc, format_http_date, utc_now
from crumb.http.encoding import encode_www_form


class SameSite(StrEnum):
    """Values of the ``SameSite`` attribute."""

    STRICT = "Strict"
    LAX = "Lax"

    @classmethod
    def parse(cls, text: str) -> SameSite | None:
        """Case-insensitive lookup. Unknown words return ``None``."""
        lowered = text.lower()
        for member in cls:
            if member.value.lower() == lowered:
                return member
        return None


@dataclass(slots=True, unsafe_hash=True)
class Cookie:
    """A cookie with all its attributes.

    Equality and hashing cover name, value, path, expires, domain, secure
    and http_only. ``samesite`` and ``extension`` ride along but do not
    take part in comparisons.

    Cookies built directly are not checked against the cookie grammar;
    cookies produced by the parser always satisfy it.
    """

    name: str
    value: str
    path: str = "/"
    expires: datetime | None = None
    domain: str | None = None
    secure: bool = False
    http_only: bool = False
    samesite: SameSite | None = field(default=None, compare=False)
    extension: str | None = field(default=None, compare=False)

    def to_cookie_header(self) -> str:
        """Serialize as a ``name=value`` pair for a ``Cookie`` header."""
        return f"{encode_www_form(self.name)}={encode_www_form(self.value)}"

    def to_set_cookie_header(self) -> str:
        """Serialize to a ``Set-Cookie`` header value string.

        ``path`` is always written, even when empty. ``expires`` is written
        with one-second precision, so microseconds do not survive a parse
        of the result.
        """
        parts = [self.to_cookie_header()]
        if self.domain:
            parts.append(f"domain={self.domain}")
        if self.path is not None:
            parts.append(f"path={self.path}")
        if self.expires is not None:
            parts.append(f"expires={format_http_date(self.expires)}")
        if self.secure:
            parts.append("Secure")
        if self.http_only:
            parts.append("HttpOnly")
        if self.samesite is not None:
            parts.append(f"SameSite={self.samesite.value}")
        if self.extension:
            parts.append(self.extension)
        return "; ".join(parts)

    def is_expired(self, clock: Clock = utc_now) -> bool:
        """Whether ``expires`` is set and strictly earlier than ``clock()``.

        A cookie without ``expires`` is a session cookie and never expires.
        """
        if self.expires is None:
            return False
        return as_utc(self.expires) < as_utc(clock())
