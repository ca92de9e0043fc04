"""Cookie expiry dates — parsing the legacy formats and formatting RFC 1123.

Servers still send ``Expires`` in four historical shapes::

    Wed, 09 Jun 2021 10:18:14 GMT        RFC 1123
    Wednesday, 09-Jun-21 10:18:14 GMT    RFC 1036
    Wed, 09-Jun-2021 10:18:14 GMT        IIS
    Wed Jun  9 10:18:14 2021             ANSI C asctime()

``parse_cookie_date`` tries them in that order and returns ``None`` when
nothing fits. It never raises.
"""

import re
from datetime import UTC, datetime, timedelta, timezone
from email.utils import format_datetime

from crumb.http.grammar import FLAGS, MONTH, WEEKDAY, WKDAY, ZONE

_MONTHS = {
    name: number
    for number, name in enumerate(
        ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec"),
        start=1,
    )
}

# Hours east of UTC for the zone names RFC 1123 allows
_ZONES = {
    "ut": 0,
    "gmt": 0,
    "est": -5,
    "edt": -4,
    "cst": -6,
    "cdt": -5,
    "mst": -7,
    "mdt": -6,
    "pst": -8,
    "pdt": -7,
}

_HMS = r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"

_FORMATS = (
    re.compile(
        rf"{WKDAY}, (?P<day>\d{{1,2}}) (?P<month>{MONTH}) (?P<year>\d{{2,4}}) {_HMS} (?P<zone>{ZONE})",
        FLAGS,
    ),
    re.compile(
        rf"{WEEKDAY}, (?P<day>\d{{2}})-(?P<month>{MONTH})-(?P<year>\d{{2}}) {_HMS} GMT",
        FLAGS,
    ),
    re.compile(
        rf"{WKDAY}, (?P<day>\d{{1,2}})-(?P<month>{MONTH})-(?P<year>\d{{2,4}}) {_HMS} GMT",
        FLAGS,
    ),
    re.compile(
        rf"{WKDAY} (?P<month>{MONTH}) (?P<day>\d{{2}}| \d) {_HMS} (?P<year>\d{{4}})",
        FLAGS,
    ),
)


def utc_now() -> datetime:
    """Default clock: the current time as an aware UTC datetime."""
    return datetime.now(UTC)


def as_utc(dt: datetime) -> datetime:
    """Return *dt* in UTC, reading naive datetimes as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def format_http_date(dt: datetime) -> str:
    """Render *dt* as an RFC 1123 date, e.g. ``Wed, 09 Jun 2021 10:18:14 GMT``."""
    return format_datetime(as_utc(dt).replace(microsecond=0), usegmt=True)


def parse_cookie_date(text: str) -> datetime | None:
    """Parse an ``Expires`` value into an aware UTC datetime.

    Returns ``None`` if no format matches the whole string, or if the
    matching text names an impossible date, time or offset.
    """
    for pattern in _FORMATS:
        match = pattern.fullmatch(text)
        if match is not None:
            return _build(match)
    return None


def _build(match: re.Match[str]) -> datetime | None:
    fields = match.groupdict()
    try:
        tz = _zone(fields.get("zone"))
        dt = datetime(
            _year(fields["year"]),
            _MONTHS[fields["month"].lower()],
            int(fields["day"]),
            int(fields["hour"]),
            int(fields["minute"]),
            int(fields["second"]),
            tzinfo=tz,
        )
        return dt.astimezone(UTC)
    except (ValueError, OverflowError):
        return None


def _year(text: str) -> int:
    year = int(text)
    if len(text) == 2:
        # RFC 6265 §5.1.1: 70-99 -> 19xx, 00-69 -> 20xx
        return year + (1900 if year >= 70 else 2000)
    return year


def _zone(text: str | None) -> timezone:
    if text is None:
        return UTC
    hours = _ZONES.get(text.lower())
    if hours is not None:
        return timezone(timedelta(hours=hours))
    sign = -1 if text[0] == "-" else 1
    digits = text.lstrip("+-")
    hh, mm = int(digits[:2]), int(digits[2:])
    if mm >= 60:
        raise ValueError(f"invalid zone offset {text!r}")
    return timezone(sign * timedelta(hours=hh, minutes=mm))
