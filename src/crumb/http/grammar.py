"""Lexical grammar for ``Cookie`` and ``Set-Cookie`` header text.

Patterns are kept as strings so they can be composed, then compiled once
at the bottom of the module. Everything is matched case-insensitively and
with ASCII-only ``\\d``/``\\s``/``\\w``.

    cookie-pair  = cookie-name "=" cookie-value
    cookie-value = DQUOTE *cookie-octet DQUOTE / *cookie-octet
    set-cookie   = cookie-pair *( ";" *WSP cookie-av )   ; one segment at a time
    cookie-av    = expires-av / max-age-av / domain-av / path-av
                 / secure-av / httponly-av / samesite-av / extension-av
"""

import re

FLAGS = re.IGNORECASE | re.ASCII

# token: anything but CTLs, SP, HT and separators
COOKIE_NAME = r'[^()<>@,;:\\"/\[\]?={} \t\x00-\x1f\x7f]+'
# %x21 / %x23-2B / %x2D-3A / %x3C-5B / %x5D-7E
COOKIE_OCTET = r"[\x21\x23-\x2b\x2d-\x3a\x3c-\x5b\x5d-\x7e]"
COOKIE_VALUE = rf'(?:"{COOKIE_OCTET}*"|{COOKIE_OCTET}*)'
COOKIE_PAIR = rf"(?P<name>{COOKIE_NAME})=(?P<value>{COOKIE_VALUE})"

# Date tokens
TIME = r"\d{2}:\d{2}:\d{2}"
MONTH = r"(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)"
WEEKDAY = r"(?:Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday)"
WKDAY = r"(?:Mon|Tue|Wed|Thu|Fri|Sat|Sun)"
ZONE = r"(?:UT|GMT|EST|EDT|CST|CDT|MST|MDT|PST|PDT|[+-]?\d{4})"

RFC1123_DATE = rf"{WKDAY}, \d{{1,2}} {MONTH} \d{{2,4}} {TIME} {ZONE}"
RFC1036_DATE = rf"{WEEKDAY}, \d{{2}}-{MONTH}-\d{{2}} {TIME} GMT"
IIS_DATE = rf"{WKDAY}, \d{{1,2}}-{MONTH}-\d{{2,4}} {TIME} GMT"
ANSIC_DATE = rf"{WKDAY} {MONTH} (?:\d{{2}}| \d) {TIME} \d{{4}}"
SANE_COOKIE_DATE = rf"(?:{RFC1123_DATE}|{RFC1036_DATE}|{IIS_DATE}|{ANSIC_DATE})"

# Attribute values
DOMAIN_LABEL = r"[A-Za-z0-9\-]+"
DOMAIN_IP = r"\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}"
DOMAIN_VALUE = rf"(?:{DOMAIN_IP}|\.?{DOMAIN_LABEL}(?:\.{DOMAIN_LABEL})*)"
PATH_VALUE = r"[^\x00-\x1f\x7f;]*"


# Each attribute segment is matched on its own with fullmatch(), so a
# known attribute only claims a segment it covers completely.
EXPIRES_AV = rf"Expires=(?P<expires>{SANE_COOKIE_DATE})"
MAX_AGE_AV = r"Max-Age=(?P<max_age>[0-9]+)"
DOMAIN_AV = rf"Domain=(?P<domain>{DOMAIN_VALUE})"
PATH_AV = rf"Path=(?P<path>{PATH_VALUE})"
SECURE_AV = r"(?P<secure>Secure)"
HTTP_ONLY_AV = r"(?P<http_only>HttpOnly)"
SAMESITE_AV = r"SameSite=(?P<samesite>\w+)"
EXTENSION_AV = r"(?P<extension>[^\x00-\x20\x7f;][^\x00-\x1f\x7f;]*)"

COOKIE_AV = (
    rf"(?:{EXPIRES_AV}|{MAX_AGE_AV}|{DOMAIN_AV}|{PATH_AV}"
    rf"|{SECURE_AV}|{HTTP_ONLY_AV}|{SAMESITE_AV}|{EXTENSION_AV})"
)

# Whitespace allowed after each ";" separator
WSP = " \t\n\r\f\v"

# One pair at the start of the header or right after "; "
COOKIE_STRING = re.compile(rf"(?:^|; ){COOKIE_PAIR}", FLAGS)

# Leading cookie-pair of a Set-Cookie header; the rest must be attributes
SET_COOKIE_PAIR = re.compile(COOKIE_PAIR, FLAGS)

# One attribute segment, used with fullmatch()
ATTRIBUTE_VALUE = re.compile(COOKIE_AV, FLAGS)
