"""Percent-style encoding for cookie names and values.

Uses ``application/x-www-form-urlencoded`` rules: unreserved characters
pass through, space becomes ``+``, everything else is ``%XX`` (UTF-8).
"""

from urllib.parse import quote_plus, unquote_plus


def encode_www_form(text: str) -> str:
    return quote_plus(text, safe="")


def decode_www_form(text: str) -> str:
    return unquote_plus(text)
