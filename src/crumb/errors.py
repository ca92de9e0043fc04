"""Crumb exception hierarchy.

Only direct misuse of the collection API raises. Malformed header text
never does: the parsers skip or discard what they cannot read.
"""


class CrumbError(Exception):
    """Base for all crumb-specific errors."""


class CookieNameMismatch(CrumbError, ValueError):  # noqa: N818
    """A cookie was stored under a key that differs from its ``name``."""

    def __init__(self, key: str, name: str) -> None:
        self.key = key
        self.name = name
        super().__init__(f"Cookie name {name!r} must match the given key {key!r}")


class CookieNotFound(CrumbError, KeyError):  # noqa: N818
    """No cookie with the requested name is in the collection."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"No cookie named {self.name!r}"
