"""Header store protocols — the interface CookieCollection reads and writes.

Structural protocols so any multi-valued header container can be filled
from or written to without coupling to the concrete type.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class MultiValueMapping(Protocol):
    """A read-only string mapping where keys can have multiple values.

    ``get_list`` returns all values for a key, or an empty list when the
    key is absent. This is all ``CookieCollection.fill_from_headers`` needs.
    """

    def get_list(self, key: str) -> list[str]: ...


@runtime_checkable
class HeaderStore(MultiValueMapping, Protocol):
    """A mutable multi-valued header container.

    ``add`` appends a value without touching existing ones.
    ``delete`` removes every value stored under a key.
    """

    def add(self, key: str, value: str) -> None: ...
    def delete(self, key: str) -> None: ...
