"""Mutable, case-insensitive HTTP headers.

Implements ``Mapping[str, str]`` and the ``HeaderStore`` protocol.
Stores ``(name, value)`` string pairs in arrival order so repeated
headers such as ``Set-Cookie`` keep one entry per line.
"""

from collections.abc import Iterable, Iterator, Mapping


class MutableHeaders(Mapping[str, str]):
    """Case-insensitive, multi-valued HTTP headers.

    ``__getitem__`` returns the first matching value.
    ``get_list`` returns all values for a header (e.g. multiple ``Set-Cookie``).
    ``add`` appends a value, ``delete`` drops every value for a name.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[tuple[str, str]] = ()) -> None:
        self._items: list[tuple[str, str]] = list(items)

    def __getitem__(self, key: str) -> str:
        key_lower = key.lower()
        for name, value in self._items:
            if name.lower() == key_lower:
                return value
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        key_lower = key.lower()
        return any(name.lower() == key_lower for name, _ in self._items)

    def __iter__(self) -> Iterator[str]:
        seen: set[str] = set()
        for name, _ in self._items:
            key = name.lower()
            if key not in seen:
                seen.add(key)
                yield key

    def __len__(self) -> int:
        return len(set(self))

    def __repr__(self) -> str:
        return f"MutableHeaders({self._items!r})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        try:
            return self[key]
        except KeyError:
            return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key* (e.g. multiple ``Set-Cookie``)."""
        key_lower = key.lower()
        return [value for name, value in self._items if name.lower() == key_lower]

    def add(self, key: str, value: str) -> None:
        """Append a value for *key*, keeping any existing ones."""
        self._items.append((key, value))

    def delete(self, key: str) -> None:
        """Remove every value for *key*. Missing keys are ignored."""
        key_lower = key.lower()
        self._items = [(name, value) for name, value in self._items if name.lower() != key_lower]

    @property
    def raw(self) -> tuple[tuple[str, str], ...]:
        """All header pairs in order, duplicates included."""
        return tuple(self._items)
