"""A mapping with string keys compared without regard to letter case."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Mapping, TypeVar, Union

V = TypeVar("V")

_Source = Union[Mapping[str, V], Iterable[tuple[str, V]], None]


def _fold(key: str) -> str:
    return key.lower()


class CaseInsensitiveMap(Generic[V]):
    """String-keyed map where 'Ana' and 'ANA' name the same entry.

    The first spelling of a key is kept, and inserting a key that is
    already present leaves the existing value untouched.
    """

    def __init__(self, items: _Source = None) -> None:
        self._entries: dict[str, tuple[str, V]] = {}
        if items is None:
            return
        pairs = items.items() if isinstance(items, Mapping) else items
        for key, value in pairs:
            self.insert(key, value)

    def insert(self, key: str, value: V) -> bool:
        """Add ``key`` unless it is present; return whether it was added."""
        folded = _fold(key)
        if folded in self._entries:
            return False
        self._entries[folded] = (key, value)
        return True

    def pop(self, key: str) -> V:
        """Remove ``key`` and return its value; raise KeyError if absent."""
        try:
            _, value = self._entries.pop(_fold(key))
        except KeyError:
            raise KeyError(key) from None
        return value

    def get(self, key: str, default: V | None = None) -> V | None:
        entry = self._entries.get(_fold(key))
        return default if entry is None else entry[1]

    def __getitem__(self, key: str) -> V:
        try:
            return self._entries[_fold(key)][1]
        except KeyError:
            raise KeyError(key) from None

    def __delitem__(self, key: str) -> None:
        self.pop(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and _fold(key) in self._entries

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def items(self) -> Iterator[tuple[str, V]]:
        return iter(list(self._entries.values()))

    def values(self) -> Iterator[V]:
        return iter([value for _, value in self._entries.values()])

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"{type(self).__name__}({{{body}}})"