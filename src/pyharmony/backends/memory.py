from __future__ import annotations

from collections.abc import Iterator

from ..errors import StoreWriteError
from .base import KeyValueStore


class MemoryStore(KeyValueStore):
    """In-process store with an optional size quota.

    ``quota`` bounds the total number of characters held across keys and
    values, the way browser storage refuses writes once it is full.
    """

    def __init__(self, data: dict[str, str] | None = None, *, quota: int | None = None):
        self._data: dict[str, str] = dict(data or {})
        self.quota = quota

    def _size(self, data: dict[str, str]) -> int:
        return sum(len(k) + len(v) for k, v in data.items())

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.quota is not None:
            pending = dict(self._data)
            pending[key] = value
            if self._size(pending) > self.quota:
                raise StoreWriteError(f"quota of {self.quota} exceeded writing {key!r}")
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> Iterator[str]:
        return iter(list(self._data))
