from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping, MutableMapping
from pathlib import Path

from ..errors import StoreWriteError


class KeyValueStore(ABC):
    """Abstract string key-value store."""

    suffixes: tuple[str, ...] = ()

    @abstractmethod
    def get(self, key: str) -> str | None:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        pass

    @abstractmethod
    def keys(self) -> Iterator[str]:
        pass


class FileStore(KeyValueStore):
    """Store keeping every key in a single file.

    The whole file is read on each access so that edits made by another
    process are picked up; the last write wins.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    @abstractmethod
    def _read(self) -> MutableMapping[str, str]:
        pass

    @abstractmethod
    def _write(self, fh, data: Mapping[str, str]) -> None:
        pass

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._save(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._save(data)

    def keys(self) -> Iterator[str]:
        return iter(list(self._read()))

    def _save(self, data: Mapping[str, str]) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8") as fh:
                self._write(fh, data)
            tmp.replace(self.path)
        except OSError as exc:
            raise StoreWriteError(f"cannot write {self.path}: {exc}") from exc
