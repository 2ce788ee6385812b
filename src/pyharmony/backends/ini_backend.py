from __future__ import annotations

import configparser
from collections.abc import Mapping, MutableMapping

from ..errors import StoreLoadError
from . import register_backend
from .base import FileStore

SECTION = "__root__"


@register_backend
class IniFileStore(FileStore):
    """INI file store keeping all keys in a single section."""

    suffixes = (".ini",)

    def _parser(self) -> configparser.ConfigParser:
        # no interpolation: stored JSON may contain '%' characters
        parser = configparser.ConfigParser(interpolation=None)
        parser.optionxform = str  # type: ignore[assignment]
        return parser

    def _read(self) -> MutableMapping[str, str]:
        parser = self._parser()
        if not self.path.exists():
            return {}
        try:
            parser.read(self.path, encoding="utf-8")
        except configparser.Error as exc:
            raise StoreLoadError(str(exc)) from exc
        if not parser.has_section(SECTION):
            return {}
        return dict(parser.items(SECTION))

    def _write(self, fh, data: Mapping[str, str]) -> None:
        parser = self._parser()
        parser.add_section(SECTION)
        for key, value in data.items():
            parser.set(SECTION, key, value)
        parser.write(fh)
