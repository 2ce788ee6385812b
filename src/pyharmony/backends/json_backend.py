from __future__ import annotations

import json
from collections.abc import Mapping, MutableMapping

from ..errors import StoreLoadError
from . import register_backend
from .base import FileStore


@register_backend
class JsonFileStore(FileStore):
    """JSON file holding a flat object of string values."""

    suffixes = (".json",)

    def _read(self) -> MutableMapping[str, str]:
        if not self.path.exists():
            return {}
        raw = self.path.read_text(encoding="utf-8")
        if raw.strip() == "":
            return {}
        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise StoreLoadError(str(exc)) from exc
        if not isinstance(data, dict):
            raise StoreLoadError("Root of JSON store must be an object")
        return {str(k): str(v) for k, v in data.items()}

    def _write(self, fh, data: Mapping[str, str]) -> None:
        json.dump(dict(data), fh, indent=2, sort_keys=True, ensure_ascii=False)
