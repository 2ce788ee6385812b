from __future__ import annotations

from collections.abc import Mapping, MutableMapping

from ..errors import StoreLoadError
from . import register_backend
from .base import FileStore


@register_backend
class YamlFileStore(FileStore):
    """YAML file store."""

    suffixes = (".yaml", ".yml")

    def _require_yaml(self):
        try:
            import yaml  # type: ignore
        except ModuleNotFoundError as exc:
            raise StoreLoadError("PyYAML is required for YAML stores") from exc
        return yaml

    def _read(self) -> MutableMapping[str, str]:
        yaml = self._require_yaml()
        if not self.path.exists():
            return {}
        raw = self.path.read_text(encoding="utf-8")
        if raw.strip() == "":
            return {}
        try:
            data = yaml.safe_load(raw) or {}
        except yaml.YAMLError as exc:
            raise StoreLoadError(str(exc)) from exc
        if not isinstance(data, dict):
            raise StoreLoadError("Root of YAML store must be a mapping")
        return {str(k): str(v) for k, v in data.items()}

    def _write(self, fh, data: Mapping[str, str]) -> None:
        yaml = self._require_yaml()
        yaml.safe_dump(dict(data), fh, sort_keys=True, allow_unicode=True)
