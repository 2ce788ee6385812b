"""Key-value store registry and factory."""
from __future__ import annotations

from pathlib import Path

from .base import KeyValueStore
from .memory import MemoryStore

_REGISTRY: dict[str, type[KeyValueStore]] = {}

def register_backend(backend: type[KeyValueStore]) -> type[KeyValueStore]:
    """Register a file store class and return it for decorator use."""
    for suf in backend.suffixes:
        _REGISTRY[suf] = backend
    return backend

def get_backend_for_path(path: Path) -> KeyValueStore:
    path = Path(path)
    backend_cls = _REGISTRY.get(path.suffix.lower())
    if backend_cls is None:
        raise ValueError(f"No backend for {path.suffix}")
    return backend_cls(path)

# register default backends
from . import ini_backend, json_backend, yaml_backend  # noqa: F401,E402

__all__ = ["KeyValueStore", "MemoryStore", "register_backend", "get_backend_for_path"]
