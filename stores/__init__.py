# stores/__init__.py
from pathlib import Path
from typing import Any, Mapping

from .base import BaseStore
from .filesystem import FilesystemStore
from .memory import MemoryStore
from errors import ConfigurationError

DEFAULT_PATH = ".cache/ddns"
DEFAULT_NAMESPACE = "ddns_hosts"


def get_store(config: Mapping[str, Any] | None) -> BaseStore:
    """Store factory: returns an instance of the configured backend."""

    config = config or {}
    backend = config.get("backend", "filesystem")

    if backend == "filesystem":
        return FilesystemStore(
            Path(config.get("path", DEFAULT_PATH)),
            config.get("namespace", DEFAULT_NAMESPACE),
        )
    elif backend == "memory":
        return MemoryStore()
    else:
        raise ConfigurationError(f"Unsupported cache backend: {backend}")
