# stores/memory.py
import threading
from typing import Dict, Optional

from .base import BaseStore


class MemoryStore(BaseStore):
    """Process-local store. Entries do not survive a restart."""

    def __init__(self):
        self._entries: Dict[str, Dict] = {}
        self._lock = threading.Lock()

    def get_entry(self, key: str) -> Optional[Dict]:
        with self._lock:
            entry = self._entries.get(key)
            return dict(entry) if entry is not None else None

    def put_entry(self, key: str, entry: Dict) -> None:
        with self._lock:
            self._entries[key] = dict(entry)

    def delete_entry(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None
