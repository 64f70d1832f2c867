# cache.py
import logging
import threading
import time
from dataclasses import dataclass, asdict
from typing import Callable, Optional

from stores import BaseStore
from errors import StorageError

logger = logging.getLogger(__name__)

TIME_TO_LIVE = 20 * 24 * 60 * 60  # 20 days


@dataclass
class CacheEntry:
    key: str
    value: str
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class AddressCache:
    """Expiring identifier -> address store on top of a durable backend.

    Expiry is lazy: an expired entry stays in the store until it is
    overwritten or deleted, but it is never returned by get(). Reads never
    delete, so a read cannot race away another process's fresh write.
    """

    def __init__(self, store: BaseStore, ttl: float = TIME_TO_LIVE,
                 clock: Callable[[], float] = time.time):
        self.store = store
        self.ttl = ttl
        self.clock = clock
        self._lock = threading.Lock()

    def get(self, identifier: str) -> Optional[str]:
        with self._lock:
            record = self.store.get_entry(identifier)
            if record is None:
                return None
            try:
                entry = CacheEntry(record["key"], record["value"], float(record["expires_at"]))
            except (KeyError, TypeError, ValueError) as err:
                logger.error(f"Malformed cache entry for {identifier}: {record!r}")
                raise StorageError(f"Malformed cache entry for {identifier}", identifier) from err
            if entry.is_expired(self.clock()):
                logger.debug(f"Cache entry for {identifier} expired at {entry.expires_at}")
                return None
            return entry.value

    def set(self, identifier: str, address: str) -> CacheEntry:
        entry = CacheEntry(identifier, address, self.clock() + self.ttl)
        with self._lock:
            self.store.put_entry(identifier, asdict(entry))
        return entry

    def delete(self, identifier: str) -> None:
        with self._lock:
            if not self.store.delete_entry(identifier):
                logger.debug(f"No cache entry to delete for {identifier}")
