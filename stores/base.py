# stores/base.py
from abc import ABC, abstractmethod
from typing import Dict, Optional


class BaseStore(ABC):
    """Abstract base class for durable key/value storage of cache entries."""

    @abstractmethod
    def get_entry(self, key: str) -> Optional[Dict]:
        """Retrieves the stored record for a key.

        Returns:
            A dictionary with the keys 'key', 'value' and 'expires_at', or
            None when nothing is stored under the key.
        """
        pass

    @abstractmethod
    def put_entry(self, key: str, entry: Dict) -> None:
        """Stores a record, replacing any previous one atomically."""
        pass

    @abstractmethod
    def delete_entry(self, key: str) -> bool:
        """Removes a record. Returns False if there was none."""
        pass
