# stores/filesystem.py
import hashlib
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

from .base import BaseStore
from errors import StorageError

logger = logging.getLogger(__name__)


class FilesystemStore(BaseStore):
    """Stores one JSON file per key under <path>/<namespace>/.

    Writes go to a temporary file that is renamed over the target, so a
    reader in this or any other process sees either the old entry or the
    new one, never a partial write.
    """

    def __init__(self, path: Path, namespace: str = "ddns_hosts"):
        self.directory = Path(path) / namespace
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as err:
            logger.error("Cannot create cache directory %s: %s", self.directory, err)
            raise StorageError(f"Cannot create cache directory {self.directory}") from err

    def _entry_path(self, key: str) -> Path:
        # Keys contain ':' which is not portable in file names.
        digest = hashlib.sha1(key.encode("utf-8")).hexdigest()
        return self.directory / f"{digest}.json"

    def get_entry(self, key: str) -> Optional[Dict]:
        entry_path = self._entry_path(key)
        try:
            with entry_path.open("r", encoding="utf-8") as file:
                return json.load(file)
        except FileNotFoundError:
            return None
        except json.JSONDecodeError as err:
            logger.error("Error decoding cache entry %s: %s", entry_path, err)
            raise StorageError(f"Corrupt cache entry for {key}", key) from err
        except OSError as err:
            logger.error("File system error while reading %s: %s", entry_path, err)
            raise StorageError(f"Cannot read cache entry for {key}", key) from err

    def put_entry(self, key: str, entry: Dict) -> None:
        entry_path = self._entry_path(key)
        try:
            fd, tmp_name = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as file:
                    json.dump(entry, file)
                    file.flush()
                    os.fsync(file.fileno())
                os.replace(tmp_name, entry_path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as err:
            logger.error("File system error while saving %s: %s", entry_path, err)
            raise StorageError(f"Cannot write cache entry for {key}", key) from err

    def delete_entry(self, key: str) -> bool:
        entry_path = self._entry_path(key)
        try:
            entry_path.unlink()
        except FileNotFoundError:
            return False
        except OSError as err:
            logger.error("File system error while deleting %s: %s", entry_path, err)
            raise StorageError(f"Cannot delete cache entry for {key}", key) from err
        return True
