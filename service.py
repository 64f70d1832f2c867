# service.py
"""Entry points for callers that resolve and report host addresses.

:class:`DynamicDNS` is the one context object a front end (HTTP handler,
CLI) holds. Build it once per process with :meth:`DynamicDNS.from_settings`
and pass it to every request; it holds no other global state.
"""
import logging
from pathlib import Path
from typing import Any, List, Optional

from dynaconf import Dynaconf
from mac_vendor_lookup import MacLookup

from cache import AddressCache
from directory import HostDirectory
from errors import (DeleteNotAllowedError, InvalidAddressError,
                    InvalidIdentifierError)
from host import HostRecord
from matcher import is_plausible_identifier
from stores import get_store
from utils import is_valid_address, parse_bool

logger = logging.getLogger(__name__)

SETTINGS_FILE = Path(__file__).resolve().parent / "config" / "settings.toml"


def load_settings(settings_file: Optional[Path] = None):
    """Loads settings from TOML with DDNS_* environment overrides."""
    return Dynaconf(
        envvar_prefix="DDNS",
        settings_files=[str(settings_file or SETTINGS_FILE)],
    )


class DynamicDNS:

    def __init__(self, directory: HostDirectory, can_delete: bool = False):
        self.directory = directory
        self.can_delete = can_delete

    @classmethod
    def from_settings(cls, settings: Any) -> "DynamicDNS":
        """Builds the directory, the cache and the delete flag from settings.

        ``settings`` is a Dynaconf instance or any mapping with ``get``.

        Raises:
            ConfigurationError: if the host list is malformed or the cache
                backend is unknown.
        """
        cache = AddressCache(get_store(settings.get("cache")))
        vendor_lookup = None
        if parse_bool(settings.get("lookup_vendor")):
            vendor_lookup = MacLookup()
        directory = HostDirectory(settings.get("hosts"), cache, vendor_lookup=vendor_lookup)
        return cls(directory, can_delete=parse_bool(settings.get("can_delete")))

    @staticmethod
    def _validate_identifier(raw: str) -> None:
        if not is_plausible_identifier(raw):
            raise InvalidIdentifierError(f"Invalid MAC address: {raw!r}", raw)

    def resolve(self, raw: str) -> Optional[HostRecord]:
        """Returns the host and its last reported address, or None if unknown."""
        self._validate_identifier(raw)
        return self.directory.find(raw)

    def upsert(self, raw: str, address: str) -> HostRecord:
        self._validate_identifier(raw)
        if not isinstance(address, str) or not is_valid_address(address):
            raise InvalidAddressError(f"Invalid IP address: {address!r}", raw)
        return self.directory.update(HostRecord(raw, address))

    def remove(self, raw: str) -> str:
        if not self.can_delete:
            logger.warning(f"Rejected delete of {raw}: deleting is disabled")
            raise DeleteNotAllowedError("Method not allowed", raw)
        self._validate_identifier(raw)
        return self.directory.delete(raw)

    def list_hosts(self) -> List[HostRecord]:
        return self.directory.all_records()
