# directory.py
import json
import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, List, Optional

from cache import AddressCache
from errors import ConfigurationError, UnknownHostError
from host import HostAttributes, HostRecord
from matcher import find_duplicates, is_plausible_identifier, match_identifier

logger = logging.getLogger(__name__)

NAMED_ATTRIBUTES = ("name", "hostname", "vendor")


def _to_plain(value: Any) -> Any:
    """Turns nested mapping types (e.g. Dynaconf boxes) into plain dicts."""
    if isinstance(value, Mapping):
        return {str(k): _to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(v) for v in value]
    return value


def parse_hosts(raw: Any) -> Dict[str, HostAttributes]:
    """Parses the configured host list into identifier -> HostAttributes.

    Args:
        raw: A JSON object string or a mapping. None means no hosts.

    Raises:
        ConfigurationError: if the data is not a mapping of mappings keyed by
            distinct MAC addresses.
    """
    if raw is None:
        raw = {}
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw or "{}")
        except json.JSONDecodeError as err:
            raise ConfigurationError(f"Host list is not valid JSON: {err}") from err
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"Host list must be an object, got {type(raw).__name__}")

    hosts: Dict[str, HostAttributes] = {}
    for identifier, attributes in _to_plain(raw).items():
        if not is_plausible_identifier(identifier):
            raise ConfigurationError(f"Not a MAC address: {identifier!r}", identifier)
        if attributes is None:
            attributes = {}
        if not isinstance(attributes, dict):
            raise ConfigurationError(f"Attributes of {identifier} must be an object", identifier)
        extra = {k: v for k, v in attributes.items() if k not in NAMED_ATTRIBUTES}
        hosts[identifier] = HostAttributes(
            name=attributes.get("name"),
            hostname=attributes.get("hostname"),
            vendor=attributes.get("vendor"),
            extra=extra,
        )

    duplicates = find_duplicates(hosts)
    if duplicates:
        listed = "; ".join(", ".join(members) for members in duplicates.values())
        raise ConfigurationError(f"Duplicate MAC addresses in host list: {listed}")
    return hosts


class HostDirectory:
    """The static list of known hosts, joined with their cached addresses."""

    def __init__(self, hosts: Any, cache: AddressCache, vendor_lookup=None):
        parsed = parse_hosts(hosts)
        if vendor_lookup is not None:
            parsed = {identifier: self._with_vendor(identifier, attributes, vendor_lookup)
                      for identifier, attributes in parsed.items()}
        self._hosts = MappingProxyType(parsed)
        self.cache = cache
        logger.info(f"Loaded {len(self._hosts)} known hosts")

    @staticmethod
    def _with_vendor(identifier: str, attributes: HostAttributes, vendor_lookup) -> HostAttributes:
        if attributes.vendor:
            return attributes
        try:
            vendor = vendor_lookup.lookup(identifier)
        except Exception as e:  # pylint: disable=broad-except
            logger.debug(f"Could not determine vendor for MAC {identifier}: {e}")
            return attributes
        return HostAttributes(attributes.name, attributes.hostname, vendor, attributes.extra)

    def load_all(self) -> Mapping:
        """Returns the read-only identifier -> HostAttributes mapping."""
        return self._hosts

    def known_identifiers(self) -> List[str]:
        return list(self._hosts)

    def resolve_identifier(self, raw: str) -> Optional[str]:
        return match_identifier(raw, self._hosts)

    def _record(self, identifier: str) -> HostRecord:
        return HostRecord(identifier, self.cache.get(identifier), self._hosts[identifier])

    def find(self, raw: str) -> Optional[HostRecord]:
        """Returns the host matching raw, with its current address, or None."""
        identifier = self.resolve_identifier(raw)
        if identifier is None:
            return None
        return self._record(identifier)

    def create(self, host_info: HostRecord) -> HostRecord:
        """Records the address of a known host. Same as update()."""
        return self.update(host_info)

    def update(self, host_info: HostRecord) -> HostRecord:
        identifier = self.resolve_identifier(host_info.identifier)
        if identifier is None:
            raise UnknownHostError("Host not found!", host_info.identifier)
        self.cache.set(identifier, host_info.address)
        logger.info(f"Address of {identifier} set to {host_info.address}")
        return HostRecord(identifier, host_info.address, self._hosts[identifier])

    def delete(self, raw: str) -> str:
        """Forgets the address of a known host. Returns the canonical identifier."""
        identifier = self.resolve_identifier(raw)
        if identifier is None:
            raise UnknownHostError("Host not found!", raw)
        self.cache.delete(identifier)
        logger.info(f"Address of {identifier} deleted")
        return identifier

    def all_records(self) -> List[HostRecord]:
        return [self._record(identifier) for identifier in self._hosts]
