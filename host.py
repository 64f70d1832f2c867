# host.py
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class HostAttributes:
    """Static attributes of a known host, as configured."""
    name: Optional[str] = None
    hostname: Optional[str] = None
    vendor: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)  # passed through unchanged


@dataclass
class HostRecord:
    identifier: str  # canonical MAC address, as stored in the directory
    address: Optional[str] = None  # last reported IP, None when absent or expired
    attributes: HostAttributes = field(default_factory=HostAttributes)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = dict(self.attributes.extra)
        for key in ("name", "hostname", "vendor"):
            value = getattr(self.attributes, key)
            if value is not None:
                data[key] = value
        data["identifier"] = self.identifier
        data["address"] = self.address
        return data
