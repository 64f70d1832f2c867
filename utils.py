# utils.py
import ipaddress
from typing import Any

_TRUE_VALUES = {"1", "true", "yes", "on"}


def parse_bool(value: Any, default: bool = False) -> bool:
    """Interprets a boolean-like setting ("true", "1", True, ...)."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


def is_valid_address(address: str) -> bool:
    """Checks if a string is a valid IPv4 or IPv6 address."""
    try:
        ipaddress.ip_address(address)
    except ValueError:
        return False
    return True
