# matcher.py
import re
import logging
from typing import Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

SEPARATORS = ":-"
_HEX_PATTERN = re.compile(r"[0-9a-fA-F]{12}")
_SEPARATOR_PATTERN = re.compile(f"[{re.escape(SEPARATORS)}]")


def strip_identifier(raw: str) -> Optional[str]:
    """Returns the 12 lowercase hex digits of a MAC address, or None.

    Only ':' and '-' are accepted as separators; anything else that is not a
    hex digit makes the input implausible.
    """
    if not isinstance(raw, str):
        return None
    digits = _SEPARATOR_PATTERN.sub("", raw.strip())
    if not _HEX_PATTERN.fullmatch(digits):
        return None
    return digits.lower()


def is_plausible_identifier(raw: str) -> bool:
    return strip_identifier(raw) is not None


def candidate_encodings(raw: str) -> List[str]:
    """Reformats raw input as dash, colon and contiguous hex, in that order."""
    digits = strip_identifier(raw)
    if digits is None:
        return []
    pairs = [digits[i:i + 2] for i in range(0, len(digits), 2)]
    return ["-".join(pairs), ":".join(pairs), "".join(pairs)]


def match_identifier(raw: str, known: Iterable[str]) -> Optional[str]:
    """Resolves raw input to one of the known canonical identifiers.

    Comparison is case-insensitive throughout. The first step that matches
    wins; None means no match, which is not an error.
    """
    known = list(known)
    index: Dict[str, str] = {}
    for key in known:
        index.setdefault(key.lower(), key)

    if not isinstance(raw, str):
        return None

    # 1. Exact match
    if raw.lower() in index:
        return index[raw.lower()]

    # 2-4. Dash, colon, then no separator; keys are reformatted the same
    # way so their stored grouping does not matter
    for step, candidate in enumerate(candidate_encodings(raw)):
        reformatted = {}
        for key in known:
            encodings = candidate_encodings(key)
            if encodings:
                reformatted.setdefault(encodings[step], key)
        if candidate in reformatted:
            return reformatted[candidate]

    # 5. No match
    logger.debug(f"No known identifier matches {raw!r}")
    return None


def find_duplicates(keys: Iterable[str]) -> Dict[str, List[str]]:
    """Groups keys that denote the same hardware address.

    Returns only the groups with more than one member, keyed by hex digits.
    """
    groups: Dict[str, List[str]] = {}
    for key in keys:
        digits = strip_identifier(key)
        if digits is not None:
            groups.setdefault(digits, []).append(key)
    return {digits: members for digits, members in groups.items() if len(members) > 1}
