from __future__ import annotations

import re
from typing import Any, List, Mapping, Optional

from .schemas import Address, Destination

_ADDRESS_PATH = re.compile(r"addresses\.([^.]+)\.")


def get_response(interview: Mapping[str, Any], path: str, default: Any = None) -> Any:
    """
    Look up a dotted path (e.g., ``household.income``) in the interview response.
    """
    value: Any = interview["response"]
    for key in path.split("."):
        if not isinstance(value, Mapping) or key not in value:
            return default
        value = value[key]
    return value


def get_addresses(interview: Mapping[str, Any]) -> List[Address]:
    entries = get_response(interview, "addresses", {}) or {}
    addresses = [Address.from_response(entry) for entry in entries.values()]
    return sorted(addresses, key=lambda address: address.sequence)


def get_destinations(interview: Mapping[str, Any]) -> List[Destination]:
    entries = get_response(interview, "destinations", {}) or {}
    destinations = [Destination.from_response(entry) for entry in entries.values()]
    return sorted(destinations, key=lambda destination: destination.sequence)


def current_address_id(
    interview: Mapping[str, Any], path: Optional[str] = None
) -> Optional[str]:
    if path:
        match = _ADDRESS_PATH.search(path)
        if match:
            return match.group(1)
    # Grouped objects share the active person id slot in the response.
    return get_response(interview, "_activePersonId")
