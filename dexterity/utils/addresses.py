"""Address normalization and deduplication"""

from typing import Any, Iterable, List

from eth_utils import is_address

from dexterity.errors import MalformedEventError


def normalize_address(value: Any) -> str:
    """Lowercase hex form used for every address comparison"""

    if isinstance(value, (bytes, bytearray)) and len(value) == 20:
        value = "0x" + bytes(value).hex()

    if not isinstance(value, str) or not is_address(value):
        raise MalformedEventError(f"Not an address: {value!r}")

    return value.lower()


def collect_addresses(records: Iterable[Any], *fields: str) -> List[str]:
    """Flatten the named address fields of every record into a deduplicated list.

    Order is first-seen, but callers should treat the result as a set.
    """

    seen = set()
    addresses = []

    for record in records:
        for field in fields:
            address = normalize_address(getattr(record, field))
            if address not in seen:
                seen.add(address)
                addresses.append(address)

    return addresses
