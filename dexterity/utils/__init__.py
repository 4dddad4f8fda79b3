from .addresses import normalize_address, collect_addresses

__all__ = [
    "normalize_address",
    "collect_addresses"
]
