from .models import EventRecord, PoolCreatedEvent, SwappedEvent, DepositedEvent, TokenEntry
from .validation import (
    EventDecoder,
    decode_pool_created,
    decode_swapped,
    decode_deposited,
    EVENT_DECODERS,
    POOL_CREATED,
    SWAPPED,
    DEPOSITED
)

__all__ = [
    "EventRecord",
    "PoolCreatedEvent",
    "SwappedEvent",
    "DepositedEvent",
    "TokenEntry",
    "EventDecoder",
    "decode_pool_created",
    "decode_swapped",
    "decode_deposited",
    "EVENT_DECODERS",
    "POOL_CREATED",
    "SWAPPED",
    "DEPOSITED"
]
