"""Typed decoding of raw contract event logs"""

from typing import Any, Dict, List, Mapping, Optional
import logging

from dexterity.errors import MalformedEventError
from dexterity.utils.addresses import normalize_address
from .models import DepositedEvent, PoolCreatedEvent, SwappedEvent

logger = logging.getLogger(__name__)

POOL_CREATED = "PoolCreated"
SWAPPED = "Swapped"
DEPOSITED = "Deposited"


class EventDecoder:
    """Resolve positional event fields through the event's ABI inputs.

    web3 orders decoded args as indexed topics first, so position i is looked
    up by the name of the i-th ABI input rather than by dict order.
    """

    def __init__(self, event_abi: Dict[str, Any]):
        self.event_name = event_abi.get("name")
        self.input_names: List[str] = [i.get("name", "") for i in event_abi.get("inputs", [])]

    def arg_at(self, log: Mapping[str, Any], position: int) -> Any:
        if position >= len(self.input_names):
            raise MalformedEventError(
                f"{self.event_name} has no field at position {position}"
            )

        args = log.get("args")
        if args is None:
            raise MalformedEventError(f"{self.event_name} log carries no args")

        name = self.input_names[position]
        if name not in args or args[name] is None:
            raise MalformedEventError(f"{self.event_name} log is missing {name or position}")

        return args[name]

    def address_at(self, log: Mapping[str, Any], position: int) -> str:
        try:
            return normalize_address(self.arg_at(log, position))
        except MalformedEventError as e:
            logger.warning(f"Malformed {self.event_name} log: {e}")
            raise

    @staticmethod
    def envelope(log: Mapping[str, Any]) -> Dict[str, Any]:
        return {
            "block_number": log.get("blockNumber"),
            "transaction_hash": _as_hex(log.get("transactionHash")),
            "log_index": log.get("logIndex"),
        }


def _as_hex(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    return str(value)


def decode_pool_created(decoder: EventDecoder, log: Mapping[str, Any]) -> PoolCreatedEvent:
    return PoolCreatedEvent(
        token0=decoder.address_at(log, 0),
        token1=decoder.address_at(log, 1),
        **decoder.envelope(log)
    )


def decode_swapped(decoder: EventDecoder, log: Mapping[str, Any]) -> SwappedEvent:
    return SwappedEvent(trader=decoder.address_at(log, 0), **decoder.envelope(log))


def decode_deposited(decoder: EventDecoder, log: Mapping[str, Any]) -> DepositedEvent:
    return DepositedEvent(depositor=decoder.address_at(log, 0), **decoder.envelope(log))


EVENT_DECODERS = {
    POOL_CREATED: decode_pool_created,
    SWAPPED: decode_swapped,
    DEPOSITED: decode_deposited,
}
