from typing import Optional

from pydantic import BaseModel


class EventRecord(BaseModel):
    """Log envelope shared by every decoded Dexterity event"""

    block_number: Optional[int] = None
    transaction_hash: Optional[str] = None
    log_index: Optional[int] = None


class PoolCreatedEvent(EventRecord):
    token0: str
    token1: str


class SwappedEvent(EventRecord):
    trader: str


class DepositedEvent(EventRecord):
    depositor: str


class TokenEntry(BaseModel):
    address: str
    name: Optional[str] = None
