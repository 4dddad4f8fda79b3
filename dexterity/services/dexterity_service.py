import logging
from typing import Any, Callable, List, Optional

from dexterity.contracts import DeploymentManifest, DexterityClient
from dexterity.data import (
    DEPOSITED,
    EVENT_DECODERS,
    POOL_CREATED,
    SWAPPED,
    EventDecoder,
    TokenEntry,
)
from dexterity.utils import collect_addresses

logger = logging.getLogger(__name__)


class DexterityService:
    """Answers the backend's read queries from Dexterity event logs"""

    def __init__(self, client: DexterityClient, manifest: DeploymentManifest):
        self.client = client
        self.manifest = manifest

    async def get_events(self, event_name: str) -> List[Any]:
        """Fetch and decode every log of event_name"""

        logs = await self.client.get_logs(event_name)
        decoder = EventDecoder(self.client.event_abi(event_name))
        decode: Callable = EVENT_DECODERS[event_name]

        return [decode(decoder, log) for log in logs]

    async def list_token_addresses(self) -> List[str]:
        events = await self.get_events(POOL_CREATED)
        return collect_addresses(events, "token0", "token1")

    async def list_tokens(self) -> List[TokenEntry]:
        """Every pooled token with the manifest name it was deployed under"""

        tokens = [
            TokenEntry(address=address, name=self.manifest.contract_name(address))
            for address in await self.list_token_addresses()
        ]

        unnamed = sum(1 for token in tokens if token.name is None)
        if unnamed:
            logger.info(f"{unnamed} of {len(tokens)} tokens have no manifest entry")

        return tokens

    async def list_token_names(self) -> List[Optional[str]]:
        """Token names in token order; None where the manifest has no match"""
        return [token.name for token in await self.list_tokens()]

    async def count_swaps(self) -> int:
        logs = await self.client.get_logs(SWAPPED)
        return len(logs)

    async def list_traders(self) -> List[str]:
        events = await self.get_events(SWAPPED)
        return collect_addresses(events, "trader")

    async def list_holders(self) -> List[str]:
        events = await self.get_events(DEPOSITED)
        return collect_addresses(events, "depositor")
