import asyncio
import logging
from typing import Any, Dict, List, Optional

import aiohttp
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.exceptions import Web3Exception

from config import Settings, settings as default_settings
from dexterity.errors import NodeQueryError
from .artifact import find_event_abi, load_abi
from .manifest import DeploymentManifest

logger = logging.getLogger(__name__)

NODE_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError, OSError, Web3Exception)


class DexterityClient:
    """Read-only handle on the deployed Dexterity contract"""

    def __init__(
        self,
        w3: AsyncWeb3,
        address: str,
        abi: List[Dict[str, Any]],
        endpoint: Optional[str] = None
    ):
        self.w3 = w3
        self.address = AsyncWeb3.to_checksum_address(address)
        self.abi = abi
        self.endpoint = endpoint
        self.contract = w3.eth.contract(address=self.address, abi=abi)

    def event_abi(self, event_name: str) -> Dict[str, Any]:
        """ABI entry for event_name; ArtifactError if the contract has none"""
        return find_event_abi(self.abi, event_name)

    async def get_logs(
        self,
        event_name: str,
        argument_filters: Optional[Dict[str, Any]] = None
    ) -> List[Any]:
        """Fetch every log of event_name over the whole chain history"""

        # Raises ArtifactError for unknown events before touching the node
        self.event_abi(event_name)
        event = self.contract.events[event_name]()

        try:
            logs = await event.get_logs(
                argument_filters=argument_filters,
                from_block=0,
                to_block="latest"
            )
        except NODE_ERRORS as e:
            logger.error(f"Log query for {event_name} failed: {e}")
            raise NodeQueryError(f"Log query for {event_name} failed: {e}") from e

        logger.debug(f"Fetched {len(logs)} {event_name} logs")
        return list(logs)

    async def is_connected(self) -> bool:
        try:
            return await self.w3.is_connected()
        except NODE_ERRORS:
            return False


def bind_dexterity(
    settings: Optional[Settings] = None,
    manifest: Optional[DeploymentManifest] = None
) -> DexterityClient:
    """Build the contract client from the manifest, artifact and node URL.

    Missing manifest entries or a broken artifact raise and abort startup.
    """

    settings = settings or default_settings
    manifest = manifest or DeploymentManifest.from_file(settings.DEPLOYMENT_MANIFEST_PATH)

    address = manifest.contract_address(settings.CONTRACT_NAME)
    abi = load_abi(settings.CONTRACT_ARTIFACT_PATH)

    w3 = AsyncWeb3(AsyncHTTPProvider(settings.RPC_URL))
    client = DexterityClient(w3, address, abi, endpoint=settings.RPC_URL)

    logger.info(f"Bound {settings.CONTRACT_NAME} at {client.address} via {settings.RPC_URL}")
    return client
