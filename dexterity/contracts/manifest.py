"""Foundry deployment manifest (broadcast run-latest.json)"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from dexterity.errors import ManifestError

logger = logging.getLogger(__name__)

CREATE_TRANSACTION = "CREATE"


class DeploymentManifest:
    """Maps logical contract names to their deployed addresses"""

    def __init__(self, transactions: List[Dict[str, Any]]):
        self.transactions = transactions

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "DeploymentManifest":
        """Load a broadcast record from disk"""

        try:
            with open(path, "r") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ManifestError(f"Cannot read deployment manifest {path}: {e}") from e

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DeploymentManifest":
        transactions = data.get("transactions") if isinstance(data, dict) else None
        if not isinstance(transactions, list):
            raise ManifestError("Deployment manifest has no transactions list")

        return cls(transactions)

    def contract_address(self, contract_name: str) -> str:
        """Address of the first deployment recorded under contract_name"""

        for tx in self.transactions:
            if tx.get("contractName") == contract_name and tx.get("contractAddress"):
                return tx["contractAddress"]

        raise ManifestError(f"No deployment of {contract_name} in manifest")

    def contract_name(self, address: str) -> Optional[str]:
        """Name of the contract created at address, if the manifest recorded it.

        Only CREATE transactions count. Addresses compare case-insensitively.
        """

        target = address.lower()
        for tx in self.transactions:
            if tx.get("transactionType") != CREATE_TRANSACTION:
                continue
            deployed = tx.get("contractAddress")
            if deployed and deployed.lower() == target:
                return tx.get("contractName")

        return None
