"""Pytest configuration and fixtures"""

import json
from typing import Dict, List, Optional

import pytest
from eth_utils import to_checksum_address
from web3.datastructures import AttributeDict

from dexterity.contracts import DeploymentManifest, find_event_abi
from dexterity.services import DexterityService


# Anvil default deployment and account addresses
TOKEN_A = "0x5fbdb2315678afecb367f032d93f642f64180aa3"
TOKEN_B = "0xe7f1725e7734ce288f8367e1bb143e90bb3f0512"
DEXTERITY = "0x9fe46736679d2d9a65f0992f2272de9f3c7fa6e0"
TRADER_1 = "0xf39fd6e51aad88f6f4ce6ab8827279cfffb92266"
TRADER_2 = "0x70997970c51812dc3a010c7d01b50e0d17dc79c8"


DEXTERITY_ABI = [
    {
        "type": "event",
        "name": "PoolCreated",
        "anonymous": False,
        "inputs": [
            {"name": "token0", "type": "address", "indexed": True},
            {"name": "token1", "type": "address", "indexed": True},
            {"name": "poolId", "type": "uint256", "indexed": False}
        ]
    },
    {
        "type": "event",
        "name": "Swapped",
        "anonymous": False,
        "inputs": [
            {"name": "trader", "type": "address", "indexed": True},
            {"name": "tokenIn", "type": "address", "indexed": True},
            {"name": "amountIn", "type": "uint256", "indexed": False},
            {"name": "amountOut", "type": "uint256", "indexed": False}
        ]
    },
    {
        "type": "event",
        "name": "Deposited",
        "anonymous": False,
        "inputs": [
            {"name": "depositor", "type": "address", "indexed": True},
            {"name": "poolId", "type": "uint256", "indexed": True},
            {"name": "amount", "type": "uint256", "indexed": False}
        ]
    },
    {
        "type": "function",
        "name": "swap",
        "stateMutability": "nonpayable",
        "inputs": [],
        "outputs": []
    }
]


def make_log(args: Dict, block_number: int = 1, log_index: int = 0) -> AttributeDict:
    """Build a web3-style EventLog"""
    return AttributeDict({
        "args": AttributeDict(args),
        "event": "",
        "logIndex": log_index,
        "transactionIndex": 0,
        "transactionHash": bytes.fromhex("ab" * 32),
        "address": to_checksum_address(DEXTERITY),
        "blockHash": bytes.fromhex("cd" * 32),
        "blockNumber": block_number,
    })


class FakeDexterityClient:
    """Stands in for DexterityClient with canned logs per event"""

    def __init__(self, logs: Optional[Dict[str, List]] = None, error: Optional[Exception] = None):
        self.logs = logs or {}
        self.error = error
        self.abi = DEXTERITY_ABI
        self.address = to_checksum_address(DEXTERITY)
        self.connected = True
        self.calls: List[str] = []

    def event_abi(self, event_name: str) -> Dict:
        return find_event_abi(self.abi, event_name)

    async def get_logs(self, event_name: str, argument_filters=None) -> List:
        self.calls.append(event_name)
        self.event_abi(event_name)
        if self.error is not None:
            raise self.error
        return list(self.logs.get(event_name, []))

    async def is_connected(self) -> bool:
        return self.connected


@pytest.fixture
def manifest_data():
    """Foundry broadcast record with one named token and the Dexterity deployment"""
    return {
        "transactions": [
            {
                "hash": "0x" + "01" * 32,
                "transactionType": "CREATE",
                "contractName": "TokenA",
                "contractAddress": to_checksum_address(TOKEN_A)
            },
            {
                "hash": "0x" + "02" * 32,
                "transactionType": "CALL",
                "contractName": "TokenB",
                "contractAddress": to_checksum_address(TOKEN_B)
            },
            {
                "hash": "0x" + "03" * 32,
                "transactionType": "CREATE",
                "contractName": "Dexterity",
                "contractAddress": to_checksum_address(DEXTERITY)
            }
        ]
    }


@pytest.fixture
def manifest(manifest_data):
    return DeploymentManifest.from_dict(manifest_data)


@pytest.fixture
def manifest_file(tmp_path, manifest_data):
    path = tmp_path / "run-latest.json"
    path.write_text(json.dumps(manifest_data))
    return path


@pytest.fixture
def artifact_file(tmp_path):
    path = tmp_path / "Dexterity.json"
    path.write_text(json.dumps({"abi": DEXTERITY_ABI, "bytecode": {"object": "0x"}}))
    return path


@pytest.fixture
def sample_logs():
    """Pool, swap and deposit logs with repeated and mixed-case addresses"""
    return {
        "PoolCreated": [
            make_log({"token0": to_checksum_address(TOKEN_A), "token1": to_checksum_address(TOKEN_B), "poolId": 0}),
            make_log({"token0": TOKEN_B.upper().replace("0X", "0x"), "token1": TOKEN_A, "poolId": 1}, block_number=2),
        ],
        "Swapped": [
            make_log({"trader": to_checksum_address(TRADER_1), "tokenIn": TOKEN_A, "amountIn": 10, "amountOut": 9}, block_number=3),
            make_log({"trader": TRADER_1, "tokenIn": TOKEN_B, "amountIn": 5, "amountOut": 4}, block_number=4),
            make_log({"trader": to_checksum_address(TRADER_2), "tokenIn": TOKEN_A, "amountIn": 1, "amountOut": 1}, block_number=5),
        ],
        "Deposited": [
            make_log({"depositor": to_checksum_address(TRADER_2), "poolId": 0, "amount": 100}, block_number=2),
            make_log({"depositor": TRADER_2, "poolId": 1, "amount": 50}, block_number=6),
        ],
    }


@pytest.fixture
def fake_client(sample_logs):
    return FakeDexterityClient(sample_logs)


@pytest.fixture
def service(fake_client, manifest):
    return DexterityService(fake_client, manifest)
