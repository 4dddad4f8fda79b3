"""Dexterity read routes"""

from fastapi import APIRouter, Depends
from typing import List, Optional
import logging

from dexterity.contracts import DexterityClient
from dexterity.data import TokenEntry
from dexterity.services import DexterityService
from .dependencies import get_dexterity_client, get_dexterity_service

logger = logging.getLogger(__name__)

router = APIRouter()

BACKEND_NAME = "Dexterity backend"

ROUTES = [
    {"path": "/", "description": "return backend title"},
    {"path": "/tokens", "description": "return existing tokens in dexterity"},
    {"path": "/tokens/details", "description": "return token addresses with their deployment names"},
    {"path": "/swaps", "description": "return swap count that have been executed in dexterity"},
    {"path": "/traders", "description": "return users of the protocol"},
    {"path": "/holders", "description": "return depositors of the protocol"},
    {"path": "/health", "description": "return node and contract binding status"},
]


@router.get("/")
async def root():
    """Static capability listing"""
    return {"name": BACKEND_NAME, "routes": ROUTES}


@router.get("/tokens", response_model=List[Optional[str]])
async def get_tokens(service: DexterityService = Depends(get_dexterity_service)):
    """Deployment names of every token seen in PoolCreated events"""
    return await service.list_token_names()


@router.get("/tokens/details", response_model=List[TokenEntry])
async def get_token_details(service: DexterityService = Depends(get_dexterity_service)):
    return await service.list_tokens()


@router.get("/swaps", response_model=int)
async def get_swaps(service: DexterityService = Depends(get_dexterity_service)):
    """Number of Swapped events"""
    return await service.count_swaps()


@router.get("/traders", response_model=List[str])
async def get_traders(service: DexterityService = Depends(get_dexterity_service)):
    return await service.list_traders()


@router.get("/holders", response_model=List[str])
async def get_holders(service: DexterityService = Depends(get_dexterity_service)):
    return await service.list_holders()


@router.get("/health")
async def health_check(client: DexterityClient = Depends(get_dexterity_client)):
    """Health check endpoint"""

    node_connected = await client.is_connected()

    return {
        "status": "healthy" if node_connected else "degraded",
        "node": "connected" if node_connected else "disconnected",
        "contract": client.address,
    }
