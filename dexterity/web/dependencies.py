"""Dependency injection for FastAPI"""

from fastapi import Request

from dexterity.contracts import DeploymentManifest, DexterityClient
from dexterity.services import DexterityService

# The lifespan stores the bound client and manifest on app.state


def get_dexterity_client(request: Request) -> DexterityClient:
    """Get the bound contract client"""
    client = getattr(request.app.state, "dexterity_client", None)
    if client is None:
        raise RuntimeError("Dexterity client not initialized")
    return client


def get_manifest(request: Request) -> DeploymentManifest:
    """Get the deployment manifest"""
    manifest = getattr(request.app.state, "manifest", None)
    if manifest is None:
        raise RuntimeError("Deployment manifest not initialized")
    return manifest


def get_dexterity_service(request: Request) -> DexterityService:
    """Get the query service"""
    return DexterityService(get_dexterity_client(request), get_manifest(request))
