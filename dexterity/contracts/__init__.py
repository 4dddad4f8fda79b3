from .artifact import load_abi, find_event_abi
from .client import DexterityClient, bind_dexterity
from .manifest import DeploymentManifest

__all__ = [
    "load_abi",
    "find_event_abi",
    "DexterityClient",
    "bind_dexterity",
    "DeploymentManifest"
]
