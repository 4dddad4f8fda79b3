"""Compiled contract artifact loading"""

import json
from pathlib import Path
from typing import Any, Dict, List, Union

from dexterity.errors import ArtifactError


def load_abi(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """Read the ABI out of a Foundry artifact (or a bare ABI list)"""

    try:
        with open(path, "r") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ArtifactError(f"Cannot read contract artifact {path}: {e}") from e

    abi = data.get("abi") if isinstance(data, dict) else data
    if not isinstance(abi, list) or not all(isinstance(entry, dict) for entry in abi):
        raise ArtifactError(f"Contract artifact {path} has no ABI list")

    return abi


def find_event_abi(abi: List[Dict[str, Any]], event_name: str) -> Dict[str, Any]:
    for entry in abi:
        if entry.get("type") == "event" and entry.get("name") == event_name:
            return entry

    raise ArtifactError(f"Event {event_name} not found in ABI")
