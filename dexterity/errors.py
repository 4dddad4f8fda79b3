"""Error kinds surfaced by the Dexterity backend"""

from enum import Enum


class ErrorKind(str, Enum):
    NODE_UNAVAILABLE = "node_unavailable"
    MALFORMED_EVENT = "malformed_event"
    CONTRACT_CONFIG = "contract_config"
    INTERNAL = "internal_error"


PUBLIC_MESSAGES = {
    ErrorKind.NODE_UNAVAILABLE: "Blockchain node request failed",
    ErrorKind.MALFORMED_EVENT: "Contract returned an event that could not be decoded",
    ErrorKind.CONTRACT_CONFIG: "Contract binding is misconfigured",
    ErrorKind.INTERNAL: "Internal server error",
}


def public_message(kind: ErrorKind) -> str:
    return PUBLIC_MESSAGES.get(kind, PUBLIC_MESSAGES[ErrorKind.INTERNAL])


class DexterityError(Exception):
    """Base error carrying the kind reported to clients"""

    kind = ErrorKind.INTERNAL


class NodeQueryError(DexterityError):
    """The node failed to answer a log query"""

    kind = ErrorKind.NODE_UNAVAILABLE


class MalformedEventError(DexterityError):
    """An event log is missing a field or carries a non-address value"""

    kind = ErrorKind.MALFORMED_EVENT


class ManifestError(DexterityError):
    """Deployment manifest is unreadable or lacks the expected contract"""

    kind = ErrorKind.CONTRACT_CONFIG


class ArtifactError(DexterityError):
    """Compiled contract artifact is unreadable or lacks an event"""

    kind = ErrorKind.CONTRACT_CONFIG
