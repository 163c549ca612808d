"""browsernode - remote element proxies for out-of-process browser engines."""

__version__ = "0.1.0"

from browsernode.actor import (
    ElementEnvelope,
    ElementHandle,
    ElementReference,
    InvalidSelector,
    MouseEventFailed,
    NodeError,
    ObsoleteNode,
    UnselectNotAllowed,
)
from browsernode.channel import (
    CDPCommandChannel,
    CommandChannel,
    CommandFailure,
    CommandName,
    CommandRequest,
    FailureKind,
)
from browsernode.config import CONFIG
from browsernode.logging_config import setup_logging

__all__ = [
    # Version
    "__version__",
    # Element proxy
    "ElementHandle",
    "ElementReference",
    "ElementEnvelope",
    # Errors
    "NodeError",
    "ObsoleteNode",
    "MouseEventFailed",
    "InvalidSelector",
    "UnselectNotAllowed",
    # Channel
    "CommandChannel",
    "CDPCommandChannel",
    "CommandFailure",
    "CommandName",
    "CommandRequest",
    "FailureKind",
    # Config / logging
    "CONFIG",
    "setup_logging",
]
