"""Actor module for element-level remote DOM interactions."""

from browsernode.actor.element import ElementHandle
from browsernode.actor.exceptions import (
    InvalidSelector,
    MouseEventFailed,
    NodeError,
    ObsoleteNode,
    UnselectNotAllowed,
)
from browsernode.actor.views import ElementEnvelope, ElementReference

__all__ = [
    "ElementEnvelope",
    "ElementHandle",
    "ElementReference",
    "InvalidSelector",
    "MouseEventFailed",
    "NodeError",
    "ObsoleteNode",
    "UnselectNotAllowed",
]
