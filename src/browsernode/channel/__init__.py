"""Command channel between element proxies and the browser-control process."""

from browsernode.channel.exceptions import CommandFailure
from browsernode.channel.service import CDPCommandChannel, CommandChannel
from browsernode.channel.views import CommandName, CommandRequest, ElementId, FailureKind, PageId

__all__ = [
    "CDPCommandChannel",
    "CommandChannel",
    "CommandFailure",
    "CommandName",
    "CommandRequest",
    "ElementId",
    "FailureKind",
    "PageId",
]
