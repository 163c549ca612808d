"""Raw failures raised by a command channel."""

from typing import Any

from browsernode.channel.views import CommandRequest, FailureKind


class CommandFailure(Exception):
    """Exception raised when the browser-control process reports a failed command.

    The channel does not interpret the failure: ``name`` is the raw failure-kind
    string, ``kind`` its closed classification and ``response`` the opaque
    diagnostic payload.
    """

    def __init__(
        self,
        name: str,
        response: Any = None,
        request: CommandRequest | None = None,
    ):
        self.name = name
        self.kind = FailureKind.from_name(name)
        self.response = response
        self.request = request
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.request is not None:
            return f'{self.name} during {self.request}: {self.response!r}'
        return f'{self.name}: {self.response!r}'
