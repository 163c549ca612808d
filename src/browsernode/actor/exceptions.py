"""Typed errors raised by element proxies."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from browsernode.actor.element import ElementHandle


class NodeError(Exception):
    """Base exception for failures tied to a specific remote element."""

    def __init__(self, node: 'ElementHandle', response: Any = None, message: str | None = None):
        self.node = node
        self.response = response
        self.message = message or f'Command on {node!r} failed: {response!r}'
        super().__init__(self.message)


class ObsoleteNode(NodeError):
    """The remote element is no longer part of its document."""

    def __init__(self, node: 'ElementHandle', response: Any = None):
        super().__init__(
            node,
            response,
            'The element you are trying to interact with is either not part of the DOM, or is '
            'not currently visible on the page (perhaps display: none is set). '
            "It is possible the element has been replaced by another element and you meant to interact with "
            "the new element. If so you need to do a new find in order to get a reference to the "
            'new element.',
        )


class MouseEventFailed(NodeError):
    """A pointer interaction could not be delivered to the element.

    The payload usually looks like
    ``{"args": ["click", {"selector": "...", "position": {"x": 1, "y": 2}}]}``;
    the accessors return ``None`` when a payload carries less.
    """

    def __init__(self, node: 'ElementHandle', response: Any = None):
        self.node = node
        self.response = response
        super().__init__(node, response, self._build_message())

    def _details(self) -> dict:
        args = self._args()
        if len(args) > 1 and isinstance(args[1], dict):
            return args[1]
        return {}

    def _args(self) -> list:
        if isinstance(self.response, dict) and isinstance(self.response.get('args'), list):
            return self.response['args']
        return []

    @property
    def event_name(self) -> str | None:
        args = self._args()
        return args[0] if args else None

    @property
    def selector(self) -> str | None:
        return self._details().get('selector')

    @property
    def position(self) -> tuple[float, float] | None:
        position = self._details().get('position')
        if isinstance(position, dict) and 'x' in position and 'y' in position:
            return (position['x'], position['y'])
        return None

    def _build_message(self) -> str:
        event_name = self.event_name or 'mouse event'
        if self.position is None:
            return f'Firing a {event_name} on {self.node!r} failed: {self.response!r}'
        x, y = self.position
        return (
            f'Firing a {event_name} at co-ordinates [{x}, {y}] failed. Another element with CSS '
            f"selector '{self.selector}' was detected at this position. It may be overlapping "
            'the element you are trying to interact with.'
        )


class InvalidSelector(Exception):
    """The browser-control process rejected a selector as malformed."""

    def __init__(self, method: str, selector: str, response: Any = None):
        self.method = method
        self.selector = selector
        self.response = response
        super().__init__(f"The browser raised a syntax error while trying to evaluate {method} selector '{selector}'")


class UnselectNotAllowed(Exception):
    """Raised when deselecting an option from a control that does not allow it."""
