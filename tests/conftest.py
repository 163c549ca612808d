"""Pytest configuration and fixtures for the browsernode test suite.

Configuration:
    - Adds src/ directory to Python path for test imports
    - Async tests are marked with ``@pytest.mark.asyncio`` (pytest-asyncio)

Shared Fakes:
    FakeChannel is a scripted stand-in for the browser-control process. Each
    command name maps to a canned result, a callable computing one from the
    call arguments, or an exception to raise. Every invocation is recorded so
    tests can assert on the exact commands sent and their order.
"""

import sys
from pathlib import Path
from typing import Any

import pytest

src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from browsernode.actor.element import ElementHandle  # noqa: E402
from browsernode.channel.exceptions import CommandFailure  # noqa: E402
from browsernode.channel.views import CommandName  # noqa: E402


class FakeChannel:
    """Scripted command channel that records every call."""

    def __init__(self, responses: dict[str, Any] | None = None):
        self.responses: dict[str, Any] = dict(responses or {})
        self.calls: list[tuple] = []

    def respond(self, name: str, result: Any) -> None:
        self.responses[name] = result

    def fail(self, name: str, failure_name: str, response: Any = None) -> None:
        self.responses[name] = CommandFailure(failure_name, response)

    def calls_for(self, name: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == name]

    @property
    def names(self) -> list[str]:
        return [call[0] for call in self.calls]

    async def invoke(self, name, page_id, element_id, *args):
        name = CommandName(name).value
        self.calls.append((name, page_id, element_id, *args))
        result = self.responses.get(name)
        if isinstance(result, BaseException):
            raise result
        if callable(result):
            return result(page_id, element_id, *args)
        return result


@pytest.fixture()
def channel():
    """A fresh scripted channel with no canned responses."""
    return FakeChannel()


@pytest.fixture()
def make_handle(channel):
    """Factory for handles on page 1 bound to the shared fake channel."""

    def factory(element_id=10, page_id=1, legacy_whitespace=False):
        return ElementHandle(channel, page_id, element_id, legacy_whitespace=legacy_whitespace)

    return factory


def scripted_element(channel, tag_name, properties=None, attributes=None):
    """Script tag name, property and attribute lookups for a single element."""
    properties = properties or {}
    attributes = attributes or {}
    channel.respond("tag_name", tag_name)
    channel.respond("property", lambda page_id, element_id, name: properties.get(name))
    channel.respond("attribute", lambda page_id, element_id, name: attributes.get(name))
