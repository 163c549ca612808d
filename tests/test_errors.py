"""Tests for translating remote failures into typed element errors.

Covers the closed FailureKind classification, the typed errors raised by
ElementHandle for obsolete nodes, failed mouse events and malformed selectors,
and the pass-through of failures the proxy does not recognise.
"""

import pytest

from browsernode.actor.exceptions import InvalidSelector, MouseEventFailed, NodeError, ObsoleteNode
from browsernode.channel.exceptions import CommandFailure
from browsernode.channel.views import CommandName, CommandRequest, FailureKind


class TestFailureKind:
    """Tests for FailureKind.from_name()."""

    @pytest.mark.parametrize(
        "raw_name, expected",
        [
            ("BrowserNode.ObsoleteNode", FailureKind.OBSOLETE_NODE),
            ("Poltergeist.MouseEventFailed", FailureKind.MOUSE_EVENT_FAILED),
            ("InvalidSelector", FailureKind.INVALID_SELECTOR),
            ("BrowserNode.JavascriptError", FailureKind.JAVASCRIPT_ERROR),
            ("BrowserNode.StatusFailError", FailureKind.UNCLASSIFIED),
            ("Unclassified", FailureKind.UNCLASSIFIED),
            ("", FailureKind.UNCLASSIFIED),
            (None, FailureKind.UNCLASSIFIED),
        ],
    )
    def test_from_name(self, raw_name, expected):
        assert FailureKind.from_name(raw_name) is expected

    def test_command_failure_keeps_raw_name_and_payload(self):
        request = CommandRequest(name=CommandName.CLICK, page_id=1, element_id=2, args=([], {}))
        failure = CommandFailure("BrowserNode.ObsoleteNode", {"args": []}, request=request)

        assert failure.name == "BrowserNode.ObsoleteNode"
        assert failure.kind is FailureKind.OBSOLETE_NODE
        assert failure.response == {"args": []}
        assert "click(1/2" in str(failure)


class TestErrorTranslation:
    """Tests for how ElementHandle maps channel failures."""

    @pytest.mark.asyncio
    async def test_obsolete_node_from_any_command(self, channel, make_handle):
        channel.fail("visible_text", "BrowserNode.ObsoleteNode", {"args": []})
        handle = make_handle()

        with pytest.raises(ObsoleteNode) as exc_info:
            await handle.visible_text()

        assert exc_info.value.node is handle
        assert exc_info.value.response == {"args": []}
        assert isinstance(exc_info.value, NodeError)
        assert isinstance(exc_info.value.__cause__, CommandFailure)

    @pytest.mark.asyncio
    async def test_obsolete_node_from_find(self, channel, make_handle):
        channel.fail("find_within", "BrowserNode.ObsoleteNode")

        with pytest.raises(ObsoleteNode):
            await make_handle().find("xpath", ".//li")

    @pytest.mark.asyncio
    async def test_mouse_event_failed(self, channel, make_handle):
        payload = {"args": ["click", {"selector": "#overlay", "position": {"x": 10, "y": 20}}]}
        channel.fail("click", "BrowserNode.MouseEventFailed", payload)
        handle = make_handle()

        with pytest.raises(MouseEventFailed) as exc_info:
            await handle.click()

        error = exc_info.value
        assert error.node is handle
        assert error.response == payload
        assert error.event_name == "click"
        assert error.selector == "#overlay"
        assert error.position == (10, 20)
        assert "[10, 20]" in str(error)
        assert "#overlay" in str(error)

    def test_mouse_event_failed_with_opaque_payload(self, make_handle):
        error = MouseEventFailed(make_handle(), "not interactable")

        assert error.event_name is None
        assert error.selector is None
        assert error.position is None
        assert "not interactable" in str(error)

    @pytest.mark.asyncio
    async def test_invalid_selector(self, channel, make_handle):
        channel.fail("find_within", "BrowserNode.InvalidSelector", {"args": ["css", "a[["]})

        with pytest.raises(InvalidSelector) as exc_info:
            await make_handle().find("css", "a[[")

        assert exc_info.value.method == "css"
        assert exc_info.value.selector == "a[["
        assert "a[[" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_unrecognised_failure_is_reraised_unchanged(self, channel, make_handle):
        failure = CommandFailure("BrowserNode.BrandNewFailure", {"detail": "?"})
        channel.respond("hover", failure)

        with pytest.raises(CommandFailure) as exc_info:
            await make_handle().hover()

        assert exc_info.value is failure
        assert exc_info.value.kind is FailureKind.UNCLASSIFIED

    @pytest.mark.asyncio
    async def test_javascript_error_is_reraised_unchanged(self, channel, make_handle):
        channel.fail("value", "BrowserNode.JavascriptError", {"text": "boom"})

        with pytest.raises(CommandFailure) as exc_info:
            await make_handle().value()

        assert exc_info.value.kind is FailureKind.JAVASCRIPT_ERROR

    @pytest.mark.asyncio
    async def test_invalid_selector_outside_find_is_not_wrapped(self, channel, make_handle):
        channel.fail("path", "BrowserNode.InvalidSelector")

        with pytest.raises(CommandFailure):
            await make_handle().path()

    @pytest.mark.asyncio
    async def test_transport_errors_propagate(self, channel, make_handle):
        channel.respond("hover", ConnectionError("socket closed"))

        with pytest.raises(ConnectionError):
            await make_handle().hover()

    @pytest.mark.asyncio
    async def test_malformed_result_is_rejected(self, channel, make_handle):
        from pydantic import ValidationError

        channel.respond("parents", {"not": "a list"})

        with pytest.raises(ValidationError):
            await make_handle().parents()
