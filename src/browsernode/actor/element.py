"""Element proxy for DOM nodes living in an out-of-process browser engine."""

import json
import logging
import os
from collections.abc import Sequence
from typing import Any, Union

from browsernode.actor.exceptions import InvalidSelector, MouseEventFailed, ObsoleteNode, UnselectNotAllowed
from browsernode.actor.text import filter_text, filter_visible_text
from browsernode.actor.views import (
    ElementEnvelope,
    ElementReference,
    FindMethod,
    ModifierType,
    Offset,
    parse_result,
)
from browsernode.channel.exceptions import CommandFailure
from browsernode.channel.service import CommandChannel
from browsernode.channel.views import CommandName, CommandRequest, ElementId, FailureKind, PageId
from browsernode.config import CONFIG

logger = logging.getLogger(__name__)

# Tag/attribute pairs whose property holds the resolved URL
_URL_PROPERTIES = {('img', 'src'), ('a', 'href')}


class ElementHandle:
    """Reference to one DOM element, addressed by page id and element id.

    Every operation is a round trip through the command channel; only the tag
    name is cached. Handles are never torn down explicitly: once the remote
    node is removed from its document, the next command raises ``ObsoleteNode``.

    Example:
        >>> button = ElementHandle(channel, page_id=1, element_id=7)
        >>> await button.tag_name()
        'button'
        >>> await button.click()
    """

    def __init__(
        self,
        channel: CommandChannel,
        page_id: PageId,
        element_id: ElementId,
        legacy_whitespace: bool | None = None,
    ):
        self._channel = channel
        self._page_id = page_id
        self._element_id = element_id
        self._legacy_whitespace = CONFIG.LEGACY_WHITESPACE if legacy_whitespace is None else legacy_whitespace
        self._tag_name: str | None = None

    @classmethod
    def from_reference(
        cls,
        channel: CommandChannel,
        reference: Union[ElementReference, ElementEnvelope, dict],
        legacy_whitespace: bool | None = None,
    ) -> 'ElementHandle':
        """Rebuild a handle from its serialized form."""
        reference = _coerce_reference(reference)
        return cls(channel, reference.page_id, reference.element_id, legacy_whitespace=legacy_whitespace)

    @property
    def page_id(self) -> PageId:
        return self._page_id

    @property
    def element_id(self) -> ElementId:
        return self._element_id

    @property
    def channel(self) -> CommandChannel:
        return self._channel

    @property
    def legacy_whitespace(self) -> bool:
        return self._legacy_whitespace

    def __repr__(self) -> str:
        return f'<ElementHandle page_id={self._page_id!r} element_id={self._element_id!r}>'

    def _spawn(self, element_id: ElementId) -> 'ElementHandle':
        return ElementHandle(self._channel, self._page_id, element_id, legacy_whitespace=self._legacy_whitespace)

    async def _command(self, name: CommandName, *args: Any) -> Any:
        """Run ``name`` against this element and translate remote failures."""
        request = CommandRequest(name=name, page_id=self._page_id, element_id=self._element_id, args=args)
        logger.debug(f'-> {request}')
        try:
            raw = await self._channel.invoke(request.name, request.page_id, request.element_id, *request.args)
        except CommandFailure as failure:
            if failure.kind is FailureKind.OBSOLETE_NODE:
                raise ObsoleteNode(self, failure.response) from failure
            if failure.kind is FailureKind.MOUSE_EVENT_FAILED:
                raise MouseEventFailed(self, failure.response) from failure
            raise
        return parse_result(request.name, raw)

    # Identity & traversal

    async def parents(self) -> list['ElementHandle']:
        """Ancestors in the order the browser reports them."""
        return [self._spawn(parent_id) for parent_id in await self._command(CommandName.PARENTS)]

    async def find(self, method: FindMethod, selector: str) -> list['ElementHandle']:
        """Descendants of this element matching ``selector``."""
        try:
            element_ids = await self._command(CommandName.FIND_WITHIN, method, selector)
        except CommandFailure as failure:
            if failure.kind is FailureKind.INVALID_SELECTOR:
                raise InvalidSelector(method, selector, failure.response) from failure
            raise
        return [self._spawn(element_id) for element_id in element_ids]

    async def find_xpath(self, selector: str) -> list['ElementHandle']:
        return await self.find('xpath', selector)

    async def find_css(self, selector: str) -> list['ElementHandle']:
        return await self.find('css', selector)

    async def equals(self, other: 'ElementHandle') -> bool:
        """Whether ``other`` refers to the same remote node.

        Element ids may be aliases, so identity is always confirmed remotely
        unless the handles live on different pages. A handle always equals
        itself.
        """
        if other is self:
            return True
        if self._page_id != other.page_id:
            return False
        return await self._command(CommandName.EQUALS, other.element_id)

    # Reads

    async def all_text(self) -> str:
        return filter_text(await self._command(CommandName.ALL_TEXT), legacy=self._legacy_whitespace)

    async def visible_text(self) -> str:
        return filter_visible_text(await self._command(CommandName.VISIBLE_TEXT), legacy=self._legacy_whitespace)

    async def attribute(self, name: str) -> str | None:
        return await self._command(CommandName.ATTRIBUTE, name)

    async def property(self, name: str) -> Any:
        return await self._command(CommandName.PROPERTY, name)

    async def get_value(self, name: str) -> Any:
        """Read ``name`` the way a caller indexing the element expects.

        Links and images report the resolved URL from the property, but only
        when the attribute is actually present. Everything else prefers the
        property and falls back to the attribute when the property is missing
        or structured.
        """
        if (await self.tag_name(), name) in _URL_PROPERTIES:
            if await self.attribute(name) is None:
                return None
            return await self.property(name)

        value = await self.property(name)
        if value is None or isinstance(value, (dict, list)):
            value = await self.attribute(name)
        return value

    async def attributes(self) -> dict[str, Any]:
        return await self._command(CommandName.ATTRIBUTES)

    async def value(self) -> Any:
        return await self._command(CommandName.VALUE)

    async def tag_name(self) -> str:
        if self._tag_name is None:
            self._tag_name = (await self._command(CommandName.TAG_NAME)).lower()
        return self._tag_name

    async def visible(self) -> bool:
        return await self._command(CommandName.VISIBLE)

    async def clickable(self) -> bool:
        return await self._command(CommandName.CLICKABLE)

    async def disabled(self) -> bool:
        return await self._command(CommandName.DISABLED)

    async def checked(self) -> Any:
        return await self.get_value('checked')

    async def selected(self) -> bool:
        return bool(await self.get_value('selected'))

    async def path(self) -> str:
        return await self._command(CommandName.PATH)

    # Writes

    async def set_value(self, value: Any, **options: Any) -> None:
        """Set the element's value according to what kind of control it is.

        Args:
            value: New value. Checkboxes take a boolean, file inputs a path or
                a sequence of paths, everything else is sent as a string.
            **options: Not supported; anything passed is logged and ignored.
        """
        if options:
            logger.warning(f'Options passed to ElementHandle.set_value are not supported - ignoring {options!r}')

        tag_name = await self.tag_name()
        if tag_name == 'input':
            input_type = await self.get_value('type')
            if input_type == 'radio':
                await self.click()
            elif input_type == 'checkbox':
                if bool(value) != bool(await self.checked()):
                    await self.click()
            elif input_type == 'file':
                await self._command(CommandName.SELECT_FILE, _file_list(value))
            else:
                await self._command(CommandName.SET, str(value))
        elif tag_name == 'textarea':
            await self._command(CommandName.SET, str(value))
        elif await self.get_value('isContentEditable'):
            await self._command(CommandName.DELETE_TEXT)
            await self.send_keys(str(value))
        else:
            logger.debug(f'set_value ignored for <{tag_name}> element {self!r}')

    async def select_option(self) -> None:
        await self._command(CommandName.SELECT, True)

    async def unselect_option(self) -> None:
        if not await self._command(CommandName.SELECT, False):
            raise UnselectNotAllowed('Cannot unselect option from single select box.')

    async def click(self, keys: list[ModifierType] | None = None, offset: Offset | None = None) -> Any:
        return await self._command(CommandName.CLICK, list(keys or []), dict(offset or {}))

    async def right_click(self, keys: list[ModifierType] | None = None, offset: Offset | None = None) -> Any:
        return await self._command(CommandName.RIGHT_CLICK, list(keys or []), dict(offset or {}))

    async def double_click(self, keys: list[ModifierType] | None = None, offset: Offset | None = None) -> Any:
        return await self._command(CommandName.DOUBLE_CLICK, list(keys or []), dict(offset or {}))

    async def hover(self) -> Any:
        return await self._command(CommandName.HOVER)

    async def drag_to(self, other: Union['ElementHandle', ElementReference, ElementEnvelope, dict]) -> Any:
        """Drag this element onto ``other``, given as a handle or its serialized form."""
        if isinstance(other, ElementHandle):
            target_id = other.element_id
        else:
            target_id = _coerce_reference(other).element_id
        return await self._command(CommandName.DRAG, target_id)

    async def drag_by(self, x: float, y: float) -> Any:
        return await self._command(CommandName.DRAG_BY, x, y)

    async def trigger(self, event: str) -> Any:
        return await self._command(CommandName.TRIGGER, event)

    async def send_keys(self, *keys: Any) -> Any:
        return await self._command(CommandName.SEND_KEYS, list(keys))

    send_key = send_keys

    # Serialization

    def reference(self) -> ElementEnvelope:
        return ElementEnvelope(ELEMENT=ElementReference(page_id=self._page_id, element_id=self._element_id))

    def as_json(self) -> dict[str, Any]:
        """Serialized form used when passing this handle back across the channel."""
        return self.reference().to_wire()

    def to_json(self) -> str:
        return json.dumps(self.as_json())


def _coerce_reference(reference: Union[ElementReference, ElementEnvelope, dict]) -> ElementReference:
    if isinstance(reference, ElementReference):
        return reference
    if isinstance(reference, ElementEnvelope):
        return reference.ELEMENT
    if 'ELEMENT' in reference:
        return ElementEnvelope.model_validate(reference).ELEMENT
    return ElementReference.model_validate(reference)


def _file_list(value: Any) -> list[str]:
    if isinstance(value, (str, bytes, os.PathLike)):
        return [os.fsdecode(value)]
    if isinstance(value, Sequence):
        return [str(path) for path in value]
    return [str(value)]
