"""Data models for the command channel protocol."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Opaque identifiers handed out by the browser-control process
PageId = int | str
ElementId = int | str


class CommandName(str, Enum):
    """Closed set of operations understood by the browser-control process.

    Values are the exact names sent over the channel.
    """

    PARENTS = 'parents'
    FIND_WITHIN = 'find_within'
    ALL_TEXT = 'all_text'
    VISIBLE_TEXT = 'visible_text'
    PROPERTY = 'property'
    ATTRIBUTE = 'attribute'
    ATTRIBUTES = 'attributes'
    VALUE = 'value'
    SET = 'set'
    SELECT_FILE = 'select_file'
    SELECT = 'select'
    TAG_NAME = 'tag_name'
    VISIBLE = 'visible?'
    CLICKABLE = 'clickable?'
    DISABLED = 'disabled?'
    CLICK = 'click'
    RIGHT_CLICK = 'right_click'
    DOUBLE_CLICK = 'double_click'
    HOVER = 'hover'
    DRAG = 'drag'
    DRAG_BY = 'drag_by'
    TRIGGER = 'trigger'
    SEND_KEYS = 'send_keys'
    EQUALS = 'equals'
    PATH = 'path'
    DELETE_TEXT = 'delete_text'


class FailureKind(str, Enum):
    """Classification of a remote failure.

    Raw failure names may carry a namespace (``BrowserNode.ObsoleteNode``);
    only the last dotted segment is significant.
    """

    OBSOLETE_NODE = 'ObsoleteNode'
    MOUSE_EVENT_FAILED = 'MouseEventFailed'
    INVALID_SELECTOR = 'InvalidSelector'
    JAVASCRIPT_ERROR = 'JavascriptError'
    UNCLASSIFIED = 'Unclassified'

    @classmethod
    def from_name(cls, name: str | None) -> 'FailureKind':
        if not name:
            return cls.UNCLASSIFIED
        short_name = name.rsplit('.', 1)[-1]
        for kind in cls:
            if kind is not cls.UNCLASSIFIED and kind.value == short_name:
                return kind
        return cls.UNCLASSIFIED


class CommandRequest(BaseModel):
    """A single command addressed to a page and, optionally, an element in it."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: CommandName
    page_id: PageId
    element_id: ElementId | None = None
    args: tuple[Any, ...] = Field(default_factory=tuple)

    def __str__(self) -> str:
        target = f'{self.page_id}/{self.element_id}' if self.element_id is not None else f'{self.page_id}'
        return f'{self.name.value}({target}, args={list(self.args)!r})'
