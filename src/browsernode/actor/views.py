"""Typed views for element proxy operations."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from typing_extensions import TypedDict

from browsernode.channel.views import CommandName, ElementId, PageId

ModifierType = Literal['Alt', 'Control', 'Meta', 'Shift']
FindMethod = Literal['xpath', 'css']


class Offset(TypedDict, total=False):
    """Click position relative to the element's top-left corner."""
    x: float
    y: float


class ElementReference(BaseModel):
    """Page/element id pair in its wire form (``{"pageId": ..., "id": ...}``)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    page_id: PageId = Field(alias='pageId')
    element_id: ElementId = Field(alias='id')


class ElementEnvelope(BaseModel):
    """Serialized handle: ``{"ELEMENT": {"pageId": ..., "id": ...}}``."""

    model_config = ConfigDict(frozen=True)

    ELEMENT: ElementReference

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


_element_ids = TypeAdapter(list[ElementId])
_boolean = TypeAdapter(bool)
_optional_boolean = TypeAdapter(bool | None)
_string = TypeAdapter(str)
_optional_string = TypeAdapter(str | None)
_mapping = TypeAdapter(dict[str, Any])
_anything = TypeAdapter(Any)

# Expected shape of each command's raw result
COMMAND_RESULTS: dict[CommandName, TypeAdapter] = {
    CommandName.PARENTS: _element_ids,
    CommandName.FIND_WITHIN: _element_ids,
    CommandName.ALL_TEXT: _optional_string,
    CommandName.VISIBLE_TEXT: _optional_string,
    CommandName.PROPERTY: _anything,
    CommandName.ATTRIBUTE: _optional_string,
    CommandName.ATTRIBUTES: _mapping,
    CommandName.VALUE: _anything,
    CommandName.SET: _anything,
    CommandName.SELECT_FILE: _anything,
    CommandName.SELECT: _optional_boolean,
    CommandName.TAG_NAME: _string,
    CommandName.VISIBLE: _boolean,
    CommandName.CLICKABLE: _boolean,
    CommandName.DISABLED: _boolean,
    CommandName.CLICK: _anything,
    CommandName.RIGHT_CLICK: _anything,
    CommandName.DOUBLE_CLICK: _anything,
    CommandName.HOVER: _anything,
    CommandName.DRAG: _anything,
    CommandName.DRAG_BY: _anything,
    CommandName.TRIGGER: _anything,
    CommandName.SEND_KEYS: _anything,
    CommandName.EQUALS: _boolean,
    CommandName.PATH: _string,
    CommandName.DELETE_TEXT: _anything,
}


def parse_result(name: CommandName, raw: Any) -> Any:
    """Validate a raw command result against the shape declared for ``name``."""
    return COMMAND_RESULTS[name].validate_python(raw)
