# src/ags_kit/table/messages.py

"""Messages sent by the table view. Field aliases match the view's wire names."""

from collections.abc import Mapping
from typing import Any, Literal, Union

from pydantic import BaseModel, Field

from ags_kit.parsers.models import CellAddress, RowKind


class CellEditMessage(BaseModel):
    type: Literal["cellEdit"]
    row_kind: RowKind = Field(alias="rowType")
    row_index: int = Field(default=0, alias="rowIndex")
    column_index: int = Field(alias="colIndex")
    old_value: str = Field(default="", alias="oldValue")
    new_value: str = Field(alias="newValue")

    class Config:
        extra = "forbid"

    @property
    def address(self) -> CellAddress:
        return CellAddress(self.row_kind, self.row_index, self.column_index)


class NavigateMessage(BaseModel):
    type: Literal["navigate"]
    row_kind: RowKind = Field(alias="rowType")
    row_index: int = Field(default=0, alias="rowIndex")

    class Config:
        extra = "forbid"

    @property
    def address(self) -> CellAddress:
        return CellAddress(self.row_kind, self.row_index)


class SelectGroupMessage(BaseModel):
    type: Literal["selectGroup"]
    group_name: str = Field(alias="groupName")

    class Config:
        extra = "forbid"


ViewMessage = Union[CellEditMessage, NavigateMessage, SelectGroupMessage]

_MESSAGE_TYPES: dict[str, type[BaseModel]] = {
    "cellEdit": CellEditMessage,
    "navigate": NavigateMessage,
    "selectGroup": SelectGroupMessage,
}


def parse_view_message(raw: Mapping[str, Any]) -> ViewMessage:
    """Validate a raw view message.

    Raises:
        ValueError: If the message type is unknown.
        pydantic.ValidationError: If the payload does not match its type.
    """
    message_type = raw.get("type")
    model = _MESSAGE_TYPES.get(message_type)  # type: ignore[arg-type]
    if model is None:
        raise ValueError(f"Unknown view message type: {message_type}")
    return model(**raw)  # type: ignore[return-value]
