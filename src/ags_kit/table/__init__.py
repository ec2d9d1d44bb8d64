from .engine import TableSyncEngine
from .messages import (
    CellEditMessage,
    NavigateMessage,
    SelectGroupMessage,
    ViewMessage,
    parse_view_message,
)
from .payload import EmptyTable, HeadingColumn, Highlight, RenderedRow, TablePayload
from .render import render_group
from .view import NoOpTableView, TableView

__all__ = [
    # Engine
    "TableSyncEngine",
    "render_group",
    # View
    "NoOpTableView",
    "TableView",
    # Messages
    "CellEditMessage",
    "NavigateMessage",
    "SelectGroupMessage",
    "ViewMessage",
    "parse_view_message",
    # Payload
    "EmptyTable",
    "HeadingColumn",
    "Highlight",
    "RenderedRow",
    "TablePayload",
]
