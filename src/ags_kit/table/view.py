from typing import Protocol

from .payload import EmptyTable, Highlight, TablePayload


class TableView(Protocol):
    """Receiving end of the table engine: the host's grid widget."""

    def show(self, payload: TablePayload | EmptyTable) -> None: ...

    def highlight(self, highlight: Highlight) -> None: ...


class NoOpTableView:
    def show(self, payload: TablePayload | EmptyTable) -> None:
        pass

    def highlight(self, highlight: Highlight) -> None:
        pass
