# src/ags_kit/table/engine.py

import logging
from dataclasses import dataclass, field

from ags_kit.buffers.base import TextBuffer
from ags_kit.buffers.types import TextEdit
from ags_kit.cache.document_store import DocumentStore
from ags_kit.dictionary.models import Dictionary
from ags_kit.index.position import field_content_span, find_group_for_line
from ags_kit.observability import names
from ags_kit.observability.base import MetricsHook, NoOpMetricsHook
from ags_kit.parsers.fields import classify_line
from ags_kit.parsers.models import Group, RowKind

from .messages import CellEditMessage, NavigateMessage, SelectGroupMessage, ViewMessage
from .payload import EmptyTable, Highlight, TablePayload
from .render import render_group
from .view import NoOpTableView, TableView

logger = logging.getLogger(__name__)

DEFAULT_RESCAN_SLACK = 10


@dataclass
class _GroupRows:
    """Physical lines of one group's rows, found by re-scanning the buffer."""

    heading: int | None = None
    unit: int | None = None
    type: int | None = None
    data: list[int] = field(default_factory=list)

    def line_for(self, row_kind: RowKind, row_index: int) -> int | None:
        if row_kind is RowKind.HEADING:
            return self.heading
        if row_kind is RowKind.UNIT:
            return self.unit
        if row_kind is RowKind.TYPE:
            return self.type
        if row_kind is RowKind.DATA and 0 <= row_index < len(self.data):
            return self.data[row_index]
        return None


class TableSyncEngine:
    """Keeps a table view of one group and the source buffer consistent.

    Bound to at most one buffer at a time. Edits from the view become text
    replacements on the buffer; cursor moves in the buffer become group
    switches and row highlights in the view.

    Addressing misses (unknown group, row outside the re-scan window) are
    silent no-ops.
    """

    def __init__(
        self,
        store: DocumentStore,
        *,
        view: TableView = NoOpTableView(),
        dictionary: Dictionary | None = None,
        rescan_slack: int = DEFAULT_RESCAN_SLACK,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.store = store
        self.view = view
        self.dictionary = dictionary or Dictionary()
        self.rescan_slack = rescan_slack
        self.metrics_hook = metrics_hook
        self.buffer: TextBuffer | None = None
        self.active_group: str | None = None

    @property
    def is_open(self) -> bool:
        return self.buffer is not None

    def is_bound_to(self, buffer: TextBuffer) -> bool:
        return self.buffer is not None and self.buffer.buffer_id == buffer.buffer_id

    # -- lifecycle ------------------------------------------------------------

    def open(self, buffer: TextBuffer) -> TablePayload | EmptyTable:
        if not self.is_bound_to(buffer):
            self.active_group = None
        self.buffer = buffer

        if self.active_group is None:
            parsed = self.store.get(buffer)
            group = find_group_for_line(parsed, buffer.cursor().line)
            if group is None:
                group = parsed.first_group()
            self.active_group = group.name if group else None

        logger.info(
            "Table view bound to %s (group=%s)", buffer.buffer_id, self.active_group
        )
        return self.render()

    def close(self) -> None:
        if self.buffer is not None:
            logger.info("Table view unbound from %s", self.buffer.buffer_id)
        self.buffer = None

    def toggle(self, buffer: TextBuffer) -> TablePayload | EmptyTable | None:
        if self.is_open:
            self.close()
            return None
        return self.open(buffer)

    def update_for_document_change(self) -> TablePayload | EmptyTable | None:
        if self.buffer is None:
            return None
        return self.render()

    # -- rendering ------------------------------------------------------------

    def render(self) -> TablePayload | EmptyTable:
        if self.buffer is None:
            raise RuntimeError("Table view is not bound to a buffer")

        parsed = self.store.get(self.buffer)
        if self.active_group not in parsed.groups:
            first = parsed.first_group()
            self.active_group = first.name if first else None

        payload: TablePayload | EmptyTable
        if self.active_group is None:
            payload = EmptyTable()
        else:
            group = parsed.groups[self.active_group]
            payload = render_group(parsed, group, self.dictionary)

        self.view.show(payload)
        self.metrics_hook.increment(names.TABLE_RENDERS_TOTAL)
        return payload

    def select_group(self, name: str) -> TablePayload | EmptyTable | None:
        """Switch the displayed group. Unknown names keep the current one."""
        if self.buffer is None:
            return None
        if name not in self.store.get(self.buffer).groups:
            logger.debug("Ignoring selection of unknown group %s", name)
            return None
        self.active_group = name
        return self.render()

    # -- buffer -> view -------------------------------------------------------

    def sync_from_cursor(
        self, buffer: TextBuffer, line: int | None = None
    ) -> Highlight | None:
        if not self.is_bound_to(buffer):
            return None

        line = buffer.cursor().line if line is None else line
        group = find_group_for_line(self.store.get(buffer), line)
        if group is None:
            return None

        if group.name != self.active_group:
            self.active_group = group.name
            self.render()

        row_kind = classify_line(buffer.line_at(line))
        if row_kind is None or row_kind is RowKind.GROUP:
            return None

        if row_kind is RowKind.DATA:
            rows = self._scan_rows(buffer, group)
            if line not in rows.data:
                return None
            # Ordinal among the re-scanned DATA lines, as edit_cell addresses rows
            highlight = Highlight(row_kind, rows.data.index(line))
        else:
            highlight = Highlight(row_kind, 0)

        self.view.highlight(highlight)
        return highlight

    # -- view -> buffer -------------------------------------------------------

    def handle_message(self, message: ViewMessage) -> None:
        if isinstance(message, CellEditMessage):
            address = message.address
            self.edit_cell(
                address.row_kind, address.row_index, address.column_index, message.new_value
            )
        elif isinstance(message, NavigateMessage):
            self.navigate(message.address.row_kind, message.address.row_index)
        elif isinstance(message, SelectGroupMessage):
            self.select_group(message.group_name)

    def edit_cell(
        self, row_kind: RowKind, row_index: int, column_index: int, new_value: str
    ) -> TextEdit | None:
        """Replace the quoted content of one cell in the buffer.

        Returns the applied edit, or None when the cell cannot be resolved or
        the buffer rejects the edit. The value is written verbatim.
        """
        resolved = self._resolve_line(row_kind, row_index)
        if resolved is None:
            return None
        buffer, line = resolved

        span = field_content_span(buffer.line_at(line), column_index + 1)
        if span is None:
            logger.debug("Line %d has no column %d", line, column_index)
            self.metrics_hook.increment(names.TABLE_EDITS_DROPPED_TOTAL)
            return None

        edit = TextEdit(
            line=line, start_character=span[0], end_character=span[1], new_text=new_value
        )
        if not buffer.apply_edit(edit):
            logger.warning("Buffer %s rejected edit on line %d", buffer.buffer_id, line)
            self.metrics_hook.increment(names.TABLE_EDITS_DROPPED_TOTAL)
            return None

        self.metrics_hook.increment(
            names.TABLE_EDITS_TOTAL, labels={"row_kind": row_kind.value}
        )
        logger.debug(
            "Edited %s[%d] column %d on line %d",
            row_kind.value,
            row_index,
            column_index,
            line,
        )

        self.store.parse(buffer)
        self.render()
        return edit

    def navigate(self, row_kind: RowKind, row_index: int = 0) -> int | None:
        """Move the buffer cursor to the start of a row's line."""
        resolved = self._resolve_line(row_kind, row_index)
        if resolved is None:
            return None
        buffer, line = resolved

        buffer.move_cursor(line, 0)
        self.metrics_hook.increment(names.TABLE_NAVIGATIONS_TOTAL)
        return line

    def resolve_line(self, row_kind: RowKind, row_index: int = 0) -> int | None:
        """Physical line of a row in the active group, or None."""
        resolved = self._resolve_line(row_kind, row_index)
        return resolved[1] if resolved else None

    def _resolve_line(
        self, row_kind: RowKind, row_index: int
    ) -> tuple[TextBuffer, int] | None:
        buffer = self.buffer
        if buffer is None or self.active_group is None:
            self.metrics_hook.increment(names.TABLE_EDITS_DROPPED_TOTAL)
            return None

        group = self.store.get(buffer).groups.get(self.active_group)
        if group is None:
            self.metrics_hook.increment(names.TABLE_EDITS_DROPPED_TOTAL)
            return None

        line = self._scan_rows(buffer, group).line_for(row_kind, row_index)
        if line is None:
            logger.debug(
                "No line for %s[%d] in group %s", row_kind.value, row_index, group.name
            )
            self.metrics_hook.increment(names.TABLE_EDITS_DROPPED_TOTAL)
            return None
        return buffer, line

    def _scan_rows(self, buffer: TextBuffer, group: Group) -> _GroupRows:
        """Re-scan forward from the group's declaration.

        The window is the group's record count plus a fixed slack, so blank
        or irregular lines are tolerated; a new group declaration ends it.
        """
        rows = _GroupRows()
        window = group.record_count + self.rescan_slack
        end = min(buffer.line_count(), group.start_line + window)

        for line in range(group.start_line, end):
            row_kind = classify_line(buffer.line_at(line))
            if row_kind is RowKind.GROUP:
                if line > group.start_line:
                    break
            elif row_kind is RowKind.HEADING and rows.heading is None:
                rows.heading = line
            elif row_kind is RowKind.UNIT and rows.unit is None:
                rows.unit = line
            elif row_kind is RowKind.TYPE and rows.type is None:
                rows.type = line
            elif row_kind is RowKind.DATA:
                rows.data.append(line)

        return rows
