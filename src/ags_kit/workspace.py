# src/ags_kit/workspace.py

"""Host-facing facade.

An editor host forwards its events (text changed, cursor moved, buffer
closed, messages from the table view) to one AgsWorkspace and renders
whatever comes back. Everything runs synchronously on the caller's thread.

Example:
    >>> workspace = AgsWorkspace(AgsConfig(dictionary_dir="data"))
    >>> buffer = InMemoryBuffer(text, buffer_id="file:///site.ags")
    >>> workspace.toggle_table(buffer)
    >>> workspace.handle_view_message({"type": "selectGroup", "groupName": "LOCA"})
"""

import logging
from collections.abc import Mapping
from datetime import datetime
from pathlib import PurePosixPath
from typing import Any

from ags_kit.buffers.base import TextBuffer
from ags_kit.cache import DocumentCache, DocumentStore
from ags_kit.config import AgsConfig
from ags_kit.dictionary import Dictionary, DictionaryLoader
from ags_kit.navigation import (
    DocumentSymbol,
    FoldingRange,
    GroupPick,
    HoverInfo,
    column_status,
    document_symbols,
    find_definition,
    folding_ranges,
    group_picks,
    hover_at,
    word_at,
)
from ags_kit.observability.base import MetricsHook, NoOpMetricsHook
from ags_kit.parsers import AgsParser, ParsedDocument
from ags_kit.summary import Summary, generate_summary, render_summary_markdown
from ags_kit.table import (
    EmptyTable,
    NoOpTableView,
    TablePayload,
    TableSyncEngine,
    TableView,
    parse_view_message,
)

logger = logging.getLogger(__name__)


class AgsWorkspace:
    def __init__(
        self,
        config: AgsConfig = AgsConfig(),
        *,
        view: TableView = NoOpTableView(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config
        self.metrics_hook = metrics_hook

        loader = DictionaryLoader(
            config.dictionary_dir,
            fallback_version=config.fallback_dictionary_version,
            user_dictionary_path=config.user_dictionary_path,
            metrics_hook=metrics_hook,
        )
        self.dictionary: Dictionary = loader.load(config.dictionary_version)

        self.cache = DocumentCache(metrics_hook=metrics_hook)
        self.store = DocumentStore(AgsParser(metrics_hook=metrics_hook), self.cache)
        self.table = TableSyncEngine(
            self.store,
            view=view,
            dictionary=self.dictionary,
            rescan_slack=config.rescan_slack,
            metrics_hook=metrics_hook,
        )
        logger.info(
            "Initialized AgsWorkspace with dictionary v%s", config.dictionary_version
        )

    # -- events ---------------------------------------------------------------

    def on_text_changed(self, buffer: TextBuffer) -> ParsedDocument:
        parsed = self.store.parse(buffer)
        if self.table.is_bound_to(buffer):
            self.table.update_for_document_change()
        return parsed

    def on_cursor_moved(self, buffer: TextBuffer) -> str | None:
        """Sync the table with the cursor; returns the column status text."""
        self.table.sync_from_cursor(buffer)

        cursor = buffer.cursor()
        return column_status(
            buffer.line_at(cursor.line),
            cursor.line,
            cursor.character,
            self.store.get(buffer),
        )

    def on_closed(self, buffer: TextBuffer) -> None:
        self.store.close(buffer)
        if self.table.is_bound_to(buffer):
            self.table.close()

    def close(self) -> None:
        self.table.close()
        self.cache.clear()

    # -- table view -----------------------------------------------------------

    def toggle_table(self, buffer: TextBuffer) -> TablePayload | EmptyTable | None:
        return self.table.toggle(buffer)

    def handle_view_message(self, raw: Mapping[str, Any]) -> None:
        self.table.handle_message(parse_view_message(raw))

    # -- reports and navigation -----------------------------------------------

    def summary(self, buffer: TextBuffer) -> Summary:
        return generate_summary(
            self.store.get(buffer),
            dictionary=self.dictionary,
            metrics_hook=self.metrics_hook,
        )

    def summary_report(
        self,
        buffer: TextBuffer,
        *,
        file_name: str | None = None,
        generated_at: datetime | None = None,
    ) -> str:
        parsed = self.store.get(buffer)
        return render_summary_markdown(
            self.summary(buffer),
            file_name=file_name or PurePosixPath(buffer.buffer_id).name or "AGS File",
            version=parsed.version,
            generated_at=generated_at,
            location_matrix_threshold=self.config.location_matrix_threshold,
        )

    def hover(self, buffer: TextBuffer, line: int, character: int) -> HoverInfo | None:
        if not self.config.hover_show_descriptions:
            return None
        return hover_at(
            buffer.line_at(line), line, character, self.store.get(buffer), self.dictionary
        )

    def outline(self, buffer: TextBuffer) -> list[DocumentSymbol]:
        return document_symbols(self.store.get(buffer), self.dictionary)

    def folding(self, buffer: TextBuffer) -> list[FoldingRange]:
        return folding_ranges(buffer.lines(), self.store.get(buffer))

    def definition(self, buffer: TextBuffer, line: int, character: int) -> int | None:
        found = word_at(buffer.line_at(line), character)
        if found is None:
            return None
        return find_definition(self.store.get(buffer), found[0])

    def group_picks(self, buffer: TextBuffer) -> list[GroupPick]:
        return group_picks(self.store.get(buffer), self.dictionary)

    def go_to_group(self, buffer: TextBuffer, name: str) -> int | None:
        group = self.store.get(buffer).groups.get(name)
        if group is None:
            return None
        buffer.move_cursor(group.start_line, 0)
        return group.start_line
