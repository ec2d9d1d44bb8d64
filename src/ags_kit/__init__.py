# Buffers
from .buffers import CursorPosition, InMemoryBuffer, TextBuffer, TextEdit

# Cache
from .cache import DocumentCache, DocumentStore

# Config
from .config import AgsConfig

# Dictionary
from .dictionary import Dictionary, DictionaryLoader, HeadingDetail

# Position index
from .index import column_at_position, field_content_span, find_group_for_line

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Parsing
from .parsers import (
    AgsParser,
    CellAddress,
    Group,
    ParsedDocument,
    RowKind,
    extract_quoted_fields,
    parse_lines,
)

# Summary
from .summary import Summary, generate_summary, render_summary_markdown

# Table view
from .table import TableSyncEngine, TableView, parse_view_message

# Workspace
from .workspace import AgsWorkspace

__all__ = [
    # Buffers
    "CursorPosition",
    "InMemoryBuffer",
    "TextBuffer",
    "TextEdit",
    # Cache
    "DocumentCache",
    "DocumentStore",
    # Config
    "AgsConfig",
    # Dictionary
    "Dictionary",
    "DictionaryLoader",
    "HeadingDetail",
    # Position index
    "column_at_position",
    "field_content_span",
    "find_group_for_line",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsing
    "AgsParser",
    "CellAddress",
    "Group",
    "ParsedDocument",
    "RowKind",
    "extract_quoted_fields",
    "parse_lines",
    # Summary
    "Summary",
    "generate_summary",
    "render_summary_markdown",
    # Table view
    "TableSyncEngine",
    "TableView",
    "parse_view_message",
    # Workspace
    "AgsWorkspace",
]
