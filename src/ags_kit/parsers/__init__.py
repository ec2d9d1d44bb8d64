from .ags_parser import AgsParser, parse_lines
from .base import DocumentParser
from .fields import classify_line, extract_quoted_fields, match_group_declaration
from .models import CellAddress, Group, ParsedDocument, RowKind

__all__ = [
    # Parser
    "AgsParser",
    "DocumentParser",
    "parse_lines",
    # Line helpers
    "classify_line",
    "extract_quoted_fields",
    "match_group_declaration",
    # Types
    "CellAddress",
    "Group",
    "ParsedDocument",
    "RowKind",
]
