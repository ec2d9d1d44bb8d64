from .hover import HoverInfo, hover_at, word_at
from .outline import (
    DocumentSymbol,
    FoldingRange,
    GroupPick,
    document_symbols,
    find_definition,
    folding_ranges,
    group_picks,
)
from .status import column_status

__all__ = [
    # Hover
    "HoverInfo",
    "hover_at",
    "word_at",
    # Status
    "column_status",
    # Outline
    "DocumentSymbol",
    "FoldingRange",
    "GroupPick",
    "document_symbols",
    "find_definition",
    "folding_ranges",
    "group_picks",
]
