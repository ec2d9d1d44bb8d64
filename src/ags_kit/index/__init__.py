from .position import column_at_position, field_content_span, find_group_for_line

__all__ = [
    "column_at_position",
    "field_content_span",
    "find_group_for_line",
]
