from ags_kit.index.position import column_at_position, find_group_for_line
from ags_kit.parsers.fields import classify_line
from ags_kit.parsers.models import ParsedDocument

from .hover import CELL_ROWS


def column_status(
    line_text: str, line_number: int, character: int, parsed: ParsedDocument
) -> str | None:
    """Status-bar text naming the column under the cursor.

    Only data, unit and type rows have one; other lines return None.
    """
    if classify_line(line_text) not in CELL_ROWS:
        return None

    column = column_at_position(line_text, character)
    if column == 0:
        return "Row type"

    group = find_group_for_line(parsed, line_number)
    if group is not None and len(group.headings) >= column:
        return f"Col {column}: {group.headings[column - 1]}"
    return f"Col {column}"
