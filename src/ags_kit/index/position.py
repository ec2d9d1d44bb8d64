# src/ags_kit/index/position.py

"""Pure queries mapping (line, character) coordinates onto a parsed document.

Nothing here is cached: every call recomputes from its arguments, so a query
can never observe a stale index after an edit.
"""

from ags_kit.parsers.models import Group, ParsedDocument


def column_at_position(line: str, character: int) -> int:
    """Column under `character` on `line`.

    Counts commas outside quoted spans before the offset. Column 0 is the
    row-type field; column k (k >= 1) is heading k - 1.
    """
    column = 0
    in_quotes = False

    for char in line[: max(character, 0)]:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            column += 1

    return column


def find_group_for_line(parsed: ParsedDocument, line_number: int) -> Group | None:
    """Group whose declaration line is the greatest one <= `line_number`.

    Relies on groups being contiguous, non-overlapping line ranges; the next
    group's start line is not checked.
    """
    found: Group | None = None

    for group in parsed.groups.values():
        if group.start_line <= line_number:
            if found is None or group.start_line > found.start_line:
                found = group

    return found


def field_content_span(line: str, field_index: int) -> tuple[int, int] | None:
    """Character span of the content of the `field_index`-th quoted field.

    The span excludes the quote characters. An unterminated final field
    extends to the end of the line. Returns None if the line has fewer fields.
    """
    if field_index < 0:
        return None

    current = 0
    i = 0
    length = len(line)

    while i < length:
        if line[i] != '"':
            i += 1
            continue

        content_start = i + 1
        closing = line.find('"', content_start)
        content_end = length if closing < 0 else closing

        if current == field_index:
            return content_start, content_end

        current += 1
        i = content_end + 1

    return None
