# src/ags_kit/navigation/hover.py

import re
from dataclasses import dataclass, replace
from typing import Literal

from ags_kit.dictionary.descriptions import ROW_TYPE_DESCRIPTIONS, TYPE_DESCRIPTIONS
from ags_kit.dictionary.models import Dictionary
from ags_kit.index.position import column_at_position, find_group_for_line
from ags_kit.parsers.fields import classify_line
from ags_kit.parsers.models import ParsedDocument, RowKind

WORD_RE = re.compile(r"[A-Z0-9_]+", re.IGNORECASE)

# Rows whose cells line up with the group's headings
CELL_ROWS = (RowKind.DATA, RowKind.UNIT, RowKind.TYPE)

HoverKind = Literal["column", "group", "heading", "type", "row"]


@dataclass(frozen=True)
class HoverInfo:
    kind: HoverKind
    code: str
    description: str = ""
    unit: str = ""
    type: str = ""
    example: str = ""
    span: tuple[int, int] | None = None


def word_at(line_text: str, character: int) -> tuple[str, tuple[int, int]] | None:
    """Identifier-like word touching `character`, with its span."""
    for match in WORD_RE.finditer(line_text):
        if match.start() <= character <= match.end():
            return match.group(0), match.span()
    return None


def hover_at(
    line_text: str,
    line_number: int,
    character: int,
    parsed: ParsedDocument,
    dictionary: Dictionary,
) -> HoverInfo | None:
    """Describe what sits under the cursor.

    On a data, unit or type row the column heading wins; otherwise the word
    under the cursor is looked up as a group, heading, data type or row type.
    """
    if classify_line(line_text) in CELL_ROWS:
        column = column_at_position(line_text, character)
        if column > 0:
            group = find_group_for_line(parsed, line_number)
            if group is not None and len(group.headings) >= column:
                return _heading_hover(group.headings[column - 1], dictionary, "column")

    found = word_at(line_text, character)
    if found is None:
        return None
    word, span = found[0].upper(), found[1]

    if dictionary.group_description(word):
        return HoverInfo(
            kind="group",
            code=word,
            description=dictionary.group_description(word),
            span=span,
        )
    if dictionary.heading_description(word):
        return replace(_heading_hover(word, dictionary, "heading"), span=span)
    if word in TYPE_DESCRIPTIONS:
        return HoverInfo(
            kind="type", code=word, description=TYPE_DESCRIPTIONS[word], span=span
        )
    if word in ROW_TYPE_DESCRIPTIONS:
        return HoverInfo(
            kind="row", code=word, description=ROW_TYPE_DESCRIPTIONS[word], span=span
        )
    return None


def _heading_hover(heading: str, dictionary: Dictionary, kind: HoverKind) -> HoverInfo:
    detail = dictionary.heading_detail(heading)
    return HoverInfo(
        kind=kind,
        code=heading,
        description=dictionary.heading_description(heading),
        unit=detail.unit if detail else "",
        type=detail.type if detail else "",
        example=detail.example if detail else "",
    )
