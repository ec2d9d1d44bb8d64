# src/ags_kit/table/render.py

from ags_kit.dictionary.descriptions import USER_DEFINED_GROUP
from ags_kit.dictionary.models import Dictionary
from ags_kit.parsers.models import Group, ParsedDocument, RowKind

from .payload import HeadingColumn, RenderedRow, TablePayload


def render_group(
    parsed: ParsedDocument, group: Group, dictionary: Dictionary | None = None
) -> TablePayload:
    """Grid for one group: headings, then units and types if present, then data.

    Every row is padded or cut to the number of headings.
    """
    dictionary = dictionary or Dictionary()
    width = len(group.headings)

    rows = [RenderedRow(RowKind.HEADING, 0, list(group.headings))]
    if group.units:
        rows.append(RenderedRow(RowKind.UNIT, 0, _align(group.units, width)))
    if group.types:
        rows.append(RenderedRow(RowKind.TYPE, 0, _align(group.types, width)))
    for index, record in enumerate(group.data_rows):
        rows.append(RenderedRow(RowKind.DATA, index, _align(record, width)))

    return TablePayload(
        group_name=group.name,
        group_names=list(parsed.groups),
        description=dictionary.group_description(group.name) or USER_DEFINED_GROUP,
        record_count=group.record_count,
        headings=[
            HeadingColumn(
                index=i,
                name=heading,
                description=dictionary.heading_description(heading),
            )
            for i, heading in enumerate(group.headings)
        ],
        rows=rows,
    )


def _align(values: list[str], width: int) -> list[str]:
    return [values[i] if i < len(values) else "" for i in range(width)]
