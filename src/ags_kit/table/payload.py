# src/ags_kit/table/payload.py

from dataclasses import dataclass

from ags_kit.parsers.models import RowKind

EMPTY_TABLE_MESSAGE = "No groups found in this AGS file."


@dataclass(frozen=True)
class HeadingColumn:
    index: int
    name: str
    description: str = ""


@dataclass(frozen=True)
class RenderedRow:
    """One grid row, addressed the same way as a CellAddress."""

    row_kind: RowKind
    row_index: int
    cells: list[str]

    @property
    def editable(self) -> bool:
        return self.row_kind is not RowKind.HEADING


@dataclass(frozen=True)
class TablePayload:
    group_name: str
    group_names: list[str]
    description: str
    record_count: int
    headings: list[HeadingColumn]
    rows: list[RenderedRow]

    @property
    def column_count(self) -> int:
        return len(self.headings)


@dataclass(frozen=True)
class EmptyTable:
    message: str = EMPTY_TABLE_MESSAGE


@dataclass(frozen=True)
class Highlight:
    """Row to highlight in the view; columns are not tracked."""

    row_kind: RowKind
    row_index: int
