# src/ags_kit/parsers/models.py

from dataclasses import dataclass, field
from enum import Enum


class RowKind(str, Enum):
    """Role of a physical line, named after its leading row-type field."""

    GROUP = "GROUP"
    HEADING = "HEADING"
    UNIT = "UNIT"
    TYPE = "TYPE"
    DATA = "DATA"


@dataclass
class Group:
    """One named data section.

    Mutable only while the parser is building it. Once a ParsedDocument is
    handed out, treat its groups as read-only.
    """

    name: str
    start_line: int
    heading_line: int = -1
    headings: list[str] = field(default_factory=list)
    units: list[str] = field(default_factory=list)
    types: list[str] = field(default_factory=list)
    data_rows: list[list[str]] = field(default_factory=list)
    record_count: int = 0
    unit_line: int = -1
    type_line: int = -1
    data_lines: list[int] = field(default_factory=list)

    def heading_index(self, heading: str) -> int:
        """Position of `heading` in this group's headings, or -1."""
        try:
            return self.headings.index(heading)
        except ValueError:
            return -1


@dataclass(frozen=True)
class ParsedDocument:
    # Insertion order is the order of first occurrence in the file.
    groups: dict[str, Group]
    version: str | None = None

    def first_group(self) -> Group | None:
        return next(iter(self.groups.values()), None)


@dataclass(frozen=True)
class CellAddress:
    """Logical cell coordinate, independent of physical line layout.

    row_index is 0 for HEADING/UNIT/TYPE and the data-row ordinal for DATA.
    column_index is 0-based over the group's headings.
    """

    row_kind: RowKind
    row_index: int = 0
    column_index: int = 0
