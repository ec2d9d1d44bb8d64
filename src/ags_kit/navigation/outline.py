# src/ags_kit/navigation/outline.py

from collections.abc import Sequence
from dataclasses import dataclass, field

from ags_kit.dictionary.descriptions import USER_DEFINED_GROUP
from ags_kit.dictionary.models import Dictionary
from ags_kit.parsers.models import ParsedDocument


@dataclass(frozen=True)
class DocumentSymbol:
    name: str
    detail: str
    line: int
    children: list["DocumentSymbol"] = field(default_factory=list)


@dataclass(frozen=True)
class FoldingRange:
    start_line: int
    end_line: int


@dataclass(frozen=True)
class GroupPick:
    name: str
    heading_count: int
    record_count: int
    description: str
    line: int


def document_symbols(parsed: ParsedDocument, dictionary: Dictionary) -> list[DocumentSymbol]:
    """One symbol per group, with its headings as children."""
    symbols = []
    for name, group in parsed.groups.items():
        description = dictionary.group_description(name) or USER_DEFINED_GROUP
        children = [
            DocumentSymbol(
                name=heading,
                detail=dictionary.heading_description(heading),
                line=group.heading_line,
            )
            for heading in group.headings
        ]
        symbols.append(
            DocumentSymbol(
                name=name,
                detail=f"{description} ({group.record_count} rows)",
                line=group.start_line,
                children=children,
            )
        )
    return symbols


def folding_ranges(lines: Sequence[str], parsed: ParsedDocument) -> list[FoldingRange]:
    """
    One range per group, from its declaration to its last non-blank line.
    Single-line groups are not foldable.
    """
    starts = sorted(group.start_line for group in parsed.groups.values())
    ranges = []

    for i, start in enumerate(starts):
        end = starts[i + 1] - 1 if i + 1 < len(starts) else len(lines) - 1
        while end > start and not lines[end].strip():
            end -= 1
        if end > start:
            ranges.append(FoldingRange(start_line=start, end_line=end))

    return ranges


def find_definition(parsed: ParsedDocument, word: str) -> int | None:
    """Declaration line of the group named `word`, if any."""
    group = parsed.groups.get(word.upper())
    return group.start_line if group else None


def group_picks(parsed: ParsedDocument, dictionary: Dictionary) -> list[GroupPick]:
    return [
        GroupPick(
            name=name,
            heading_count=len(group.headings),
            record_count=group.record_count,
            description=dictionary.group_description(name) or USER_DEFINED_GROUP,
            line=group.start_line,
        )
        for name, group in parsed.groups.items()
    ]
