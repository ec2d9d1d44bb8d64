# src/ags_kit/parsers/fields.py

"""Line-level helpers shared by the parser, the position index and the
table engine.

Quoted fields are read without any escape convention: a quote character
inside a field's content ends that field.
"""

import re

from .models import RowKind

QUOTED_FIELD_RE = re.compile(r'"([^"]*?)"')
ROW_KIND_RE = re.compile(r'^"(GROUP|HEADING|UNIT|TYPE|DATA)"', re.IGNORECASE)
GROUP_DECLARATION_RE = re.compile(r'^"GROUP"\s*,\s*"([A-Z0-9_]+)"', re.IGNORECASE)


def extract_quoted_fields(line: str) -> list[str]:
    """Values between non-overlapping quote pairs, left to right.

    Text outside quote pairs is ignored; an unterminated quote ends the scan.
    """
    return QUOTED_FIELD_RE.findall(line)


def classify_line(line: str) -> RowKind | None:
    """Row kind from the leading row-type field, case-insensitive."""
    match = ROW_KIND_RE.match(line.strip())
    if match is None:
        return None
    return RowKind(match.group(1).upper())


def match_group_declaration(line: str) -> str | None:
    """Group name when `line` declares a group with a valid identifier."""
    match = GROUP_DECLARATION_RE.match(line.strip())
    return match.group(1) if match else None
