# src/ags_kit/parsers/ags_parser.py

import logging
from collections.abc import Iterable
from time import monotonic

from ags_kit.config import FORMAT_VERSION_HEADING, TRANSMISSION_GROUP
from ags_kit.observability import names
from ags_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentParser
from .fields import classify_line, extract_quoted_fields, match_group_declaration
from .models import Group, ParsedDocument, RowKind

logger = logging.getLogger(__name__)


class AgsParser(DocumentParser):
    """
    Line-oriented AGS parser.
    - One linear pass, one piece of state (the current group)
    - Unrecognised lines are dropped without error
    - A repeated group name replaces the earlier group
    """

    def __init__(self, metrics_hook: MetricsHook = NoOpMetricsHook()) -> None:
        self.metrics_hook = metrics_hook

    def parse(self, lines: Iterable[str]) -> ParsedDocument:
        start = monotonic()
        groups: dict[str, Group] = {}
        current: Group | None = None
        version: str | None = None
        line_count = 0

        for line_number, line in enumerate(lines):
            line_count += 1
            trimmed = line.strip()
            if not trimmed:
                continue

            name = match_group_declaration(trimmed)
            if name is not None:
                current = Group(name=name, start_line=line_number)
                if name in groups:
                    logger.debug(
                        "Group %s redeclared at line %d, replacing earlier group",
                        name,
                        line_number,
                    )
                # Keeps the key's original position in the mapping
                groups[name] = current
                continue

            kind = classify_line(trimmed)
            if kind is None or kind is RowKind.GROUP or current is None:
                continue

            values = extract_quoted_fields(trimmed)[1:]

            if kind is RowKind.HEADING:
                current.heading_line = line_number
                current.headings = values
            elif kind is RowKind.UNIT:
                current.unit_line = line_number
                current.units = values
            elif kind is RowKind.TYPE:
                current.type_line = line_number
                current.types = values
            elif kind is RowKind.DATA:
                current.data_rows.append(values)
                current.data_lines.append(line_number)
                current.record_count += 1
                if current.name == TRANSMISSION_GROUP:
                    version = self._format_version(current, values) or version

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.PARSE_LINES_TOTAL, line_count)
        self.metrics_hook.record_gauge(names.PARSE_GROUPS, len(groups))
        logger.debug(
            "Parsed %d lines into %d groups in %.1fms", line_count, len(groups), elapsed_ms
        )

        return ParsedDocument(groups=groups, version=version)

    def _format_version(self, group: Group, values: list[str]) -> str | None:
        """
        Format version carried by a transmission DATA row, if any.
        """
        index = group.heading_index(FORMAT_VERSION_HEADING)
        if 0 <= index < len(values) and values[index]:
            return values[index]
        return None


def parse_lines(
    lines: Iterable[str], metrics_hook: MetricsHook = NoOpMetricsHook()
) -> ParsedDocument:
    return AgsParser(metrics_hook=metrics_hook).parse(lines)
