# src/ags_kit/summary/report.py

"""Markdown rendering of a Summary."""

from datetime import datetime

from .models import Summary

DEFAULT_LOCATION_MATRIX_THRESHOLD = 20


def format_depth_range(depth_min: float | None, depth_max: float | None) -> str:
    """Depth span for display; a missing range is a placeholder, never zero."""
    if depth_min is None and depth_max is None:
        return "-"
    if depth_min is None:
        return f"- {depth_max:.2f}"
    if depth_max is None:
        return f"{depth_min:.2f} -"
    return f"{depth_min:.2f} - {depth_max:.2f}"


def render_summary_markdown(
    summary: Summary,
    *,
    file_name: str = "AGS File",
    version: str | None = None,
    generated_at: datetime | None = None,
    location_matrix_threshold: int = DEFAULT_LOCATION_MATRIX_THRESHOLD,
) -> str:
    generated_at = generated_at or datetime.now()
    lines: list[str] = [
        "# AGS File Summary",
        "",
        f"**File:** {file_name}",
        f"**Version:** {version or 'Unknown'}",
        f"**Generated:** {generated_at:%Y-%m-%d %H:%M:%S}",
        "",
        "## Overview",
        "",
        "| Metric | Value |",
        "|--------|-------|",
        f"| Groups | {summary.total_groups} |",
        f"| Total Records | {summary.total_records:,} |",
        f"| Locations | {len(summary.locations)} |",
        f"| Location Types | {len(summary.locations_by_type)} |",
        "",
        "## Group Summary",
        "",
        "| Group | Description | Records |",
        "|-------|-------------|---------|",
    ]
    for group in summary.group_counts:
        lines.append(
            f"| {group.name} | {group.description or 'User-defined'} | {group.count:,} |"
        )
    lines.append("")

    lines.extend(_location_type_section(summary))
    lines.extend(_location_section(summary))
    lines.extend(_records_by_location_section(summary, location_matrix_threshold))

    return "\n".join(lines)


def _location_type_section(summary: Summary) -> list[str]:
    if not summary.locations_by_type:
        return []

    lines = [
        "## Location Type Summary",
        "",
        "| Type | Count | Depth Range (m) |",
        "|------|-------|-----------------|",
    ]
    ordered = sorted(summary.locations_by_type.items(), key=lambda item: -item[1].count)
    for location_type, info in ordered:
        depth = format_depth_range(info.depth_min, info.depth_max)
        lines.append(f"| {location_type} | {info.count} | {depth} |")
    lines.append("")
    return lines


def _location_section(summary: Summary) -> list[str]:
    if not summary.locations:
        return []

    has_types = bool(summary.locations_by_type)
    lines = ["## Location Summary", ""]
    if has_types:
        lines += [
            "| Location ID | Type | Depth Range (m) |",
            "|-------------|------|-----------------|",
        ]
    else:
        lines += ["| Location ID | Depth Range (m) |", "|-------------|-----------------|"]

    for location in summary.locations:
        depth = format_depth_range(location.depth_min, location.depth_max)
        if has_types:
            lines.append(f"| {location.id} | {location.type or '-'} | {depth} |")
        else:
            lines.append(f"| {location.id} | {depth} |")
    lines.append("")
    return lines


def _records_by_location_section(summary: Summary, threshold: int) -> list[str]:
    location_count = len(summary.records_by_location)
    if location_count == 0:
        return []

    if location_count > threshold:
        return [
            "## Records by Location",
            "",
            f"*{location_count} locations - table omitted for readability*",
            "",
        ]

    location_ids = sorted(summary.records_by_location)
    located_groups = [
        group.name
        for group in summary.group_counts
        if any(group.name in counts for counts in summary.records_by_location.values())
    ]
    if not located_groups:
        return []

    lines = [
        "## Records by Location",
        "",
        "| Group | " + " | ".join(location_ids) + " |",
        "|-------|" + "------|" * len(location_ids),
    ]
    for name in located_groups:
        cells = [
            str(summary.records_by_location[location_id].get(name) or "-")
            for location_id in location_ids
        ]
        lines.append(f"| {name} | " + " | ".join(cells) + " |")
    lines.append("")
    return lines
