# src/ags_kit/summary/aggregator.py

import logging
import math
from dataclasses import replace
from time import monotonic

from ags_kit.config import (
    GEOLOGY_BASE_HEADING,
    GEOLOGY_GROUP,
    GEOLOGY_TOP_HEADING,
    LOCATION_EASTING_HEADING,
    LOCATION_FINAL_DEPTH_HEADING,
    LOCATION_GROUP,
    LOCATION_ID_HEADING,
    LOCATION_NORTHING_HEADING,
    LOCATION_TYPE_HEADING,
)
from ags_kit.dictionary.models import Dictionary
from ags_kit.observability import names
from ags_kit.observability.base import MetricsHook, NoOpMetricsHook
from ags_kit.parsers.models import Group, ParsedDocument

from .models import DepthRange, GroupCount, LocationInfo, LocationTypeInfo, Summary

logger = logging.getLogger(__name__)


def generate_summary(
    parsed: ParsedDocument,
    *,
    dictionary: Dictionary | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Summary:
    start = monotonic()
    dictionary = dictionary or Dictionary()

    group_counts: list[GroupCount] = []
    records_by_location: dict[str, dict[str, int]] = {}
    total_records = 0

    for name, group in parsed.groups.items():
        group_counts.append(
            GroupCount(
                name=name,
                count=group.record_count,
                description=dictionary.group_description(name) or None,
            )
        )
        total_records += group.record_count

        location_index = group.heading_index(LOCATION_ID_HEADING)
        if location_index < 0:
            continue
        for row in group.data_rows:
            location_id = _value(row, location_index)
            if location_id:
                counts = records_by_location.setdefault(location_id, {})
                counts[name] = counts.get(name, 0) + 1

    # sorted() is stable, so ties keep file order
    group_counts = sorted(group_counts, key=lambda g: -g.count)

    depth_ranges = _depth_ranges_by_location(parsed.groups.get(GEOLOGY_GROUP))
    locations, locations_by_type = _location_inventory(
        parsed.groups.get(LOCATION_GROUP), depth_ranges
    )

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.SUMMARY_DURATION, elapsed_ms)
    metrics_hook.record_gauge(names.SUMMARY_LOCATIONS, len(locations))
    logger.debug(
        "Summarised %d groups, %d records, %d locations",
        len(parsed.groups),
        total_records,
        len(locations),
    )

    return Summary(
        total_groups=len(parsed.groups),
        total_records=total_records,
        group_counts=group_counts,
        locations=locations,
        locations_by_type=locations_by_type,
        records_by_location=records_by_location,
    )


def _depth_ranges_by_location(geology: Group | None) -> dict[str, DepthRange]:
    ranges: dict[str, DepthRange] = {}
    if geology is None:
        return ranges

    location_index = geology.heading_index(LOCATION_ID_HEADING)
    top_index = geology.heading_index(GEOLOGY_TOP_HEADING)
    base_index = geology.heading_index(GEOLOGY_BASE_HEADING)
    if location_index < 0 or (top_index < 0 and base_index < 0):
        return ranges

    for row in geology.data_rows:
        location_id = _value(row, location_index)
        if not location_id:
            continue

        for depth in (_depth(row, top_index), _depth(row, base_index)):
            if depth is None:
                continue
            existing = ranges.get(location_id)
            ranges[location_id] = (
                existing.including(depth) if existing else DepthRange(depth, depth)
            )

    return ranges


def _location_inventory(
    location_group: Group | None, depth_ranges: dict[str, DepthRange]
) -> tuple[list[LocationInfo], dict[str, LocationTypeInfo]]:
    locations: list[LocationInfo] = []
    by_type: dict[str, LocationTypeInfo] = {}
    if location_group is None:
        return locations, by_type

    id_index = location_group.heading_index(LOCATION_ID_HEADING)
    easting_index = location_group.heading_index(LOCATION_EASTING_HEADING)
    northing_index = location_group.heading_index(LOCATION_NORTHING_HEADING)
    type_index = location_group.heading_index(LOCATION_TYPE_HEADING)
    final_depth_index = location_group.heading_index(LOCATION_FINAL_DEPTH_HEADING)

    for row in location_group.data_rows:
        location_id = _value(row, id_index)
        if not location_id:
            continue

        location_type = _value(row, type_index)
        depth_range = depth_ranges.get(location_id)
        locations.append(
            LocationInfo(
                id=location_id,
                type=location_type,
                easting=_value(row, easting_index),
                northing=_value(row, northing_index),
                final_depth=_value(row, final_depth_index),
                depth_range=depth_range,
            )
        )

        if location_type:
            by_type[location_type] = _fold_type(by_type.get(location_type), depth_range)

    return locations, by_type


def _fold_type(
    existing: LocationTypeInfo | None, depth_range: DepthRange | None
) -> LocationTypeInfo:
    """Count one more location and widen the type's range by its depths.

    A missing bound never erases a bound already known for the type.
    """
    if existing is None:
        return LocationTypeInfo(
            count=1,
            depth_min=depth_range.min if depth_range else None,
            depth_max=depth_range.max if depth_range else None,
        )

    if depth_range is None:
        return replace(existing, count=existing.count + 1)

    return LocationTypeInfo(
        count=existing.count + 1,
        depth_min=_merge_bound(existing.depth_min, depth_range.min, min),
        depth_max=_merge_bound(existing.depth_max, depth_range.max, max),
    )


def _merge_bound(current: float | None, value: float, pick) -> float:
    return value if current is None else pick(current, value)


def _value(row: list[str], index: int) -> str | None:
    if 0 <= index < len(row):
        return row[index]
    return None


def _depth(row: list[str], index: int) -> float | None:
    raw = _value(row, index)
    if not raw:
        return None
    try:
        depth = float(raw)
    except ValueError:
        return None
    return depth if math.isfinite(depth) else None
