# src/ags_kit/summary/models.py

from dataclasses import dataclass


@dataclass(frozen=True)
class DepthRange:
    min: float
    max: float

    def including(self, value: float) -> "DepthRange":
        return DepthRange(min=min(self.min, value), max=max(self.max, value))


@dataclass(frozen=True)
class GroupCount:
    name: str
    count: int
    description: str | None = None


@dataclass(frozen=True)
class LocationInfo:
    """One investigation point from the location group.

    Coordinates, type and final depth are kept verbatim as strings.
    depth_range is None when the location has no usable geology depths.
    """

    id: str
    type: str | None = None
    easting: str | None = None
    northing: str | None = None
    final_depth: str | None = None
    depth_range: DepthRange | None = None

    @property
    def depth_min(self) -> float | None:
        return self.depth_range.min if self.depth_range else None

    @property
    def depth_max(self) -> float | None:
        return self.depth_range.max if self.depth_range else None


@dataclass(frozen=True)
class LocationTypeInfo:
    count: int
    depth_min: float | None = None
    depth_max: float | None = None


@dataclass(frozen=True)
class Summary:
    """Derived, read-only view of a parsed document. Recomputed on demand."""

    total_groups: int
    total_records: int
    group_counts: list[GroupCount]
    locations: list[LocationInfo]
    locations_by_type: dict[str, LocationTypeInfo]
    records_by_location: dict[str, dict[str, int]]
