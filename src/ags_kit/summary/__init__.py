from .aggregator import generate_summary
from .models import DepthRange, GroupCount, LocationInfo, LocationTypeInfo, Summary
from .report import format_depth_range, render_summary_markdown

__all__ = [
    "DepthRange",
    "GroupCount",
    "LocationInfo",
    "LocationTypeInfo",
    "Summary",
    "format_depth_range",
    "generate_summary",
    "render_summary_markdown",
]
