# src/ags_kit/observability/names.py

"""Standard metric names for ags-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parser Metrics
# ============================================================================

# Duration
PARSE_DURATION = "ags_parse_duration"

# Counters
PARSE_LINES_TOTAL = "ags_parse_lines_total"

# Gauges
PARSE_GROUPS = "ags_parse_groups"


# ============================================================================
# Summary Metrics
# ============================================================================

# Duration
SUMMARY_DURATION = "ags_summary_duration"

# Gauges
SUMMARY_LOCATIONS = "ags_summary_locations"


# ============================================================================
# Table View Metrics
# ============================================================================

# Counters
TABLE_EDITS_TOTAL = "ags_table_edits_total"
TABLE_EDITS_DROPPED_TOTAL = "ags_table_edits_dropped_total"
TABLE_NAVIGATIONS_TOTAL = "ags_table_navigations_total"
TABLE_RENDERS_TOTAL = "ags_table_renders_total"


# ============================================================================
# Dictionary Metrics
# ============================================================================

# Counters
DICTIONARY_LOAD_ERRORS_TOTAL = "ags_dictionary_load_errors_total"


# ============================================================================
# Document Cache Metrics
# ============================================================================

# Counters
CACHE_EVICTIONS_TOTAL = "ags_cache_evictions_total"
