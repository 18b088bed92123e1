# src/explainshell_cli/observability/names.py

"""Standard metric names for explainshell-cli observability.

Durations are in milliseconds.
"""

# ============================================================================
# Fetch Metrics
# ============================================================================

# Duration
FETCH_DURATION = "fetch_duration"

# Counters
FETCH_REQUESTS_TOTAL = "fetch_requests_total"
FETCH_ERRORS_TOTAL = "fetch_errors_total"


# ============================================================================
# Parse Metrics
# ============================================================================

# Duration
PARSE_DURATION = "parse_duration"

# Counters
PARSE_SEGMENTS_TOTAL = "parse_segments_total"

# Gauges
PARSE_HELP_TEXTS = "parse_help_texts"


# ============================================================================
# Format Metrics
# ============================================================================

# Duration
FORMAT_DURATION = "format_duration"

# Gauges
FORMAT_GROUPS = "format_groups"
