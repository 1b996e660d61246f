# src/canvas_kit/observability/names.py

"""Standard metric names for canvas-kit observability.

Use these constants instead of hardcoded strings.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Research parsing
# ============================================================================

# Duration
RESEARCH_PARSE_DURATION = "research_parse_duration"

# Counters
RESEARCH_PARSES_TOTAL = "research_parses_total"

# Gauges (0-100, labelled by framework)
RESEARCH_CONFIDENCE = "research_confidence"


# ============================================================================
# Deep research calls
# ============================================================================

# Duration
RESEARCH_CALL_DURATION = "research_call_duration"

# Counters
RESEARCH_REQUESTS_TOTAL = "research_requests_total"
RESEARCH_ERRORS_TOTAL = "research_errors_total"
RESEARCH_TOKENS_TOTAL = "research_tokens_total"


# ============================================================================
# Tools
# ============================================================================

# Duration
TOOL_CALL_DURATION = "tool_call_duration"

# Counters
TOOL_CALLS_TOTAL = "tool_calls_total"


# ============================================================================
# Entity store
# ============================================================================

# Counters (labelled by operation)
STORE_OPERATIONS_TOTAL = "store_operations_total"
