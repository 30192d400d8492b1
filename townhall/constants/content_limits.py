"""
Content and Token Limit Constants.

Maximum lengths and other content-related limits.
"""

# ============================================================================
# TRANSCRIPT PROCESSING
# ============================================================================

TRANSCRIPT_MAX_LENGTH_FOR_ANALYSIS = 30000
"""Maximum transcript characters sent to the LLM (context window budget)."""

VIDEO_ID_LENGTH = 11
"""Length of a YouTube video identifier."""


# ============================================================================
# REPORT RENDERING
# ============================================================================

UNKNOWN_LOCATION = "Unknown Location"
"""Location label for meetings the LLM could not place."""

UNKNOWN_DATE = "Unknown Date"
"""Date label for meetings without a detected date."""
