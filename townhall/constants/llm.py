"""
LLM (Large Language Model) Configuration Constants.

Model names, temperature settings, and other LLM-specific parameters.
"""

# ============================================================================
# MODEL NAMES
# ============================================================================

OPENAI_MODEL_FAST = "gpt-4o-mini"
"""Fast, cost-effective model used for meeting analysis and reports."""


# ============================================================================
# TEMPERATURE SETTINGS
# ============================================================================
# Lower temperature = more deterministic/focused
# Higher temperature = more creative/varied

LLM_TEMP_MEETING_ANALYSIS = 0.2
"""Temperature for extracting structured issues from a transcript."""

LLM_TEMP_DASHBOARD_REPORT = 0.4
"""Temperature for writing the executive dashboard narrative."""
