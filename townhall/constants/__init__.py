"""
Application Constants Package.

This package centralizes all constants used throughout the application,
organized by domain/concern for better maintainability.

All constants are re-exported from this __init__.py for convenience.
You can import either from the main package or specific modules:

    from townhall.constants import VideoStatus, TRANSCRIPT_MAX_LENGTH_FOR_ANALYSIS
    from townhall.constants.enums import VideoStatus
"""

# ============================================================================
# ENUMERATIONS
# ============================================================================

from .enums import (
    VideoStatus,
    StorageBackend,
    IssueCategory,
)

# ============================================================================
# LLM CONFIGURATION
# ============================================================================

from .llm import (
    OPENAI_MODEL_FAST,
    LLM_TEMP_MEETING_ANALYSIS,
    LLM_TEMP_DASHBOARD_REPORT,
)

# ============================================================================
# CONTENT LIMITS
# ============================================================================

from .content_limits import (
    TRANSCRIPT_MAX_LENGTH_FOR_ANALYSIS,
    VIDEO_ID_LENGTH,
    UNKNOWN_LOCATION,
    UNKNOWN_DATE,
)

# ============================================================================
# STORAGE
# ============================================================================

from .storage import (
    DEFAULT_DATA_DIR,
    DEFAULT_MONGO_DB_NAME,
    DEFAULT_MONGO_COLLECTION,
    RECORD_FILE_SUFFIX,
)

__all__ = [
    "VideoStatus",
    "StorageBackend",
    "IssueCategory",
    "OPENAI_MODEL_FAST",
    "LLM_TEMP_MEETING_ANALYSIS",
    "LLM_TEMP_DASHBOARD_REPORT",
    "TRANSCRIPT_MAX_LENGTH_FOR_ANALYSIS",
    "VIDEO_ID_LENGTH",
    "UNKNOWN_LOCATION",
    "UNKNOWN_DATE",
    "DEFAULT_DATA_DIR",
    "DEFAULT_MONGO_DB_NAME",
    "DEFAULT_MONGO_COLLECTION",
    "RECORD_FILE_SUFFIX",
]
