from .video import (
    Location,
    Issue,
    MeetingAnalysis,
    VideoRecord,
    IngestResult,
    utcnow,
)

__all__ = [
    "Location",
    "Issue",
    "MeetingAnalysis",
    "VideoRecord",
    "IngestResult",
    "utcnow",
]
