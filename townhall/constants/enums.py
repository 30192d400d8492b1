"""
Enumeration classes for the application.

All enum types used throughout the application for type safety and validation.
"""

from enum import Enum


class VideoStatus(str, Enum):
    """
    Lifecycle status of a stored video record.

    - QUEUED: Record created, transcript not yet fetched
    - FETCHED: Transcript stored, waiting for analysis
    - ANALYZED: Structured analysis computed (terminal)
    - ERROR: Ingestion failed; the caller must re-ingest
    """
    QUEUED = "queued"
    FETCHED = "fetched"
    ANALYZED = "analyzed"
    ERROR = "error"


class StorageBackend(str, Enum):
    """
    Backing medium for the video record store.

    - AUTO: MONGO when a database URL is configured, FILE otherwise
    - FILE: One JSON file per video in a local data directory
    - MONGO: One document per video in a MongoDB collection
    """
    AUTO = "auto"
    FILE = "file"
    MONGO = "mongo"


class IssueCategory(str, Enum):
    """Categories the analysis prompt asks the LLM to pick from."""
    BUSINESS = "Business"
    REAL_ESTATE = "Real Estate"
    INFRASTRUCTURE = "Infrastructure"
    PUBLIC_SAFETY = "Public Safety"
    BUDGET = "Budget"
    OTHER = "Other"
