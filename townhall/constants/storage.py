"""
Storage Configuration Constants.

Default locations and names for the video record store.
"""

DEFAULT_DATA_DIR = ".data"
"""Directory holding one <video_id>.json file per record (file backend)."""

DEFAULT_MONGO_DB_NAME = "townhall"
"""MongoDB database name (mongo backend)."""

DEFAULT_MONGO_COLLECTION = "video_analysis"
"""MongoDB collection holding one document per video (mongo backend)."""

RECORD_FILE_SUFFIX = ".json"
"""Suffix of record files in the data directory."""
