"""Townhall Digest: public meeting videos to civic-issue reports."""

__version__ = "1.0.0"
