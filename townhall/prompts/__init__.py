"""
Prompts Package.

Centralized location for reusable prompt components and instructions.
Each agent module imports common snippets and defines its own specific prompts.
"""

from .common import (
    # JSON Instructions
    JSON_OUTPUT_STRICT,

    # Analysis Principles
    OBJECTIVITY_INSTRUCTION,

    # Schemas
    ISSUE_CATEGORIES,
    SCHEMA_ISSUE,
    SCHEMA_LOCATION,
)

__all__ = [
    "JSON_OUTPUT_STRICT",
    "OBJECTIVITY_INSTRUCTION",
    "ISSUE_CATEGORIES",
    "SCHEMA_ISSUE",
    "SCHEMA_LOCATION",
]
