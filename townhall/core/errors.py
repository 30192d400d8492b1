"""
Exception taxonomy for the ingestion / analysis / report pipeline.

Each class carries the HTTP status the API layer answers with, so the
core never imports FastAPI and the route handlers never guess codes.
"""
from typing import Any, Dict, Optional


class TownhallError(Exception):
    """Base error; unexpected failures map to 500."""
    status_code = 500

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"error": self.message}
        if self.code:
            payload["code"] = self.code
        return payload


class InvalidInputError(TownhallError):
    """Malformed URL or missing required field."""
    status_code = 400


class NotFoundError(TownhallError):
    """Requested record (or any analyzed record) does not exist yet."""
    status_code = 404


class PreconditionError(TownhallError):
    """Input is well-formed but cannot be processed (e.g. video without captions)."""
    status_code = 422


class ExternalServiceError(TownhallError):
    """Transcript provider or LLM call failed."""


class LLMParseError(TownhallError):
    """LLM response is not valid JSON once code fences are stripped."""


class ConfigurationError(TownhallError):
    """Server is missing required configuration (API key, backend settings)."""
