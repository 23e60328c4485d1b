"""
Application-level exceptions.

The scoring engine is total and never raises these. They belong to the
collaborators around it (configuration, record retrieval) and carry a stable
error code for API responses.
"""

from __future__ import annotations


class ParetoError(Exception):
    """Base class for errors surfaced to API callers."""

    code = "pareto_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message, "code": self.code}


class ConfigurationError(ParetoError):
    """Required setting (sheet id, credentials) is missing or invalid."""

    code = "configuration_error"


class RecordSourceError(ParetoError):
    """Record retrieval failed (auth, transport, unexpected response)."""

    code = "record_source_error"
