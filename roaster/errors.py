"""Error taxonomy for the analysis and landing-page pipelines.

``RoasterError`` subclasses carry the HTTP status the API layer should use;
the message is what the end user sees, so only user-actionable errors
(validation, fetch) put anything specific in it.
"""

from __future__ import annotations


class RoasterError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(RoasterError):
    """A required request field is missing or blank."""

    status_code = 400


class FetchError(RoasterError):
    """The target site could not be fetched (network, timeout, non-2xx)."""

    status_code = 400


class GenerationError(RoasterError):
    """The generative-text collaborator failed or returned unusable output.

    Always recovered locally by falling back to the heuristic path.
    """

    status_code = 502


class InternalError(RoasterError):
    """Unexpected failure, reduced to a generic message for the client."""

    status_code = 500
