"""
Exceptions raised by the workout demo pipeline.

Every pipeline-level failure carries a ``message`` meant for the user; any
lower-level detail is kept on ``detail`` for logs.
"""

from typing import Optional


class WorkoutDemosError(Exception):
    """Base exception for all pipeline errors."""

    def __init__(self, message: str, *, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class InvalidDocumentError(WorkoutDemosError):
    """The uploaded file is not an acceptable PDF."""


class DocumentReadError(WorkoutDemosError):
    """The PDF could not be opened or its text could not be read."""


class ExtractionError(WorkoutDemosError):
    """Exercise names could not be obtained from the language model."""


class ExtractionRequestError(ExtractionError):
    """The completion request failed or returned a non-success status."""


class ExtractionParseError(ExtractionError):
    """The completion did not contain a parseable JSON array."""


class EmptyExtractionError(WorkoutDemosError):
    """The document was read fine but contained no exercises."""
