"""Error taxonomy for the ingestion and generation paths.

File-input errors propagate to the user with a corrective message.
Generation errors are caught by the coach and replaced with defaults.
"""

from models.documents import ClassificationResult


class ExtractionError(Exception):
    """Base class for failures turning an upload into text."""

    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class SizeError(ExtractionError):
    status_code = 413


class UnsupportedFormatError(ExtractionError):
    pass


class LegacyFormatError(UnsupportedFormatError):
    """Binary .doc uploads, which are never parsed."""


class PdfParseError(ExtractionError):
    pass


class DocxParseError(ExtractionError):
    pass


class ClassificationRejection(Exception):
    """The extracted text did not score as a resume."""

    status_code = 422

    def __init__(self, result: ClassificationResult, message: str) -> None:
        super().__init__(message)
        self.result = result
        self.message = message


class GenerationError(Exception):
    def __init__(self, status: int, message: str) -> None:
        super().__init__(f"Generation failed ({status}): {message}")
        self.status = status
        self.message = message
