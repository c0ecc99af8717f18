"""Error taxonomy for the conversion pipeline.

Every failure that reaches the caller is a ``ConversionError``; the API layer
turns it into a JSON body with the message and the HTTP status carried here.
"""


class ConversionError(Exception):
    """Base exception for conversion pipeline errors."""

    status_code: int = 500
    default_message: str = "Conversion failed"

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)


class MissingInput(ConversionError):
    """Required input is missing."""

    status_code = 400
    default_message = "Required input is missing"


class UnsupportedFormat(ConversionError):
    """Unsupported file type."""

    status_code = 400
    default_message = "Unsupported file type"


class FileTooLarge(ConversionError):
    """Uploaded file is too large."""

    status_code = 413
    default_message = "File too large"


class UnreadableDocument(ConversionError):
    """No text could be extracted from the document."""

    status_code = 400
    default_message = "No text could be extracted from the document"


class ExtractionFailure(ConversionError):
    """Structured extraction failed."""

    status_code = 502
    default_message = "Structured extraction failed"


class MissingCredential(ExtractionFailure):
    """API key is required."""

    status_code = 400
    default_message = "API key is required"


class ServiceUnavailable(ExtractionFailure):
    """A model variant is not available for this credential.

    Recorded per variant and never raised on its own; the extractor moves on
    to the next variant instead.
    """

    def __init__(self, model: str, status: int | None = None, body: str = "") -> None:
        self.model = model
        self.status = status
        self.body = body
        super().__init__(f"Gemini API error with model {model}: {status} - {body}")


class ServiceError(ExtractionFailure):
    """Fatal error reported by the text-understanding service."""

    def __init__(self, model: str, status: int | None, body: str) -> None:
        self.model = model
        self.status = status
        self.body = body
        super().__init__(f"Gemini API error with model {model}: {status} - {body}")


class MalformedResponse(ExtractionFailure):
    """Success response without an extractable JSON object."""

    default_message = "Failed to parse AI response as JSON"


class AllVariantsExhausted(ExtractionFailure):
    """Every model variant was unavailable."""

    default_message = "All Gemini models failed. Please check your API key and model access."

    def __init__(self, last_error: ExtractionFailure | None = None) -> None:
        self.last_error = last_error
        if last_error is None:
            super().__init__()
        else:
            super().__init__(str(last_error))


class RenderFailure(ConversionError):
    """Resume record does not match the expected structure."""

    status_code = 500
    default_message = "Resume record does not match the expected structure"


class InternalError(ConversionError):
    """Internal server error."""

    status_code = 500
    default_message = "Internal server error"
