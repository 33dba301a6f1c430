"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    status_code = 400

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    status_code = 404

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class InvalidRequestError(AppError):
    """Raised when a quote request carries no usable symbols."""

    def __init__(self, message: str = "symbols is required"):
        super().__init__(message, code="INVALID_REQUEST")


class UpstreamUnavailableError(AppError):
    """Raised when the quote provider answers with a non-success status.

    Callers should treat this as transient.
    """

    status_code = 502

    def __init__(self, upstream_status: int):
        self.upstream_status = upstream_status
        super().__init__(f"upstream {upstream_status}", code="UPSTREAM_UNAVAILABLE")


class FetchFailedError(AppError):
    """Raised when the quote provider cannot be reached or returns garbage."""

    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message or "fetch failed", code="FETCH_FAILED")


class ImportMalformedError(AppError):
    """Raised when an imported holdings document is not a JSON array.

    Handled at the import boundary; never surfaced to the user.
    """

    def __init__(self, message: str):
        super().__init__(message, code="IMPORT_MALFORMED")
