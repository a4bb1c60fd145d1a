"""
Custom exceptions for PDF Inspect.

Every failure a request can hit maps onto one of these classes. The
dispatcher and the document accessor turn them into error envelopes, so
none of them ever reaches the transport.
"""


class PDFInspectException(Exception):
    """Base exception for all PDF Inspect errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown PDF inspection error occurred."


class DocumentNotFoundError(PDFInspectException):
    """Raised when the supplied path does not reference an existing file."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"File not found: {path}")


class InvalidArgumentError(PDFInspectException):
    """Raised when a request argument is missing, mistyped or malformed."""

    @property
    def default_message(self) -> str:
        return "Invalid argument."


class InvalidRangeError(InvalidArgumentError):
    """Raised when a page range expression fails to parse."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid page range: {value}")


class ProcessingError(PDFInspectException):
    """Raised when a recognised file cannot be opened, parsed or read."""

    @property
    def default_message(self) -> str:
        return "Unable to process PDF file."


class InvalidPDFError(ProcessingError):
    """Raised when PDF file is invalid or corrupted."""

    @property
    def default_message(self) -> str:
        return "Invalid or corrupted PDF file."


class EncryptedPDFError(ProcessingError):
    """Raised when PDF is encrypted and cannot be processed."""

    @property
    def default_message(self) -> str:
        return "PDF is encrypted and cannot be processed without a password."


class UnknownOperationError(PDFInspectException):
    """Raised when a request names an operation that is not registered."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")
