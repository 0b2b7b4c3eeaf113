class QuadrootsError(Exception):
    """Base class for exceptions in this module."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigValidationError(QuadrootsError):
    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


class DocumentError(QuadrootsError):
    """Raised when the polynomial document cannot be written, read or parsed."""


class RootDecodingError(QuadrootsError):
    """Raised when an encoded root is not valid base64, UTF-8 or a number."""
