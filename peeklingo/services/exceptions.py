# peeklingo/services/exceptions.py
"""
Shared exception types for the lookup services.

API error codes (errorCode in the response body) are data, not exceptions.
These types cover failures that prevent a response from being obtained or read.
"""


class PeekLingoError(Exception):
    """Base class for PeekLingo errors."""

    pass


class TranslationRequestError(PeekLingoError):
    """Raised when the translation endpoint cannot be reached or answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ResponseParseError(PeekLingoError):
    """Raised when the response body is not a usable translation payload."""

    pass


class LanguageConflictError(PeekLingoError):
    """Raised when both preferred languages are the same."""

    pass
