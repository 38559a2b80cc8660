"""Errors raised by the document client."""

from __future__ import annotations


class DocumentError(Exception):
    """Base error for remote document access."""

    status_code: int | None = None


class DocumentConfigError(DocumentError):
    """Client is missing required configuration (e.g. the access token)."""


class DocumentNetworkError(DocumentError):
    """No response was received from the API."""


class DocumentApiError(DocumentError):
    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"API Error ({status_code}): {message}")
        self.status_code = status_code
        self.message = message


class DocumentAuthError(DocumentApiError):
    """Invalid or expired access token."""


class DocumentNotFound(DocumentApiError):
    """The file was not found or the token has no access to it."""
