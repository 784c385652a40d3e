from __future__ import annotations


class OrcaApiError(Exception):
    """Base for every error raised by the Orca client."""


class InvalidBaseUrlError(OrcaApiError):
    """Base URL supplied at construction is not a usable http(s) URL."""


class TransportError(OrcaApiError):
    """Request failed before a usable body was obtained."""

    def __init__(self, message: str, *, url: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class DecodeError(OrcaApiError):
    """Response body is not valid JSON or does not match the expected shape."""

    def __init__(self, message: str, *, target: str | None = None):
        super().__init__(message)
        self.target = target
