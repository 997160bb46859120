"""Typed exception hierarchy for storeprobe."""
from __future__ import annotations


class StoreProbeError(Exception):
    """Base exception for all storeprobe errors."""

    pass


class InvalidURLError(StoreProbeError):
    """Raised when the input is not an absolute http(s) URL."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Invalid URL: {url}")


class UnreachableTargetError(StoreProbeError):
    """Raised when the page could not be fetched or returned a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def for_status(cls, status_code: int) -> "UnreachableTargetError":
        return cls(f"URL returned status {status_code}", status_code=status_code)


class InvalidHeaderError(StoreProbeError):
    """Raised when a request header value cannot be sent (non-ASCII)."""

    def __init__(self, name: str, value: str):
        self.name = name
        self.value = value
        super().__init__(f"Invalid {name} header: {value!r}")
