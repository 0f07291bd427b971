from __future__ import annotations


class DecodeError(ValueError):
    """A payload did not match the expected schema."""


class FetchError(Exception):
    """Base class for everything that can go wrong fetching from the API."""

    def __init__(self, url: str, message: str = ""):
        self.url = url
        super().__init__(message or url)


class NetworkError(FetchError):
    def __init__(self, url: str, reason: str = ""):
        self.reason = reason
        super().__init__(url, f"could not reach {url}: {reason}" if reason else f"could not reach {url}")


class BadStatus(FetchError):
    def __init__(self, url: str, status: int):
        self.status = status
        super().__init__(url, f"HTTP {status} from {url}")


class BadPayload(FetchError):
    def __init__(self, url: str, reason: str):
        self.reason = reason
        super().__init__(url, f"unexpected payload from {url}: {reason}")


def describe_error(error: Exception) -> str:
    """One-line, user-facing text for a failed fetch."""
    if isinstance(error, NetworkError):
        return f"Network error: could not reach {error.url}"
    if isinstance(error, BadStatus):
        return f"Bad status {error.status} from {error.url}"
    if isinstance(error, BadPayload):
        return f"Could not read the response from {error.url}: {error.reason}"
    return f"Unexpected error: {error}"
