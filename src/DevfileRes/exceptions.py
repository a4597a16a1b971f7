"""Exception hierarchy for remote resource resolution.

Messages are shown to the user verbatim, so they must never include a token.
"""

from __future__ import annotations


class DevfileResError(Exception):
    """Base class for all DevfileRes errors."""


# --- URL parsing -----------------------------------------------------------


class URLParseError(DevfileResError):
    """Raised when a URL cannot be turned into repository coordinates."""

    def with_prefix(self, prefix: str) -> URLParseError:
        """Return a copy of this error with *prefix* before the message."""
        return type(self)(f"{prefix}{self}")


class InvalidURLError(URLParseError):
    """The URL is empty, has no host or path, or is not http/https."""


class UnsupportedHostError(URLParseError):
    """The URL host is not a recognised git provider."""

    def __init__(self, host: str, message: str | None = None):
        self.host = host
        super().__init__(
            message
            or "url host should be a valid GitHub, GitLab, or Bitbucket host; "
            f"received: {host}"
        )

    def with_prefix(self, prefix: str) -> UnsupportedHostError:
        return UnsupportedHostError(self.host, f"{prefix}{self}")


class PathFormatError(URLParseError):
    """The URL path does not match the provider's path grammar."""

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(message)

    def with_prefix(self, prefix: str) -> PathFormatError:
        return PathFormatError(f"{prefix}{self}", path=self.path)


# --- Network ---------------------------------------------------------------


class TokenValidationError(DevfileResError):
    """The repository probe failed with the candidate token."""


class FetchError(DevfileResError):
    """Downloading content failed (transport error or non-2xx status)."""

    def __init__(
        self,
        message: str,
        url: str = "",
        status_code: int | None = None,
    ):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


# --- Classification --------------------------------------------------------


class DecodeError(DevfileResError):
    """A YAML document lacks a usable ``kind`` or ``metadata.name``."""

    def __init__(self, message: str, index: int | None = None):
        self.index = index
        super().__init__(message)


# --- Cloning ---------------------------------------------------------------


class CloneError(DevfileResError):
    """``git clone`` could not be run or exited with an error."""
