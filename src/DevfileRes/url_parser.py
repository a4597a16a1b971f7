"""URL validation and provider-specific parsing into GitUrl coordinates."""

from __future__ import annotations

from urllib.parse import urlparse

from DevfileRes.exceptions import (
    InvalidURLError,
    PathFormatError,
    UnsupportedHostError,
)
from DevfileRes.git_url import GitUrl
from DevfileRes.providers.registry import get_provider


def validate_url(url: str) -> None:
    """Check that *url* is an absolute http(s) URL with a host and a path.

    Raises:
        InvalidURLError: Otherwise.
    """
    if not url:
        raise InvalidURLError("URL is empty.")

    parsed = urlparse(url)
    if not parsed.scheme:
        raise InvalidURLError(f"Invalid URL (no scheme): {url}")
    if parsed.scheme not in ("http", "https"):
        raise InvalidURLError(f"Unsupported scheme: {parsed.scheme}")
    if not parsed.netloc:
        raise InvalidURLError(f"Invalid URL (no host): {url}")
    if not parsed.path:
        raise InvalidURLError(f"url path should not be empty: {url}")


def parse_git_url(full_url: str) -> GitUrl:
    """Parse a GitHub, GitLab or Bitbucket URL into a GitUrl.

    Supported formats:
      - https://github.com/owner/repo
      - https://github.com/owner/repo/tree/branch/path/to/dir
      - https://github.com/owner/repo/blob/branch/path/to/file
      - https://raw.githubusercontent.com/owner/repo/branch/path/to/file
      - https://gitlab.com/owner/repo[/-/blob|tree|raw/branch/path]
      - https://bitbucket.org/owner/repo[/src|raw/branch/path]

    Hosts are matched exactly; ``www.github.com`` is not GitHub.

    Raises:
        InvalidURLError: The URL itself is malformed.
        UnsupportedHostError: The host is not a known provider.
        PathFormatError: The path does not fit the provider's grammar.
    """
    validate_url(full_url)

    parsed = urlparse(full_url)
    host = parsed.netloc
    provider = get_provider(host)
    if provider is None:
        raise UnsupportedHostError(host)

    path = parsed.path[1:]
    repo_path = provider.parse_path(host, path)
    if not repo_path.owner or not repo_path.repo:
        raise PathFormatError(
            f"url path should contain <user>/<repo>, received: {path}", path=path
        )
    return GitUrl.from_repo_path(parsed.scheme, host, repo_path)
