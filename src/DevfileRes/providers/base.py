"""Abstract base class for git hosting providers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from DevfileRes.models import ProviderType, RepoPath


class GitProvider(ABC):
    """One git hosting service: its URL grammar and its endpoints.

    Subclasses list the exact host names they answer for in ``hosts``;
    the registry selects a provider by exact host match.
    """

    provider_type: ProviderType
    hosts: tuple[str, ...] = ()
    # user-info name paired with a token in an authenticated clone URL
    clone_username: str = "token"
    # shown when a URL must point at a file but does not
    file_marker_hint: str = ""

    @abstractmethod
    def parse_path(self, host: str, path: str) -> RepoPath:
        """Split a URL path (without the leading ``/``) into coordinates.

        Raises:
            PathFormatError: The path does not follow the provider's grammar.
        """

    @abstractmethod
    def api_url(self, owner: str, repo: str) -> str:
        """Return the repository metadata endpoint used to probe access."""

    @abstractmethod
    def raw_file_url(self, owner: str, repo: str, branch: str, path: str) -> str:
        """Return the endpoint serving the raw bytes of a file."""

    def clone_host(self, host: str) -> str:
        """Return the host to clone from for a URL on *host*."""
        return host
