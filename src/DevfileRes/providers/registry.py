"""Host name → provider lookup."""

from __future__ import annotations

from DevfileRes.providers.base import GitProvider
from DevfileRes.providers.bitbucket import BitbucketProvider
from DevfileRes.providers.github import GitHubProvider
from DevfileRes.providers.gitlab import GitLabProvider

_PROVIDERS: dict[str, GitProvider] = {}


def register(provider: GitProvider) -> None:
    """Make *provider* answer for each of its hosts (exact match)."""
    for host in provider.hosts:
        _PROVIDERS[host] = provider


def get_provider(host: str) -> GitProvider | None:
    """Return the provider for *host*, or None. Subdomains do not match."""
    return _PROVIDERS.get(host)


def known_hosts() -> tuple[str, ...]:
    return tuple(_PROVIDERS)


for _provider in (GitHubProvider(), GitLabProvider(), BitbucketProvider()):
    register(_provider)
