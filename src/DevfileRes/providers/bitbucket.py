"""Bitbucket URL grammar and endpoints."""

from __future__ import annotations

from DevfileRes.exceptions import PathFormatError
from DevfileRes.file_filter import has_file_extension
from DevfileRes.models import ProviderType, RepoPath
from DevfileRes.providers.base import GitProvider

BITBUCKET_HOST = "bitbucket.org"

_FILE_MARKERS = ("raw", "src")


class BitbucketProvider(GitProvider):
    """Provider for bitbucket.org URLs: ``owner/repo[/src|raw/branch/path]``."""

    provider_type = ProviderType.BITBUCKET
    hosts = (BITBUCKET_HOST,)
    clone_username = "x-token-auth"
    file_marker_hint = "url path to file should contain 'raw' or 'src' and a file name"

    API_BASE = f"https://api.{BITBUCKET_HOST}/2.0"

    def parse_path(self, host: str, path: str) -> RepoPath:
        parts = path.split("/", 4)
        if len(parts) < 2:
            raise PathFormatError(
                f"url path should contain <user>/<repo>, received: {path}",
                path=path,
            )

        owner, repo = parts[0], parts[1]
        if len(parts) == 2:
            return RepoPath(owner=owner, repo=repo)

        if len(parts) != 5:
            raise PathFormatError(
                f"url path should contain path to directory or file, received: {path}",
                path=path,
            )

        marker, branch, file_path = parts[2], parts[3], parts[4]
        if marker not in _FILE_MARKERS:
            raise PathFormatError(
                f"url path should contain 'raw' or 'src', received: {path}",
                path=path,
            )

        return RepoPath(
            owner=owner,
            repo=repo,
            branch=branch,
            path=file_path,
            is_file=has_file_extension(file_path),
        )

    def api_url(self, owner: str, repo: str) -> str:
        return f"{self.API_BASE}/repositories/{owner}/{repo}"

    def raw_file_url(self, owner: str, repo: str, branch: str, path: str) -> str:
        return f"{self.api_url(owner, repo)}/src/{branch}/{path}"
