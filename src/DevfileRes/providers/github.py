"""GitHub URL grammar and endpoints."""

from __future__ import annotations

from DevfileRes.exceptions import PathFormatError
from DevfileRes.models import ProviderType, RepoPath
from DevfileRes.providers.base import GitProvider

GITHUB_HOST = "github.com"
RAW_GITHUB_HOST = "raw.githubusercontent.com"


class GitHubProvider(GitProvider):
    """Provider for github.com and raw.githubusercontent.com URLs."""

    provider_type = ProviderType.GITHUB
    hosts = (GITHUB_HOST, RAW_GITHUB_HOST)
    file_marker_hint = "url path to directory or file should contain 'tree' or 'blob'"

    API_BASE = "https://api.github.com"
    RAW_BASE = f"https://{RAW_GITHUB_HOST}"

    def parse_path(self, host: str, path: str) -> RepoPath:
        if host == RAW_GITHUB_HOST:
            return self._parse_raw(path)
        return self._parse_primary(path)

    def _parse_raw(self, path: str) -> RepoPath:
        # raw URLs carry no "blob"/"tree" marker: owner/repo/branch/path
        parts = path.split("/", 3)
        if len(parts) != 4:
            raise PathFormatError(
                "raw url path should contain <owner>/<repo>/<branch>/<path/to/file>, "
                f"received: {path}",
                path=path,
            )
        owner, repo, branch, file_path = parts
        return RepoPath(
            owner=owner, repo=repo, branch=branch, path=file_path, is_file=True
        )

    def _parse_primary(self, path: str) -> RepoPath:
        parts = path.split("/", 4)
        if len(parts) < 2:
            raise PathFormatError(
                f"url path should contain <user>/<repo>, received: {path}",
                path=path,
            )

        owner, repo = parts[0], parts[1]
        if len(parts) < 5:
            return RepoPath(owner=owner, repo=repo)

        marker, branch, file_path = parts[2], parts[3], parts[4]
        if marker == "tree":
            is_file = False
        elif marker == "blob":
            is_file = True
        else:
            raise PathFormatError(f"{self.file_marker_hint}, received: {path}", path=path)

        return RepoPath(
            owner=owner, repo=repo, branch=branch, path=file_path, is_file=is_file
        )

    def api_url(self, owner: str, repo: str) -> str:
        return f"{self.API_BASE}/repos/{owner}/{repo}"

    def raw_file_url(self, owner: str, repo: str, branch: str, path: str) -> str:
        return f"{self.RAW_BASE}/{owner}/{repo}/{branch}/{path}"

    def clone_host(self, host: str) -> str:
        return GITHUB_HOST
