"""GitLab URL grammar and endpoints."""

from __future__ import annotations

from urllib.parse import quote

from DevfileRes.exceptions import PathFormatError
from DevfileRes.file_filter import has_file_extension
from DevfileRes.models import ProviderType, RepoPath
from DevfileRes.providers.base import GitProvider

GITLAB_HOST = "gitlab.com"

_FILE_MARKERS = ("blob", "tree", "raw")


class GitLabProvider(GitProvider):
    """Provider for gitlab.com URLs.

    GitLab separates the project from the file part with ``/-/``:
    ``owner/repo/-/blob/branch/path``. There is no marker telling files
    from directories, so a path with an extension is taken to be a file.
    """

    provider_type = ProviderType.GITLAB
    hosts = (GITLAB_HOST,)
    file_marker_hint = "url path to file should contain 'blob', 'tree' or 'raw' and a file name"

    API_BASE = f"https://{GITLAB_HOST}/api/v4"

    def parse_path(self, host: str, path: str) -> RepoPath:
        split = path.split("/-/")

        org = split[0].split("/", 1)
        if len(org) < 2:
            raise PathFormatError(
                f"url path should contain <user>/<repo>, received: {path}",
                path=path,
            )
        owner, repo = org

        if len(split) < 2:
            return RepoPath(owner=owner, repo=repo)

        file_part = split[1].split("/", 2)
        if len(file_part) != 3 or file_part[0] not in _FILE_MARKERS:
            raise PathFormatError(
                f"url path should contain 'blob' or 'tree' or 'raw', received: {path}",
                path=path,
            )

        _, branch, file_path = file_part
        return RepoPath(
            owner=owner,
            repo=repo,
            branch=branch,
            path=file_path,
            is_file=has_file_extension(file_path),
        )

    def _project_id(self, owner: str, repo: str) -> str:
        return quote(f"{owner}/{repo}", safe="")

    def api_url(self, owner: str, repo: str) -> str:
        return f"{self.API_BASE}/projects/{self._project_id(owner, repo)}"

    def raw_file_url(self, owner: str, repo: str, branch: str, path: str) -> str:
        return (
            f"{self.api_url(owner, repo)}/repository/files/"
            f"{quote(path, safe='')}/raw?ref={quote(branch, safe='')}"
        )
