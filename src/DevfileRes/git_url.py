"""Repository coordinates resolved from a git provider URL."""

from __future__ import annotations

from dataclasses import dataclass

from DevfileRes.exceptions import FetchError, TokenValidationError
from DevfileRes.http_client import http_get
from DevfileRes.logging_utils import get_logger
from DevfileRes.models import HTTPRequestParams, RepoPath
from DevfileRes.providers.base import GitProvider
from DevfileRes.providers.registry import get_provider

logger = get_logger(__name__)


@dataclass(frozen=True)
class GitUrl:
    """Where a file or directory lives in a hosted git repository.

    The access token is not a field: it cannot be passed to the
    constructor, is absent from ``repr`` and equality, and is only set by
    :meth:`set_token` after the provider accepted it.
    """

    protocol: str
    host: str
    owner: str
    repo: str
    branch: str = ""
    path: str = ""
    is_file: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "_token", "")

    @classmethod
    def from_repo_path(cls, protocol: str, host: str, repo_path: RepoPath) -> GitUrl:
        return cls(
            protocol=protocol,
            host=host,
            owner=repo_path.owner,
            repo=repo_path.repo,
            branch=repo_path.branch,
            path=repo_path.path,
            is_file=repo_path.is_file,
        )

    @property
    def provider(self) -> GitProvider | None:
        return get_provider(self.host)

    @property
    def has_token(self) -> bool:
        return bool(self._token)

    @property
    def repo_url(self) -> str:
        """``<protocol>://<host>/<owner>/<repo>.git`` without branch or path."""
        return f"{self.protocol}://{self.host}/{self.owner}/{self.repo}.git"

    def api_url(self) -> str:
        """Return the metadata endpoint probed to check repository access."""
        provider = self.provider
        if provider is None:
            return self.repo_url
        return provider.api_url(self.owner, self.repo)

    def raw_file_url(self) -> str:
        """Return the endpoint serving this file's raw content."""
        provider = self.provider
        if provider is None:
            raise ValueError(f"no raw file endpoint for host {self.host}")
        return provider.raw_file_url(self.owner, self.repo, self.branch, self.path)

    def authenticated_clone_url(self) -> str:
        """Return the remote URL for ``git clone``, with the token embedded.

        The result contains the token; hand it to git and nowhere else.
        """
        provider = self.provider
        host = provider.clone_host(self.host) if provider else self.host
        if not self._token:
            return f"{self.protocol}://{host}/{self.owner}/{self.repo}.git"
        username = provider.clone_username if provider else "token"
        return (
            f"{self.protocol}://{username}:{self._token}@{host}"
            f"/{self.owner}/{self.repo}.git"
        )

    # -- token handling ----------------------------------------------------

    def redact(self, text: str) -> str:
        """Mask every occurrence of the stored token in *text*."""
        if not self._token:
            return text
        return text.replace(self._token, "***")

    def request_params(self, url: str, timeout: float | None = None) -> HTTPRequestParams:
        """Build a GET for *url* carrying the validated token, if any."""
        return HTTPRequestParams(url=url, token=self._token, timeout=timeout)

    def set_token(self, token: str, timeout: float | None = None) -> None:
        """Validate *token* against the repository and keep it on success.

        On failure the stored token is cleared.

        Raises:
            TokenValidationError: The probe request failed.
        """
        try:
            self._validate_token(HTTPRequestParams(url="", token=token, timeout=timeout))
        except TokenValidationError as exc:
            object.__setattr__(self, "_token", "")
            raise TokenValidationError(f"failed to set token. error: {exc}") from exc
        object.__setattr__(self, "_token", token)

    def is_public(self, timeout: float | None = None) -> bool:
        """Return True if the repository answers the probe without a token."""
        try:
            self._validate_token(HTTPRequestParams(url="", token="", timeout=timeout))
        except TokenValidationError:
            return False
        return True

    def _validate_token(self, params: HTTPRequestParams) -> None:
        api_url = self.api_url()
        logger.debug("Probing %s (token=%s)", api_url, "yes" if params.token else "no")
        try:
            body = http_get(
                HTTPRequestParams(url=api_url, token=params.token, timeout=params.timeout)
            )
        except FetchError as exc:
            raise TokenValidationError(str(exc)) from exc
        if not body:
            raise TokenValidationError(f"empty response from {api_url}")
