"""Download file content from git providers or plain URLs."""

from __future__ import annotations

from DevfileRes.exceptions import PathFormatError, URLParseError
from DevfileRes.git_url import GitUrl
from DevfileRes.http_client import http_get
from DevfileRes.logging_utils import get_logger
from DevfileRes.models import HTTPRequestParams
from DevfileRes.providers.registry import known_hosts
from DevfileRes.url_parser import parse_git_url

logger = get_logger(__name__)

_PARSE_ERROR_PREFIX = "failed to parse git repo. error: "


def is_git_provider_repo(url: str) -> bool:
    """Return True if *url* mentions one of the supported provider hosts."""
    return any(host in url for host in known_hosts())


def _require_file(git_url: GitUrl, received: str, prefix: str = "") -> None:
    if not git_url.is_file:
        hint = git_url.provider.file_marker_hint
        raise PathFormatError(
            f"{prefix}{hint}, received: {received}", path=git_url.path
        )


def download_git_file(
    git_url: GitUrl, token: str = "", timeout: float | None = None
) -> bytes:
    """Fetch the raw content of the file *git_url* points at.

    A token already set on *git_url* is reused without another probe.
    Otherwise *token*, when given, is validated and sent only if the
    repository is not public.
    """
    _require_file(git_url, git_url.path or git_url.repo_url)

    raw_url = git_url.raw_file_url()
    if token and not git_url.has_token and not git_url.is_public(timeout):
        git_url.set_token(token, timeout)

    logger.info("Downloading %s", raw_url)
    return http_get(git_url.request_params(raw_url, timeout))


def download_in_memory(params: HTTPRequestParams) -> bytes:
    """Fetch the bytes behind ``params.url``.

    Provider URLs are parsed and rewritten to the provider's raw-file
    endpoint; they must point at a file. When a token is given and the
    repository is not public, the token is validated before it is sent.
    Any other URL is fetched as-is, without the token.

    Raises:
        URLParseError: A provider URL could not be parsed. The subclass
            raised by the parser is kept.
        PathFormatError: A provider URL points at a directory or repository.
        TokenValidationError: The token was rejected by the provider.
        FetchError: Transport failure or non-2xx response, reported
            against the resolved URL.
    """
    if not is_git_provider_repo(params.url):
        return http_get(HTTPRequestParams(url=params.url, timeout=params.timeout))

    try:
        git_url = parse_git_url(params.url)
    except URLParseError as exc:
        raise exc.with_prefix(_PARSE_ERROR_PREFIX) from exc

    _require_file(git_url, params.url, prefix=_PARSE_ERROR_PREFIX)
    return download_git_file(git_url, params.token, params.timeout)
