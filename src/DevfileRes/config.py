"""Environment-driven settings: request timeout and per-host tokens."""

from __future__ import annotations

import os

from DevfileRes import token_store
from DevfileRes.logging_utils import get_logger
from DevfileRes.providers.bitbucket import BITBUCKET_HOST
from DevfileRes.providers.github import GITHUB_HOST, RAW_GITHUB_HOST
from DevfileRes.providers.gitlab import GITLAB_HOST

logger = get_logger(__name__)

TIMEOUT_ENV_VAR = "DEVFILERES_HTTP_TIMEOUT"
DEFAULT_TIMEOUT = 30.0

# Host to environment variable mapping
HOST_TO_ENV_VAR: dict[str, str] = {
    GITHUB_HOST: "GITHUB_TOKEN",
    RAW_GITHUB_HOST: "GITHUB_TOKEN",
    GITLAB_HOST: "GITLAB_TOKEN",
    BITBUCKET_HOST: "BITBUCKET_TOKEN",
}


def default_timeout() -> float:
    """Return the request timeout in seconds used when a caller gives none."""
    raw = os.environ.get(TIMEOUT_ENV_VAR, "").strip()
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r", TIMEOUT_ENV_VAR, raw)
        return DEFAULT_TIMEOUT
    if value <= 0:
        logger.warning("Ignoring non-positive %s=%r", TIMEOUT_ENV_VAR, raw)
        return DEFAULT_TIMEOUT
    return value


def resolve_token(host: str, explicit_token: str | None = None) -> str | None:
    """Resolve an authentication token for *host*.

    Priority: explicit token > OS keychain > environment variable > None.
    """
    if explicit_token and explicit_token.strip():
        return explicit_token.strip()

    saved = token_store.load(host)
    if saved:
        return saved

    env_var = HOST_TO_ENV_VAR.get(host)
    if env_var:
        return os.environ.get(env_var) or None
    return None
