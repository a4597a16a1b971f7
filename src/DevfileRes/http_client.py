"""Single-shot HTTP GET shared by the token probe and the content fetcher."""

from __future__ import annotations

from http import HTTPStatus

import requests

from DevfileRes import config
from DevfileRes.exceptions import FetchError
from DevfileRes.logging_utils import get_logger
from DevfileRes.models import HTTPRequestParams

logger = get_logger(__name__)

USER_AGENT = "DevfileRes/1.0"


def _reason(resp: requests.Response) -> str:
    if resp.reason:
        return resp.reason
    try:
        return HTTPStatus(resp.status_code).phrase
    except ValueError:
        return ""


def http_get(params: HTTPRequestParams) -> bytes:
    """GET ``params.url`` and return the body.

    The token, when present, is sent as a bearer token. No retries are made.

    Raises:
        FetchError: transport failure, or a status outside 2xx. The message
            names the requested URL and status but never the token.
    """
    headers = {"User-Agent": USER_AGENT}
    if params.token:
        headers["Authorization"] = f"Bearer {params.token}"
    timeout = params.timeout if params.timeout is not None else config.default_timeout()

    logger.debug(
        "GET %s (timeout=%ss, token=%s)",
        params.url,
        timeout,
        "yes" if params.token else "no",
    )
    try:
        resp = requests.get(params.url, headers=headers, timeout=timeout)
    except requests.RequestException as exc:
        raise FetchError(
            f"failed to retrieve {params.url}: {exc}", url=params.url
        ) from exc

    if not 200 <= resp.status_code < 300:
        raise FetchError(
            f"failed to retrieve {params.url}, {resp.status_code}: {_reason(resp)}",
            url=params.url,
            status_code=resp.status_code,
        )
    return resp.content
