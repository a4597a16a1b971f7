"""Keep validated provider tokens in the OS keychain, one entry per host.

``raw.githubusercontent.com`` shares the ``github.com`` entry, since both
resolve to the same repositories. Every call degrades to a no-op when no
keychain backend is usable.
"""

from __future__ import annotations

from DevfileRes.logging_utils import get_logger
from DevfileRes.providers.github import GITHUB_HOST, RAW_GITHUB_HOST

logger = get_logger(__name__)

SERVICE_NAME = "DevfileRes"
_AVAILABLE = False

try:
    import keyring
    from keyring.backends import fail

    # keyring falls back to a backend that raises on every call
    _AVAILABLE = not isinstance(keyring.get_keyring(), fail.Keyring)
except Exception:
    logger.warning("keyring not available; token persistence disabled")


def is_available() -> bool:
    return _AVAILABLE


def entry_name(host: str) -> str:
    """Return the keychain username under which *host*'s token is kept."""
    if host == RAW_GITHUB_HOST:
        host = GITHUB_HOST
    return f"token:{host}"


def load(host: str) -> str | None:
    """Return the saved token for *host*, or None."""
    if not _AVAILABLE:
        return None
    try:
        return keyring.get_password(SERVICE_NAME, entry_name(host)) or None
    except Exception:
        logger.debug("Keychain lookup for %s failed", host)
        return None


def save(host: str, token: str) -> bool:
    """Save *token* for *host*. Returns True on success.

    Callers save only tokens the provider has accepted.
    """
    if not _AVAILABLE or not token:
        return False
    try:
        keyring.set_password(SERVICE_NAME, entry_name(host), token)
    except Exception:
        logger.warning("Failed to save the token for %s to the keychain", host)
        return False
    logger.info("Saved token for %s to the keychain", host)
    return True


def delete(host: str) -> bool:
    """Forget the token saved for *host*. Returns True if one was removed."""
    if not _AVAILABLE:
        return False
    try:
        keyring.delete_password(SERVICE_NAME, entry_name(host))
    except Exception:
        return False
    logger.info("Removed token for %s from the keychain", host)
    return True
