"""Runtime environment helpers guarding the development identity shortcut."""

import os
from urllib.parse import urlparse
from typing import Optional, Set

_LOCAL_HOSTS: Set[str] = {"localhost", "127.0.0.1", "::1"}


def _hostname(url_value: str) -> Optional[str]:
    """Return hostname from a URL or bare host string."""
    url_value = (url_value or "").strip()
    if not url_value:
        return None
    candidate = url_value if "://" in url_value else f"http://{url_value}"
    return urlparse(candidate).hostname


def allowed_dev_hosts() -> Set[str]:
    """Local hosts plus anything listed in DEV_MODE_ALLOWED_HOSTS."""
    extra = os.getenv("DEV_MODE_ALLOWED_HOSTS", "")
    return set(_LOCAL_HOSTS) | {h.strip().lower() for h in extra.split(",") if h.strip()}


def dev_mode_requested() -> bool:
    return os.getenv("DEV_MODE", "false").lower() == "true"


def dev_mode_active() -> bool:
    """Return True if DEV_MODE is enabled and allowed; raise if misconfigured.

    With DEV_MODE every request acts as the development user, so it is only
    honoured when APP_BASE_URL points at a local (or explicitly allowed) host,
    or when ALLOW_DEV_MODE=true is set for hostless runs.
    """
    if not dev_mode_requested():
        return False

    hostname = _hostname(os.getenv("APP_BASE_URL", ""))
    if hostname:
        allowed = allowed_dev_hosts()
        if hostname.lower() not in allowed:
            raise RuntimeError(
                f"DEV_MODE=true is not permitted when APP_BASE_URL points to '{hostname}'. "
                f"Allowed hosts: {sorted(allowed)}"
            )
    elif os.getenv("ALLOW_DEV_MODE", "false").lower() != "true":
        raise RuntimeError(
            "DEV_MODE=true requires APP_BASE_URL to be set to a localhost URL "
            "or ALLOW_DEV_MODE=true for non-local execution."
        )
    return True
