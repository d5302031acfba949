"""Development identity guard.

With ``DEV_MODE=true`` every request is served as a fixed local account, so
the switch is honoured only on a machine the developer controls: the host of
``APP_BASE_URL`` must be local or listed in ``DEV_MODE_ALLOWED_HOSTS``.
Running without ``APP_BASE_URL`` needs ``ALLOW_DEV_MODE=true`` as well.
"""

import os
from urllib.parse import urlparse
from typing import FrozenSet, Optional, Tuple

DEV_USER_EMAIL = "dev@localhost"
DEV_USER_NAME = "Development User"

LOCAL_HOSTS: FrozenSet[str] = frozenset({"localhost", "127.0.0.1", "::1"})


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").strip().lower() == "true"


def _base_url_host() -> Optional[str]:
    raw = os.getenv("APP_BASE_URL", "").strip()
    if not raw:
        return None
    if "://" not in raw:
        raw = f"http://{raw}"
    host = urlparse(raw).hostname
    return host.lower() if host else None


def allowed_dev_hosts() -> FrozenSet[str]:
    listed = os.getenv("DEV_MODE_ALLOWED_HOSTS", "").split(",")
    return LOCAL_HOSTS | {entry.strip().lower() for entry in listed if entry.strip()}


def dev_mode_requested() -> bool:
    return _env_flag("DEV_MODE")


def dev_mode_active() -> bool:
    """Return True when the dev identity may be used; raise RuntimeError if DEV_MODE is set where it is not allowed."""
    if not dev_mode_requested():
        return False

    host = _base_url_host()
    if host is None:
        if not _env_flag("ALLOW_DEV_MODE"):
            raise RuntimeError("DEV_MODE needs APP_BASE_URL on a local host, or ALLOW_DEV_MODE=true")
        return True

    permitted = allowed_dev_hosts()
    if host not in permitted:
        raise RuntimeError(f"DEV_MODE refused for APP_BASE_URL host '{host}'; allowed: {sorted(permitted)}")
    return True


def dev_identity() -> Optional[Tuple[str, str]]:
    """Return ``(display_name, email)`` of the dev account, or None outside dev mode."""
    if dev_mode_active():
        return DEV_USER_NAME, DEV_USER_EMAIL
    return None
