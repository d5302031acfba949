"""System information exposed to the front end, sourced from the environment."""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional, TypedDict


class SystemInfo(TypedDict):
    showSwaggerUILink: bool
    sourceRepo: Optional[str]
    commitMessage: Optional[str]
    commitId: Optional[str]
    githubUrl: Optional[str]


def _normalize_bool(value: str | None, default: bool = False) -> bool:
    """Return normalized boolean from environment-style value."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"", "0", "false", "no", "off"}:
        return False
    if normalized in {"1", "true", "yes", "on"}:
        return True
    return default


def _env_or_none(name: str) -> Optional[str]:
    value = (os.getenv(name) or "").strip()
    return value or None


@lru_cache(maxsize=None)
def get_system_info() -> SystemInfo:
    """Return the cached system information."""
    source_repo = _env_or_none("SOURCE_REPO")
    commit_id = _env_or_none("COMMIT_ID")
    github_url = None
    if source_repo and commit_id:
        github_url = f"{source_repo.rstrip('/')}/commit/{commit_id}"
    return SystemInfo(
        showSwaggerUILink=_normalize_bool(os.getenv("SHOW_SWAGGER_UI_LINK")),
        sourceRepo=source_repo,
        commitMessage=_env_or_none("COMMIT_MESSAGE"),
        commitId=commit_id,
        githubUrl=github_url,
    )


def refresh_system_info_cache() -> None:
    """Invalidate cached values (useful for tests)."""
    get_system_info.cache_clear()
