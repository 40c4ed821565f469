"""User and author lookups backed by the global git configuration."""

from __future__ import annotations

import logging
import subprocess

logger = logging.getLogger(__name__)


def git_config(key: str) -> str:
    """Return the value of a git config key, or "" if unset or git is unavailable."""
    try:
        result = subprocess.run(
            ["git", "config", "--get", key],
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        logger.debug("git executable not found while reading %s", key)
        return ""
    if result.returncode != 0:
        return ""
    return result.stdout.strip()


def current_user_identity() -> str:
    """Return the code-hosting username (``github.user``)."""
    return git_config("github.user")


def current_author_identity() -> str:
    """Return the author name (``user.name``)."""
    return git_config("user.name")
