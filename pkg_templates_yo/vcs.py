"""Git repository setup for generated packages."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from pkg_templates_yo.errors import VcsError

if TYPE_CHECKING:
    from pkg_templates_yo.template import PackageTemplate

logger = logging.getLogger(__name__)

DEFAULT_BRANCH = "master"


def remote_url(template: PackageTemplate, pkg_name: str) -> str:
    """Return the ``origin`` URL for a package, HTTPS or SSH per ``template.ssh``."""
    if template.ssh:
        return f"git@{template.host}:{template.user}/{pkg_name}.jl.git"
    return f"https://{template.host}/{template.user}/{pkg_name}.jl"


class VcsInitializer(Protocol):
    def initialize(self, root: Path, template: PackageTemplate, pkg_name: str) -> None: ...


class GitInitializer:
    """Create a repository with a default branch, an origin remote and an initial commit."""

    def __init__(self, branch: str = DEFAULT_BRANCH, git: str = "git") -> None:
        self.branch = branch
        self.git = git

    def _run(self, root: Path, *args: str) -> None:
        cmd = [self.git, *args]
        try:
            subprocess.run(cmd, cwd=root, capture_output=True, text=True, check=True)
        except FileNotFoundError as exc:
            raise VcsError(" ".join(cmd), "git executable not found") from exc
        except subprocess.CalledProcessError as exc:
            raise VcsError(" ".join(cmd), exc.stderr.strip()) from exc

    def initialize(self, root: Path, template: PackageTemplate, pkg_name: str) -> None:
        url = remote_url(template, pkg_name)
        logger.debug("Initializing git repository in %s (origin %s)", root, url)
        self._run(root, "init")
        self._run(root, "checkout", "-b", self.branch)
        self._run(root, "remote", "add", "origin", url)
        self._run(root, "add", "-A")
        self._run(root, "commit", "-m", f"Files generated by pkg-templates-yo for {pkg_name}")
