"""Registering generated packages in the local Julia development environment."""

from __future__ import annotations

import json
import shutil
import subprocess
from pathlib import Path
from typing import Protocol

from pkg_templates_yo.errors import WorkspaceError


class Workspace(Protocol):
    def register(self, root: Path, pkg_name: str) -> None: ...


class JuliaWorkspace:
    """Run ``Pkg.develop`` on the generated package in the active Julia environment."""

    def __init__(self, julia: str = "julia") -> None:
        self.julia = julia

    def register(self, root: Path, pkg_name: str) -> None:
        exe = shutil.which(self.julia)
        if exe is None:
            raise WorkspaceError(f"'{self.julia}' not found on PATH")
        code = f"using Pkg; Pkg.develop(PackageSpec(path={json.dumps(str(root))}))"
        result = subprocess.run(
            [exe, "--startup-file=no", "-e", code],
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            raise WorkspaceError(f"Pkg.develop({pkg_name}) failed: {result.stderr.strip()}")
