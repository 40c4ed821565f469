"""Tests for pkg_templates_yo.workspace."""

from __future__ import annotations

import subprocess
from unittest.mock import patch

import pytest

from pkg_templates_yo.errors import WorkspaceError
from pkg_templates_yo.workspace import JuliaWorkspace


def _completed(returncode=0, stderr=""):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout="", stderr=stderr)


class TestJuliaWorkspace:
    def test_missing_executable(self, tmp_path):
        with patch("pkg_templates_yo.workspace.shutil.which", return_value=None):
            with pytest.raises(WorkspaceError, match="'julia' not found"):
                JuliaWorkspace().register(tmp_path, "Foo")

    def test_develop_called(self, tmp_path):
        with patch("pkg_templates_yo.workspace.shutil.which", return_value="/usr/bin/julia"), patch(
            "pkg_templates_yo.workspace.subprocess.run", return_value=_completed()
        ) as run:
            JuliaWorkspace().register(tmp_path / "Foo", "Foo")
        cmd = run.call_args.args[0]
        assert cmd[0] == "/usr/bin/julia"
        assert "Pkg.develop" in cmd[-1]
        assert str(tmp_path / "Foo") in cmd[-1]

    def test_failure(self, tmp_path):
        with patch("pkg_templates_yo.workspace.shutil.which", return_value="/usr/bin/julia"), patch(
            "pkg_templates_yo.workspace.subprocess.run",
            return_value=_completed(returncode=1, stderr="ERROR: boom\n"),
        ):
            with pytest.raises(WorkspaceError, match="boom"):
                JuliaWorkspace().register(tmp_path, "Foo")
