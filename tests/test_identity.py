"""Tests for pkg_templates_yo.identity."""

from __future__ import annotations

import subprocess
from unittest.mock import patch

from pkg_templates_yo import identity
from pkg_templates_yo.identity import current_author_identity, current_user_identity


def _completed(returncode=0, stdout=""):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr="")


class TestGitConfig:
    def test_value_stripped(self):
        with patch("pkg_templates_yo.identity.subprocess.run", return_value=_completed(stdout="alice\n")) as run:
            assert identity.git_config("github.user") == "alice"
        assert run.call_args.args[0] == ["git", "config", "--get", "github.user"]

    def test_unset_key(self):
        with patch("pkg_templates_yo.identity.subprocess.run", return_value=_completed(returncode=1)):
            assert identity.git_config("github.user") == ""

    def test_git_missing(self):
        with patch("pkg_templates_yo.identity.subprocess.run", side_effect=FileNotFoundError):
            assert identity.git_config("user.name") == ""


class TestIdentities:
    # Imported at module load, before conftest replaces them on the module.
    def test_user(self, monkeypatch):
        monkeypatch.setattr(identity, "git_config", {"github.user": "alice"}.get)
        assert current_user_identity() == "alice"

    def test_author(self, monkeypatch):
        monkeypatch.setattr(identity, "git_config", {"user.name": "Jane Doe"}.get)
        assert current_author_identity() == "Jane Doe"
