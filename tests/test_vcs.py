"""Tests for pkg_templates_yo.vcs."""

from __future__ import annotations

import subprocess
from unittest.mock import patch

import pytest

from pkg_templates_yo.errors import VcsError
from pkg_templates_yo.vcs import GitInitializer, remote_url


class TestRemoteUrl:
    def test_https(self, make_template):
        assert remote_url(make_template(), "Foo") == "https://github.com/alice/Foo.jl"

    def test_ssh(self, make_template):
        t = make_template(ssh=True, host="gitlab.com")
        assert remote_url(t, "Foo") == "git@gitlab.com:alice/Foo.jl.git"


class TestGitInitializer:
    def test_command_sequence(self, make_template, tmp_path):
        t = make_template()
        with patch("pkg_templates_yo.vcs.subprocess.run") as run:
            GitInitializer().initialize(tmp_path, t, "Foo")
        commands = [c.args[0] for c in run.call_args_list]
        assert commands[:4] == [
            ["git", "init"],
            ["git", "checkout", "-b", "master"],
            ["git", "remote", "add", "origin", "https://github.com/alice/Foo.jl"],
            ["git", "add", "-A"],
        ]
        assert commands[4][:3] == ["git", "commit", "-m"]
        assert all(c.kwargs["cwd"] == tmp_path for c in run.call_args_list)

    def test_custom_branch(self, make_template, tmp_path):
        with patch("pkg_templates_yo.vcs.subprocess.run") as run:
            GitInitializer(branch="main").initialize(tmp_path, make_template(), "Foo")
        assert run.call_args_list[1].args[0] == ["git", "checkout", "-b", "main"]

    def test_command_failure(self, make_template, tmp_path):
        err = subprocess.CalledProcessError(128, ["git", "init"], stderr="fatal: nope\n")
        with patch("pkg_templates_yo.vcs.subprocess.run", side_effect=err):
            with pytest.raises(VcsError, match="fatal: nope"):
                GitInitializer().initialize(tmp_path, make_template(), "Foo")

    def test_git_missing(self, make_template, tmp_path):
        with patch("pkg_templates_yo.vcs.subprocess.run", side_effect=FileNotFoundError):
            with pytest.raises(VcsError, match="not found"):
                GitInitializer().initialize(tmp_path, make_template(), "Foo")
