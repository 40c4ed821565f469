"""Shared test fixtures for pkg-templates-yo."""

from __future__ import annotations

import logging

import pytest

from pkg_templates_yo import identity, output
from pkg_templates_yo.template import create_template


@pytest.fixture(autouse=True)
def _no_git_identity(monkeypatch):
    """Keep tests independent of the machine's git configuration."""
    monkeypatch.setattr(identity, "current_user_identity", lambda: "")
    monkeypatch.setattr(identity, "current_author_identity", lambda: "")


@pytest.fixture(autouse=True)
def _reset_output():
    """Reset the console singleton and logger between tests."""
    output._reset_console()
    yield
    output._reset_console()
    logger = logging.getLogger("pkg_templates_yo")
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture()
def make_template(tmp_path):
    """Build a template rooted in tmp_path with test-friendly defaults."""

    def _make(**kwargs):
        kwargs.setdefault("user", "alice")
        kwargs.setdefault("authors", "Jane Doe")
        kwargs.setdefault("dir", tmp_path)
        return create_template(**kwargs)

    return _make
