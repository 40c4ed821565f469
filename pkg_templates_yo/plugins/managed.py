"""Built-in managed single-file plugins for CI and coverage services."""

from __future__ import annotations

from typing import Any

from pkg_templates_yo.declare import Field, declare_plugin
from pkg_templates_yo.files import DEFAULTS_DIR
from pkg_templates_yo.plugin import Badge, ManagedPlugin

COVERAGE_PATTERNS = ("*.jl.cov", "*.jl.*.cov", "*.jl.mem")


def _doc(name: str, service: str, url: str) -> str:
    return (
        f"Add {name} to a template's plugins to integrate generated packages "
        f"with {service} ({url})."
    )


AppVeyor = declare_plugin(
    "AppVeyor",
    "appveyor.yml",
    ".appveyor.yml",
    defaults_dir=DEFAULTS_DIR,
    badges=Badge(
        "Build Status",
        "https://ci.appveyor.com/api/projects/status/github/{{USER}}/{{PKGNAME}}.jl?svg=true",
        "https://ci.appveyor.com/project/{{USER}}/{{PKGNAME}}-jl",
    ),
    doc=_doc("AppVeyor", "AppVeyor", "https://appveyor.com"),
)

Codecov = declare_plugin(
    "Codecov",
    None,
    ".codecov.yml",
    gitignore=COVERAGE_PATTERNS,
    badges=Badge(
        "Coverage",
        "https://codecov.io/gh/{{USER}}/{{PKGNAME}}.jl/branch/master/graph/badge.svg",
        "https://codecov.io/gh/{{USER}}/{{PKGNAME}}.jl",
    ),
    doc=_doc("Codecov", "Codecov", "https://codecov.io"),
)

Coveralls = declare_plugin(
    "Coveralls",
    None,
    ".coveralls.yml",
    gitignore=COVERAGE_PATTERNS,
    badges=Badge(
        "Coverage",
        "https://coveralls.io/repos/github/{{USER}}/{{PKGNAME}}.jl/badge.svg?branch=master",
        "https://coveralls.io/github/{{USER}}/{{PKGNAME}}.jl?branch=master",
    ),
    doc=_doc("Coveralls", "Coveralls", "https://coveralls.io"),
)

TravisCI = declare_plugin(
    "TravisCI",
    "travis.yml",
    ".travis.yml",
    defaults_dir=DEFAULTS_DIR,
    badges=Badge(
        "Build Status",
        "https://travis-ci.com/{{USER}}/{{PKGNAME}}.jl.svg?branch=master",
        "https://travis-ci.com/{{USER}}/{{PKGNAME}}.jl",
    ),
    doc=_doc("TravisCI", "Travis CI", "https://travis-ci.com"),
)


class GitLabCIPlugin(ManagedPlugin):
    """GitLab CI; the ``coverage`` flag toggles coverage reporting."""

    def ignore_patterns(self) -> list[str]:
        return list(COVERAGE_PATTERNS) if self.coverage else []

    def badges(self) -> list[Badge]:
        bs = [
            Badge(
                "Build Status",
                "https://gitlab.com/{{USER}}/{{PKGNAME}}.jl/badges/master/build.svg",
                "https://gitlab.com/{{USER}}/{{PKGNAME}}.jl/pipelines",
            )
        ]
        if self.coverage:
            bs.append(
                Badge(
                    "Coverage",
                    "https://gitlab.com/{{USER}}/{{PKGNAME}}.jl/badges/master/coverage.svg",
                    "https://gitlab.com/{{USER}}/{{PKGNAME}}.jl/commits/master",
                )
            )
        return bs

    def context(self) -> dict[str, Any]:
        return {**super().context(), "GITLAB_COVERAGE": self.coverage}

    def describe(self) -> str:
        state = "enabled" if self.coverage else "disabled"
        return f"{super().describe()}, coverage {state}"


GitLabCI = declare_plugin(
    "GitLabCI",
    "gitlab-ci.yml",
    ".gitlab-ci.yml",
    Field("coverage", bool, True),
    defaults_dir=DEFAULTS_DIR,
    plugin_class=GitLabCIPlugin,
    doc=(
        "Add GitLabCI to a template's plugins to integrate generated packages with "
        "GitLab CI (https://docs.gitlab.com/ce/ci). If coverage is set, code "
        "coverage analysis is enabled."
    ),
)
