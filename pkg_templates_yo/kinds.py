"""Plugin kind identifiers.

A template holds at most one plugin per kind. Generic plugins carry a
parameter so that, e.g., ``Documenter[TravisCI]`` and ``Documenter[GitLabCI]``
are distinct kinds.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class PluginKind:
    """Type identity of a plugin, used as the template's plugin-dict key."""

    name: str
    param: str | None = None

    def __str__(self) -> str:
        if self.param is None:
            return self.name
        return f"{self.name}[{self.param}]"


TRAVIS_CI = PluginKind("TravisCI")
APPVEYOR = PluginKind("AppVeyor")
GITLAB_CI = PluginKind("GitLabCI")
CODECOV = PluginKind("Codecov")
COVERALLS = PluginKind("Coveralls")
DOCUMENTER = PluginKind("Documenter")
DOCUMENTER_TRAVIS = PluginKind("Documenter", "TravisCI")
DOCUMENTER_GITLAB = PluginKind("Documenter", "GitLabCI")

# Badges of these kinds are written first, in this order.
BADGE_ORDER: tuple[PluginKind, ...] = (
    DOCUMENTER_GITLAB,
    DOCUMENTER_TRAVIS,
    TRAVIS_CI,
    APPVEYOR,
    GITLAB_CI,
    CODECOV,
    COVERALLS,
)
