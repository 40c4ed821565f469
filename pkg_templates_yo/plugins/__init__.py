"""Built-in plugins."""

from pkg_templates_yo.plugins.documenter import Documenter
from pkg_templates_yo.plugins.managed import (
    AppVeyor,
    Codecov,
    Coveralls,
    GitLabCI,
    GitLabCIPlugin,
    TravisCI,
)

__all__ = [
    "AppVeyor",
    "Codecov",
    "Coveralls",
    "Documenter",
    "GitLabCI",
    "GitLabCIPlugin",
    "TravisCI",
]
