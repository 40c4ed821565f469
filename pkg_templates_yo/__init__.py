"""pkg-templates-yo: scaffold new Julia packages from composable plugin templates."""

from pkg_templates_yo.declare import Field, declare_plugin
from pkg_templates_yo.generate import Generator, GenerationResult, generate
from pkg_templates_yo.kinds import PluginKind
from pkg_templates_yo.licenses import DEFAULT_LICENSES, LicenseStore
from pkg_templates_yo.plugin import Badge, BasePlugin, CustomPlugin, ManagedPlugin, Plugin
from pkg_templates_yo.plugins import AppVeyor, Codecov, Coveralls, Documenter, GitLabCI, TravisCI
from pkg_templates_yo.render import render, substitute, version_floor
from pkg_templates_yo.template import PackageTemplate, create_template, describe

__version__ = "0.3.0"

__all__ = [
    "AppVeyor",
    "Badge",
    "BasePlugin",
    "Codecov",
    "Coveralls",
    "CustomPlugin",
    "DEFAULT_LICENSES",
    "Documenter",
    "Field",
    "GenerationResult",
    "Generator",
    "GitLabCI",
    "LicenseStore",
    "ManagedPlugin",
    "PackageTemplate",
    "Plugin",
    "PluginKind",
    "TravisCI",
    "__version__",
    "create_template",
    "declare_plugin",
    "describe",
    "generate",
    "render",
    "substitute",
    "version_floor",
]
