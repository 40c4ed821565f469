"""Placeholder substitution.

Templates use mustache syntax: ``{{KEY}}`` inserts a value,
``{{#KEY}}...{{/KEY}}`` keeps its body when KEY is truthy and
``{{^KEY}}...{{/KEY}}`` when it is falsy or missing. Rendering is done by
pystache with HTML escaping disabled, since the output is config files and
Markdown rather than HTML.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

import pystache
from packaging.version import Version

from pkg_templates_yo import kinds

if TYPE_CHECKING:
    from pkg_templates_yo.template import PackageTemplate

_renderer = pystache.Renderer(escape=lambda text: text, missing_tags="ignore")


def render(text: str, context: Mapping[str, Any] | None = None) -> str:
    """Render ``text`` against ``context``. Missing keys render as empty."""
    return _renderer.render(text, dict(context or {}))


def merge_contexts(*contexts: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge contexts left to right; later contexts win on key collisions."""
    merged: dict[str, Any] = {}
    for ctx in contexts:
        if ctx:
            merged.update(ctx)
    return merged


def template_context(template: PackageTemplate) -> dict[str, Any]:
    """Build the default substitution context derived from a template."""
    # No prerelease marker here, unlike version_floor.
    v = template.julia_version
    plugins = template.plugins
    ctx: dict[str, Any] = {
        "USER": template.user,
        "VERSION": f"{v.major}.{v.minor}",
        "GH_PAGES": kinds.DOCUMENTER_TRAVIS in plugins,
        "GL_PAGES": kinds.DOCUMENTER_GITLAB in plugins,
        "CODECOV": kinds.CODECOV in plugins,
        "COVERALLS": kinds.COVERALLS in plugins,
    }
    # TODO: user-defined coverage plugins are not detected; this needs a
    # coverage capability on the Plugin protocol that GitLabCI can opt into.
    gitlab = plugins.get(kinds.GITLAB_CI)
    ctx["COVERAGE"] = (
        ctx["CODECOV"]
        or ctx["COVERALLS"]
        or (gitlab is not None and bool(getattr(gitlab, "coverage", False)))
    )
    return ctx


def substitute(
    text: str,
    template: PackageTemplate,
    extra: Mapping[str, Any] | None = None,
) -> str:
    """Render ``text`` with the template's default context plus ``extra`` on top."""
    return render(text, merge_contexts(template_context(template), extra))


def version_floor(version: Version | str) -> str:
    """Format a minimum Julia version as ``major.minor``.

    Prereleases of a ``major.minor.0`` version render as ``"major.minor-"``,
    meaning "at least the upcoming major.minor". String versions must be
    PEP 440-compatible; others raise ``packaging.version.InvalidVersion``.
    """
    v = Version(version) if isinstance(version, str) else version
    if not v.is_prerelease or v.micro > 0:
        return f"{v.major}.{v.minor}"
    return f"{v.major}.{v.minor}-"
