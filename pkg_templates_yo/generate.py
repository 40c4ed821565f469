"""Package generation: the driver that turns a template into files on disk.

Sequence for ``Generator.generate(template, pkg_name)``:
1. Resolve the package root (``<template.dir>/<pkg_name>``)
2. Write the package skeleton (module, Project.toml, tests)
3. Write README.md, .gitignore (if git), LICENSE (if licensed), REQUIRE
4. Run every plugin's file generation
5. Initialize git (if enabled and configured)
6. Register the package in the workspace (if enabled and configured)

Nothing is rolled back on failure; files written before an error remain.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from pkg_templates_yo.errors import InvalidPackageNameError
from pkg_templates_yo.files import DEFAULTS_DIR, gen_file
from pkg_templates_yo.kinds import BADGE_ORDER
from pkg_templates_yo.licenses import DEFAULT_LICENSES, LicenseStore
from pkg_templates_yo.plugin import Plugin, rendered_badges
from pkg_templates_yo.render import substitute, version_floor
from pkg_templates_yo.template import PackageTemplate
from pkg_templates_yo.vcs import VcsInitializer
from pkg_templates_yo.workspace import Workspace

logger = logging.getLogger(__name__)

# Always ignored, regardless of plugins.
BASE_IGNORE_PATTERNS = (".DS_Store", "*~", "*.swp")
MANIFEST_PATTERN = "/Manifest.toml"
LANGUAGE_NAME = "julia"


@dataclass
class GenerationResult:
    """Summary of a generation run. Paths are relative to ``root``."""

    root: Path
    files: list[str] = field(default_factory=list)
    plugin_files: list[str] = field(default_factory=list)


def splitjl(pkg_name: str) -> str:
    """Remove a trailing ``.jl`` from a package name."""
    return pkg_name[:-3] if pkg_name.endswith(".jl") else pkg_name


def badge_ordered_plugins(template: PackageTemplate) -> list[Plugin]:
    """Return plugins in README badge order.

    Well-known kinds come first in ``BADGE_ORDER``; the rest follow, sorted by
    description.
    """
    plugins = template.plugins
    known = [plugins[k] for k in BADGE_ORDER if k in plugins]
    rest = sorted(
        (p for k, p in plugins.items() if k not in BADGE_ORDER),
        key=lambda p: p.describe(),
    )
    return known + rest


def readme_text(template: PackageTemplate, pkg_name: str) -> str:
    lines: list[str] = []
    for plugin in badge_ordered_plugins(template):
        lines.extend(rendered_badges(plugin, template.user, pkg_name))
    text = f"# {pkg_name}\n"
    if lines:
        text += "\n" + "\n".join(lines) + "\n"
    return substitute(text, template, {"PKGNAME": pkg_name})


def gitignore_text(template: PackageTemplate) -> str:
    patterns = list(BASE_IGNORE_PATTERNS)
    if not template.manifest:
        patterns.append(MANIFEST_PATTERN)
    for plugin in template.plugins.values():
        patterns.extend(plugin.ignore_patterns())
    unique = list(dict.fromkeys(patterns))
    return substitute("\n".join(unique) + "\n", template)


def license_text(template: PackageTemplate, licenses: LicenseStore = DEFAULT_LICENSES) -> str:
    header = f"Copyright (c) {date.today().year} {template.authors}\n"
    return substitute(header + licenses.text(template.license), template)


def require_text(template: PackageTemplate) -> str:
    return substitute(f"{LANGUAGE_NAME} {version_floor(template.julia_version)}", template)


class Generator:
    """Write packages to disk from a ``PackageTemplate``.

    ``defaults_dir`` holds the skeleton templates (``module.jl``,
    ``Project.toml``, ``runtests.jl``). ``vcs`` and ``workspace`` are optional
    collaborators; when absent the matching step is skipped.
    """

    def __init__(
        self,
        *,
        licenses: LicenseStore = DEFAULT_LICENSES,
        defaults_dir: str | Path = DEFAULTS_DIR,
        vcs: VcsInitializer | None = None,
        workspace: Workspace | None = None,
    ) -> None:
        self.licenses = licenses
        self.defaults_dir = Path(defaults_dir)
        self.vcs = vcs
        self.workspace = workspace

    def _default(self, name: str) -> str:
        return (self.defaults_dir / name).read_text(encoding="utf-8")

    def generate(self, template: PackageTemplate, pkg_name: str) -> GenerationResult:
        pkg_name = splitjl(pkg_name)
        if not pkg_name.isidentifier():
            raise InvalidPackageNameError(pkg_name)

        root = template.dir / pkg_name
        result = GenerationResult(root=root)
        logger.info("Generating %s in %s", pkg_name, root)

        def write(rel: str, text: str) -> None:
            gen_file(root / rel, text)
            result.files.append(rel)

        skeleton = {
            "PKGNAME": pkg_name,
            "UUID": str(uuid.uuid4()),
            "AUTHORS": template.authors,
        }
        write(f"src/{pkg_name}.jl", substitute(self._default("module.jl"), template, skeleton))
        write("Project.toml", substitute(self._default("Project.toml"), template, skeleton))
        write("test/runtests.jl", substitute(self._default("runtests.jl"), template, skeleton))

        write("README.md", readme_text(template, pkg_name))
        if template.git:
            write(".gitignore", gitignore_text(template))
        if template.license:
            write("LICENSE", license_text(template, self.licenses))
        write("REQUIRE", require_text(template))

        for plugin in template.plugins.values():
            generated = plugin.generate(template, pkg_name)
            logger.debug("Plugin %s generated %s", plugin.kind, generated)
            result.plugin_files.extend(generated)

        if template.git:
            if self.vcs is not None:
                self.vcs.initialize(root, template, pkg_name)
            else:
                logger.debug("No VCS initializer configured; skipping git setup")
        if template.develop:
            if self.workspace is not None:
                self.workspace.register(root, pkg_name)
            else:
                logger.debug("No workspace configured; skipping registration")

        return result


def generate(
    template: PackageTemplate,
    pkg_name: str,
    *,
    licenses: LicenseStore = DEFAULT_LICENSES,
) -> GenerationResult:
    """Generate files for ``pkg_name`` without git setup or workspace registration."""
    return Generator(licenses=licenses).generate(template, pkg_name)
