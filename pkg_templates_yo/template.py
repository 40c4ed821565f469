"""The package template: immutable settings shared by every generated package.

Build one with ``create_template()``, which validates its inputs; the
dataclass constructor itself performs no validation.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Iterable, Sequence
from urllib.parse import urlparse

from packaging.version import InvalidVersion, Version

from pkg_templates_yo import identity
from pkg_templates_yo.errors import (
    InvalidHostError,
    InvalidVersionError,
    MissingIdentityError,
    UnknownLicenseError,
)
from pkg_templates_yo.files import tilde
from pkg_templates_yo.kinds import PluginKind
from pkg_templates_yo.licenses import DEFAULT_LICENSES, LicenseStore
from pkg_templates_yo.plugin import Plugin
from pkg_templates_yo.render import version_floor

logger = logging.getLogger(__name__)

DEFAULT_HOST = "github.com"
DEFAULT_LICENSE = "MIT"
DEFAULT_JULIA_VERSION = Version("1.0.0")


def default_dir() -> Path:
    """Return the Julia development directory (``JULIA_PKG_DEVDIR`` or ``~/.julia/dev``)."""
    devdir = os.environ.get("JULIA_PKG_DEVDIR", "").strip()
    return Path(devdir) if devdir else Path("~") / ".julia" / "dev"


@dataclass(frozen=True)
class PackageTemplate:
    """Settings used to generate packages.

    The ``plugins`` mapping may be edited in place after construction; doing
    so skips validation.
    """

    user: str
    host: str = DEFAULT_HOST
    license: str = DEFAULT_LICENSE
    authors: str = ""
    dir: Path = field(default_factory=lambda: Path.cwd())
    julia_version: Version = DEFAULT_JULIA_VERSION
    ssh: bool = False
    manifest: bool = False
    git: bool = True
    develop: bool = True
    plugins: dict[PluginKind, Plugin] = field(default_factory=dict)

    def __str__(self) -> str:
        return describe(self)


def _normalize_host(host: str) -> str:
    url = host if "://" in host else f"https://{host}"
    try:
        hostname = urlparse(url).hostname
    except ValueError as exc:
        raise InvalidHostError(host) from exc
    if not hostname:
        raise InvalidHostError(host)
    return hostname


def _collect_plugins(plugins: Sequence[Plugin]) -> dict[PluginKind, Plugin]:
    plugin_dict = {p.kind: p for p in plugins}
    if len(plugins) != len(plugin_dict):
        logger.warning(
            "Plugin list contained duplicates, only the last of each kind was kept"
        )
    return plugin_dict


def create_template(
    *,
    user: str | None = None,
    host: str = DEFAULT_HOST,
    license: str = DEFAULT_LICENSE,
    authors: str | Iterable[str] | None = None,
    dir: str | Path | None = None,
    julia_version: Version | str = DEFAULT_JULIA_VERSION,
    ssh: bool = False,
    manifest: bool = False,
    git: bool = True,
    develop: bool = True,
    plugins: Sequence[Plugin] = (),
    licenses: LicenseStore = DEFAULT_LICENSES,
) -> PackageTemplate:
    """Validate settings and build a ``PackageTemplate``.

    Args:
        user: Code-hosting username. Falls back to git config ``github.user``.
        host: Code-hosting host or URL; only the hostname is kept.
        license: License identifier, or "" for no license.
        authors: Author name(s) for the license. A list is joined with ", ".
            Falls back to git config ``user.name``.
        dir: Directory generated packages go in. Made absolute here.
        julia_version: Minimum supported Julia version. Strings are parsed as
            PEP 440 versions, so only PEP 440-compatible prerelease tags
            (``-DEV``, ``-rc1``, ``-beta2``) are accepted.
        ssh: Use an SSH remote URL.
        manifest: Commit ``Manifest.toml``.
        git: Create a git repository.
        develop: Register generated packages in the development workspace.
        plugins: Plugins to include; the last plugin of each kind wins.
        licenses: Store used to validate ``license``.

    Raises:
        MissingIdentityError: No username given or configured.
        InvalidHostError: ``host`` has no hostname.
        UnknownLicenseError: ``license`` is not in ``licenses``.
        InvalidVersionError: ``julia_version`` is not a parseable version.
    """
    user = (user or "").strip() or identity.current_user_identity()
    if not user:
        raise MissingIdentityError()

    hostname = _normalize_host(host)

    if license and not licenses.exists(license):
        raise UnknownLicenseError(license)

    if authors is None:
        author_str = identity.current_author_identity()
    elif isinstance(authors, str):
        author_str = authors
    else:
        author_str = ", ".join(authors)

    out_dir = Path(os.path.abspath(Path(dir if dir is not None else default_dir()).expanduser()))

    if isinstance(julia_version, str):
        try:
            version = Version(julia_version)
        except InvalidVersion as exc:
            raise InvalidVersionError("julia_version", julia_version) from exc
    else:
        version = julia_version

    return PackageTemplate(
        user=user,
        host=hostname,
        license=license,
        authors=author_str,
        dir=out_dir,
        julia_version=version,
        ssh=ssh,
        manifest=manifest,
        git=git,
        develop=develop,
        plugins=_collect_plugins(plugins),
    )


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def describe(template: PackageTemplate) -> str:
    """Render a template as deterministic, human-readable text."""
    spc = "  "
    lines = [
        "Template:",
        f"{spc}→ User: {template.user or 'None'}",
        f"{spc}→ Host: {template.host or 'None'}",
    ]
    if template.license:
        year = date.today().year
        lines.append(f"{spc}→ License: {template.license} ({template.authors} {year})")
    else:
        lines.append(f"{spc}→ License: None")
    lines += [
        f"{spc}→ Package directory: {tilde(template.dir)}",
        f"{spc}→ Minimum Julia version: v{version_floor(template.julia_version)}",
        f"{spc}→ SSH remote: {_yes_no(template.ssh)}",
        f"{spc}→ Commit Manifest.toml: {_yes_no(template.manifest)}",
        f"{spc}→ Create Git repository: {_yes_no(template.git)}",
        f"{spc}→ Develop packages: {_yes_no(template.develop)}",
    ]
    if not template.plugins:
        lines.append(f"{spc}→ Plugins: None")
    else:
        lines.append(f"{spc}→ Plugins:")
        for text in sorted(p.describe() for p in template.plugins.values()):
            body = f"\n{spc * 2}".join(text.split("\n"))
            lines.append(f"{spc * 2}• {body}")
    return "\n".join(lines)
