"""Documenter.jl documentation plugin, optionally deployed by a CI service."""

from __future__ import annotations

import json
import logging
import os
import shutil
from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterable, Mapping

from pkg_templates_yo.declare import ManagedPluginType
from pkg_templates_yo.errors import TemplateNotFoundError
from pkg_templates_yo.files import gen_file
from pkg_templates_yo.kinds import PluginKind
from pkg_templates_yo.plugin import Badge, BasePlugin

if TYPE_CHECKING:
    from pkg_templates_yo.template import PackageTemplate

logger = logging.getLogger(__name__)

DOCUMENTER_UUID = "e30172f5-a6a5-5a46-863b-614d45cd2de4"
RESERVED_KWARGS = ("modules", "format", "pages", "repo", "sitename", "authors", "assets")
SUPPORTED_CI = ("TravisCI", "GitLabCI")
TAB = "    "


def _julia_repr(value: Any) -> str:
    """Format a Python value as a Julia literal for ``makedocs`` keywords.

    Strings starting with ``:`` are written as Julia symbols.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        if value.startswith(":") and value[1:].isidentifier():
            return value
        return json.dumps(value)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(_julia_repr(v) for v in value) + "]"
    return str(value)


class Documenter(BasePlugin):
    """Documentation generation via Documenter.jl.

    ``ci`` selects deployment: ``TravisCI`` (GitHub Pages), ``GitLabCI``
    (GitLab Pages), or ``None`` for local builds only. Each choice is a
    distinct plugin kind.
    """

    def __init__(
        self,
        ci: ManagedPluginType | str | None = None,
        assets: Iterable[str | Path] = (),
        kwargs: Mapping[str, Any] | None = None,
    ) -> None:
        ci_name = ci.schema.name if isinstance(ci, ManagedPluginType) else ci
        if ci_name is not None and ci_name not in SUPPORTED_CI:
            raise ValueError(
                f"Documenter cannot deploy with {ci_name!r}; expected one of {SUPPORTED_CI}"
            )
        self.ci = ci_name

        self.assets: list[Path] = []
        for asset in assets:
            path = Path(os.path.abspath(Path(asset).expanduser()))
            if not path.is_file():
                raise TemplateNotFoundError(str(path), what="Asset file")
            self.assets.append(path)

        self.kwargs: dict[str, Any] = {str(k): v for k, v in (kwargs or {}).items()}

    @property
    def kind(self) -> PluginKind:
        return PluginKind("Documenter", self.ci)

    def ignore_patterns(self) -> list[str]:
        return ["/docs/build/", "/docs/site/"]

    def badges(self) -> list[Badge]:
        if self.ci == "TravisCI":
            return [
                Badge(
                    "Stable",
                    "https://img.shields.io/badge/docs-stable-blue.svg",
                    "https://{{USER}}.github.io/{{PKGNAME}}.jl/stable",
                ),
                Badge(
                    "Dev",
                    "https://img.shields.io/badge/docs-dev-blue.svg",
                    "https://{{USER}}.github.io/{{PKGNAME}}.jl/dev",
                ),
            ]
        if self.ci == "GitLabCI":
            return [
                Badge(
                    "Dev",
                    "https://img.shields.io/badge/docs-dev-blue.svg",
                    "https://{{USER}}.gitlab.io/{{PKGNAME}}.jl/dev",
                )
            ]
        return []

    def generate(self, template: PackageTemplate, pkg_name: str) -> list[str]:
        docs_dir = template.dir / pkg_name / "docs"

        if self.assets:
            assets_dir = docs_dir / "src" / "assets"
            assets_dir.mkdir(parents=True, exist_ok=True)
            lines = ["String["]
            for asset in self.assets:
                shutil.copyfile(asset, assets_dir / asset.name)
                lines.append(f'{TAB * 2}"assets/{asset.name}",')
            lines.append(f"{TAB}]")
            assets_string = "\n".join(lines)
        else:
            assets_string = "String[]"

        extra = ""
        for key, value in self.kwargs.items():
            if key in RESERVED_KWARGS:
                logger.warning(
                    'Ignoring predefined Documenter kwargs "%s" from additional kwargs', key
                )
                continue
            extra += f"{TAB}{key}={_julia_repr(value)},\n"

        make = (
            "using Documenter\n"
            f"using {pkg_name}\n"
            "\n"
            "makedocs(;\n"
            f"{TAB}modules=[{pkg_name}],\n"
            f"{TAB}format=Documenter.HTML(),\n"
            f"{TAB}pages=[\n"
            f'{TAB * 2}"Home" => "index.md",\n'
            f"{TAB}],\n"
            f'{TAB}repo="https://{template.host}/{template.user}/{pkg_name}.jl'
            '/blob/{commit}{path}#L{line}",\n'
            f'{TAB}sitename="{pkg_name}.jl",\n'
            f'{TAB}authors={json.dumps(template.authors)},\n'
            f"{TAB}assets={assets_string},\n"
            f"{extra})\n"
        )
        if self.ci == "TravisCI":
            make += (
                "\n"
                "deploydocs(;\n"
                f'{TAB}repo="{template.host}/{template.user}/{pkg_name}.jl",\n'
                ")\n"
            )

        index = (
            f"# {pkg_name}.jl\n"
            "\n"
            "```@index\n"
            "```\n"
            "\n"
            "```@autodocs\n"
            f"Modules = [{pkg_name}]\n"
            "```\n"
        )
        project = f'[deps]\nDocumenter = "{DOCUMENTER_UUID}"\n'

        gen_file(docs_dir / "make.jl", make)
        gen_file(docs_dir / "src" / "index.md", index)
        gen_file(docs_dir / "Project.toml", project)
        return ["docs/"]

    def describe(self) -> str:
        return (
            f"{self.kind}: {len(self.assets)} extra asset(s), "
            f"{len(self.kwargs)} extra keyword(s)"
        )

    def __repr__(self) -> str:
        return f"Documenter(ci={self.ci!r}, assets={[str(a) for a in self.assets]!r})"
