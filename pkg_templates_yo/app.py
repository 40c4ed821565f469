"""App factory and CLI commands.

Public API:
    create_app(registry) -> typer.Typer
    run(argv) -> int
    main() -> None
"""

from __future__ import annotations

import os
import sys
import traceback
from pathlib import Path
from typing import List, Optional

import typer

from pkg_templates_yo import __version__, output
from pkg_templates_yo.discovery import load_entry_point_plugins
from pkg_templates_yo.errors import PkgTemplatesError, WorkspaceError
from pkg_templates_yo.generate import Generator
from pkg_templates_yo.licenses import DEFAULT_LICENSES
from pkg_templates_yo.plugin import Plugin
from pkg_templates_yo.registry import PluginRegistry, register_builtins
from pkg_templates_yo.template import (
    DEFAULT_HOST,
    DEFAULT_JULIA_VERSION,
    DEFAULT_LICENSE,
    PackageTemplate,
    create_template,
    describe,
)
from pkg_templates_yo.vcs import GitInitializer
from pkg_templates_yo.workspace import JuliaWorkspace

PROG_NAME = "pkg-templates"
DEBUG_ENV_VAR = "PKG_TEMPLATES_DEBUG"

# ── Shared template options ─────────────────────────────────────────────────

_USER = typer.Option(None, "--user", "-u", help="Code hosting username (default: git config github.user).")
_HOST = typer.Option(DEFAULT_HOST, "--host", help="Code hosting host or URL.")
_LICENSE = typer.Option(DEFAULT_LICENSE, "--license", "-l", help="License identifier; empty for none.")
_AUTHOR = typer.Option(None, "--author", "-a", help="Author name; repeat for several.")
_DIR = typer.Option(None, "--dir", "-d", help="Directory generated packages go in.")
_JULIA = typer.Option(str(DEFAULT_JULIA_VERSION), "--julia-version", help="Minimum Julia version.")
_SSH = typer.Option(False, "--ssh/--no-ssh", help="Use an SSH remote URL.")
_MANIFEST = typer.Option(False, "--manifest/--no-manifest", help="Commit Manifest.toml.")
_GIT = typer.Option(True, "--git/--no-git", help="Create a git repository.")
_DEVELOP = typer.Option(True, "--develop/--no-develop", help="Develop the package in the active Julia environment.")
_PLUGIN = typer.Option(None, "--plugin", "-p", help="Plugin name; repeat for several (see 'plugins').")


def _build_plugins(registry: PluginRegistry, names: Optional[List[str]]) -> list[Plugin]:
    plugins: list[Plugin] = []
    for name in names or []:
        if name not in registry:
            output.error(f"Unknown plugin '{name}'. Available: {', '.join(registry.names())}")
            raise typer.Exit(code=2)
        plugins.append(registry.create(name))
    return plugins


def _build_template(
    registry: PluginRegistry,
    user: Optional[str],
    host: str,
    license: str,
    author: Optional[List[str]],
    dir: Optional[Path],
    julia_version: str,
    ssh: bool,
    manifest: bool,
    git: bool,
    develop: bool,
    plugin: Optional[List[str]],
) -> PackageTemplate:
    return create_template(
        user=user,
        host=host,
        license=license,
        authors=author or None,
        dir=dir,
        julia_version=julia_version,
        ssh=ssh,
        manifest=manifest,
        git=git,
        develop=develop,
        plugins=_build_plugins(registry, plugin),
    )


def create_app(registry: PluginRegistry | None = None) -> typer.Typer:
    """Create the Typer app.

    When no registry is given, one is built from the built-in plugins plus
    any entry-point plugins, then frozen.
    """
    if registry is None:
        registry = PluginRegistry()
        register_builtins(registry)
        load_entry_point_plugins(registry)
        registry.freeze()

    app = typer.Typer(
        name=PROG_NAME,
        help="Generate new Julia packages from composable templates.",
        add_completion=False,
        no_args_is_help=True,
        rich_markup_mode="rich",
        context_settings={"help_option_names": ["--help"]},
    )

    @app.command("version", help="Show version.")
    def _version_cmd() -> None:
        output.print_text(f"pkg-templates-yo [cyan]{__version__}[/cyan]")

    @app.command("licenses", help="List available licenses.")
    def _licenses_cmd(
        json: bool = typer.Option(False, "--json", "-j", help="Output as JSON."),
    ) -> None:
        rows = DEFAULT_LICENSES.available()
        if json:
            output.emit_json({k: v for k, v in rows})
            return
        width = max(len(k) for k, _ in rows)
        for key, name in rows:
            output.print_text(f"  {key:<{width}}  {name}", markup=False)

    @app.command("license", help="Print the text of a license.")
    def _license_cmd(name: str = typer.Argument(..., help="License identifier.")) -> None:
        sys.stdout.write(DEFAULT_LICENSES.text(name) + "\n")

    @app.command("plugins", help="List available plugins.")
    def _plugins_cmd(
        json: bool = typer.Option(False, "--json", "-j", help="Output as JSON."),
    ) -> None:
        names = registry.names()
        if json:
            output.emit_json({n: registry.help_text(n) for n in names})
            return
        width = max((len(n) for n in names), default=0)
        for name in names:
            output.print_text(f"  {name:<{width}}  {registry.help_text(name)}", markup=False)

    @app.command("show", help="Show the template built from the given options.")
    def _show_cmd(
        user: Optional[str] = _USER,
        host: str = _HOST,
        license: str = _LICENSE,
        author: Optional[List[str]] = _AUTHOR,
        dir: Optional[Path] = _DIR,
        julia_version: str = _JULIA,
        ssh: bool = _SSH,
        manifest: bool = _MANIFEST,
        git: bool = _GIT,
        develop: bool = _DEVELOP,
        plugin: Optional[List[str]] = _PLUGIN,
    ) -> None:
        template = _build_template(
            registry, user, host, license, author, dir, julia_version,
            ssh, manifest, git, develop, plugin,
        )
        sys.stdout.write(describe(template) + "\n")

    @app.command("generate", help="Generate a new package.")
    def _generate_cmd(
        name: str = typer.Argument(..., help="Package name (a trailing .jl is removed)."),
        user: Optional[str] = _USER,
        host: str = _HOST,
        license: str = _LICENSE,
        author: Optional[List[str]] = _AUTHOR,
        dir: Optional[Path] = _DIR,
        julia_version: str = _JULIA,
        ssh: bool = _SSH,
        manifest: bool = _MANIFEST,
        git: bool = _GIT,
        develop: bool = _DEVELOP,
        plugin: Optional[List[str]] = _PLUGIN,
    ) -> None:
        template = _build_template(
            registry, user, host, license, author, dir, julia_version,
            ssh, manifest, git, develop, plugin,
        )
        output.heading(f"Generating {name}")
        sys.stdout.write(describe(template) + "\n")

        generator = Generator(vcs=GitInitializer(), workspace=JuliaWorkspace())
        try:
            result = generator.generate(template, name)
        except WorkspaceError as exc:
            # Files and repository already exist at this point.
            output.warning(str(exc))
            return

        output.action(f"Package root: {result.root}")
        for rel in result.files + result.plugin_files:
            output.bullet(rel)
        output.success(f"Generated {len(result.files) + len(result.plugin_files)} path(s)")

    return app


def run(argv: list[str] | None = None) -> int:
    """Execute the CLI and return an exit code. MUST NOT call sys.exit()."""
    debug = os.environ.get(DEBUG_ENV_VAR) == "1"
    output.setup_logging(debug=debug)

    try:
        app = create_app()
        args = argv if argv is not None else sys.argv[1:]
        rv = app(args, standalone_mode=False)
        return rv if isinstance(rv, int) else 0
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0
    except PkgTemplatesError as exc:
        if debug:
            traceback.print_exc(file=sys.stderr)
        output.error(str(exc))
        return exc.exit_code
    except Exception as exc:
        if debug:
            traceback.print_exc(file=sys.stderr)
        output.error(f"Unexpected error: {exc}")
        return 1


def main() -> None:
    """Console-script entry point."""
    sys.exit(run())
