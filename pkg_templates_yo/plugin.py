"""Plugin capability model.

Every plugin answers the same four queries: ignore patterns, badges,
substitution context, and file generation. Plugins are keyed in a template by
their ``kind``, so a template holds at most one plugin of each kind.

Two shapes are provided:

- ``ManagedPlugin``: renders one template file to a fixed destination. New
  managed kinds are declared with ``pkg_templates_yo.declare.declare_plugin``.
- ``CustomPlugin``: arbitrary behavior supplied as data and callables.

Anything else that satisfies the ``Plugin`` protocol works too; ``BasePlugin``
supplies the no-op defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Protocol, runtime_checkable

from pkg_templates_yo.files import gen_file, tilde
from pkg_templates_yo.kinds import PluginKind
from pkg_templates_yo.render import merge_contexts, render, substitute

if TYPE_CHECKING:
    from pkg_templates_yo.declare import PluginSchema
    from pkg_templates_yo.template import PackageTemplate


@dataclass(frozen=True)
class Badge:
    """Markdown badge data. Each field may contain placeholders."""

    hover: str
    image: str
    link: str

    def __str__(self) -> str:
        return f"[![{self.hover}]({self.image})]({self.link})"


@runtime_checkable
class Plugin(Protocol):
    """The capability set every plugin exposes."""

    @property
    def kind(self) -> PluginKind: ...

    def ignore_patterns(self) -> list[str]: ...

    def badges(self) -> list[Badge]: ...

    def context(self) -> dict[str, Any]: ...

    def generate(self, template: PackageTemplate, pkg_name: str) -> list[str]: ...

    def describe(self) -> str: ...


class BasePlugin:
    """No-op implementations of the plugin capabilities."""

    @property
    def kind(self) -> PluginKind:
        return PluginKind(type(self).__name__)

    def ignore_patterns(self) -> list[str]:
        return []

    def badges(self) -> list[Badge]:
        return []

    def context(self) -> dict[str, Any]:
        return {}

    def generate(self, template: PackageTemplate, pkg_name: str) -> list[str]:
        return []

    def describe(self) -> str:
        return str(self.kind)

    def __str__(self) -> str:
        return self.describe()


GenerateFn = Callable[["PackageTemplate", str], list[str]]


@dataclass
class CustomPlugin(BasePlugin):
    """A plugin assembled from data and an optional ``generate`` callable."""

    plugin_kind: PluginKind
    patterns: list[str] = field(default_factory=list)
    badge_list: list[Badge] = field(default_factory=list)
    view: dict[str, Any] = field(default_factory=dict)
    generator: GenerateFn | None = None
    description: str | None = None

    @property
    def kind(self) -> PluginKind:
        return self.plugin_kind

    def ignore_patterns(self) -> list[str]:
        return list(self.patterns)

    def badges(self) -> list[Badge]:
        return list(self.badge_list)

    def context(self) -> dict[str, Any]:
        return dict(self.view)

    def generate(self, template: PackageTemplate, pkg_name: str) -> list[str]:
        if self.generator is None:
            return []
        return list(self.generator(template, pkg_name))

    def describe(self) -> str:
        return self.description or str(self.plugin_kind)


class ManagedPlugin(BasePlugin):
    """A plugin that manages a single configuration file.

    Instances are created by calling a ``ManagedPluginType`` (see
    ``declare.py``), never directly. Declared extra attributes are readable as
    instance attributes, e.g. ``GitLabCI(coverage=False).coverage``.
    """

    def __init__(
        self, schema: PluginSchema, source: Path | None, attrs: dict[str, Any]
    ) -> None:
        self._schema = schema
        self._source = source
        self._attrs = dict(attrs)

    def __getattr__(self, name: str) -> Any:
        attrs = self.__dict__.get("_attrs", {})
        if name in attrs:
            return attrs[name]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    @property
    def kind(self) -> PluginKind:
        return PluginKind(self._schema.name)

    @property
    def source(self) -> Path | None:
        return self._source

    @property
    def destination(self) -> str:
        return self._schema.destination

    @property
    def attrs(self) -> dict[str, Any]:
        return dict(self._attrs)

    def ignore_patterns(self) -> list[str]:
        return list(self._schema.gitignore)

    def badges(self) -> list[Badge]:
        return list(self._schema.badges)

    def context(self) -> dict[str, Any]:
        return dict(self._schema.view)

    def generate(self, template: PackageTemplate, pkg_name: str) -> list[str]:
        if self._source is None:
            return []
        text = substitute(
            self._source.read_text(encoding="utf-8"),
            template,
            merge_contexts({"PKGNAME": pkg_name}, self.context()),
        )
        gen_file(template.dir / pkg_name / self.destination, text)
        return [self.destination]

    def describe(self) -> str:
        cfg = "no file" if self._source is None else tilde(self._source)
        return f"{self._schema.name}: Configured with {cfg}"

    def __repr__(self) -> str:
        src = "None" if self._source is None else repr(tilde(self._source))
        extras = "".join(f", {k}={v!r}" for k, v in self._attrs.items())
        return f"{self._schema.name}({src}{extras})"


def rendered_badges(plugin: Plugin, user: str, pkg_name: str) -> list[str]:
    """Render a plugin's badges as Markdown.

    ``USER`` and ``PKGNAME`` are available to every badge; the plugin's own
    context takes priority over them.
    """
    ctx = merge_contexts({"USER": user, "PKGNAME": pkg_name}, plugin.context())
    return [render(str(badge), ctx) for badge in plugin.badges()]
