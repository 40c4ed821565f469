"""Declarative definition of managed single-file plugin kinds.

A declared kind is data (``PluginSchema``) plus a callable that builds
``ManagedPlugin`` instances::

    TravisCI = declare_plugin(
        "TravisCI",
        "travis.yml",
        ".travis.yml",
        defaults_dir=DEFAULTS_DIR,
        badges=Badge("Build Status", "...", "..."),
    )
    plugin = TravisCI()             # default source file
    plugin = TravisCI(None)         # no file, badges only
    plugin = TravisCI("my.yml")     # custom source, must exist

Extra attributes are declared with ``Field``; each becomes a keyword argument
of the kind's constructor (required unless it has a default).
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

from pkg_templates_yo.errors import TemplateNotFoundError
from pkg_templates_yo.kinds import PluginKind
from pkg_templates_yo.plugin import Badge, ManagedPlugin


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()
_DEFAULT: Any = object()


@dataclass(frozen=True)
class Field:
    """An extra typed attribute of a declared plugin kind.

    Each plugin instance receives its own copy of ``default``.
    """

    name: str
    type: type = object
    default: Any = MISSING

    @property
    def required(self) -> bool:
        return self.default is MISSING


@dataclass(frozen=True)
class PluginSchema:
    """Everything a managed plugin kind needs, stored as data."""

    name: str
    source: Path | None
    destination: str
    fields: tuple[Field, ...] = ()
    gitignore: tuple[str, ...] = ()
    badges: tuple[Badge, ...] = ()
    view: dict[str, Any] = field(default_factory=dict)


def _as_tuple(value: Any) -> tuple:
    if value is None:
        return ()
    if isinstance(value, (str, Badge)):
        return (value,)
    return tuple(value)


def _check_exists(path: Path) -> Path:
    if not path.is_file():
        raise TemplateNotFoundError(os.path.abspath(path))
    return path


class ManagedPluginType:
    """A declared plugin kind. Calling it constructs a plugin instance."""

    def __init__(
        self,
        schema: PluginSchema,
        plugin_class: type[ManagedPlugin] = ManagedPlugin,
        doc: str | None = None,
    ) -> None:
        self.schema = schema
        self.plugin_class = plugin_class
        self.__doc__ = doc
        self.__name__ = schema.name

    @property
    def kind(self) -> PluginKind:
        return PluginKind(self.schema.name)

    @property
    def default_source(self) -> Path | None:
        return self.schema.source

    def __call__(self, file: str | Path | None = _DEFAULT, **kwargs: Any) -> ManagedPlugin:
        if file is _DEFAULT:
            source = self.schema.source
        elif file is None:
            source = None
        else:
            source = _check_exists(Path(file).expanduser())

        attrs: dict[str, Any] = {}
        declared = {f.name: f for f in self.schema.fields}
        unknown = sorted(set(kwargs) - set(declared))
        if unknown:
            raise TypeError(f"{self.schema.name}() got unexpected keyword(s): {', '.join(unknown)}")
        for name, fld in declared.items():
            if name in kwargs:
                value = kwargs[name]
            elif fld.required:
                raise TypeError(f"{self.schema.name}() missing required keyword '{name}'")
            else:
                value = copy.deepcopy(fld.default)
            if not isinstance(value, fld.type):
                raise TypeError(
                    f"{self.schema.name}() keyword '{name}' must be "
                    f"{fld.type.__name__}, got {type(value).__name__}"
                )
            attrs[name] = value

        return self.plugin_class(self.schema, source, attrs)

    def __repr__(self) -> str:
        return f"<plugin kind {self.schema.name}>"


def declare_plugin(
    name: str,
    source: str | Path | None,
    destination: str,
    *fields: Field,
    defaults_dir: str | Path | None = None,
    gitignore: str | Iterable[str] | None = None,
    badges: Badge | Iterable[Badge] | None = None,
    view: dict[str, Any] | None = None,
    plugin_class: type[ManagedPlugin] = ManagedPlugin,
    doc: str | None = None,
) -> ManagedPluginType:
    """Declare a new managed single-file plugin kind.

    Args:
        name: Kind name, also used in descriptions.
        source: Default template file, or ``None`` for no file. Relative paths
            resolve against ``defaults_dir`` when it is given.
        destination: Output path relative to the generated package root.
        *fields: Extra attributes exposed as constructor keywords.
        defaults_dir: Directory holding default template files.
        gitignore: Pattern(s) added to generated ``.gitignore`` files.
        badges: Badge(s) added to generated READMEs.
        view: Extra substitutions for the plugin's file and badges.
        plugin_class: ``ManagedPlugin`` subclass overriding capabilities.

    Raises:
        TemplateNotFoundError: If ``source`` is given and does not exist.
    """
    src: Path | None = None
    if source is not None:
        src = Path(source).expanduser()
        if defaults_dir is not None and not src.is_absolute():
            src = Path(defaults_dir) / src
        _check_exists(src)

    schema = PluginSchema(
        name=name,
        source=src,
        destination=destination,
        fields=tuple(fields),
        gitignore=tuple(str(p) for p in _as_tuple(gitignore)),
        badges=_as_tuple(badges),
        view=dict(view or {}),
    )
    return ManagedPluginType(schema, plugin_class=plugin_class, doc=doc)
