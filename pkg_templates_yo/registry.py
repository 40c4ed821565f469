"""Plugin registry: maps short CLI names to plugin factories.

Enforces naming rules, conflict rules, deterministic ordering, and freeze semantics.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable

from pkg_templates_yo.errors import RegistryConflictError, RegistryFrozenError
from pkg_templates_yo.plugin import Plugin

# Regex for valid plugin names
NAME_RE = re.compile(r"^[a-z][a-z0-9-]*$")

PluginFactory = Callable[..., Plugin]


@dataclass
class _Entry:
    name: str
    factory: PluginFactory
    help_text: str
    order: int


class PluginRegistry:
    """Accumulates named plugin factories for lookup by the CLI."""

    def __init__(self) -> None:
        self._entries: dict[str, _Entry] = {}
        self._frozen = False
        self._counter = 0

    # ── Public registration API ──────────────────────────────────────────

    def register(
        self,
        name: str,
        factory: PluginFactory,
        help_text: str = "",
        order: int | None = None,
    ) -> None:
        """Register a plugin factory under ``name``."""
        self._check_frozen()
        self._validate_name(name)
        ord_val = self._next_order(order)

        if name in self._entries:
            raise RegistryConflictError(name, "already registered")

        self._entries[name] = _Entry(name=name, factory=factory, help_text=help_text, order=ord_val)

    def freeze(self) -> None:
        """Freeze the registry; later registrations raise."""
        self._frozen = True

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    # ── Lookup ───────────────────────────────────────────────────────────

    def names(self) -> list[str]:
        """Registered names in registration order."""
        return [e.name for e in sorted(self._entries.values(), key=lambda e: e.order)]

    def help_text(self, name: str) -> str:
        return self._get(name).help_text

    def create(self, name: str, **kwargs: Any) -> Plugin:
        """Instantiate the plugin registered under ``name``."""
        return self._get(name).factory(**kwargs)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    # ── Internals ────────────────────────────────────────────────────────

    def _get(self, name: str) -> _Entry:
        try:
            return self._entries[name]
        except KeyError:
            known = ", ".join(self.names()) or "none"
            raise KeyError(f"Unknown plugin '{name}' (available: {known})") from None

    def _check_frozen(self) -> None:
        """Raise RegistryFrozenError if the registry is frozen."""
        if self._frozen:
            raise RegistryFrozenError()

    def _validate_name(self, name: str) -> None:
        if not NAME_RE.match(name):
            raise ValueError(f"Invalid plugin name '{name}': must match {NAME_RE.pattern}")

    def _next_order(self, explicit: int | None) -> int:
        """Return the explicit order if given, otherwise auto-increment."""
        if explicit is not None:
            return explicit
        self._counter += 1
        return self._counter


def register_builtins(registry: PluginRegistry) -> None:
    """Register the built-in plugins."""
    from pkg_templates_yo.plugins import (
        AppVeyor,
        Codecov,
        Coveralls,
        Documenter,
        GitLabCI,
        TravisCI,
    )

    registry.register("travis", TravisCI, help_text="Travis CI configuration.")
    registry.register("appveyor", AppVeyor, help_text="AppVeyor configuration.")
    registry.register("gitlab-ci", GitLabCI, help_text="GitLab CI configuration with coverage.")
    registry.register("codecov", Codecov, help_text="Codecov coverage badge.")
    registry.register("coveralls", Coveralls, help_text="Coveralls coverage badge.")
    registry.register("documenter", Documenter, help_text="Local Documenter.jl docs.")
    registry.register(
        "documenter-travis",
        lambda **kw: Documenter(TravisCI, **kw),
        help_text="Documenter.jl docs deployed to GitHub Pages by Travis CI.",
    )
    registry.register(
        "documenter-gitlab",
        lambda **kw: Documenter(GitLabCI, **kw),
        help_text="Documenter.jl docs deployed to GitLab Pages by GitLab CI.",
    )
