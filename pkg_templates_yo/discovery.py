"""Third-party plugin discovery through entry points.

Entry-point callable signature: (registry: PluginRegistry) -> None

Entry points in the ``pkg_templates_yo.plugins`` group are loaded in name
order, or in the order given by ``names``.
"""

from __future__ import annotations

import logging
from importlib.metadata import entry_points
from typing import TYPE_CHECKING, Sequence

from pkg_templates_yo.errors import PluginLoadError

if TYPE_CHECKING:
    from pkg_templates_yo.registry import PluginRegistry

logger = logging.getLogger(__name__)

EP_GROUP = "pkg_templates_yo.plugins"


def load_entry_point_plugins(
    registry: PluginRegistry,
    names: Sequence[str] | None = None,
) -> list[str]:
    """Load entry-point plugins into ``registry``; return the loaded names.

    Raises PluginLoadError on import failure or registration exception.
    """
    if names is None:
        names = sorted({ep.name for ep in entry_points(group=EP_GROUP)})
    for ep_name in names:
        _load_entry_point(ep_name, registry)
    return list(names)


def _load_entry_point(ep_name: str, registry: PluginRegistry) -> None:
    """Discover and invoke a single entry-point plugin by name."""
    try:
        matches = list(entry_points(group=EP_GROUP, name=ep_name))
        if not matches:
            raise ImportError(f"No entry point '{ep_name}' in group '{EP_GROUP}'")
        callable_ = matches[0].load()
    except Exception as exc:
        logger.error("Entry-point plugin '%s': %s", ep_name, exc)
        raise PluginLoadError(ep_name, str(exc)) from exc

    try:
        callable_(registry)
    except PluginLoadError:
        raise
    except Exception as exc:
        logger.error("Entry-point plugin '%s' raised: %s", ep_name, exc)
        raise PluginLoadError(ep_name, str(exc)) from exc
