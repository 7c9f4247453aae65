"""Loading of world plugins listed in a parameter value."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

log = logging.getLogger(__name__)


class PluginConfigError(Exception):
    """Raised when the plugin list or the world cannot be used."""


@dataclass(frozen=True)
class PluginSpec:
    """A world plugin to load: its name and the library file holding it."""

    name: str
    file: str


def parse_world_plugins(value: Any) -> list[PluginSpec]:
    """Turn a list of ``{"name": ..., "file": ...}`` entries into plugin specs.

    Entries lacking ``name`` or ``file`` are skipped. Raises PluginConfigError
    if the value is not a list.
    """
    if not isinstance(value, (list, tuple)):
        raise PluginConfigError(
            "Parameter world_plugins should be specified as an array. "
            "Gazebo world plugins won't be loaded."
        )
    specs = []
    for entry in value:
        if not isinstance(entry, Mapping) or "name" not in entry or "file" not in entry:
            log.error(
                "World plugin parameter specification should have 'name' and 'file'."
            )
            continue
        specs.append(PluginSpec(str(entry["name"]), str(entry["file"])))
    return specs


def load_world_plugins(world: Any, value: Any) -> list[PluginSpec]:
    """Load every valid plugin listed in ``value`` into ``world``.

    ``world`` must offer ``load_plugin(file, name, sdf)``; plugins are loaded
    without an SDF element. Returns the plugins that were loaded, in order.
    """
    if world is None:
        raise PluginConfigError(
            "Could not obtain the world, so plugins cannot be loaded"
        )
    specs = parse_world_plugins(value)
    for spec in specs:
        world.load_plugin(spec.file, spec.name, None)
    log.info("Eligible plugins loaded.")
    return specs