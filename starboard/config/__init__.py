"""
Configuration System

Starboard keeps its configuration in the cluster: public settings in a
ConfigMap and sensitive ones in a Secret, both named "starboard". The two
are merged into a single ConfigData view, with Secret values winning on a
key collision.

Modules:
    keys: Key names and resource identifiers
    defaults: Compiled-in default table
    data: ConfigData and its typed accessors
    manager: ConfigManager (read / ensure_default / delete)
    settings: StarboardSettings for reaching the cluster
"""

from starboard.config.data import (
    ConfigData,
    MalformedValueError,
    TrivyMode,
    get_default_config,
)
from starboard.config.manager import ConfigManager, merge_config
from starboard.config.settings import StarboardSettings

__all__ = [
    "ConfigData",
    "ConfigManager",
    "MalformedValueError",
    "StarboardSettings",
    "TrivyMode",
    "get_default_config",
    "merge_config",
]
