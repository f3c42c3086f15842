"""
Starboard Config - Cluster-Side Configuration for Starboard

Reads, bootstraps and removes Starboard's configuration, kept in a
ConfigMap (public settings) and a Secret (sensitive settings) in one
namespace.

Example:
    >>> from starboard import ConfigManager, StarboardSettings
    >>> settings = StarboardSettings()
    >>> manager = ConfigManager.for_kubernetes(
    ...     settings.load_kube_client(), namespace=settings.namespace
    ... )
    >>> await manager.ensure_default()
    >>> data = await manager.read()
    >>> data.get_trivy_version()
    '0.14.0'

Main Classes:
    ConfigManager: Lifecycle of the ConfigMap and Secret
    ConfigData: Merged read-only view with typed accessors
    StarboardSettings: How to reach the cluster
"""

__version__ = "0.9.0"


# Public API - lazy imports so the CLI and parser don't pull in the kube client
def __getattr__(name: str):
    """Lazy import public API components."""

    if name in ("ConfigData", "ConfigManager", "StarboardSettings",
                "MalformedValueError", "TrivyMode", "get_default_config"):
        from starboard import config
        return getattr(config, name)

    if name in ("get_version_from_image_ref", "parse_image_ref", "ImageReference"):
        from starboard.utils import image
        return getattr(image, name)

    if name in ("ConfigSourceError", "ResourceNotFoundError", "ResourceAlreadyExistsError"):
        from starboard.storage import base
        return getattr(base, name)

    if name in ("NAMESPACE_NAME", "CONFIG_MAP_NAME", "SECRET_NAME"):
        from starboard.config import keys
        return getattr(keys, name)

    raise AttributeError(f"module 'starboard' has no attribute {name!r}")


__all__ = [
    # Main classes
    "ConfigManager",
    "ConfigData",
    "StarboardSettings",

    # Helpers
    "get_default_config",
    "get_version_from_image_ref",
    "parse_image_ref",
    "ImageReference",
    "TrivyMode",

    # Errors
    "ConfigSourceError",
    "ResourceNotFoundError",
    "ResourceAlreadyExistsError",
    "MalformedValueError",

    # Resource identifiers
    "NAMESPACE_NAME",
    "CONFIG_MAP_NAME",
    "SECRET_NAME",

    # Version
    "__version__",
]
