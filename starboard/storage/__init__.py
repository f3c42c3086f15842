"""
Configuration Sources

Backing stores for Starboard's configuration.

Modules:
    base: Abstract source interface and errors
    kubernetes/: ConfigMap and Secret sources over CoreV1Api
    memory/: Dict-backed sources for tests and dry runs

Layout in the cluster:
    <namespace>/
    ├── ConfigMap starboard    # public settings (plain strings)
    └── Secret starboard       # sensitive settings (base64 on the wire)
"""

from starboard.storage.base import (
    ConfigSource,
    ConfigSourceError,
    ResourceAlreadyExistsError,
    ResourceNotFoundError,
)
from starboard.storage.memory import InMemoryConfigSource, InMemoryStore

__all__ = [
    "ConfigSource",
    "ConfigSourceError",
    "ResourceAlreadyExistsError",
    "ResourceNotFoundError",
    "InMemoryConfigSource",
    "InMemoryStore",
]
