"""
In-Memory Configuration Sources

Dict-backed sources with the same semantics as the Kubernetes ones.
Useful for tests and for dry runs without a cluster.

Example:
    >>> store = InMemoryStore()
    >>> public = InMemoryConfigSource(store, kind="ConfigMap")
    >>> secret = InMemoryConfigSource(store, kind="Secret")
    >>> manager = ConfigManager(public, secret)
"""

from collections.abc import Mapping

from starboard.config import keys
from starboard.storage.base import (
    ConfigSource,
    ResourceAlreadyExistsError,
    ResourceNotFoundError,
)


class InMemoryStore:
    """Resources keyed by (kind, namespace, name)."""

    def __init__(self) -> None:
        self._resources: dict[tuple[str, str, str], dict[str, str]] = {}

    def get(self, kind: str, namespace: str, name: str) -> dict[str, str] | None:
        data = self._resources.get((kind, namespace, name))
        return None if data is None else dict(data)

    def put(self, kind: str, namespace: str, name: str, data: Mapping[str, str]) -> None:
        self._resources[(kind, namespace, name)] = dict(data)

    def pop(self, kind: str, namespace: str, name: str) -> dict[str, str] | None:
        return self._resources.pop((kind, namespace, name), None)

    def __contains__(self, key: tuple[str, str, str]) -> bool:
        return key in self._resources


class InMemoryConfigSource(ConfigSource):
    """A single resource inside an InMemoryStore."""

    def __init__(
        self,
        store: InMemoryStore,
        kind: str,
        namespace: str = keys.NAMESPACE_NAME,
        name: str = keys.CONFIG_MAP_NAME,
    ):
        self._store = store
        self.kind = kind
        self._namespace = namespace
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def namespace(self) -> str:
        return self._namespace

    def _not_found(self) -> ResourceNotFoundError:
        return ResourceNotFoundError(
            f"{self.kind} {self._namespace}/{self._name} not found", status=404
        )

    async def get(self) -> dict[str, str]:
        data = self._store.get(self.kind, self._namespace, self._name)
        if data is None:
            raise self._not_found()
        return data

    async def create(self, data: Mapping[str, str]) -> None:
        if (self.kind, self._namespace, self._name) in self._store:
            raise ResourceAlreadyExistsError(
                f"{self.kind} {self._namespace}/{self._name} already exists", status=409
            )
        self._store.put(self.kind, self._namespace, self._name, data)

    async def delete(self) -> None:
        if self._store.pop(self.kind, self._namespace, self._name) is None:
            raise self._not_found()
