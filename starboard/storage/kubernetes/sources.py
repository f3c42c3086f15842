"""
Kubernetes Configuration Sources

ConfigMap and Secret backed sources over a ``kubernetes.client.CoreV1Api``.

The Kubernetes client is synchronous, so every call runs in a worker thread
via ``asyncio.to_thread``. Cancelling the awaiting task abandons the result;
``request_timeout`` bounds how long the thread itself can block.
"""

import asyncio
import base64
import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from kubernetes import client
from kubernetes.client.exceptions import ApiException
from urllib3.exceptions import HTTPError

from starboard.config import keys
from starboard.storage.base import (
    ConfigSource,
    ConfigSourceError,
    ResourceAlreadyExistsError,
    ResourceNotFoundError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

MANAGED_BY_LABELS = {"app.kubernetes.io/managed-by": "starboard"}


class KubernetesSource(ConfigSource):
    """
    Shared plumbing for ConfigMap and Secret sources.

    Translates ``ApiException`` status codes:
        404 -> ResourceNotFoundError
        409 -> ResourceAlreadyExistsError
        other -> ConfigSourceError

    Transport failures from urllib3 (refused connections, timeouts) also
    surface as ConfigSourceError.
    """

    kind = "Resource"

    def __init__(
        self,
        api: client.CoreV1Api,
        namespace: str = keys.NAMESPACE_NAME,
        name: str = keys.CONFIG_MAP_NAME,
        request_timeout: float | None = None,
    ):
        self._api = api
        self._namespace = namespace
        self._name = name
        self._request_timeout = request_timeout

    @property
    def name(self) -> str:
        return self._name

    @property
    def namespace(self) -> str:
        return self._namespace

    def _metadata(self) -> client.V1ObjectMeta:
        return client.V1ObjectMeta(
            name=self._name,
            namespace=self._namespace,
            labels=dict(MANAGED_BY_LABELS),
        )

    def _kwargs(self) -> dict[str, Any]:
        if self._request_timeout is None:
            return {}
        return {"_request_timeout": self._request_timeout}

    async def _call(self, action: str, fn: Callable[..., T], *args: Any) -> T:
        """Run a blocking API call in a thread and translate its errors."""
        logger.debug(f"{action} {self.kind} {self._namespace}/{self._name}")
        try:
            return await asyncio.to_thread(fn, *args, **self._kwargs())
        except ApiException as e:
            message = f"{action} {self.kind} {self._namespace}/{self._name} failed: {e.reason}"
            if e.status == 404:
                raise ResourceNotFoundError(message, status=e.status) from e
            if e.status == 409:
                raise ResourceAlreadyExistsError(message, status=e.status) from e
            raise ConfigSourceError(message, status=e.status) from e
        except HTTPError as e:
            raise ConfigSourceError(
                f"{action} {self.kind} {self._namespace}/{self._name} failed: {e}"
            ) from e


class ConfigMapSource(KubernetesSource):
    """Non-sensitive settings stored as ConfigMap string data."""

    kind = "ConfigMap"

    async def get(self) -> dict[str, str]:
        cm = await self._call(
            "read", self._api.read_namespaced_config_map, self._name, self._namespace
        )
        return dict(cm.data or {})

    async def create(self, data: Mapping[str, str]) -> None:
        body = client.V1ConfigMap(metadata=self._metadata(), data=dict(data) or None)
        await self._call(
            "create", self._api.create_namespaced_config_map, self._namespace, body
        )
        logger.info(f"Created ConfigMap {self._namespace}/{self._name} with {len(data)} keys")

    async def delete(self) -> None:
        await self._call(
            "delete", self._api.delete_namespaced_config_map, self._name, self._namespace
        )
        logger.info(f"Deleted ConfigMap {self._namespace}/{self._name}")


class SecretSource(KubernetesSource):
    """
    Sensitive settings stored as Secret data.

    Secret values travel base64-encoded; this source decodes them to UTF-8
    strings on read and encodes them on create. Bytes that are not valid
    UTF-8 survive the round trip as surrogate escapes.
    """

    kind = "Secret"

    def __init__(
        self,
        api: client.CoreV1Api,
        namespace: str = keys.NAMESPACE_NAME,
        name: str = keys.SECRET_NAME,
        request_timeout: float | None = None,
    ):
        super().__init__(api, namespace, name, request_timeout)

    @staticmethod
    def _decode(data: Mapping[str, str] | None) -> dict[str, str]:
        return {
            key: base64.b64decode(value or "").decode("utf-8", "surrogateescape")
            for key, value in (data or {}).items()
        }

    @staticmethod
    def _encode(data: Mapping[str, str]) -> dict[str, str]:
        return {
            key: base64.b64encode(value.encode("utf-8", "surrogateescape")).decode("ascii")
            for key, value in data.items()
        }

    async def get(self) -> dict[str, str]:
        secret = await self._call(
            "read", self._api.read_namespaced_secret, self._name, self._namespace
        )
        return self._decode(secret.data)

    async def create(self, data: Mapping[str, str]) -> None:
        body = client.V1Secret(
            metadata=self._metadata(),
            data=self._encode(data) or None,
        )
        await self._call(
            "create", self._api.create_namespaced_secret, self._namespace, body
        )
        logger.info(f"Created Secret {self._namespace}/{self._name} with {len(data)} keys")

    async def delete(self) -> None:
        await self._call(
            "delete", self._api.delete_namespaced_secret, self._name, self._namespace
        )
        logger.info(f"Deleted Secret {self._namespace}/{self._name}")
