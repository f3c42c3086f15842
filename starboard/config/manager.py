"""
ConfigManager - Configuration Lifecycle

Reads, bootstraps and removes the two resources that hold Starboard's
configuration: a ConfigMap with public settings and a Secret with
sensitive ones.

Example:
    >>> from kubernetes import client, config
    >>> config.load_kube_config()
    >>> manager = ConfigManager.for_kubernetes(client.CoreV1Api(), namespace="starboard")
    >>> await manager.ensure_default()
    >>> data = await manager.read()
    >>> data.get_trivy_image_ref()
    'docker.io/aquasec/trivy:0.14.0'

Error handling:
    ResourceNotFoundError is absorbed by read() (empty data), delete()
    (nothing to do) and ensure_default() (go ahead and create).
    ResourceAlreadyExistsError is absorbed by ensure_default() (someone
    else created it first). Everything else, including cancellation,
    propagates. No retries.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from starboard.config import keys
from starboard.config.data import ConfigData
from starboard.config.defaults import DEFAULT_CONFIG
from starboard.storage.base import (
    ConfigSource,
    ResourceAlreadyExistsError,
    ResourceNotFoundError,
)

if TYPE_CHECKING:
    from kubernetes.client import CoreV1Api

logger = logging.getLogger(__name__)


def merge_config(
    public: Mapping[str, str],
    secret: Mapping[str, str],
    defaults: Mapping[str, str] = DEFAULT_CONFIG,
) -> ConfigData:
    """
    Overlay secret values on public values.

    A key present in both resolves to the secret's value. The two key sets
    are disjoint by convention, so a collision is logged.
    """
    merged = dict(public)
    collisions = sorted(merged.keys() & secret.keys())
    if collisions:
        logger.warning(f"Secret overrides ConfigMap for keys: {collisions}")
    merged.update(secret)
    return ConfigData(merged, defaults=defaults)


class ConfigManager:
    """
    Manages the public (ConfigMap) and secret (Secret) configuration sources.

    Holds no state between calls; every read() is a fresh snapshot.
    """

    def __init__(
        self,
        public: ConfigSource,
        secret: ConfigSource,
        defaults: Mapping[str, str] = DEFAULT_CONFIG,
    ):
        self.public = public
        self.secret = secret
        self.defaults = defaults

    @classmethod
    def for_kubernetes(
        cls,
        api: CoreV1Api,
        namespace: str = keys.NAMESPACE_NAME,
        defaults: Mapping[str, str] = DEFAULT_CONFIG,
        request_timeout: float | None = None,
    ) -> ConfigManager:
        """Build a manager over the starboard ConfigMap and Secret in a namespace."""
        from starboard.storage.kubernetes import ConfigMapSource, SecretSource

        return cls(
            ConfigMapSource(
                api, namespace, keys.CONFIG_MAP_NAME, request_timeout=request_timeout
            ),
            SecretSource(api, namespace, keys.SECRET_NAME, request_timeout=request_timeout),
            defaults=defaults,
        )

    @property
    def namespace(self) -> str:
        return self.public.namespace

    async def read(self) -> ConfigData:
        """
        Read and merge both sources.

        Missing resources count as empty. Any other failure propagates and
        no data is returned.
        """
        public = await self._get_or_empty(self.public)
        secret = await self._get_or_empty(self.secret)
        return merge_config(public, secret, defaults=self.defaults)

    async def ensure_default(self) -> None:
        """
        Create the ConfigMap with defaults and an empty Secret if they are missing.

        Existing resources are left untouched, so this is safe to call on
        every startup. The namespace must already exist.
        """
        await self._create_if_missing(self.public, self.defaults)
        await self._create_if_missing(self.secret, {})

    async def delete(self) -> None:
        """Delete both resources. Missing resources are not an error."""
        for source in (self.public, self.secret):
            try:
                await source.delete()
            except ResourceNotFoundError:
                logger.debug(f"{source!r} already absent")

    @staticmethod
    async def _get_or_empty(source: ConfigSource) -> dict[str, str]:
        try:
            return await source.get()
        except ResourceNotFoundError:
            logger.debug(f"{source!r} not found, treating as empty")
            return {}

    @staticmethod
    async def _create_if_missing(source: ConfigSource, data: Mapping[str, str]) -> None:
        try:
            await source.get()
            logger.debug(f"{source!r} exists, leaving untouched")
            return
        except ResourceNotFoundError:
            pass

        try:
            await source.create(data)
        except ResourceAlreadyExistsError:
            logger.debug(f"{source!r} was created concurrently")
