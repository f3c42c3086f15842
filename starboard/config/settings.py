"""
StarboardSettings - Client-Side Settings

How the tool reaches the cluster, as opposed to ConfigData, which is the
configuration stored in the cluster.

Example:
    >>> # Use defaults (reads from environment)
    >>> settings = StarboardSettings()

    >>> # Explicit configuration
    >>> settings = StarboardSettings(namespace="security", request_timeout=10)

    >>> # From config file
    >>> settings = StarboardSettings.from_file("./starboard.toml")

Configuration Priority (highest to lowest):
    1. Programmatic (passed to StarboardSettings())
    2. Environment variables
    3. Config file (when using from_file)
    4. Built-in defaults

Environment Variables:
    STARBOARD_NAMESPACE - Namespace holding the ConfigMap and Secret
    KUBECONFIG - Path to kubeconfig file (standard name)
    STARBOARD_KUBE_CONTEXT - kubeconfig context to use
    STARBOARD_IN_CLUSTER - Use the in-cluster service account ("true"/"false")
    STARBOARD_REQUEST_TIMEOUT - Per-request API timeout in seconds
    STARBOARD_LOG_LEVEL - Logging level name
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from starboard.config import keys

if TYPE_CHECKING:
    from kubernetes.client import CoreV1Api


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("1", "t", "true", "yes", "on"):
        return True
    if lowered in ("0", "f", "false", "no", "off"):
        return False
    raise ValueError(f"Invalid boolean: {value!r}")


class StarboardSettings:
    """Settings for connecting to the cluster."""

    # === Cluster ===

    namespace: str = keys.NAMESPACE_NAME
    """Namespace holding the starboard ConfigMap and Secret"""

    kubeconfig: str | None = None
    """Path to kubeconfig (None = client default, ~/.kube/config)"""

    context: str | None = None
    """kubeconfig context (None = current context)"""

    in_cluster: bool = False
    """Use the pod's service account instead of kubeconfig"""

    request_timeout: float | None = 30.0
    """Per-request API timeout in seconds (None = no client-side timeout)"""

    # === Logging ===

    log_level: str = "WARNING"
    """Root logging level for the CLI"""

    def __init__(self, **kwargs: Any) -> None:
        """
        Initialize settings.

        Args:
            **kwargs: Override any setting
        """
        self._load_from_env()

        for key, value in kwargs.items():
            if hasattr(self, key) and not key.startswith("_"):
                setattr(self, key, value)
            else:
                raise ValueError(f"Unknown setting: {key}")

    def _load_from_env(self) -> None:
        """Load settings from environment variables."""
        if namespace := os.getenv("STARBOARD_NAMESPACE"):
            self.namespace = namespace
        if kubeconfig := os.getenv("KUBECONFIG"):
            self.kubeconfig = kubeconfig
        if context := os.getenv("STARBOARD_KUBE_CONTEXT"):
            self.context = context
        if in_cluster := os.getenv("STARBOARD_IN_CLUSTER"):
            self.in_cluster = _parse_bool(in_cluster)
        if timeout := os.getenv("STARBOARD_REQUEST_TIMEOUT"):
            self.request_timeout = float(timeout)
        if level := os.getenv("STARBOARD_LOG_LEVEL"):
            self.log_level = level.upper()

    @classmethod
    def from_file(cls, path: str | Path, **overrides: Any) -> StarboardSettings:
        """
        Load settings from a TOML file.

        Example TOML:
            [kubernetes]
            namespace = "security"
            context = "prod"
            request_timeout = 10

            [logging]
            level = "INFO"

        Top-level keys matching a setting name are accepted as well.

        Raises:
            FileNotFoundError: If the file doesn't exist
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")

        with open(path, "rb") as f:
            data = tomllib.load(f)

        flat: dict[str, Any] = {}
        for key, value in data.get("kubernetes", {}).items():
            flat[key] = value
        if "level" in data.get("logging", {}):
            flat["log_level"] = str(data["logging"]["level"]).upper()
        for key, value in data.items():
            if not isinstance(value, dict):
                flat[key] = value

        # Environment wins over the file; explicit overrides win over both
        settings = cls()
        env_set = {
            name
            for name, var in (
                ("namespace", "STARBOARD_NAMESPACE"),
                ("kubeconfig", "KUBECONFIG"),
                ("context", "STARBOARD_KUBE_CONTEXT"),
                ("in_cluster", "STARBOARD_IN_CLUSTER"),
                ("request_timeout", "STARBOARD_REQUEST_TIMEOUT"),
                ("log_level", "STARBOARD_LOG_LEVEL"),
            )
            if os.getenv(var)
        }
        values = {k: v for k, v in flat.items() if k not in env_set}
        values.update(overrides)
        return settings.with_overrides(**values)

    def with_overrides(self, **kwargs: Any) -> StarboardSettings:
        """Return new settings with specified overrides."""
        new_settings = StarboardSettings.__new__(StarboardSettings)
        for key in dir(self):
            if not key.startswith("_") and not callable(getattr(self, key)):
                setattr(new_settings, key, getattr(self, key))
        for key, value in kwargs.items():
            if not hasattr(new_settings, key) or key.startswith("_"):
                raise ValueError(f"Unknown setting: {key}")
            setattr(new_settings, key, value)
        return new_settings

    def load_kube_client(self) -> CoreV1Api:
        """Build a CoreV1Api from kubeconfig or the in-cluster service account."""
        from kubernetes import client, config

        if self.in_cluster:
            config.load_incluster_config()
        else:
            config.load_kube_config(config_file=self.kubeconfig, context=self.context)
        return client.CoreV1Api()
