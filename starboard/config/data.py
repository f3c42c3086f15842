"""
ConfigData - Merged Configuration View

A read-only string-to-string mapping over the Starboard ConfigMap and Secret
with typed accessors. Each accessor reads a fixed key and falls back to the
injected default table when the key is absent or empty. Keys missing from
an injected table fall back to the compiled-in defaults.

Example:
    >>> data = ConfigData({"trivy.imageRef": "gcr.io/aquasecurity/trivy:0.8.0"})
    >>> data.get_trivy_image_ref()
    'gcr.io/aquasecurity/trivy:0.8.0'
    >>> data.get_trivy_version()
    '0.8.0'
    >>> ConfigData().get_kube_bench_image_ref()
    'docker.io/aquasec/kube-bench:0.4.0'
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import Enum

from starboard.config import keys
from starboard.config.defaults import DEFAULT_CONFIG
from starboard.utils.image import get_version_from_image_ref

_TRUE_VALUES = frozenset({"1", "t", "T", "true", "TRUE", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "false", "FALSE", "False"})


class MalformedValueError(ValueError):
    """Raised when a configuration value cannot be converted to its type."""

    def __init__(self, key: str, value: str, expected: str):
        self.key = key
        self.value = value
        super().__init__(f"Invalid value for {key}: {value!r} (expected {expected})")


class TrivyMode(str, Enum):
    """How Trivy scan jobs reach the vulnerability database."""

    STANDALONE = "Standalone"
    CLIENT_SERVER = "ClientServer"


class ConfigData(Mapping[str, str]):
    """
    Merged configuration from the Starboard ConfigMap and Secret.

    Instances are snapshots. They are never written back, and compare
    equal to any mapping with the same items.
    """

    def __init__(
        self,
        data: Mapping[str, str] | None = None,
        defaults: Mapping[str, str] = DEFAULT_CONFIG,
    ) -> None:
        self._data: dict[str, str] = dict(data or {})
        self._defaults = defaults

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ConfigData({self._data!r})"

    @property
    def defaults(self) -> Mapping[str, str]:
        """Default table backing the accessors."""
        return self._defaults

    # -------------------------------------------------------------------------
    # Lookup helpers
    # -------------------------------------------------------------------------

    def _get_or_default(self, key: str) -> str:
        value = self._data.get(key)
        if value:
            return value
        if key in self._defaults:
            return self._defaults[key]
        return DEFAULT_CONFIG[key]

    def _get_optional(self, key: str) -> str | None:
        return self._data.get(key) or None

    def _get_bool(self, key: str, default: bool = False) -> bool:
        value = self._data.get(key)
        if not value:
            return default
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        raise MalformedValueError(key, value, "a boolean")

    # -------------------------------------------------------------------------
    # Image references
    # -------------------------------------------------------------------------

    def get_trivy_image_ref(self) -> str:
        return self._get_or_default(keys.TRIVY_IMAGE_REF)

    def get_kube_bench_image_ref(self) -> str:
        return self._get_or_default(keys.KUBE_BENCH_IMAGE_REF)

    def get_kube_hunter_image_ref(self) -> str:
        return self._get_or_default(keys.KUBE_HUNTER_IMAGE_REF)

    def get_polaris_image_ref(self) -> str:
        return self._get_or_default(keys.POLARIS_IMAGE_REF)

    # -------------------------------------------------------------------------
    # Versions derived from image references
    # -------------------------------------------------------------------------

    def get_trivy_version(self) -> str:
        return get_version_from_image_ref(self.get_trivy_image_ref())

    def get_kube_bench_version(self) -> str:
        return get_version_from_image_ref(self.get_kube_bench_image_ref())

    def get_kube_hunter_version(self) -> str:
        return get_version_from_image_ref(self.get_kube_hunter_image_ref())

    def get_polaris_version(self) -> str:
        return get_version_from_image_ref(self.get_polaris_image_ref())

    # -------------------------------------------------------------------------
    # Trivy settings
    # -------------------------------------------------------------------------

    def get_trivy_mode(self) -> TrivyMode:
        """
        Return the Trivy client mode.

        Raises:
            MalformedValueError: If the value is not a known mode
        """
        value = self._get_or_default(keys.TRIVY_MODE)
        try:
            return TrivyMode(value)
        except ValueError:
            expected = " or ".join(m.value for m in TrivyMode)
            raise MalformedValueError(keys.TRIVY_MODE, value, expected) from None

    def get_trivy_server_url(self) -> str:
        return self._get_or_default(keys.TRIVY_SERVER_URL)

    def get_trivy_severity(self) -> list[str]:
        """Severities to report, in configured order."""
        raw = self._get_or_default(keys.TRIVY_SEVERITY)
        return [s.strip() for s in raw.split(",") if s.strip()]

    def get_trivy_ignore_unfixed(self) -> bool:
        return self._get_bool(keys.TRIVY_IGNORE_UNFIXED)

    def get_trivy_insecure_registry(self) -> bool:
        return self._get_bool(keys.TRIVY_INSECURE_REGISTRY)

    def get_trivy_http_proxy(self) -> str | None:
        return self._get_optional(keys.TRIVY_HTTP_PROXY)

    def get_trivy_https_proxy(self) -> str | None:
        return self._get_optional(keys.TRIVY_HTTPS_PROXY)

    def get_trivy_no_proxy(self) -> str | None:
        return self._get_optional(keys.TRIVY_NO_PROXY)

    def get_trivy_github_token(self) -> str | None:
        return self._get_optional(keys.TRIVY_GITHUB_TOKEN)


def get_default_config() -> ConfigData:
    """Return a fresh ConfigData holding the compiled-in defaults."""
    return ConfigData(DEFAULT_CONFIG)
