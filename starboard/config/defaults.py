"""
Default Configuration

Compiled-in values written to a fresh ConfigMap by ConfigManager.ensure_default()
and used by ConfigData accessors when a key is absent.

The table is read-only. Pass a different mapping as ``ConfigData(defaults=...)``
to override it (e.g. in tests).
"""

from collections.abc import Mapping
from types import MappingProxyType

from starboard.config import keys

DEFAULT_CONFIG: Mapping[str, str] = MappingProxyType({
    keys.TRIVY_SEVERITY: "UNKNOWN,LOW,MEDIUM,HIGH,CRITICAL",
    keys.TRIVY_IMAGE_REF: "docker.io/aquasec/trivy:0.14.0",
    keys.TRIVY_MODE: "Standalone",
    keys.TRIVY_SERVER_URL: "http://trivy-server.trivy-server:4954",
    keys.KUBE_BENCH_IMAGE_REF: "docker.io/aquasec/kube-bench:0.4.0",
    keys.KUBE_HUNTER_IMAGE_REF: "docker.io/aquasec/kube-hunter:0.4.0",
    keys.POLARIS_IMAGE_REF: "quay.io/fairwinds/polaris:3.0",
})
