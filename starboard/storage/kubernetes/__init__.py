"""
Kubernetes-backed configuration sources (ConfigMap and Secret).
"""

from starboard.storage.kubernetes.sources import (
    ConfigMapSource,
    KubernetesSource,
    SecretSource,
)

__all__ = ["ConfigMapSource", "KubernetesSource", "SecretSource"]
