"""
Configuration Keys

Every key read from or written to the Starboard ConfigMap and Secret.
Keys follow the "<component>.<property>" convention.
"""

# === Backing resources ===

NAMESPACE_NAME = "starboard"
"""Default namespace holding the ConfigMap and Secret"""

CONFIG_MAP_NAME = "starboard"
"""Name of the ConfigMap with non-sensitive settings"""

SECRET_NAME = "starboard"
"""Name of the Secret with sensitive settings"""

# === Trivy ===

TRIVY_IMAGE_REF = "trivy.imageRef"
TRIVY_MODE = "trivy.mode"
TRIVY_SERVER_URL = "trivy.serverURL"
TRIVY_SEVERITY = "trivy.severity"
TRIVY_IGNORE_UNFIXED = "trivy.ignoreUnfixed"
TRIVY_INSECURE_REGISTRY = "trivy.insecureRegistry"
TRIVY_HTTP_PROXY = "trivy.httpProxy"
TRIVY_HTTPS_PROXY = "trivy.httpsProxy"
TRIVY_NO_PROXY = "trivy.noProxy"
TRIVY_GITHUB_TOKEN = "trivy.githubToken"

# === Other scanners ===

KUBE_BENCH_IMAGE_REF = "kube-bench.imageRef"
KUBE_HUNTER_IMAGE_REF = "kube-hunter.imageRef"
POLARIS_IMAGE_REF = "polaris.imageRef"
