"""Tests for StarboardSettings."""

from unittest.mock import MagicMock, patch

import pytest

from starboard.config import StarboardSettings

ENV_VARS = (
    "STARBOARD_NAMESPACE",
    "KUBECONFIG",
    "STARBOARD_KUBE_CONTEXT",
    "STARBOARD_IN_CLUSTER",
    "STARBOARD_REQUEST_TIMEOUT",
    "STARBOARD_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


class TestStarboardSettings:
    """Tests for settings layering."""

    def test_defaults(self):
        """Built-in defaults apply with a clean environment."""
        settings = StarboardSettings()
        assert settings.namespace == "starboard"
        assert settings.kubeconfig is None
        assert settings.in_cluster is False
        assert settings.request_timeout == 30.0
        assert settings.log_level == "WARNING"

    def test_env(self, monkeypatch):
        """Environment variables override defaults."""
        monkeypatch.setenv("STARBOARD_NAMESPACE", "security")
        monkeypatch.setenv("STARBOARD_IN_CLUSTER", "true")
        monkeypatch.setenv("STARBOARD_REQUEST_TIMEOUT", "5")
        monkeypatch.setenv("STARBOARD_LOG_LEVEL", "debug")

        settings = StarboardSettings()

        assert settings.namespace == "security"
        assert settings.in_cluster is True
        assert settings.request_timeout == 5.0
        assert settings.log_level == "DEBUG"

    def test_kwargs_win_over_env(self, monkeypatch):
        """Explicit arguments override the environment."""
        monkeypatch.setenv("STARBOARD_NAMESPACE", "security")
        assert StarboardSettings(namespace="other").namespace == "other"

    def test_unknown_option(self):
        """Unknown options are rejected."""
        with pytest.raises(ValueError, match="Unknown setting"):
            StarboardSettings(nope=1)

    def test_invalid_bool_env(self, monkeypatch):
        """A malformed boolean in the environment is an error."""
        monkeypatch.setenv("STARBOARD_IN_CLUSTER", "maybe")
        with pytest.raises(ValueError):
            StarboardSettings()

    def test_with_overrides(self):
        """with_overrides returns a modified copy."""
        base = StarboardSettings()
        changed = base.with_overrides(namespace="security")
        assert changed.namespace == "security"
        assert base.namespace == "starboard"
        assert changed.request_timeout == base.request_timeout

    def test_from_file(self, tmp_path):
        """TOML sections are flattened into settings."""
        path = tmp_path / "starboard.toml"
        path.write_text(
            '[kubernetes]\n'
            'namespace = "security"\n'
            'request_timeout = 10\n'
            '\n'
            '[logging]\n'
            'level = "info"\n'
        )
        settings = StarboardSettings.from_file(path)
        assert settings.namespace == "security"
        assert settings.request_timeout == 10
        assert settings.log_level == "INFO"

    def test_from_file_env_wins(self, tmp_path, monkeypatch):
        """Environment variables take priority over the file."""
        path = tmp_path / "starboard.toml"
        path.write_text('[kubernetes]\nnamespace = "security"\n')
        monkeypatch.setenv("STARBOARD_NAMESPACE", "from-env")
        assert StarboardSettings.from_file(path).namespace == "from-env"

    def test_from_file_missing(self, tmp_path):
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            StarboardSettings.from_file(tmp_path / "missing.toml")

    def test_load_kube_client_kubeconfig(self):
        """kubeconfig and context are passed to the loader."""
        settings = StarboardSettings(kubeconfig="/tmp/kc", context="prod")
        with patch("kubernetes.config.load_kube_config") as load, \
             patch("kubernetes.client.CoreV1Api", return_value=MagicMock()) as api:
            result = settings.load_kube_client()
        load.assert_called_once_with(config_file="/tmp/kc", context="prod")
        assert result is api.return_value

    def test_load_kube_client_in_cluster(self):
        """In-cluster mode uses the service account."""
        settings = StarboardSettings(in_cluster=True)
        with patch("kubernetes.config.load_incluster_config") as load, \
             patch("kubernetes.client.CoreV1Api"):
            settings.load_kube_client()
        load.assert_called_once_with()
