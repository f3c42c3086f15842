"""Tests for the starboard CLI."""

from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from starboard.cli import app
from starboard.config import ConfigManager
from starboard.config.keys import CONFIG_MAP_NAME, SECRET_NAME
from starboard.storage.base import ConfigSourceError
from starboard.storage.memory import InMemoryConfigSource, InMemoryStore

runner = CliRunner()


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def patched_manager(store):
    def _build(namespace):
        ns = namespace or "starboard"
        return ConfigManager(
            InMemoryConfigSource(store, "ConfigMap", ns, CONFIG_MAP_NAME),
            InMemoryConfigSource(store, "Secret", ns, SECRET_NAME),
        )

    with patch("starboard.cli._build_manager", side_effect=_build):
        yield


class TestCLI:
    """Tests for CLI commands."""

    def test_help(self):
        """Help lists the commands."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "init" in result.output
        assert "cleanup" in result.output

    def test_init_then_config(self, store, patched_manager):
        """init creates defaults that config then shows."""
        result = runner.invoke(app, ["init", "-n", "security"])
        assert result.exit_code == 0
        assert store.get("ConfigMap", "security", CONFIG_MAP_NAME) is not None

        result = runner.invoke(app, ["config", "-n", "security"])
        assert result.exit_code == 0
        assert "trivy.imageRef" in result.output
        assert "0.14.0" in result.output

    def test_config_masks_secrets(self, store, patched_manager):
        """Secret values are masked unless requested."""
        store.put("Secret", "starboard", SECRET_NAME, {"trivy.githubToken": "ghp_abc"})

        masked = runner.invoke(app, ["config"])
        assert masked.exit_code == 0
        assert "ghp_abc" not in masked.output

        shown = runner.invoke(app, ["config", "--show-secrets"])
        assert shown.exit_code == 0
        assert "ghp_abc" in shown.output

    def test_config_invalid_mode(self, store, patched_manager):
        """An invalid value exits with an error."""
        store.put("ConfigMap", "starboard", CONFIG_MAP_NAME, {"trivy.mode": "Remote"})
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 1
        assert "trivy.mode" in result.output

    def test_cleanup(self, store, patched_manager):
        """cleanup removes both resources and tolerates absence."""
        runner.invoke(app, ["init"])
        result = runner.invoke(app, ["cleanup"])
        assert result.exit_code == 0
        assert store.get("ConfigMap", "starboard", CONFIG_MAP_NAME) is None
        assert store.get("Secret", "starboard", SECRET_NAME) is None

        again = runner.invoke(app, ["cleanup"])
        assert again.exit_code == 0

    def test_version_of(self):
        """version-of prints the parsed version."""
        result = runner.invoke(app, ["version-of", "registry:5000/aquasec/trivy:0.14.0"])
        assert result.exit_code == 0
        assert result.output.strip() == "0.14.0"

    def test_version_of_invalid(self):
        """An empty reference exits with an error."""
        result = runner.invoke(app, ["version-of", ""])
        assert result.exit_code == 1

    def test_config_binary_secret(self, store, patched_manager):
        """Binary Secret values are shown without crashing."""
        value = b"\xff\xfeok".decode("utf-8", "surrogateescape")
        store.put("Secret", "starboard", SECRET_NAME, {"cert": value})

        result = runner.invoke(app, ["config", "--show-secrets"])

        assert result.exit_code == 0
        assert "ok" in result.output

    def test_config_transport_error(self, patched_manager):
        """A failing backing store exits with a message, not a traceback."""
        with patch(
            "starboard.config.ConfigManager.read",
            AsyncMock(side_effect=ConfigSourceError("connection refused")),
        ):
            result = runner.invoke(app, ["config"])
        assert result.exit_code == 1
        assert "connection refused" in result.output
