"""
Command-Line Interface

CLI commands for managing Starboard's cluster-side configuration.

Commands:
    starboard init        - Create the ConfigMap and Secret with defaults if missing
    starboard config      - Show the merged configuration
    starboard cleanup     - Delete the ConfigMap and Secret
    starboard version-of  - Print the version of an image reference

Usage:
    # Bootstrap defaults in the "starboard" namespace
    starboard init

    # Inspect configuration in another namespace
    starboard config --namespace security

    # Show secret values too
    starboard config --show-secrets
"""

from __future__ import annotations

import asyncio
import logging
from typing import NoReturn, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from starboard.config import ConfigData, ConfigManager, StarboardSettings
from starboard.storage.base import ConfigSourceError, ResourceNotFoundError
from starboard.utils.image import get_version_from_image_ref

__all__ = ["main", "app"]

app = typer.Typer(
    name="starboard",
    help="Manage Starboard configuration stored in the cluster",
    no_args_is_help=True,
)
console = Console()

NamespaceOption = typer.Option(
    None,
    "--namespace", "-n",
    help="Namespace holding the starboard ConfigMap and Secret",
)


@app.callback()
def _setup() -> None:
    """Load .env and configure logging before any command runs."""
    load_dotenv()
    logging.basicConfig(
        level=StarboardSettings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _build_manager(namespace: Optional[str]) -> ConfigManager:
    """Create a ConfigManager for the configured cluster."""
    settings = StarboardSettings()
    if namespace:
        settings = settings.with_overrides(namespace=namespace)
    return ConfigManager.for_kubernetes(
        settings.load_kube_client(),
        namespace=settings.namespace,
        request_timeout=settings.request_timeout,
    )


def _printable(value: str) -> str:
    """Render surrogate-escaped Secret bytes as replacement characters."""
    return value.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def _fail(message: str) -> NoReturn:
    console.print(f"[red]{message}[/]")
    raise typer.Exit(code=1)


@app.command()
def init(namespace: Optional[str] = NamespaceOption) -> None:
    """Create the ConfigMap with defaults and an empty Secret if missing."""
    manager = _build_manager(namespace)
    try:
        asyncio.run(manager.ensure_default())
    except ConfigSourceError as e:
        _fail(f"Failed to initialize configuration: {e}")
    console.print(f"[green]Configuration ready in namespace {manager.namespace}[/]")


@app.command("config")
def show_config(
    namespace: Optional[str] = NamespaceOption,
    show_secrets: bool = typer.Option(
        False,
        "--show-secrets",
        help="Print Secret values instead of masking them",
    ),
) -> None:
    """Show the merged configuration and the scanner versions it selects."""
    manager = _build_manager(namespace)

    async def _run() -> tuple[ConfigData, set[str]]:
        data = await manager.read()
        if show_secrets:
            return data, set()
        try:
            secret_keys = set(await manager.secret.get())
        except ResourceNotFoundError:
            secret_keys = set()
        return data, secret_keys

    try:
        data, secret_keys = asyncio.run(_run())
    except ConfigSourceError as e:
        _fail(f"Failed to read configuration: {e}")

    table = Table(title=f"Configuration: {manager.namespace}")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key in sorted(data):
        value = "********" if key in secret_keys else data[key]
        table.add_row(key, _printable(value))
    console.print(table)

    versions = Table(title="Scanners")
    versions.add_column("Scanner", style="cyan")
    versions.add_column("Image")
    versions.add_column("Version", style="green")
    try:
        versions.add_row("trivy", data.get_trivy_image_ref(), data.get_trivy_version())
        versions.add_row(
            "kube-bench", data.get_kube_bench_image_ref(), data.get_kube_bench_version()
        )
        versions.add_row(
            "kube-hunter", data.get_kube_hunter_image_ref(), data.get_kube_hunter_version()
        )
        versions.add_row("polaris", data.get_polaris_image_ref(), data.get_polaris_version())
        console.print(versions)
        console.print(f"\n[dim]Trivy mode: {data.get_trivy_mode().value}[/]")
    except ValueError as e:
        _fail(f"Invalid configuration: {e}")


@app.command()
def cleanup(namespace: Optional[str] = NamespaceOption) -> None:
    """Delete the ConfigMap and Secret."""
    manager = _build_manager(namespace)
    try:
        asyncio.run(manager.delete())
    except ConfigSourceError as e:
        _fail(f"Failed to delete configuration: {e}")
    console.print(f"[green]Configuration removed from namespace {manager.namespace}[/]")


@app.command("version-of")
def version_of(
    image_ref: str = typer.Argument(..., help="Container image reference"),
) -> None:
    """Print the version (tag or digest) of an image reference."""
    try:
        version = get_version_from_image_ref(image_ref)
    except ValueError as e:
        _fail(str(e))
    console.print(version)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
