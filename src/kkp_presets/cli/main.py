"""Main CLI entry point for kkp-presets."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from kkp_presets import __version__
from kkp_presets.core.exceptions import PresetError
from kkp_presets.core.models import ProviderKind
from kkp_presets.utils.logging import get_logger, log_error

if TYPE_CHECKING:
    from kkp_presets.core.config import PresetsConfig
    from kkp_presets.registry.preset_catalog import PresetCatalog

console = Console()
logger = get_logger(__name__)


class PresetsContext:
    """Shared context for CLI commands with lazy initialization."""

    def __init__(self, config_path: str):
        """Initialize context with config path.

        Args:
            config_path: Path to presets file
        """
        self.config_path = config_path
        self._config: PresetsConfig | None = None
        self._catalog: PresetCatalog | None = None

    @property
    def config(self) -> PresetsConfig:
        """Get or load config lazily, configuring logging on first load."""
        if self._config is None:
            from kkp_presets.core.config import PresetsConfig
            from kkp_presets.utils.logging import setup_logging

            self._config = PresetsConfig.from_file(Path(self.config_path).expanduser())
            setup_logging(
                level=self._config.logging.level,
                format=self._config.logging.format,
                output=self._config.logging.output,
            )
        return self._config

    @property
    def catalog(self) -> PresetCatalog:
        """Get or build the preset catalog lazily."""
        if self._catalog is None:
            from kkp_presets.registry.preset_catalog import PresetCatalog

            self._catalog = PresetCatalog.from_config(self.config)
        return self._catalog


def _load_catalog(ctx: click.Context) -> PresetCatalog:
    try:
        return ctx.obj.catalog
    except PresetError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    type=click.Path(),
    default="~/.kkp/presets.yaml",
    help="Path to presets file",
)
@click.pass_context
def cli(ctx: click.Context, config: str) -> None:
    """Inspect KKP cloud-provider credential presets."""
    ctx.obj = PresetsContext(config_path=config)


@cli.command()
@click.pass_context
def validate(ctx: click.Context) -> None:
    """Validate every provider preset in the presets file."""
    from kkp_presets.core.formats import default_formats
    from kkp_presets.interfaces.validatable import ValidationContext

    console.print("[bold magenta]Preset Validation[/bold magenta]\n")
    catalog = _load_catalog(ctx)
    formats = default_formats()
    failures = 0

    for preset in catalog.all():
        for kind, provider in preset.providers.items():
            try:
                provider.validate(formats)
                provider.context_validate(ValidationContext(), formats)
                console.print(f"  [green]✓ {preset.name}/{kind}[/green]")
            except PresetError as e:
                failures += 1
                log_error(logger, e, operation="validate", preset=preset.name, provider=kind)
                console.print(f"  [red]✗ {preset.name}/{kind}: {escape(str(e))}[/red]")

    if failures:
        console.print(f"\n[bold red]✗ {failures} preset(s) invalid[/bold red]")
        sys.exit(1)

    console.print(f"\n[bold green]✓ {len(catalog)} preset(s) valid[/bold green]")


@cli.command(name="list")
@click.option(
    "--provider",
    type=click.Choice([k.value for k in ProviderKind]),
    help="Only show enabled presets of this provider",
)
@click.option("--datacenter", help="Datacenter to match (with --provider)")
@click.option("--format", type=click.Choice(["table", "json"]), default="table")
@click.pass_context
def list_presets(
    ctx: click.Context, provider: str | None, datacenter: str | None, format: str
) -> None:
    """List presets and their providers."""
    catalog = _load_catalog(ctx)

    if provider:
        rows = [(name, provider, p) for name, p in catalog.applicable(provider, datacenter)]
    else:
        rows = [
            (preset.name, kind, p) for preset in catalog.all() for kind, p in preset.providers.items()
        ]

    if not rows:
        console.print("[yellow]No presets found matching the filters[/yellow]")
        return

    if format == "json":
        click.echo(
            json.dumps(
                [
                    {
                        "name": name,
                        "provider": kind,
                        "datacenter": p.datacenter,
                        "enabled": p.enabled,
                        "customizable": p.is_customizable,
                    }
                    for name, kind, p in rows
                ],
                indent=2,
            )
        )
        return

    table = Table(title=f"Presets ({len(rows)} total)")
    table.add_column("Name", style="cyan")
    table.add_column("Provider", style="magenta")
    table.add_column("Datacenter", style="blue")
    table.add_column("Enabled", style="bold")
    table.add_column("Customizable", style="yellow")

    for name, kind, p in rows:
        enabled_color = "green" if p.enabled else "red"
        table.add_row(
            name,
            kind,
            p.datacenter or "-",
            f"[{enabled_color}]{'yes' if p.enabled else 'no'}[/{enabled_color}]",
            "yes" if p.is_customizable else "no",
        )

    console.print(table)


@cli.command()
@click.argument("name")
@click.argument("provider", type=click.Choice([k.value for k in ProviderKind]))
@click.pass_context
def encode(ctx: click.Context, name: str, provider: str) -> None:
    """Print the wire JSON of a preset's provider section."""
    catalog = _load_catalog(ctx)

    preset = catalog.get(name)
    if preset is None:
        console.print(f"[red]Error: preset not found: {name}[/red]")
        sys.exit(1)

    provider_preset = preset.provider(provider)
    if provider_preset is None:
        console.print(f"[red]Error: preset {name} has no {provider} section[/red]")
        sys.exit(1)

    try:
        data = provider_preset.marshal_binary()
    except PresetError as e:
        log_error(logger, e, operation="encode", preset=name, provider=provider)
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    click.echo(data.decode("utf-8"))


if __name__ == "__main__":
    cli()
