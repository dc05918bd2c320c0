"""Admin commands for setting up configuration and storage."""

import sys
from pathlib import Path

from rich.console import Console

from diario.config import create_default_config, get_config_path, get_settings

console = Console()


def run_full_init(config_path: Path) -> None:
    """Create config file and data directory."""
    console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
    create_default_config(config_path)
    console.print("[green]✓[/green] Config file created (permissions: 600)")

    settings = get_settings(config_path)
    console.print(f"[cyan]Creating data directory at {settings.data_dir}...[/cyan]")
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    console.print("[green]✓[/green] Data directory ready")

    console.print("\n[green]Initialization complete![/green]", style="bold")
    console.print(f"[dim]Config: {config_path}[/dim]")
    console.print(f"[dim]Data: {settings.data_dir}[/dim]")


def init_command(force: bool = False) -> None:
    """Initialize diario configuration and data directory."""
    config_path = get_config_path()

    # Guard: refuse to overwrite without force flag
    if not force and config_path.exists():
        console.print("[red]Initialization failed:[/red]", style="bold")
        console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'diario init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        run_full_init(config_path)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)
