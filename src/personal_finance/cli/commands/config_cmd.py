"""Config commands — show and change CLI defaults."""

from decimal import Decimal, InvalidOperation

import typer
from rich.console import Console
from rich.table import Table

from ...core.config import config_path, get_config, save_config
from ...core.exceptions import ConfigError

app = typer.Typer(help="Show or change defaults")
console = Console()


@app.command("show")
def show():
    """Print the active configuration."""
    cfg = get_config()
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="dim")
    table.add_column("Value", justify="right")
    table.add_row("default_inflation_rate", f"{cfg.default_inflation_rate}")
    table.add_row("log_level", cfg.log_level)
    console.print(table)
    console.print(f"[dim]{config_path()}[/dim]")


@app.command("set-inflation")
def set_inflation(rate: str = typer.Argument(..., help="Annual inflation as a fraction (e.g. 0.04)")):
    """Change the inflation rate used when --inflation is not given."""
    cfg = get_config()
    previous = cfg.default_inflation_rate
    try:
        cfg.default_inflation_rate = Decimal(rate)
        save_config(cfg)
    except (InvalidOperation, ConfigError) as e:
        cfg.default_inflation_rate = previous
        console.print(f"[red]Invalid inflation rate '{rate}': {e}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Default inflation set to {cfg.default_inflation_rate}[/green]")


@app.command("set-log-level")
def set_log_level(level: str = typer.Argument(..., help="DEBUG, INFO, WARNING, ERROR or CRITICAL")):
    """Change the log level used when --verbose is not given."""
    cfg = get_config()
    previous = cfg.log_level
    cfg.log_level = level
    try:
        save_config(cfg)
    except ConfigError as e:
        cfg.log_level = previous
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Log level set to {cfg.log_level}[/green]")
