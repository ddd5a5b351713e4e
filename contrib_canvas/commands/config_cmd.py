"""
Configuration management command.

Allows users to view and modify contrib-canvas defaults.
"""
from typing import Optional

from rich.console import Console
from rich.table import Table

from contrib_canvas.config.settings import get_config_path
from contrib_canvas.config.user_config import (
    EDITABLE_KEYS,
    get_custom_themes,
    load_config,
    reset_config,
    set_preference,
)


def run(console: Console, action: str, key: Optional[str] = None, value: Optional[str] = None) -> None:
    """
    Handle configuration commands.

    Args:
        console: Rich console for output
        action: Configuration action to perform
        key: Setting name for "set"
        value: Setting value for "set"

    Actions:
        show - Display all current settings
        set <key> <value> - Change a setting
        reset - Restore the defaults
    """
    if action == "show":
        _show_config(console)

    elif action == "set":
        if not key or value is None:
            console.print("[red]Error: Setting name and value required[/red]")
            console.print("[yellow]Usage: contrib-canvas config set theme githubDark[/yellow]")
            return

        try:
            set_preference(key, value)
            console.print(f"[green]✓ {key} set to: {value}[/green]")
        except ValueError as e:
            console.print(f"[red]Error: {e}[/red]")

    elif action == "reset":
        reset_config()
        console.print("[green]✓ Configuration reset to defaults[/green]")

    else:
        console.print(f"[red]Unknown action: {action}[/red]")
        console.print("\n[yellow]Available actions:[/yellow]")
        console.print("  show                - Display all settings")
        console.print("  set <key> <value>   - Change a setting")
        console.print("  reset               - Restore the defaults")


def _show_config(console: Console) -> None:
    """Display current configuration."""
    config = load_config()

    table = Table(title="Configuration", show_header=True, header_style="bold")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    for key in EDITABLE_KEYS:
        value = config.get(key)
        table.add_row(key, str(value) if value not in (None, "") else "[dim](none)[/dim]")

    custom_names = ", ".join(sorted(get_custom_themes())) or "[dim](none)[/dim]"
    table.add_row("custom themes", custom_names)

    console.print(table)
    console.print(f"[dim]Config file: {get_config_path()}[/dim]")
