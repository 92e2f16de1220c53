"""
Display utilities for reporting sync progress.

Everything here prints to stderr; stdout is reserved for the generated config.
"""

from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..models import SSHConfigEntry

console = Console(stderr=True)


def display_ssh_config_summary(entries: Sequence[SSHConfigEntry]) -> None:
    """Display generated SSH config entries in a formatted table."""
    if not entries:
        console.print("[yellow]No SSH config entries could be generated[/yellow]")
        return

    console.print(f"[green]Generated {len(entries)} SSH config entries[/green]")

    table = Table(title="SSH Config Entries")
    table.add_column("Host", style="cyan")
    table.add_column("HostName", style="green")
    table.add_column("IdentityFile", style="yellow")

    for entry in entries:
        table.add_row(escape(entry.name), escape(entry.hostname), escape(entry.identity_file))

    console.print(table)


def display_completion(output_path: str) -> None:
    """Display completion message."""
    console.print("\n[bold green]✅ SSH Configuration Sync Complete![/bold green]")
    console.print(f"[green]SSH config saved to: {escape(output_path)}[/green]")


def display_error(message: str) -> None:
    """Display error message."""
    console.print(f"[red]error: {escape(message)}[/red]", highlight=False)
