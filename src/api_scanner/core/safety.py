"""Banner and legal disclaimer shown before a scan starts."""

from __future__ import annotations

from rich.console import Console

from api_scanner import __version__

console = Console()


def print_banner() -> None:
    """Print the tool banner."""
    console.print("[blue]==========================================[/blue]")
    console.print(f"[bold blue]       API Security Scanner v{__version__}[/bold blue]")
    console.print("[blue]==========================================[/blue]")


def display_legal_disclaimer() -> None:
    """Display legal disclaimer before scanning."""
    console.print()
    console.print("[bold red]╔══════════════════════════════════════════════════════════════╗[/bold red]")
    console.print("[bold red]║                    LEGAL DISCLAIMER                          ║[/bold red]")
    console.print("[bold red]╠══════════════════════════════════════════════════════════════╣[/bold red]")
    console.print("[bold red]║[/bold red] Only probe APIs you own or are authorized to test.           [bold red]║[/bold red]")
    console.print("[bold red]║[/bold red] Method probing sends POST, PUT, DELETE and PATCH requests    [bold red]║[/bold red]")
    console.print("[bold red]║[/bold red] to the target, which may change server-side state.          [bold red]║[/bold red]")
    console.print("[bold red]╚══════════════════════════════════════════════════════════════╝[/bold red]")
    console.print()
