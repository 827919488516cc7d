"""API Security Scanner CLI - Main entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from api_scanner import __version__
from api_scanner.core.config import Settings
from api_scanner.core.dependencies import check_dependencies
from api_scanner.core.exceptions import ConfigurationError, DependencyError, ScannerError
from api_scanner.core.logging import configure_logging
from api_scanner.core.safety import display_legal_disclaimer, print_banner

app = typer.Typer(
    name="api-scanner",
    help="Probe an API for permissive CORS, allowed HTTP methods, "
    "information disclosure and unlisted endpoints.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

console = Console()


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        console.print(f"API Security Scanner v{__version__}")
        raise typer.Exit()


@app.command()
def scan(
    url: str = typer.Option(..., "-u", "--url", help="Target URL (e.g., https://api.target.com)"),
    wordlist: Optional[Path] = typer.Option(
        None, "-w", "--wordlist", help="Wordlist for endpoint discovery, one path per line"
    ),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Output directory (default: api_scan_results)"
    ),
    timeout: Optional[float] = typer.Option(
        None, "-t", "--timeout", help="Request timeout in seconds (default: 10)"
    ),
    config: Optional[Path] = typer.Option(None, "-c", "--config", help="Path to configuration file"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Diagnostic log level"),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit diagnostic logs as JSON"),
    dry_run: Optional[bool] = typer.Option(
        None, "--dry-run/--no-dry-run", help="Show what would be done without executing"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    🔍 Run the CORS, HTTP method, information disclosure and
    (with a wordlist) endpoint discovery probes against a target URL.

    Findings are printed and, for CORS and discovery, appended to flat
    files in the output directory.
    """
    if timeout is not None and timeout <= 0:
        raise typer.BadParameter("must be greater than 0", param_hint="'-t' / '--timeout'")

    configure_logging(level=log_level, json_format=json_logs)

    try:
        settings = Settings.from_file_or_default(config)
    except ConfigurationError as e:
        console.print(f"[red][ERROR] {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if dry_run is not None:
        settings.dry_run = dry_run
    if output is not None:
        settings.scanner.output_dir = output
    if timeout is not None:
        settings.prober.timeout = timeout

    print_banner()

    try:
        check_dependencies(tools=settings.scanner.required_tools)
    except DependencyError as e:
        console.print(f"[red][ERROR] Required {e.kind} missing: {escape(e.name)}[/red]")
        raise typer.Exit(1)

    display_legal_disclaimer()

    console.print(Panel.fit(
        f"[bold cyan]Target:[/bold cyan] {escape(url)}\n"
        f"[bold cyan]Wordlist:[/bold cyan] {escape(str(wordlist)) if wordlist else 'None'}\n"
        f"[bold cyan]Output:[/bold cyan] {escape(str(settings.scanner.output_dir))}\n"
        f"[bold cyan]Timeout:[/bold cyan] {settings.prober.timeout:g}s "
        f"(discovery {settings.prober.discovery_timeout:g}s)",
        title="🔍 Scan Configuration",
    ))

    if settings.dry_run:
        console.print("[yellow]DRY RUN - Probe plan:[/yellow]")
        console.print("  1. CORS: HEAD with a cross-origin Origin header")
        console.print(f"  2. Methods: {', '.join(m.value for m in settings.prober.methods_to_test)}")
        console.print(f"  3. Disclosure: GET, search for {len(settings.prober.sensitive_keywords)} keywords")
        if wordlist:
            console.print("  4. Discovery: GET each wordlist entry")
        return

    from api_scanner.core.orchestrator import ScanOrchestrator

    try:
        ScanOrchestrator(settings).run(url, wordlist=wordlist)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        raise typer.Exit(130)
    except ScannerError as e:
        console.print(f"\n[red]Fatal error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
