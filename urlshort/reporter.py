from __future__ import annotations

from typing import Iterable

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .models import FindResult, RunSummary

USAGE_EXAMPLE = 'urlshort -f urls.txt -o shortened.txt -x "&,=" -p -F payloads.txt -D'

_OPTIONS = [
    ("-f FILE", "Input file containing URLs (required)"),
    ("-o FILE", "Output file to write shortened URLs"),
    ("-x SPEC", 'Delimiters to split on, comma separated, e.g. "&,=" (default "=")'),
    ("-p", "Split URLs at path segments (/) as well"),
    ("-a STR", "String to append to each generated variation"),
    ("-F FILE", "File containing strings to append (one per line, overrides -a)"),
    ("-D", "Remove duplicate generated URLs"),
    ("-Q", "Quiet mode (no banner or URL echo; errors and final message still shown)"),
    ("--find KW", "Save URLs containing ANY of the comma separated keywords"),
    ("--findX KW", "Save URLs containing ALL of the comma separated keywords"),
    ("-h", "Show this help message"),
]


def _out() -> Console:
    return Console(highlight=False, emoji=False, soft_wrap=True)


def _err() -> Console:
    return Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)


def show_banner() -> None:
    grid = Table.grid(padding=(0, 1))
    grid.add_column(no_wrap=True)
    grid.add_column()
    grid.add_row("[bold cyan]Tool Type:[/]", "[italic cyan]Advanced URL Shortener & Parameter Generator[/]")
    grid.add_row("[bold yellow]Use Case:[/]", "[italic yellow]Security Testing, Web Dev Utility, Payload Injector[/]")
    grid.add_row("[bold blue]Version:[/]", f"[bold blue]{__version__}[/]")
    _out().print(
        Panel.fit(
            grid,
            title="[bold red]URLSHORT[/]",
            border_style="white",
            box=box.DOUBLE,
        )
    )


def show_help(to_stderr: bool = False) -> None:
    console = _err() if to_stderr else _out()
    console.print("\n[bold]Usage:[/bold]")
    console.print("  urlshort -f <input-file> [options]")
    table = Table(title="Options", title_justify="left", box=None, show_header=False, padding=(0, 2))
    table.add_column(no_wrap=True)
    table.add_column()
    for flag, desc in _OPTIONS:
        table.add_row(flag, escape(desc))
    console.print(table)
    console.print("[bold]Example:[/bold]")
    console.print(f"  {escape(USAGE_EXAMPLE)}")


def info(message: str) -> None:
    _out().print(f"[cyan][*] {escape(message)}[/cyan]")


def notice(message: str) -> None:
    _out().print(f"[yellow][*] {escape(message)}[/yellow]")


def success(message: str) -> None:
    _out().print(f"[bold green][+] {escape(message)}[/bold green]")


def error(message: str) -> None:
    _err().print(f"[bold red]Error: {escape(message)}[/bold red]")


def _display(url: str) -> str:
    # Undecodable input bytes survive as surrogates; the terminal gets U+FFFD
    return url.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def print_urls(urls: Iterable[str]) -> None:
    console = _out()
    for u in urls:
        console.print(_display(u), markup=False, soft_wrap=True)


def print_summary(summary: RunSummary) -> None:
    """Compact table of what the run produced, shown in non-quiet mode."""
    table = Table.grid(expand=False)
    table.add_column(justify="left")
    table.add_column(justify="right")
    table.add_row("Input URLs", str(summary.input_count))
    table.add_row("Delimiters", escape(" ".join(summary.delimiters) or "-"))
    table.add_row("Variations", str(summary.result_count))
    for f in summary.finds:
        table.add_row(f.mode.value, str(len(f.matches)))
    _out().print(Panel(table, title="Summary", border_style="blue", box=box.ROUNDED, expand=False))


def print_find_result(result: FindResult) -> None:
    table = Table(title=f"{result.mode.value}: {escape(result.keywords)}", expand=True, box=box.SIMPLE_HEAVY)
    table.add_column("URL", overflow="fold")
    for u in result.sorted_matches:
        table.add_row(escape(_display(u)))
    _out().print(table)
