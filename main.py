"""PY-Balance – CLI entry point."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, BarColumn, TextColumn, MofNCompleteColumn
from rich.markup import escape
from rich.table import Table

from src.balance import count_letters
from src.scanner import LineResult, check_lines, get_text_files

load_dotenv()

app = typer.Typer(
    name="py-balance",
    help="Check whether text holds as many 'p' letters as 'y' letters.",
    add_completion=False,
)
console = Console()

DEFAULT_EXCLUDE = {"venv", ".venv", "node_modules", "__pycache__", ".git"}


def _env_excludes() -> set[str]:
    """Extra directories to skip, read from ``PY_BALANCE_EXCLUDE``."""
    raw = os.getenv("PY_BALANCE_EXCLUDE", "")
    return {part.strip() for part in raw.split(",") if part.strip()}


def _verdict(balanced: bool) -> str:
    return "[green]balanced[/green]" if balanced else "[red]unbalanced[/red]"


@app.command()
def check(
    texts: list[str] = typer.Argument(
        ..., help="One or more strings to check. Put -- before a string that starts with a dash."
    ),
) -> None:
    """Check each string and report its 'p'/'y' counts."""
    table = Table(title="Letter Balance")
    table.add_column("Text", style="cyan")
    table.add_column("p", justify="right", style="magenta")
    table.add_column("y", justify="right", style="magenta")
    table.add_column("Result", justify="center")

    all_balanced = True
    for text in texts:
        count = count_letters(text)
        all_balanced = all_balanced and count.balanced
        table.add_row(escape(repr(text)), str(count.p), str(count.y), _verdict(count.balanced))

    console.print(table)
    if not all_balanced:
        raise typer.Exit(code=1)


@app.command()
def scan(
    path: str = typer.Argument(..., help="Text file or directory to scan."),
    exclude: Optional[list[str]] = typer.Option(None, "--exclude", "-e", help="Directories to skip."),
    only_unbalanced: bool = typer.Option(False, "--only-unbalanced", help="List unbalanced lines only."),
) -> None:
    """Check every line of every .txt file under PATH."""
    excluded = sorted(DEFAULT_EXCLUDE | _env_excludes() | set(exclude or []))
    files = get_text_files(path, excluded_dirs=excluded)
    if not files:
        console.print("[yellow]No text files found.[/yellow]")
        return

    results: list[LineResult] = []
    errors: list[tuple[Path, str]] = []

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("Scanning files...", total=len(files))

        for file in files:
            progress.update(task, description=f"Scanning {file.name}")
            try:
                results.extend(check_lines(file))
            except Exception as exc:
                errors.append((file, str(exc)))
                console.print(f"  [red]Error reading {file}: {exc}[/red]")
            progress.advance(task)

    shown = [r for r in results if not r.balanced] if only_unbalanced else results
    if shown:
        table = Table(title="Scan Results")
        table.add_column("File", style="cyan")
        table.add_column("Line", justify="right", style="magenta")
        table.add_column("Text", style="white")
        table.add_column("p", justify="right")
        table.add_column("y", justify="right")
        table.add_column("Result", justify="center")
        for r in shown:
            table.add_row(
                escape(str(r.file_path)), str(r.line_number), escape(r.text),
                str(r.count.p), str(r.count.y), _verdict(r.balanced),
            )
        console.print()
        console.print(table)
        console.print()

    unbalanced = sum(1 for r in results if not r.balanced)
    _print_summary(len(results) - unbalanced, unbalanced, errors)

    if unbalanced or errors:
        raise typer.Exit(code=1)


def _print_summary(
    balanced: int,
    unbalanced: int,
    errors: list[tuple[Path, str]],
) -> None:
    """Print a coloured summary line after a scan."""
    parts: list[str] = []
    if balanced:
        parts.append(f"[green]Balanced {balanced} line(s)[/green]")
    if unbalanced:
        parts.append(f"[red]Unbalanced {unbalanced} line(s)[/red]")
    console.print(" | ".join(parts) if parts else "[dim]Nothing to do.[/dim]")

    if errors:
        console.print("\n[bold red]Errors:[/bold red]")
        for path, msg in errors:
            console.print(f"  [red]{path}:[/red] {msg}")


if __name__ == "__main__":
    app()
