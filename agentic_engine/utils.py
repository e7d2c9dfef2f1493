"""Shared console helpers for agentic-engine.

All user-facing output goes through one Rich ``Console``: status messages,
the spinner shown while files are written, the post-scaffold "Getting Started"
panel, and the grouped validator report.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.rule import Rule
from rich.table import Table

from agentic_engine.config import ProjectConfig
from agentic_engine.validator import ValidationReport

console = Console()


# ---------------------------------------------------------------------------
# Status messages
# ---------------------------------------------------------------------------


def print_banner(title: str = "agentic-engine") -> None:
    """Print the intro rule shown before the questionnaire."""
    console.print()
    console.print(Rule(f"[bold black on cyan] {title} [/bold black on cyan]", style="cyan"))
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def create_progress() -> Progress:
    """Create a Rich spinner for the emission stages.

    Returns:
        A ``Progress`` instance suitable for use as a context manager.
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )


# ---------------------------------------------------------------------------
# Scaffold summary
# ---------------------------------------------------------------------------


def print_next_steps(config: ProjectConfig, validate_command: str) -> None:
    """Print the "Getting Started" panel shown after a successful run."""
    ci_step = (
        "Push to GitHub to activate CI workflows"
        if config.include_ci
        else "Set up CI/CD workflows"
    )
    body = "\n".join([
        f"[cyan]cd[/cyan] {escape(str(config.target_path))}",
        "",
        "[dim]Next steps:[/dim]",
        "1. Initialize your application framework (e.g., [cyan]npm create vite@latest[/cyan], "
        "[cyan]bun create next-app[/cyan])",
        "2. Review and customize [cyan]AGENTS.md[/cyan] and [cyan]CLAUDE.md[/cyan]",
        "3. Add your first design doc in [cyan]docs/design-docs/[/cyan]",
        f"4. {ci_step}",
        "",
        "[dim]Validation:[/dim]",
        f"- Run [cyan]{validate_command}[/cyan]",
    ])
    console.print(Panel(body, title="Getting Started", border_style="cyan", expand=False))
    print_success("Agent harness ready! Start building with AI agents.")


# ---------------------------------------------------------------------------
# Validator report
# ---------------------------------------------------------------------------


def print_report(report: ValidationReport) -> None:
    """Print validator findings in two labelled groups with counts."""
    console.print("Validating project structure...")
    console.print()
    console.print(Rule(style="dim"))

    if not report.errors and not report.warnings:
        print_success("All validation checks passed!")
    else:
        if report.errors:
            console.print()
            console.print(f"[bold red]Errors ({len(report.errors)}):[/bold red]")
            for finding in report.errors:
                console.print(f"  - {finding.message}", markup=False, highlight=False)
        if report.warnings:
            console.print()
            console.print(f"[bold yellow]Warnings ({len(report.warnings)}):[/bold yellow]")
            for finding in report.warnings:
                console.print(f"  - {finding.message}", markup=False, highlight=False)

    console.print()
    console.print(Rule(style="dim"))
    if report.passed:
        print_success("Structure validation passed.")
    else:
        print_error("Structure validation failed.")
    console.print()
