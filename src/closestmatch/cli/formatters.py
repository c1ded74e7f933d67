"""Rich console output formatting utilities."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from closestmatch.cli.context import CLIContext

if TYPE_CHECKING:
    from closestmatch.infrastructure.config import GlobalConfig
    from closestmatch.modules.matching import ScoredCandidate

__all__ = [
    "console",
    "error_console",
    "print_config",
    "print_did_you_mean",
    "print_distance",
    "print_distance_matrix",
    "print_error",
    "print_info",
    "print_matches",
    "print_score_table",
    "print_success",
    "print_warning",
]

# Shared console instance
console = Console()
error_console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {message}")


def print_info(message: str) -> None:
    """Print an info message.

    Suppressed when --quiet flag is set.
    """
    if not CLIContext.get().quiet:
        console.print(f"[blue]i[/blue] {message}")


def print_did_you_mean(suggestions: list[str]) -> None:
    """Print 'Did you mean?' suggestions.

    Args:
        suggestions: List of similar names to suggest.
    """
    if not suggestions:
        return

    console.print()
    console.print("[dim]Did you mean?[/dim]")
    for name in suggestions:
        console.print(f"  [cyan]{escape(name)}[/cyan]")


def print_distance(value: int) -> None:
    """Print a bare distance, suitable for scripting."""
    console.print(str(value), highlight=False)


def print_matches(matches: list[str]) -> None:
    """Print matched candidates one per line, without markup."""
    for match in matches:
        console.print(match, markup=False, highlight=False, soft_wrap=True)


def _truncate(text: str, max_length: int) -> str:
    """Truncate text with ellipsis if too long."""
    if len(text) <= max_length:
        return text
    return text[: max_length - 1] + "…"


def print_score_table(query: str, scores: list[ScoredCandidate]) -> None:
    """Print every candidate with its distance to the query.

    Rows at the minimum distance are highlighted.

    Args:
        query: Query the candidates were scored against.
        scores: Scored candidates in original order.
    """
    if not scores:
        return

    best = min(scored.distance for scored in scores)

    table = Table(title=f"Distances to '{escape(_truncate(query, 40))}'")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Candidate", overflow="fold")
    table.add_column("Distance", justify="right")

    for scored in scores:
        style = "bold green" if scored.distance == best else None
        table.add_row(
            str(scored.index),
            escape(scored.candidate),
            str(scored.distance),
            style=style,
        )

    console.print(table)


def print_distance_matrix(text1: str, text2: str, matrix: list[list[int]]) -> None:
    """Print the full edit-distance table for two texts.

    Rows follow the characters of text1, columns those of text2. The
    bottom-right cell is the distance.

    Args:
        text1: Row text.
        text2: Column text.
        matrix: Table from distance_matrix(text1, text2).
    """
    table = Table(show_header=True, header_style="bold cyan", box=None)
    table.add_column("", style="bold cyan")
    table.add_column("ε", justify="right")
    for char in text2:
        table.add_column(escape(char), justify="right")

    row_labels = ["ε", *text1]
    last_row = len(matrix) - 1
    for i, (label, row) in enumerate(zip(row_labels, matrix, strict=True)):
        cells = [str(value) for value in row]
        if i == last_row:
            cells[-1] = f"[bold green]{cells[-1]}[/bold green]"
        table.add_row(escape(label), *cells)

    panel = Panel(
        table,
        title=f"[cyan]{escape(_truncate(text1, 30))} → {escape(_truncate(text2, 30))}[/cyan]",
        subtitle=f"distance {matrix[-1][-1]}",
        border_style="cyan",
    )
    console.print(panel)


def print_config(config: GlobalConfig, path: str) -> None:
    """Print the effective configuration.

    Args:
        config: Configuration to show.
        path: Location of the config file.
    """
    lines = [
        f"[bold]show-all:[/bold] {str(config.show_all_by_default).lower()}",
        f"[bold]fold:[/bold]     {str(config.fold_input).lower()}",
        "",
        f"[dim]{escape(path)}[/dim]",
    ]
    panel = Panel(
        "\n".join(lines),
        title="[blue]Configuration[/blue]",
        border_style="blue",
    )
    console.print(panel)
