"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from strokematch.core.matcher import MatchResult
from strokematch.domain import ResolvedArc

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]strokematch[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_glyph_info(character: str, stroke_count: int, logical_count: int) -> None:
    """Print glyph summary.

    Args:
        character: Character label
        stroke_count: Number of graphical strokes
        logical_count: Number of logical strokes
    """
    line = Text("  ")
    line.append(character, style="bold")
    console.print(line)
    console.print(f"  {stroke_count} strokes {SYM_DOT} {logical_count} logical strokes")


def print_stroke_outline(
    index: int,
    logical_id: int,
    median_count: int,
    outline_text: str,
    arcs: list[ResolvedArc | None],
) -> None:
    """Print one stroke's outline and resolved arcs.

    Args:
        index: Graphical stroke index
        logical_id: Logical stroke id from the stroke map
        median_count: Number of median points
        outline_text: Serialized outline
        arcs: Resolved arcs of the outline, in order
    """
    console.print(
        f"\n  [bold]Stroke {index}[/bold] {SYM_DOT} logical {logical_id} "
        f"{SYM_DOT} {median_count} medians"
    )
    console.print(Text(f"  {outline_text}" if outline_text else "  (no outline)"))
    for arc_idx, arc in enumerate(arcs):
        if arc is None:
            console.print(f"  [yellow]arc {arc_idx}: no circle with this radius[/yellow]")
        else:
            direction = "cw" if arc.clockwise else "ccw"
            console.print(
                f"  arc {arc_idx}: center ({arc.center.x:.3f}, {arc.center.y:.3f}) "
                f"r={arc.radius:.3f} {direction}"
            )


def print_gate_table(result: MatchResult) -> None:
    """Print every gate that ran with its value and threshold.

    Args:
        result: Match result to display
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Gate")
    table.add_column("Value", justify="right")
    table.add_column("Threshold", justify="right")
    table.add_column("")

    for outcome in result.outcomes:
        value = "-" if outcome.value is None else f"{outcome.value:.4f}"
        threshold = "-" if outcome.threshold is None else f"{outcome.threshold:.4f}"
        mark = f"[green]{SYM_OK}[/green]" if outcome.passed else f"[red]{SYM_ERR}[/red]"
        table.add_row(outcome.name, value, threshold, mark)

    console.print(table)


def print_verdict(result: MatchResult) -> None:
    """Print the final verdict.

    Args:
        result: Match result to summarize
    """
    if result.accepted:
        console.print(f"\n[bold green]{SYM_OK} Accepted[/bold green]")
    else:
        console.print(
            f"\n[bold red]{SYM_ERR} Rejected[/bold red] {SYM_DOT} {result.rejected_by}"
        )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
