"""
Sempoa Trainer: terminal front-end.

A Rich terminal interface over the curriculum, the progression engine and
the bead board.

Commands:
- sempoa status     - Completion and per-section progress
- sempoa levels     - All levels with lock/progress state
- sempoa select     - Make an unlocked level current
- sempoa practice   - Answer questions for the current level
- sempoa question   - One-off question for any configuration
- sempoa board      - Show the beads representing a value
- sempoa classify   - Technique table for single-digit pairs
- sempoa reset      - Start the curriculum over
"""

from __future__ import annotations

import sys
from typing import Optional

import typer
from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, IntPrompt
from rich.table import Table

from sempoa.config import get_settings
from sempoa.core.beads import BoardConfig, can_represent_value, parse_bead_key, value_to_bead_keys
from sempoa.core.classifier import build_matrix
from sempoa.core.constants import DigitLevel, Operation, section_label
from sempoa.db.progress_store import create_store
from sempoa.learning.curriculum import COMPLEMENT_ORDER, OPERATION_ORDER
from sempoa.learning.models import Level
from sempoa.learning.progression import ProgressionService
from sempoa.learning.question_generator import QuestionGenerator
from sempoa.learning.session import PracticeSession

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="sempoa",
    help="Sempoa Trainer: abacus complement practice",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
console = Console()


STYLES = {
    "correct": "bold green",
    "incorrect": "bold red",
    "info": "bold cyan",
    "locked": "dim",
    "completed": "green",
    "current": "bold yellow",
}


def _service() -> ProgressionService:
    settings = get_settings()
    return ProgressionService(create_store(settings))


def _fail(message: str) -> None:
    console.print(f"[red]{message}[/red]")
    raise typer.Exit(1)


def _parse_enum(enum_cls, value: str, label: str):
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        _fail(f"Unknown {label} '{value}' (choose from: {choices})")


def _level_state(level: Level, current_id: str | None) -> str:
    if level.id == current_id:
        return f"[{STYLES['current']}]current[/{STYLES['current']}]"
    if level.is_completed:
        return f"[{STYLES['completed']}]completed[/{STYLES['completed']}]"
    if level.is_unlocked:
        return "[cyan]unlocked[/cyan]"
    return f"[{STYLES['locked']}]locked[/{STYLES['locked']}]"


# =============================================================================
# Progress
# =============================================================================


@app.command()
def status() -> None:
    """Show overall completion and progress per section."""
    service = _service()
    progress = service.load_progress()
    current = service.get_current_level(progress)

    console.print("\n[bold cyan]Learning Journey[/bold cyan]")
    console.print("=" * 40)

    summary = Table(show_header=False, box=None)
    summary.add_column("Metric", style="dim")
    summary.add_column("Value", style="bold")
    summary.add_row("Completion", f"{service.get_completion_percentage(progress)}%")
    summary.add_row("Levels completed", f"{progress.completed_count}/{len(progress.all_levels)}")
    summary.add_row("Total score", str(progress.total_score))
    summary.add_row(
        "Current level",
        f"{current.title} ({current.id})" if current else "[green]Curriculum complete[/green]",
    )
    console.print(summary)

    table = Table(title="Sections", show_header=True)
    table.add_column("Operation", style="cyan")
    table.add_column("Section")
    table.add_column("Completed", justify="right")
    for operation in OPERATION_ORDER:
        for complement in COMPLEMENT_ORDER:
            section = service.get_section_progress(progress, operation, complement)
            table.add_row(
                f"{operation.icon} {operation.display_name}",
                section_label(complement, operation),
                f"{section.completed}/{section.total}",
            )
    console.print(table)


@app.command()
def levels(
    operation: Optional[str] = typer.Option(
        None,
        "--operation", "-o",
        help="Only show levels of this operation (addition, subtraction, mixed)",
    ),
) -> None:
    """List curriculum levels with their lock and progress state."""
    selected = _parse_enum(Operation, operation, "operation") if operation else None

    service = _service()
    progress = service.load_progress()

    table = Table(title="Levels")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Level ID")
    table.add_column("Title")
    table.add_column("Correct", justify="right")
    table.add_column("Attempts", justify="right")
    table.add_column("State")

    for index, level in enumerate(progress.all_levels):
        if selected is not None and level.operation_type is not selected:
            continue
        table.add_row(
            str(index + 1),
            level.id,
            level.title,
            str(level.correct_answers),
            str(level.questions_completed),
            _level_state(level, progress.current_level_id),
        )
    console.print(table)


@app.command()
def select(
    level_id: str = typer.Argument(..., help="Level ID, e.g. addition-smallFriend-single"),
) -> None:
    """Make an unlocked level the current level."""
    service = _service()
    progress = service.load_progress()

    level = progress.get_level(level_id)
    if level is None:
        _fail(f"Unknown level '{level_id}'")
    if not level.is_unlocked:
        _fail(f"Level '{level_id}' is locked")

    service.select_level(progress, level)
    console.print(f"[green]Current level: {level.title}[/green]")


@app.command()
def reset(
    confirm: bool = typer.Option(
        False,
        "--yes", "-y",
        help="Skip confirmation",
    ),
) -> None:
    """Discard all progress and start the curriculum over."""
    if not confirm and not Confirm.ask("Reset ALL progress? This cannot be undone!", default=False):
        raise typer.Exit(0)

    _service().reset_progress()
    console.print("[green]Progress has been reset.[/green]")


# =============================================================================
# Practice
# =============================================================================


@app.command()
def practice(
    count: int = typer.Option(10, "--count", "-n", min=1, help="Number of questions"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for questions"),
) -> None:
    """Answer questions for the current level."""
    service = _service()
    session = PracticeSession(
        service=service,
        progress=service.load_progress(),
        generator=QuestionGenerator(seed=seed),
    )

    for _ in range(count):
        level = session.current_level
        question = session.current_question
        if level is None or question is None:
            console.print(Panel("[green]You have completed the whole curriculum![/green]"))
            break

        console.print(
            f"\n[{STYLES['info']}]{level.title}[/{STYLES['info']}] "
            f"[dim]({level.correct_answers}/{service.mastery_threshold})[/dim]"
        )
        answer = IntPrompt.ask(f"  {question.prompt} =")
        while not can_represent_value(answer, session.board):
            console.print("[red]That value does not fit on the board[/red]")
            answer = IntPrompt.ask(f"  {question.prompt} =")

        session.set_value(answer)
        result = session.check_answer()
        style = STYLES["correct"] if result.is_correct else STYLES["incorrect"]
        console.print(f"  [{style}]{result.feedback}[/{style}]")
        if result.level_completed:
            next_level = session.current_level
            message = f"Level complete! Next: {next_level.title}" if next_level else "Curriculum complete!"
            console.print(Panel(f"[bold green]{message}[/bold green]"))

    console.print(
        f"\nSession: [green]{session.score} correct[/green], "
        f"[red]{session.mistakes} mistakes[/red]"
    )
    if session.completion_times:
        average = sum(entry.time for entry in session.completion_times) / len(session.completion_times)
        console.print(f"[dim]Average time per correct answer: {average:.1f}s[/dim]")


@app.command()
def question(
    difficulty: str = typer.Option("single", "--difficulty", "-d", help="single, double, triple, four, five"),
    operation: str = typer.Option("addition", "--operation", "-o", help="addition, subtraction, mixed"),
    small_friend: bool = typer.Option(False, "--small-friend", help="Require a small-friend step"),
    big_friend: bool = typer.Option(False, "--big-friend", help="Require a big-friend step"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
) -> None:
    """Generate a single question."""
    digit_level = _parse_enum(DigitLevel, difficulty, "difficulty")
    resolved = _parse_enum(Operation, operation, "operation")

    generated = QuestionGenerator(seed=seed).generate(
        digit_level,
        resolved,
        require_small_friend=small_friend,
        require_big_friend=big_friend,
    )
    console.print(f"{generated.prompt} = [bold]{generated.answer}[/bold]")


# =============================================================================
# Board
# =============================================================================


@app.command()
def board(
    value: int = typer.Argument(..., help="Non-negative value to show on the board"),
) -> None:
    """Show the beads that represent a value."""
    config = BoardConfig.from_settings()
    if not can_represent_value(value, config):
        _fail(f"Value {value} cannot be shown on a {config.columns}-column board (max {config.max_value})")

    keys = value_to_bead_keys(value, config)
    by_column: dict[int, list[str]] = {}
    for key in keys:
        by_column.setdefault(parse_bead_key(key).column, []).append(key)

    table = Table(title=f"Board for {value}")
    table.add_column("Column", justify="right")
    table.add_column("Place", justify="right", style="dim")
    table.add_column("Upper", style="magenta")
    table.add_column("Lower", style="cyan")
    table.add_column("Digit", justify="right", style="bold")

    for column in range(config.columns):
        column_keys = sorted(by_column.get(column, []))
        upper = [key for key in column_keys if "-upper-" in key]
        lower = [key for key in column_keys if "-lower-" in key]
        table.add_row(
            str(column),
            str(config.place_value(column)),
            " ".join(upper) or "-",
            " ".join(lower) or "-",
            str(5 * len(upper) + len(lower)),
        )
    console.print(table)
    console.print(f"[dim]{len(keys)} active beads[/dim]")


@app.command()
def classify(
    operation: str = typer.Argument(..., help="addition or subtraction"),
) -> None:
    """Show which technique every single-digit pair needs."""
    resolved = _parse_enum(Operation, operation, "operation")
    if resolved is Operation.MIXED:
        _fail("Classification needs addition or subtraction")

    matrix = build_matrix()[resolved]
    table = Table(title=f"{resolved.icon} {resolved.display_name} techniques")
    table.add_column(f"a {resolved.symbol} b", justify="right", style="bold")
    for b in range(10):
        table.add_column(str(b), justify="center")

    for a, row in enumerate(matrix):
        table.add_row(
            str(a),
            *(f"[{technique.color}]{technique.display_name}[/{technique.color}]" for technique in row),
        )
    console.print(table)


# =============================================================================
# Entry Point
# =============================================================================


def run() -> None:
    """CLI entry point."""
    settings = get_settings()
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.log_level,
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )

    app()


if __name__ == "__main__":
    run()
