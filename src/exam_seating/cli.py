"""CLI entry point for exam seating allocation."""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .allocator import (
    SeatAllocator,
    export_batch_json,
    export_result_json,
    load_exam_data,
    parse_exam,
)
from .config import load_config
from .exceptions import SeatingError
from .importers import student_set_from_file
from .models import AllocationResult, Hall, StudentSet
from .validators import validate_exam

app = typer.Typer(
    name="exam-seating",
    help="Allocate examinees to exam hall seats",
    add_completion=False,
)
console = Console()


class ModeOption(str, Enum):
    """Allocation mode options."""

    classic = "classic"
    constrained = "constrained"


class SeatingOption(str, Enum):
    """Seating type options."""

    fair = "fair"
    normal = "normal"


def _setup_logging(verbose: bool) -> None:
    """Route library logging through rich when verbose output is requested."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_exams(input_file: Path) -> list[dict]:
    if not input_file.exists():
        console.print(f"[bold red]Error:[/bold red] File not found: {input_file}")
        raise typer.Exit(1)

    try:
        exams = load_exam_data(input_file)
    except json.JSONDecodeError as e:
        console.print(f"[bold red]Error:[/bold red] Invalid JSON in {input_file}: {e}")
        raise typer.Exit(1)

    if not exams:
        console.print("[bold yellow]Warning:[/bold yellow] No exams found in input file")
        raise typer.Exit(1)
    return exams


@app.command()
def allocate(
    input_file: Annotated[
        Path,
        typer.Argument(help="Exam JSON file with halls and student sets"),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("-o", "--output", help="Output JSON file path"),
    ] = None,
    mode: Annotated[
        Optional[ModeOption],
        typer.Option("-m", "--mode", help="Allocation mode (overrides the exam file)"),
    ] = None,
    seating: Annotated[
        Optional[SeatingOption],
        typer.Option("-s", "--seating", help="Seating type (overrides the exam file)"),
    ] = None,
    config_file: Annotated[
        Optional[Path],
        typer.Option("--config", help="Path to seating-config.json"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Show detailed output"),
    ] = False,
) -> None:
    """Allocate seats for every exam in an exam file."""
    _setup_logging(verbose)
    exams = _load_exams(input_file)

    try:
        config = load_config(config_file)
    except (FileNotFoundError, ValueError, TypeError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    allocator = SeatAllocator(config)
    results: dict[str, AllocationResult] = {}
    halls_by_exam: dict[str, list[Hall]] = {}

    with console.status("[bold green]Allocating seats..."):
        for index, exam in enumerate(exams):
            exam_id = str(exam.get("id", f"exam-{index + 1}"))
            try:
                halls, student_sets = parse_exam(exam)
            except (KeyError, TypeError, ValueError) as e:
                console.print(f"[bold red]Error:[/bold red] Malformed exam '{exam_id}': {e}")
                raise typer.Exit(1)
            halls_by_exam[exam_id] = halls
            try:
                results[exam_id] = allocator.allocate(
                    halls,
                    student_sets,
                    mode=(mode.value if mode else exam.get("mode", exam.get("editorMode"))),
                    seating_type=(
                        seating.value
                        if seating
                        else exam.get("seating_type", exam.get("seatingType"))
                    ),
                )
            except ValueError as e:
                console.print(f"[bold red]Error:[/bold red] Malformed exam '{exam_id}': {e}")
                raise typer.Exit(1)

    failed = 0
    for exam_id, result in results.items():
        console.print(f"\n[bold]Exam:[/bold] {exam_id} ({result.mode.value}, {result.seating_type.value})")
        if not result.success:
            failed += 1
            console.print(f"  [bold red]✗ {result.error}[/bold red]")
        else:
            _show_hall_table(halls_by_exam[exam_id], result)

        if result.warnings:
            console.print(f"  [bold yellow]Warnings ({len(result.warnings)}):[/bold yellow]")
            for warning in result.warnings:
                console.print(f"    [yellow]• {warning}[/yellow]")

    output_path = output or Path("output/seating.json")
    if output_path.suffix != ".json":
        output_path = output_path.with_suffix(".json")
    with console.status(f"[bold green]Exporting to {output_path}..."):
        if len(results) == 1:
            export_result_json(next(iter(results.values())), output_path)
        else:
            export_batch_json(results, output_path)
    console.print(f"\n[bold green]✓[/bold green] Seating exported to: {output_path}")

    if failed:
        raise typer.Exit(1)


def _show_hall_table(halls: list[Hall], result: AllocationResult) -> None:
    """Show seated counts per hall."""
    statistics = result.statistics
    table = Table(title="Halls")
    table.add_column("Hall", style="cyan")
    table.add_column("Constraint", style="magenta")
    table.add_column("Seats", style="blue")
    table.add_column("Seated", style="green")

    for hall in halls:
        constraint = hall.constraint.mode.value
        if hall.constraint.is_restricted:
            constraint += f" ({', '.join(hall.constraint.allowed_set_ids)})"
        table.add_row(
            hall.name,
            constraint,
            str(statistics.hall_capacity.get(hall.id, 0)),
            str(statistics.by_hall.get(hall.id, 0)),
        )

    console.print(table)
    console.print(
        f"  Seated {statistics.total_assigned} of {statistics.total_students} students "
        f"in {statistics.total_seats} seats"
    )


@app.command()
def validate(
    input_file: Annotated[
        Path,
        typer.Argument(help="Exam JSON file with halls and student sets"),
    ],
) -> None:
    """Validate halls and student sets without allocating seats."""
    exams = _load_exams(input_file)
    all_valid = True

    for index, exam in enumerate(exams):
        exam_id = str(exam.get("id", f"exam-{index + 1}"))
        console.print(f"\n[bold]Validation Results for:[/bold] {exam_id}")

        try:
            halls, student_sets = parse_exam(exam)
        except (KeyError, TypeError, ValueError) as e:
            console.print(f"[bold red]✗ Malformed exam record: {e}[/bold red]")
            all_valid = False
            continue

        validation = validate_exam(halls, student_sets)

        if validation["valid"]:
            console.print("[bold green]✓ Exam is valid[/bold green]")
        else:
            all_valid = False
            console.print("[bold red]✗ Exam has issues[/bold red]")

        console.print(f"  Students: {validation['total_students']}")
        console.print(f"  Assignable seats: {validation['total_seats']}")

        if validation["errors"]:
            console.print(f"\n[bold red]Errors ({len(validation['errors'])}):[/bold red]")
            for error in validation["errors"]:
                console.print(f"  [red]• {error}[/red]")

        if validation["warnings"]:
            console.print(f"\n[bold yellow]Warnings ({len(validation['warnings'])}):[/bold yellow]")
            for warning in validation["warnings"]:
                console.print(f"  [yellow]• {warning}[/yellow]")

    if not all_valid:
        raise typer.Exit(1)


@app.command()
def stats(
    input_file: Annotated[
        Path,
        typer.Argument(help="Exam JSON file with halls and student sets"),
    ],
) -> None:
    """Show hall capacity and set sizes of an exam file."""
    exams = _load_exams(input_file)

    for index, exam in enumerate(exams):
        exam_id = str(exam.get("id", f"exam-{index + 1}"))
        try:
            halls, student_sets = parse_exam(exam)
        except (KeyError, TypeError, ValueError) as e:
            console.print(f"[bold red]Error:[/bold red] Malformed exam '{exam_id}': {e}")
            raise typer.Exit(1)

        console.print(f"\n[bold]Statistics for:[/bold] {exam_id}")

        hall_table = Table(title="Halls")
        hall_table.add_column("Hall", style="cyan")
        hall_table.add_column("Size", style="blue")
        hall_table.add_column("Assignable", style="green")
        hall_table.add_column("Faculty", style="yellow")
        hall_table.add_column("Constraint", style="magenta")
        hall_table.add_column("Fill", style="blue")

        for hall in halls:
            rows, cols = hall.dimensions
            hall_table.add_row(
                hall.name,
                f"{rows}×{cols}",
                str(hall.assignable_count),
                str(len(hall.layout) - hall.assignable_count),
                hall.constraint.mode.value,
                hall.constraint.fill_direction.value,
            )
        console.print(hall_table)

        set_table = Table(title="Student Sets")
        set_table.add_column("Set", style="cyan")
        set_table.add_column("Label", style="blue")
        set_table.add_column("Students", style="green")
        set_table.add_column("Roster", style="magenta")

        for student_set in student_sets:
            set_table.add_row(
                student_set.id,
                student_set.label,
                str(student_set.size),
                "explicit" if student_set.students is not None else "synthesized",
            )
        console.print(set_table)

        total_seats = sum(hall.assignable_count for hall in halls)
        total_students = sum(s.size for s in student_sets)
        console.print(f"  Total students: {total_students}")
        console.print(f"  Total assignable seats: {total_seats}")
        if total_students > total_seats:
            console.print(
                f"  [bold red]Short by {total_students - total_seats} seats[/bold red]"
            )


@app.command()
def roster(
    input_file: Annotated[
        Path,
        typer.Argument(help="Excel or CSV file with student register numbers", exists=True, readable=True),
    ],
    set_id: Annotated[
        str,
        typer.Option("--set-id", help="Identifier of the student set"),
    ],
    label: Annotated[
        Optional[str],
        typer.Option("--label", help="Display label (e.g. subject code)"),
    ] = None,
    column: Annotated[
        Optional[str],
        typer.Option("-c", "--column", help="Column holding register numbers (default: first)"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("-o", "--output", help="Output JSON file path"),
    ] = None,
) -> None:
    """Import a student set roster from a spreadsheet."""
    try:
        student_set: StudentSet = student_set_from_file(
            input_file, set_id=set_id, label=label or set_id, column=column
        )
    except SeatingError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    console.print(f"\n[bold]Roster for:[/bold] {student_set.label}")
    console.print(f"  Students: {student_set.size}")
    preview = ", ".join(student_set.students[:5])
    if student_set.size > 5:
        preview += ", ..."
    console.print(f"  {preview}")

    if output:
        output_path = output if output.suffix == ".json" else output.with_suffix(".json")
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(student_set.to_dict(), f, ensure_ascii=False, indent=2)
        console.print(f"\n[bold green]✓[/bold green] Student set exported to: {output_path}")


if __name__ == "__main__":
    app()
