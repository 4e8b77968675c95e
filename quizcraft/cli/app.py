"""Typer CLI application for parsing, generating and exporting quizzes."""

from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from quizcraft.config.logging import configure_logging
from quizcraft.config.settings import get_settings
from quizcraft.editing.operations import filter_for_presentation
from quizcraft.errors import QuizcraftError
from quizcraft.export.exporter import ExportFormat, export_questions
from quizcraft.export.text_export import option_letter
from quizcraft.graph.state import create_initial_state
from quizcraft.graph.workflow import compile_workflow
from quizcraft.ingest.extract import extract_text
from quizcraft.models.quiz import (
    GenerationRequest,
    ParserConfig,
    ParseResult,
    PresentationMode,
    PresentedQuestion,
    QuestionDifficulty,
    QuestionSchema,
    SegmentationConvention,
)
from quizcraft.parsing.parser import QuizTextParser

app = typer.Typer(
    name="quizcraft",
    help="Turn study material into editable, exportable quizzes",
    add_completion=False,
)

console = Console()


def fail(message: str) -> None:
    """Print an error and exit with status 1."""
    console.print(f"[red]Error:[/red] {message}", style="bold")
    raise typer.Exit(code=1)


def load_source_text(input_file: Path) -> str:
    """Extract the text of an input file, exiting on failure."""
    try:
        return extract_text(input_file)
    except QuizcraftError as e:
        fail(str(e))


@app.command()
def parse(
    input_file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="Quiz text to parse (text, JSON, PDF or image file)",
    ),
    schema: QuestionSchema = typer.Option(
        QuestionSchema.MULTIPLE_CHOICE,
        "--schema",
        "-s",
        help="Question type every block is validated against",
        case_sensitive=False,
    ),
    options: Optional[int] = typer.Option(
        None,
        "--options",
        help="Required number of options for multiple choice questions",
        min=2,
    ),
    convention: SegmentationConvention = typer.Option(
        SegmentationConvention.HEADING,
        "--convention",
        "-c",
        help="How questions are laid out in the text",
        case_sensitive=False,
    ),
    mode: PresentationMode = typer.Option(
        PresentationMode.PROMPTS_AND_ANSWERS,
        "--mode",
        "-m",
        help="Which parts of each question to show and export",
        case_sensitive=False,
    ),
    export_format: Optional[ExportFormat] = typer.Option(
        None,
        "--format",
        "-f",
        help="Export the parsed questions in this format",
        case_sensitive=False,
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file base name",
    ),
    output_dir: Optional[str] = typer.Option(
        None,
        "--output-dir",
        help="Directory exported files are written to",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """
    Parse existing quiz text into questions.

    Example:
        quizcraft parse quiz.txt --schema true_false -f xlsx
    """
    settings = get_settings()
    configure_logging(settings.log_level, verbose)

    try:
        config = ParserConfig(
            option_count=options or settings.default_option_count,
            question_schema=schema,
            convention=convention,
        )
    except ValidationError as e:
        fail(e.errors()[0]["msg"])

    raw_text = load_source_text(input_file)
    result = QuizTextParser(config).parse(raw_text)
    report_parse_result(result)

    questions = filter_for_presentation(result.records, mode)
    display_questions(questions)

    if export_format is not None:
        export_and_report(
            questions,
            export_format,
            output or settings.default_output_path,
            output_dir or settings.output_dir,
        )


@app.command()
def generate(
    input_file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="Study material (text, JSON, PDF or image file)",
    ),
    num_questions: Optional[int] = typer.Option(
        None,
        "--questions",
        "-q",
        help="Number of questions to generate",
        min=1,
        max=50,
    ),
    difficulty: QuestionDifficulty = typer.Option(
        QuestionDifficulty.MEDIUM,
        "--difficulty",
        "-d",
        help="Overall difficulty level",
        case_sensitive=False,
    ),
    schema: QuestionSchema = typer.Option(
        QuestionSchema.MULTIPLE_CHOICE,
        "--schema",
        "-s",
        help="Question type to generate",
        case_sensitive=False,
    ),
    options: Optional[int] = typer.Option(
        None,
        "--options",
        help="Number of options for multiple choice questions",
        min=2,
        max=26,
    ),
    max_regenerations: Optional[int] = typer.Option(
        None,
        "--max-regenerations",
        help="Extra generation rounds when too few questions parse",
        min=0,
        max=10,
    ),
    mode: PresentationMode = typer.Option(
        PresentationMode.PROMPTS_AND_ANSWERS,
        "--mode",
        "-m",
        help="Which parts of each question to show and export",
        case_sensitive=False,
    ),
    export_format: Optional[ExportFormat] = typer.Option(
        None,
        "--format",
        "-f",
        help="Export the generated questions in this format",
        case_sensitive=False,
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file base name",
    ),
    output_dir: Optional[str] = typer.Option(
        None,
        "--output-dir",
        help="Directory exported files are written to",
    ),
    raw_output: Optional[Path] = typer.Option(
        None,
        "--raw-output",
        help="Also save the unparsed model output to this file",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """
    Generate a quiz from study material using AI.

    Example:
        quizcraft generate notes.pdf -q 15 -d hard --schema short_answer -f docx
    """
    settings = get_settings()
    configure_logging(settings.log_level, verbose)

    request = GenerationRequest(
        num_questions=num_questions or settings.default_question_count,
        difficulty=difficulty,
        option_count=options or settings.default_option_count,
        question_schema=schema,
    )
    source_text = load_source_text(input_file)
    if not source_text.strip():
        fail("Please provide some text to generate a quiz from.")

    display_config(input_file, request)

    state = create_initial_state(source_text, request, max_regenerations)
    workflow = compile_workflow()

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            task = progress.add_task("[cyan]Generating quiz...", total=None)
            final_state = workflow.invoke(state)
            progress.update(task, description="[green]Quiz generation complete!")
    except (QuizcraftError, ValueError) as e:
        fail(str(e))

    if raw_output is not None and final_state.get("best_raw_quiz_text"):
        raw_output.write_text(final_state["best_raw_quiz_text"], encoding="utf-8")
        console.print(f"Raw quiz text saved to: {raw_output}")

    result = final_state.get("best_result") or ParseResult()
    report_parse_result(result)

    questions = filter_for_presentation(result.records, mode)
    display_questions(questions)

    if export_format is not None:
        export_and_report(
            questions,
            export_format,
            output or settings.default_output_path,
            output_dir or settings.output_dir,
        )


@app.command()
def info() -> None:
    """Display information about the quiz tool."""
    schemas = ", ".join(schema.value for schema in QuestionSchema)
    conventions = ", ".join(convention.value for convention in SegmentationConvention)
    formats = ", ".join(fmt.value for fmt in ExportFormat)
    modes = ", ".join(mode.value for mode in PresentationMode)

    info_text = f"""
[bold cyan]quizcraft[/bold cyan]

[bold]Question types:[/bold] {schemas}
[bold]Text layouts:[/bold] {conventions}
[bold]Export formats:[/bold] {formats}
[bold]Presentation modes:[/bold] {modes}

[bold]Input files:[/bold] PDF, images (OCR), plain text, JSON
    """
    console.print(Panel(info_text, title="Quiz Info", border_style="cyan"))


def report_parse_result(result: ParseResult) -> None:
    """Tell the user how much of the text could be turned into questions."""
    if result.is_empty_input:
        fail("No questions found in the text.")
    if not result.records:
        fail(f"None of the {result.blocks_seen} question blocks could be parsed.")
    if result.rejected_count:
        console.print(
            f"[yellow]Warning:[/yellow] {result.rejected_count} of "
            f"{result.blocks_seen} question blocks could not be parsed."
        )


def display_config(input_file: Path, request: GenerationRequest) -> None:
    """Display the configuration before generation."""
    table = Table(title="Quiz Configuration", show_header=False, border_style="cyan")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Source", str(input_file))
    table.add_row("Questions", str(request.num_questions))
    table.add_row("Difficulty", request.difficulty.value.capitalize())
    table.add_row("Question type", request.question_schema.value)
    if request.question_schema == QuestionSchema.MULTIPLE_CHOICE:
        table.add_row("Options", str(request.option_count))

    console.print()
    console.print(table)


def display_questions(questions: List[PresentedQuestion]) -> None:
    """Show the questions in a table."""
    table = Table(title=f"Questions ({len(questions)})", border_style="green")
    table.add_column("#", style="cyan")
    table.add_column("Question", style="white")
    table.add_column("Options", style="white")
    table.add_column("Answer", style="green")

    for number, question in enumerate(questions, 1):
        choices = "\n".join(
            f"{option_letter(i)}. {choice}" for i, choice in enumerate(question.choices or [])
        )
        table.add_row(
            str(number),
            question.prompt or "",
            choices,
            question.correct_answer or "",
        )

    console.print()
    console.print(table)


def export_and_report(
    questions: List[PresentedQuestion],
    export_format: ExportFormat,
    output: str,
    output_dir: str,
) -> None:
    """Export the questions and print where they went."""
    console.print(f"\n[cyan]Exporting to {export_format.value.upper()}...[/cyan]")
    try:
        output_file = export_questions(questions, export_format, output, output_dir=output_dir)
    except (OSError, ValueError) as e:
        fail(f"Error during export: {e}")

    console.print(f"\n[green]✓[/green] Quiz exported to: {output_file}")


@app.callback()
def callback() -> None:
    """
    quizcraft - Parse, generate and export quizzes.
    """
    pass


if __name__ == "__main__":
    app()
