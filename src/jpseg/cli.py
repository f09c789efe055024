"""CLI entry point for jpseg."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from jpseg.analyzer import AnalysisResult, ConcordanceResult, Tokenizer, get_tokenizer
from jpseg.config import settings
from jpseg.exceptions import JpsegError
from jpseg.logging import setup_logging
from jpseg.session import AnalysisSession

app = typer.Typer(
    name="jpseg",
    help="Japanese morphological analysis: word frequencies and KWIC concordance.",
    add_completion=False,
)

console = Console()
error_console = Console(stderr=True)

FileArgument = Annotated[
    Path | None,
    typer.Argument(help="UTF-8 text file to analyze", dir_okay=False),
]
TextOption = Annotated[
    str | None,
    typer.Option("--text", help="Analyze this text instead of a file"),
]
LanguageOption = Annotated[
    str | None,
    typer.Option(
        "--language",
        "-l",
        help="Tokenizer language: japanese, english or auto (default from settings)",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable verbose debug output to stderr"),
]


def _open_session(file: Path | None, text: str | None, language: str | None) -> AnalysisSession:
    """Build a session from exactly one of a file or inline text."""
    if (file is None) == (text is None):
        error_console.print("[red]Error:[/red] Provide either a FILE or --text (not both).")
        raise typer.Exit(1)

    session = AnalysisSession(tokenizer=_make_tokenizer(language, text))
    if file is not None:
        session.load_file(file)
        if (language or settings.language) == "auto":
            session.tokenizer = _make_tokenizer("auto", session.input_text)
    else:
        session.input_text = text or ""
    return session


def _make_tokenizer(language: str | None, text: str | None) -> Tokenizer:
    try:
        return get_tokenizer(language or settings.language, text)
    except ValueError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None


@app.command()
def analyze(
    file: FileArgument = None,
    text: TextOption = None,
    top: Annotated[
        int | None,
        typer.Option("--top", "-t", help="Show only the N most frequent words", min=1),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Also write the CSV export to this path"),
    ] = None,
    language: LanguageOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Tokenize text and show each word with its part of speech and frequency."""
    setup_logging(settings.log_level, verbose=verbose)

    try:
        session = _open_session(file, text, language)
        result = session.analyze()

        if result.is_empty:
            error_console.print("[yellow]Warning:[/yellow] No tokens found")
            raise typer.Exit(0)

        if top is not None:
            display_top_words(result, top)
        else:
            display_tokens(result)

        if output_file is not None and session.save_csv(output_file):
            console.print(f"Results written to [bold]{escape(str(output_file))}[/bold]")
    except JpsegError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None


@app.command()
def search(
    keyword: Annotated[str, typer.Argument(help="Exact surface form to search for")],
    file: FileArgument = None,
    text: TextOption = None,
    window: Annotated[
        int | None,
        typer.Option("--window", "-w", help="Tokens of context on each side", min=1),
    ] = None,
    language: LanguageOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Show every occurrence of KEYWORD with its surrounding tokens."""
    setup_logging(settings.log_level, verbose=verbose)

    try:
        session = _open_session(file, text, language)
        results = session.search(keyword, window)
    except JpsegError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None

    if not results:
        error_console.print(
            f"[yellow]Warning:[/yellow] No occurrences of '{escape(keyword)}' found"
        )
        raise typer.Exit(0)

    display_concordance(results)


@app.command()
def export(
    file: Annotated[Path, typer.Argument(help="UTF-8 text file to analyze", dir_okay=False)],
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="CSV path (default from settings)"),
    ] = None,
    language: LanguageOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Analyze a file and write the word list as a spreadsheet-friendly CSV."""
    setup_logging(settings.log_level, verbose=verbose)
    target = output_file or Path(settings.csv_filename)

    try:
        session = _open_session(file, None, language)
        session.analyze()
        written = session.save_csv(target)
    except JpsegError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None

    if not written:
        console.print("Nothing to export.")
        return

    console.print(f"Wrote {len(session.tokens)} rows to [bold]{escape(str(target))}[/bold]")


def display_tokens(result: AnalysisResult) -> None:
    """Display every token with its tag and frequency as a Rich table."""
    console.print(f"[bold]Total tokens:[/bold] {result.total_tokens:,}")
    console.print(f"[bold]Unique words:[/bold] {result.unique_words:,}")
    console.print()

    table = Table(title="Morphological Analysis")
    table.add_column("単語", style="cyan")
    table.add_column("品詞")
    table.add_column("頻度", justify="right", style="green")

    for token in result.tokens:
        table.add_row(
            escape(token.text), escape(token.pos), str(result.frequency_of(token.text))
        )

    console.print(table)


def display_top_words(result: AnalysisResult, n: int) -> None:
    """Display the N most frequent words as a Rich table."""
    table = Table(title="Word Frequencies")
    table.add_column("Rank", justify="right", style="dim")
    table.add_column("単語", style="cyan")
    table.add_column("頻度", justify="right", style="green")

    for i, (word, count) in enumerate(result.top_words(n), 1):
        table.add_row(str(i), escape(word), str(count))

    console.print(table)


def display_concordance(results: list[ConcordanceResult]) -> None:
    """Display concordance lines as a KWIC table."""
    table = Table(title=f"Concordance: {escape(results[0].keyword)} ({len(results)} hits)")
    table.add_column("Line", justify="right", style="dim")
    table.add_column("Left", justify="right")
    table.add_column("Keyword", justify="center", style="bold cyan")
    table.add_column("Right", justify="left")

    for r in results:
        table.add_row(
            str(r.line_number),
            escape(r.left_context),
            escape(r.keyword),
            escape(r.right_context),
        )

    console.print(table)


@app.command()
def config() -> None:
    """Show current configuration."""
    table = Table(title="jpseg Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("JPSEG_LANGUAGE", settings.language)
    table.add_row("JPSEG_DEFAULT_WINDOW_SIZE", str(settings.default_window_size))
    table.add_row("JPSEG_CSV_FILENAME", settings.csv_filename)
    table.add_row("JPSEG_LOG_LEVEL", settings.log_level)

    console.print(table)


if __name__ == "__main__":
    app()
