"""kwic CLI: keyword-in-context search over a single text file.

Three commands: validate, tokens, search.
Uses typer for argument parsing and rich for formatted terminal output.
"""

from __future__ import annotations

import json
import logging

import typer
from rich.console import Console
from rich.panel import Panel
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from textsearch.config import load_config
from textsearch.errors import TextSearchError
from textsearch.indexer import read_document
from textsearch.logging import CLI, configure_logging, get_logger
from textsearch.searcher import TextSearcher
from textsearch.tokenizer import TextTokenizer
from textsearch.validator import validate_config

app = typer.Typer(help="kwic: find every occurrence of a word with its surrounding context.")
console = Console()
logger = get_logger(__name__)


def _fail(message: str) -> None:
    console.print(f"[red]Error: {escape(message)}[/red]", soft_wrap=True)
    raise typer.Exit(code=1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


# ── validate ────────────────────────────────────────────────────────


@app.command()
def validate(config_path: str = typer.Argument(..., help="Path to config JSON")):
    """Check a search config for syntactic and semantic errors."""
    passed, errors = validate_config(config_path)

    if passed:
        console.print(
            Panel("[bold green]✓ Validation passed[/bold green]", border_style="green")
        )
    else:
        console.print(
            Panel("[bold red]✗ Validation failed[/bold red]", border_style="red")
        )
        for err in errors:
            console.print(f"  [red]✗[/red] {escape(err)}", soft_wrap=True)
        raise typer.Exit(code=1)


# ── tokens ──────────────────────────────────────────────────────────


@app.command()
def tokens(
    file_path: str = typer.Argument(..., help="Text file to tokenize"),
    config_path: str | None = typer.Option(None, "--config", help="Path to config JSON"),
    pattern: str | None = typer.Option(None, "--pattern", help="Override the word pattern"),
    limit: int = typer.Option(50, "--limit", min=0, help="Show at most N tokens (0 = all)"),
):
    """Show how a file splits into word and filler tokens."""
    try:
        config = load_config(config_path, word_pattern=pattern)
        text = read_document(file_path, config["encoding"])
        tokenizer = TextTokenizer(text, config["word_pattern"])
    except TextSearchError as e:
        _fail(str(e))

    all_tokens = tokenizer.tokens
    shown = all_tokens if limit == 0 else all_tokens[:limit]

    table = Table(title=f"Tokens: {file_path}")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Kind", width=6)
    table.add_column("Offset", justify="right")
    table.add_column("Text", style="cyan")
    for i, token in enumerate(shown):
        kind = "[green]word[/green]" if token.is_word else "[dim]filler[/dim]"
        table.add_row(str(i), kind, str(token.start), Text(repr(token.text)))
    console.print(table)

    word_total = sum(1 for t in all_tokens if t.is_word)
    console.print(
        f"\n{len(all_tokens)} tokens ({word_total} words), showing {len(shown)}"
    )


# ── search ──────────────────────────────────────────────────────────


@app.command()
def search(
    file_path: str = typer.Argument(..., help="Text file to search"),
    word: str = typer.Argument(..., help="Word to look for (case-insensitive)"),
    context: int | None = typer.Option(
        None, "--context", "-c", help="Words of context on each side (default: from config)"
    ),
    config_path: str | None = typer.Option(None, "--config", help="Path to config JSON"),
    as_json: bool = typer.Option(False, "--json", help="Print hits as JSON"),
):
    """Print every occurrence of WORD with its surrounding context."""
    try:
        config = load_config(config_path, context_words=context)
        context_words = config["context_words"]
        searcher = TextSearcher.from_file(
            file_path, encoding=config["encoding"], word_pattern=config["word_pattern"]
        )
        hits = searcher.search_hits(word, context_words)
    except TextSearchError as e:
        _fail(str(e))

    logger.info(f"{CLI} {file_path}: {len(hits)} hit(s) for {word!r}")

    if as_json:
        typer.echo(json.dumps([h.to_dict() for h in hits], indent=2, ensure_ascii=False))
        return

    if not hits:
        console.print(f'[dim]No matches for "{escape(word)}" in {escape(file_path)}[/dim]')
        return

    console.print(f'\n[bold]Query:[/bold] "{escape(word)}"  |  Context: {context_words} word(s)')
    table = Table()
    table.add_column("#", style="dim", width=3)
    table.add_column("Word #", justify="right", width=7)
    table.add_column("Context", style="cyan")
    for i, hit in enumerate(hits, 1):
        table.add_row(str(i), str(hit.word_index), Text(hit.text))
    console.print(table)
    console.print(
        f"\n{len(hits)} hit(s) among {searcher.word_count} words "
        f"({searcher.vocabulary_size} distinct)"
    )


if __name__ == "__main__":
    app()
