"""Command line entry point for inspecting preference hints."""

import os
from pathlib import Path

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table
from rich.text import Text

from prefhints.config import HintsConfig
from prefhints.domain.types import CompletionResult, Context, Token, TokenType
from prefhints.infrastructure.memory import (
    InMemoryEditor,
    InMemoryPreferenceStore,
    StaticContextAnalyzer,
    StaticLanguageRegistry,
    StaticLintRegistry,
    StaticThemeRegistry,
)
from prefhints.logger import get_logger, setup_logger
from prefhints.provider import PreferencesHintProvider
from prefhints.schema.loader import HintSources, load_hint_sources

load_dotenv()

console = Console()

cli = typer.Typer(
    name="prefhints",
    help="Inspect the key and value hints offered inside JSON preference files",
    epilog="""
    Examples:
    $ prefhints keys sources.json --parent language --query java
    $ prefhints values sources.json themes.theme --query dark
    """,
    add_completion=False,
)


def _document_option() -> str:
    return typer.Option(
        "brackets.json", "--document", "-d", help="Name of the edited file, must match PREFHINTS_DOCUMENT_PATTERN"
    )


def _debug_option() -> bool:
    return typer.Option(os.getenv("DEBUG", "false").lower() == "true", "--debug", help="Enable debug logging")


def _load(sources_path: Path) -> HintSources:
    try:
        return load_hint_sources(sources_path)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        console.print(f"[red]Error:[/red] could not load hint sources: {e}")
        raise typer.Exit(code=1)


def _suggest(
    sources: HintSources, context: Context, config: HintsConfig, document: str
) -> CompletionResult | None:
    """Run the full availability check and ranking for a hand-built context."""
    editor = InMemoryEditor(text=context.token.text, cursor=context.cursor_offset_in_token, document_name=document)
    provider = PreferencesHintProvider(
        store=InMemoryPreferenceStore(sources.preferences),
        analyzer=StaticContextAnalyzer(context),
        language_registry=StaticLanguageRegistry(sources.languages),
        lint_registry=StaticLintRegistry(sources.linters),
        theme_registry=StaticThemeRegistry(sources.themes),
        config=config,
    )
    provider.gate.set_active_document(editor.document_name)
    if not provider.is_completion_available(editor):
        return None
    return provider.get_completions()


def _print(result: CompletionResult | None) -> None:
    if result is None or not result.candidates:
        console.print("[yellow]No suggestions[/yellow]")
        return

    table = Table(title=f"Suggestions for {result.query!r}" if result.query else "Suggestions")
    table.add_column("#", justify="right")
    table.add_column("Suggestion")
    if result.show_metadata:
        table.add_column("Type")
        table.add_column("Description")

    for index, record in enumerate(result.candidates, start=1):
        label = Text.assemble(*[(span.text, "bold cyan") if span.matched else span.text for span in record.ranges])
        row = [str(index), label]
        if result.show_metadata:
            value_type = record.candidate.value_type
            row += [value_type.value if value_type else "", record.candidate.description or ""]
        table.add_row(*row)

    console.print(table)


def _token(query: str) -> Token:
    text = f'"{query}'
    return Token(text=text, start_offset=0, end_offset=len(text))


@cli.command()
def keys(
    sources: Path = typer.Argument(..., help="JSON file with preferences, languages, themes and linters"),
    parent: str = typer.Option("", "--parent", "-p", help="Parent key of the object being edited"),
    query: str = typer.Option("", "--query", "-q", help="Text typed so far"),
    exclude: str = typer.Option("", "--exclude", "-x", help="Comma-separated keys already present"),
    document: str = _document_option(),
    debug: bool = _debug_option(),
):
    """Show the key suggestions for an object under PARENT."""
    setup_logger(log_level="DEBUG" if debug else "INFO")
    logger = get_logger("main")

    hint_sources = _load(sources)
    token = _token(query)
    context = Context(
        token_type=TokenType.KEY,
        token=token,
        parent_key_name=parent,
        cursor_offset_in_token=len(token.text),
        exclusion_list=frozenset(k.strip() for k in exclude.split(",") if k.strip()),
    )
    logger.info(f"Key suggestions requested (parent={parent!r}, query={query!r})")
    _print(_suggest(hint_sources, context, HintsConfig.from_env(), document))


@cli.command()
def values(
    sources: Path = typer.Argument(..., help="JSON file with preferences, languages, themes and linters"),
    key: str = typer.Argument(..., help="Key whose value is being edited"),
    parent: str = typer.Option("", "--parent", "-p", help="Parent key of the object holding KEY"),
    query: str = typer.Option("", "--query", "-q", help="Text typed so far"),
    array: bool = typer.Option(False, "--array", help="The value is an element of an array"),
    document: str = _document_option(),
    debug: bool = _debug_option(),
):
    """Show the value suggestions for KEY."""
    setup_logger(log_level="DEBUG" if debug else "INFO")
    logger = get_logger("main")

    hint_sources = _load(sources)
    token = _token(query)
    context = Context(
        token_type=TokenType.VALUE,
        token=token,
        parent_key_name=parent,
        key_name=key,
        cursor_offset_in_token=len(token.text),
        is_array_element=array,
    )
    logger.info(f"Value suggestions requested (key={key!r}, parent={parent!r}, query={query!r})")
    _print(_suggest(hint_sources, context, HintsConfig.from_env(), document))


def run():
    """Entry point for the prefhints CLI."""
    cli()


if __name__ == "__main__":
    run()
