"""Command line interface for wikdget."""

import json
from pathlib import Path
from typing import Optional

import click

from .core.config import Config
from .database import Database
from .formatter import format_templates
from .log import setup_logging
from .search import LanguageController, SearchController


@click.group()
@click.version_option()
@click.option("--config", "config_path", type=click.Path(exists=True), help="Configuration YAML file")
@click.option("--db", "--database", "database_path", help="Path to the Wiktionary JSON dump")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
@click.option("-d", "--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[str], database_path: Optional[str],
        verbose: bool, debug: bool) -> None:
    """Look up words in Wiktionary and show readable definitions."""
    config = Config.from_file(Path(config_path)) if config_path else Config()
    if database_path:
        config.database_path = database_path
    config.verbose = config.verbose or verbose
    config.debug = config.debug or debug

    setup_logging(config.verbose, config.debug)
    ctx.obj = config


def _open_database(config: Config) -> Database:
    database = Database(config)
    try:
        database.load()
    except Exception as e:
        click.echo(f"Error loading database: {e}", err=True)
        raise click.Abort()
    return database


@cli.command("format")
@click.argument("text")
def format_command(text: str) -> None:
    """Render the templates in TEXT."""
    click.echo(format_templates(text))


@cli.command()
@click.argument("query", default="")
@click.pass_obj
def languages(config: Config, query: str) -> None:
    """List the languages matching QUERY."""
    for language in LanguageController(config.languages).filter(query):
        click.echo(language)


@cli.command()
@click.argument("word")
@click.option("--lang", "language", required=True, help="Language of the entry (e.g., Dutch)")
@click.pass_obj
def lookup(config: Config, word: str, language: str) -> None:
    """Show the definitions of WORD in a language."""
    controller = SearchController(_open_database(config))
    try:
        results = controller.search(word, language)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()

    if not results:
        click.echo(f"No {language} entries for {word}")
        return
    for number, line in enumerate(results, start=1):
        click.echo(f"{number}. {line}")


@cli.command()
@click.argument("word")
@click.pass_obj
def page(config: Config, word: str) -> None:
    """Print the parsed entries of WORD as JSON."""
    database = _open_database(config)
    try:
        found = database.find_page(word)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()

    if found is None:
        click.echo(f"No page for {word}", err=True)
        raise click.Abort()
    click.echo(json.dumps(found.to_dict(), indent=2, ensure_ascii=False))


@cli.command()
@click.argument("word")
@click.option("--lang", "language", required=True, help="Language of the entry (e.g., Dutch)")
@click.pass_obj
def audio(config: Config, word: str, language: str) -> None:
    """Print the pronunciation audio URLs of WORD."""
    database = _open_database(config)
    try:
        page = database.find_page(word)
        entries = database.find_entries_for_language(page, language) if page else []
        urls = []
        for entry in entries:
            for url in database.get_audio_urls_for_entry(entry):
                if url is not None and url not in urls:
                    urls.append(url)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()

    if not urls:
        click.echo(f"No pronunciations found for {word}")
    for url in urls:
        click.echo(url)


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
