"""Command line interface for generating identifiers."""

from typing import Annotated, Any

import typer
from pydantic import ValidationError
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from structlog import get_logger

from controly_ids._version import __version__
from controly_ids.config.settings import GeneratorSettings
from controly_ids.core.generator import Generator
from controly_ids.core.logging import setup_logging
from controly_ids.exceptions import (
    EntropyUnavailableError,
    GeneratorConfigError,
    GeneratorSaturatedError,
)


app = typer.Typer(
    name="controly-ids",
    help="Generate short, collision-free random identifiers",
    no_args_is_help=True,
)

console = Console()
logger = get_logger(__name__)


def version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        console.print(f"controly-ids {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Controly identifier generator."""


def load_settings(**overrides: Any) -> GeneratorSettings:
    """Load settings from the environment with non-None CLI overrides applied.

    Raises:
        typer.Exit: If the resulting configuration is invalid

    """
    cli_overrides = {key: value for key, value in overrides.items() if value is not None}
    try:
        settings = GeneratorSettings(**cli_overrides)
    except ValidationError as e:
        console.print("[red]Invalid generator configuration:[/red]")
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            console.print(f"  {field}: {error['msg']}", highlight=False)
        raise typer.Exit(1) from e

    setup_logging(json_logs=settings.json_logs, log_level_name=settings.log_level)
    return settings


@app.command(name="generate")
def generate_ids(
    count: Annotated[
        int,
        typer.Option("--count", "-n", min=1, help="Number of identifiers to generate"),
    ] = 1,
    length: Annotated[
        int | None,
        typer.Option("--length", "-l", help="Symbols per identifier"),
    ] = None,
    alphabet: Annotated[
        str | None,
        typer.Option("--alphabet", "-a", help="Distinct symbols to draw from"),
    ] = None,
    max_attempts: Annotated[
        int | None,
        typer.Option("--max-attempts", help="Draws allowed per identifier"),
    ] = None,
) -> None:
    """Print unique identifiers, one per line.

    All identifiers come from one generator, so they are unique among
    themselves.

    Examples:
        controly-ids generate
        controly-ids generate -n 10 --length 6
        controly-ids generate --alphabet 0123456789 --length 4

    """
    settings = load_settings(
        length=length, alphabet=alphabet, max_attempts=max_attempts
    )

    try:
        generator = Generator.from_settings(settings)
    except GeneratorConfigError as e:
        console.print(f"[red]Invalid generator configuration:[/red] {e.message}")
        raise typer.Exit(1) from e

    try:
        for _ in range(count):
            console.print(
                generator.generate(), markup=False, highlight=False, soft_wrap=True
            )
    except GeneratorSaturatedError as e:
        logger.error("cli_generate_failed", error=e.message, issued=len(generator))
        console.print(
            f"[red]Keyspace exhausted after {len(generator)} identifiers.[/red] "
            "Use a longer length or a larger alphabet."
        )
        raise typer.Exit(1) from e
    except EntropyUnavailableError as e:
        console.print(f"[red]Secure random source unavailable:[/red] {e.message}")
        raise typer.Exit(1) from e


@app.command(name="keyspace")
def show_keyspace(
    length: Annotated[
        int | None,
        typer.Option("--length", "-l", help="Symbols per identifier"),
    ] = None,
    alphabet: Annotated[
        str | None,
        typer.Option("--alphabet", "-a", help="Distinct symbols to draw from"),
    ] = None,
) -> None:
    """Show the alphabet, length and number of possible identifiers."""
    settings = load_settings(length=length, alphabet=alphabet)
    generator = Generator.from_settings(settings)

    table = Table(
        show_header=True,
        header_style="bold cyan",
        box=box.ROUNDED,
        title="Identifier Keyspace",
        title_style="bold white",
    )
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("Alphabet", escape("".join(generator.alphabet)))
    table.add_row("Alphabet size", str(len(generator.alphabet)))
    table.add_row("Length", str(generator.length))
    table.add_row("Max attempts", str(generator.max_attempts))
    table.add_row("Keyspace", f"{generator.keyspace_size:,}")

    console.print(table)


def app_main() -> None:
    """Entry point for the console script."""
    app()
