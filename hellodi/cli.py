"""
CLI tool for hellodi using Typer
"""

import typer
from rich.console import Console
from typer import Context

from . import __version__
from .app import run
from .logging_config import configure_logging

console = Console()

app = typer.Typer(
    name="hellodi",
    help="Greets the world through an injected console output. Runs 'hello' by default.",
    rich_markup_mode="rich",
    invoke_without_command=True,
    add_completion=False,
)


@app.callback()
def main(ctx: Context):
    """
    hellodi CLI
    """
    configure_logging()
    if ctx.invoked_subcommand is None:
        hello()


@app.command()
def hello():
    """Print the greeting to standard output"""
    run()


@app.command()
def version():
    """Show version information"""
    console.print(f"hellodi v{__version__}")
