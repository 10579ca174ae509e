"""Command 'version' of taskcadence"""

import typer

from taskcadence import __version__
from taskcadence.utils.ui.console import get_console

app = typer.Typer()
console = get_console(highlight=False)


@app.command()
def version() -> None:
    """Show version information"""
    console.print(__version__)
