"""
Production output capabilities
"""

from typing import Optional, TextIO

import typer

from .dependency import Dependency


class ConsoleDependency(Dependency):
    """Writes each message as a line on the console"""

    def __init__(self, stream: Optional[TextIO] = None):
        # None means whatever sys.stdout is at write time
        self.stream = stream

    def output(self, message: str) -> None:
        # color=True keeps escape sequences when the target is not a tty
        typer.echo(message, file=self.stream, color=True)
