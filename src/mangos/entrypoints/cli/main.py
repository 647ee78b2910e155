"""MANGOS CLI entry point.

Defines the top-level ``mangos`` group and registers the text commands.

Examples
    $ mangos --version
    $ mangos split "a,,b" -d ,
"""

import click

from mangos import __version__

from .text import COMMANDS


@click.group()
@click.version_option(__version__, prog_name="mangos")
def mangos() -> None:
    """Text utilities built on the MANGOS library.

    Split text into tokens, join tokens back together, trim whitespace, change
    ASCII case and reverse text. Every command writes its result to stdout.
    """


for command in COMMANDS:
    mangos.add_command(command)
