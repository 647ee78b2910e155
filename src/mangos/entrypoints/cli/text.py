"""MANGOS text commands.

Thin wrappers exposing `mangos.text` on the command line. Each command takes
its input as an argument (``-`` reads stdin) and writes the result to
stdout, so commands can be chained with pipes.

Examples
    $ mangos split "a,,b" -d ,
    $ mangos split "a;b,c" -d ";," --multiple
    $ mangos join a b c -s ,
    $ echo "  padded  " | mangos trim -
"""

import logging

import click

from mangos import text as textops
from mangos.config import DEFAULT_DELIMITER, DEFAULT_SEPARATOR

from .helpers import non_empty, read_text

logger = logging.getLogger(__name__)


@click.command()
@click.argument("text", callback=non_empty)
@click.option(
    "--delimiter",
    "-d",
    default=DEFAULT_DELIMITER,
    callback=non_empty,
    show_default=True,
    help="Delimiter to split on.",
)
@click.option(
    "--multiple/--literal",
    default=False,
    show_default=True,
    help=(
        "With --multiple, every character of the delimiter separates tokens on "
        "its own. With --literal, the delimiter must match as a whole."
    ),
)
def split(text: str, delimiter: str, multiple: bool) -> None:
    """Split TEXT into tokens, one per line. Empty tokens are dropped."""
    value = read_text(text)
    if not value:
        raise click.BadParameter("text must not be empty", param_hint="TEXT")
    logger.debug("split delimiter=%r multiple=%s", delimiter, multiple)
    for token in textops.split(value, delimiter, multiple):
        click.echo(token)


@click.command()
@click.argument("tokens", nargs=-1)
@click.option(
    "--separator",
    "-s",
    default=DEFAULT_SEPARATOR,
    help="Separator placed between adjacent tokens.",
)
def join(tokens: tuple[str, ...], separator: str) -> None:
    """Join TOKENS with a separator."""
    click.echo(textops.join(tokens, separator))


@click.command()
@click.argument("text")
def trim(text: str) -> None:
    """Strip leading and trailing whitespace from TEXT."""
    click.echo(textops.trim(read_text(text)))


@click.command()
@click.argument("text")
def upper(text: str) -> None:
    """Convert ASCII letters in TEXT to uppercase."""
    click.echo(textops.to_upper(read_text(text)))


@click.command()
@click.argument("text")
def lower(text: str) -> None:
    """Convert ASCII letters in TEXT to lowercase."""
    click.echo(textops.to_lower(read_text(text)))


@click.command()
@click.argument("text")
def reverse(text: str) -> None:
    """Reverse the characters of TEXT."""
    click.echo(textops.reverse(read_text(text)))


COMMANDS = [split, join, trim, upper, lower, reverse]
