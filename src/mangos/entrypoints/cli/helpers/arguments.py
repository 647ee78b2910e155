"""Argument helpers for the text commands.

Commands accept their text as an argument; ``-`` reads it from stdin
instead. Validation happens here so that library preconditions are never
hit from the command line.
"""

import click

STDIN_MARKER = "-"


def read_text(value: str) -> str:
    """Return `value`, or the whole of stdin when `value` is ``-``.

    A single trailing newline from stdin is dropped.
    """
    if value != STDIN_MARKER:
        return value
    data = click.get_text_stream("stdin").read()
    return data.removesuffix("\n")


def non_empty(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter,
    value: str,
) -> str:
    """Click callback rejecting empty strings.

    Raises:
        click.BadParameter: If `value` is empty.
    """
    if value == "":
        raise click.BadParameter(f"{param.name} must not be empty")
    return value
