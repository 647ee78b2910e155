"""Configuration constants for MANGOS.

The library's fixed character sets and default arguments live here.
"""

# Characters removed by `mangos.text.trim`.
WHITESPACE = " \t\n\r"

DEFAULT_DELIMITER = " "
DEFAULT_SEPARATOR = ""
