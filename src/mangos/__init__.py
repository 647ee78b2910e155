"""MANGOS

A small generic utility library: fixed-size sequence helpers and text helpers,
built around a string tokenization and whitespace-trimming engine.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
