"""Helpers shared by MANGOS CLI commands."""

from .arguments import non_empty, read_text

__all__ = ["non_empty", "read_text"]
