"""Entry points for MANGOS."""
