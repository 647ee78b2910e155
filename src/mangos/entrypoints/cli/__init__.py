"""MANGOS command-line interface."""
