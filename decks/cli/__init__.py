"""Command-line front end for the deck builder."""

from .main import app, main

__all__ = ["app", "main"]
