"""
CLI package for Brixie.

This package contains the Typer application that browses the catalog
from a terminal.
"""

__all__ = ["app"]
