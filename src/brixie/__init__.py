"""
Brixie - typed Python client for the Rebrickable LEGO catalog.

This package provides an async API client for sets, parts, themes and
colors, plus a small command-line front end built on top of it.
"""

__version__ = "0.1.0"
__author__ = "Brixie Team"
__license__ = "Apache-2.0"

from typing import Final

# Package metadata
VERSION: Final[str] = __version__
PACKAGE_NAME: Final[str] = "brixie"
USER_AGENT: Final[str] = f"{PACKAGE_NAME}/{VERSION}"

__all__ = [
    "__version__",
    "VERSION",
    "PACKAGE_NAME",
    "USER_AGENT",
]
