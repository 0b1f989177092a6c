"""
Entry point for running Brixie as a module.

This allows users to run the CLI using:
    python -m brixie [command] [options]
"""

from brixie.cli.app import app

if __name__ == "__main__":
    app()
