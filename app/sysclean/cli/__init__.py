"""CLI package for sysclean.

This package contains the Typer application and all subcommands.
"""

from sysclean.cli.main import app

__all__ = ["app"]
