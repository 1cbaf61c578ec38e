"""CLI commands for sysclean.

This package contains all subcommand implementations.
"""

from sysclean.cli.commands import config, junk, large, system

__all__ = ["config", "junk", "large", "system"]
