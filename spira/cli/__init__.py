"""
Spira CLI

Command-line interface for Spira.

Commands:
- spira --version: Print the version and exit
- spira version: Show version and build info
"""

from spira.cli.main import app

__all__ = ["app"]
