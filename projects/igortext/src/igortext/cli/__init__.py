"""Command line interface for igortext."""

from igortext.cli.commands import app

__all__ = ["app"]
