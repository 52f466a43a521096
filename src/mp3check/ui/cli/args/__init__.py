"""Command line argument handling package."""

from mp3check.ui.cli.args.options import AuditArgs
from mp3check.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "AuditArgs"]
