"""Rich renderers for CLI output."""

from .summary import SummaryDisplay

__all__ = ["SummaryDisplay"]
