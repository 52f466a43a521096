"""Utilities for rendering the end-of-run summary."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mp3check.features.validation import AuditSummary


class SummaryDisplay:
    """Render an ``AuditSummary`` to a Rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console: Console = console or Console()

    def show_summary(self, summary: AuditSummary) -> None:
        """Print counters and the files that still need manual attention.

        Args:
            summary: Outcome of the audit run.
        """
        mode = " (dry run)" if summary.dry_run else ""
        self.console.print(f"\n[bold]Check summary{mode}:[/bold] {escape(str(summary.root))}")

        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column(style="bold")
        table.add_column(justify="right")
        table.add_row("Folders visited", str(summary.folders_visited))
        table.add_row("Folders skipped", str(summary.folders_skipped))
        table.add_row("Files checked", str(summary.files_checked))
        table.add_row("[red]Errors[/red]", f"[red]{summary.errors}[/red]")
        table.add_row("[yellow]Warnings[/yellow]", f"[yellow]{summary.warnings}[/yellow]")
        table.add_row("Corrections", str(summary.repairs))
        if summary.dry_run:
            table.add_row("Files to update", str(summary.files_needing_update))
        else:
            table.add_row("[green]Files updated[/green]", f"[green]{summary.files_saved}[/green]")
        table.add_row("Files failed", str(summary.files_failed))
        self.console.print(table)

        flagged = [
            audit
            for audit in summary.files
            if audit.error_message is not None
            or (audit.result is not None and audit.result.report)
        ]
        if not flagged:
            return

        self.console.print("\n[bold]Files needing attention:[/bold]")
        for audit in flagged:
            if audit.error_message is not None:
                self.console.print(f"[red]  • {escape(str(audit.path))}: {escape(audit.error_message)}[/red]")
                continue
            assert audit.result is not None
            report = audit.result.report
            self.console.print(
                f"  • {escape(str(audit.path))}: "
                f"[red]{len(report.errors)} error(s)[/red], "
                f"[yellow]{len(report.warnings)} warning(s)[/yellow]"
            )


__all__ = ["SummaryDisplay"]
