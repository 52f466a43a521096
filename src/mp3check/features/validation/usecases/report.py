"""
Summary: Value types produced by the rule engine and the folder walker.
Why: Keep the engine lean by centralising report and event definitions.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from mp3check.shared.track_metadata import TrackMetadata


class AuditEvent(StrEnum):
    """Structured event identifiers for audit logs."""

    RUN_START = "audit.run.start"
    RUN_COMPLETE = "audit.run.complete"
    FOLDER_UNEXPECTED_FILES = "audit.folder.unexpected_files"
    FOLDER_INVALID_FILES = "audit.folder.invalid_files"
    FOLDER_SKIPPED = "audit.folder.skipped"
    FOLDER_TOO_DEEP = "audit.folder.too_deep"
    FILE_VIOLATION = "audit.file.violation"
    FILE_REPAIR = "audit.file.repair"
    FILE_SAVED = "audit.file.saved"
    FILE_DRY_RUN = "audit.file.dry_run"
    FILE_MISSING = "audit.file.missing"
    FILE_ERROR = "audit.file.error"


class Severity(StrEnum):
    """How serious a reported violation is."""

    WARNING = "warning"
    ERROR = "error"

    @property
    def log_level(self) -> int:
        """Matching standard logging level."""
        return logging.WARNING if self is Severity.WARNING else logging.ERROR


@dataclass(frozen=True, slots=True)
class Violation:
    """A problem the tool reports but does not fix."""

    severity: Severity
    field: str
    message: str


@dataclass(frozen=True, slots=True)
class FieldRepair:
    """A correction the tool applied on its own."""

    field: str
    old_value: object
    new_value: object
    message: str


@dataclass(slots=True)
class ViolationReport:
    """Ordered violations of one file."""

    violations: list[Violation] = field(default_factory=list)

    def error(self, field_name: str, message: str) -> None:
        """Record a convention-breaking violation."""
        self.violations.append(Violation(Severity.ERROR, field_name, message))

    def warning(self, field_name: str, message: str) -> None:
        """Record an advisory violation."""
        self.violations.append(Violation(Severity.WARNING, field_name, message))

    @property
    def errors(self) -> list[Violation]:
        return [v for v in self.violations if v.severity is Severity.ERROR]

    @property
    def warnings(self) -> list[Violation]:
        return [v for v in self.violations if v.severity is Severity.WARNING]

    def __iter__(self) -> Iterator[Violation]:
        return iter(self.violations)

    def __len__(self) -> int:
        return len(self.violations)

    def __bool__(self) -> bool:
        return bool(self.violations)


@dataclass(slots=True)
class CheckResult:
    """Outcome of checking one file."""

    metadata: TrackMetadata
    report: ViolationReport = field(default_factory=ViolationReport)
    repairs: list[FieldRepair] = field(default_factory=list)

    @property
    def needs_update(self) -> bool:
        """Whether any rule corrected a field."""
        return bool(self.repairs)


@dataclass(slots=True)
class FileAudit:
    """What happened to one file during a run."""

    path: Path
    result: CheckResult | None = None
    saved: bool = False
    error_message: str | None = None

    @property
    def needs_update(self) -> bool:
        return self.result is not None and self.result.needs_update


@dataclass(slots=True)
class AuditSummary:
    """Counters and per-file outcomes of a whole run."""

    root: Path
    dry_run: bool
    folders_visited: int = 0
    folders_skipped: int = 0
    folder_errors: int = 0
    folder_warnings: int = 0
    files: list[FileAudit] = field(default_factory=list)

    @property
    def files_checked(self) -> int:
        return sum(1 for audit in self.files if audit.result is not None)

    @property
    def files_failed(self) -> int:
        return sum(1 for audit in self.files if audit.error_message is not None)

    @property
    def files_needing_update(self) -> int:
        return sum(1 for audit in self.files if audit.needs_update)

    @property
    def files_saved(self) -> int:
        return sum(1 for audit in self.files if audit.saved)

    @property
    def errors(self) -> int:
        return self.folder_errors + sum(
            len(audit.result.report.errors) for audit in self.files if audit.result is not None
        )

    @property
    def warnings(self) -> int:
        return self.folder_warnings + sum(
            len(audit.result.report.warnings) for audit in self.files if audit.result is not None
        )

    @property
    def repairs(self) -> int:
        return sum(
            len(audit.result.repairs) for audit in self.files if audit.result is not None
        )

    def summary_extra(self) -> dict[str, object]:
        """Return a dictionary suitable for structured logging extras."""
        return {
            "folder": str(self.root),
            "dry_run": self.dry_run,
            "folders_visited": self.folders_visited,
            "folders_skipped": self.folders_skipped,
            "files_checked": self.files_checked,
            "files_failed": self.files_failed,
            "files_saved": self.files_saved,
            "errors": self.errors,
            "warnings": self.warnings,
            "repairs": self.repairs,
        }


__all__ = [
    "AuditEvent",
    "AuditSummary",
    "CheckResult",
    "FieldRepair",
    "FileAudit",
    "Severity",
    "Violation",
    "ViolationReport",
]
