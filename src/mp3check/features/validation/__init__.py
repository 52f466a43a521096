# Where: mp3check.features.validation.__init__
# What: Expose the audit engine, walker and shared result types.
# Why: Provide a cohesive import surface for UI and application layers.

from mp3check.shared.track_metadata import TrackMetadata

from .domain import (
    FolderContext,
    FolderPath,
    NameValidator,
    derive_album_name,
    derive_artist_name,
    needs_trimming,
)
from .usecases import (
    AuditEvent,
    AuditSummary,
    CheckResult,
    FieldRepair,
    FileAudit,
    FileRuleEngine,
    FilesystemPort,
    FolderClassifier,
    Severity,
    TagStoreError,
    TagStorePort,
    Violation,
    ViolationReport,
)

__all__ = [
    "TrackMetadata",
    "FolderContext",
    "FolderPath",
    "NameValidator",
    "derive_album_name",
    "derive_artist_name",
    "needs_trimming",
    "AuditEvent",
    "AuditSummary",
    "CheckResult",
    "FieldRepair",
    "FileAudit",
    "FileRuleEngine",
    "FilesystemPort",
    "FolderClassifier",
    "Severity",
    "TagStoreError",
    "TagStorePort",
    "Violation",
    "ViolationReport",
]
