"""
Summary: Use cases of the library audit: rule engine, folder walk and their ports.
Why: Provide one import surface for the application layer and the tests.
"""

from .folder_walker import FolderClassifier
from .ports import FilesystemPort, TagStoreError, TagStorePort
from .report import (
    AuditEvent,
    AuditSummary,
    CheckResult,
    FieldRepair,
    FileAudit,
    Severity,
    Violation,
    ViolationReport,
)
from .rule_engine import FileRuleEngine

__all__ = [
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
