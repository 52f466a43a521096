"""Application service exports."""

from .audit_service import AuditMusicService, AuditRequest, AuditRootError

__all__ = ["AuditMusicService", "AuditRequest", "AuditRootError"]
