"""src/mp3check/application/services/audit_service.py
What: Application-level orchestration for auditing a music library.
Why: Keep the CLI thin and wire adapters to the walker in one place.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from mp3check.config.config import AUDIO_EXTENSION_DEFAULT
from mp3check.features.validation import (
    AuditSummary,
    FileRuleEngine,
    FilesystemPort,
    FolderClassifier,
    TagStorePort,
)
from mp3check.features.validation.adapters import LocalFilesystemAdapter, MutagenTagStore
from mp3check.platform.logging import logger


class AuditRootError(ValueError):
    """Raised when the music root cannot be audited at all."""


@dataclass(slots=True)
class AuditRequest:
    """Input parameters for an audit run."""

    root: Path | None
    dry_run: bool = False
    audio_extension: str = AUDIO_EXTENSION_DEFAULT


class AuditMusicService:
    """Facade to audit a music root with configured adapters."""

    def __init__(
        self,
        filesystem: FilesystemPort | None = None,
        tag_store: TagStorePort | None = None,
    ) -> None:
        self.filesystem: FilesystemPort = filesystem or LocalFilesystemAdapter()
        self.tag_store: TagStorePort = tag_store or MutagenTagStore()

    def build_classifier(self, request: AuditRequest) -> FolderClassifier:
        """Create the folder walker for ``request``."""

        return FolderClassifier(
            self.filesystem,
            self.tag_store,
            FileRuleEngine(audio_extension=request.audio_extension),
            dry_run=request.dry_run,
        )

    def run(self, request: AuditRequest) -> AuditSummary:
        """Audit the library described by ``request``.

        Raises:
            AuditRootError: If the root is empty or doesn't exist.
        """
        if request.root is None:
            logger.error("The music folder was empty")
            raise AuditRootError("The music folder was empty")
        root = request.root.expanduser().resolve()
        if not self.filesystem.exists(root):
            logger.error("The music folder was not found: %s", root)
            raise AuditRootError(f"The music folder was not found: {root}")

        return self.build_classifier(request).run(root)


__all__ = ["AuditMusicService", "AuditRequest", "AuditRootError"]
