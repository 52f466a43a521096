"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final


@final
@dataclass(slots=True)
class AuditArgs:
    """Command line arguments of an audit run."""

    music_path: Path
    dry_run: bool
    audio_extension: str


__all__ = ["AuditArgs"]
