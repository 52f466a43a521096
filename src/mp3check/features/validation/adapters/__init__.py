"""Concrete adapters for the validation ports."""

from .filesystem_adapter import LocalFilesystemAdapter
from .mutagen_tag_store import MutagenTagStore

__all__ = ["LocalFilesystemAdapter", "MutagenTagStore"]
