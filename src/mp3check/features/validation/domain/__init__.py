"""
Summary: Pure domain rules for names, trimming and folder paths.
Why: Keep the convention checks free of I/O so they are trivially testable.
"""

from .folder_path import FolderContext, FolderPath, derive_album_name, derive_artist_name
from .names import NameValidator
from .trimming import needs_trimming

__all__ = [
    "FolderContext",
    "FolderPath",
    "NameValidator",
    "derive_album_name",
    "derive_artist_name",
    "needs_trimming",
]
