"""Where: src/mp3check/config/settings.py
What: Fixed conventions of the library layout and tag contents.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Names use ASCII letters, digits and the space; titles add '?!.
Trade-offs: - Sets are not user-configurable; the convention is fixed.
"""

from __future__ import annotations

import string
from typing import Final

# Allowed characters ----------------------------------------------------------

# Artist and album names. The space is needed for "First Last" artist names
# derived from "Last_First" folders.
NAME_CHARS: Final[frozenset[str]] = frozenset(string.ascii_letters + string.digits + " ")

# Track titles.
TITLE_CHARS: Final[frozenset[str]] = NAME_CHARS | frozenset("'?!")

# Genres.
GENRE_CHARS: Final[frozenset[str]] = frozenset(string.ascii_letters)


# Folder layout -----------------------------------------------------------------

# <root>/<grouping>/<artist>/<album>
ROOT_DEPTH: Final[int] = 0
GROUPING_DEPTH: Final[int] = 1
ARTIST_DEPTH: Final[int] = 2
ALBUM_DEPTH: Final[int] = 3

# Separator between title and artist in a track file name.
FILE_NAME_SEPARATOR: Final[str] = "-"

# Separator in "Last_First" artist folder names.
ARTIST_NAME_SEPARATOR: Final[str] = "_"


__all__ = [
    "NAME_CHARS",
    "TITLE_CHARS",
    "GENRE_CHARS",
    "ROOT_DEPTH",
    "GROUPING_DEPTH",
    "ARTIST_DEPTH",
    "ALBUM_DEPTH",
    "FILE_NAME_SEPARATOR",
    "ARTIST_NAME_SEPARATOR",
]
