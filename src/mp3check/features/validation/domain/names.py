"""
Summary: Character-set and emptiness checks for artist, album and title names.
Why: One validator keeps the messages consistent between folder and tag checks.
"""

from __future__ import annotations

from collections.abc import Set
from typing import final

from mp3check.platform.logging import logger


@final
class NameValidator:
    """Validate names against an allowed character set."""

    @staticmethod
    def problem(name: str | None, allowed_chars: Set[str], *, label: str = "name") -> str | None:
        """Describe why ``name`` is invalid.

        Args:
            name: Candidate name, ``None`` when absent.
            allowed_chars: Characters the name may consist of.
            label: Human readable name of the checked value (``"artist name"``...).

        Returns:
            str | None: A message for invalid names, ``None`` for valid ones.
        """
        if name is None or not name.strip():
            return f"The {label} is empty"

        invalid = sorted({char for char in name if char not in allowed_chars})
        if invalid:
            listed = ", ".join(repr(char) for char in invalid)
            return f"The {label} {name!r} contains not allowed characters ({listed})"

        return None

    @classmethod
    def is_valid(cls, name: str | None, allowed_chars: Set[str], *, label: str = "name") -> bool:
        """Check ``name`` and log a warning when it is invalid.

        Args:
            name: Candidate name, ``None`` when absent.
            allowed_chars: Characters the name may consist of.
            label: Human readable name of the checked value.

        Returns:
            bool: ``True`` when the name is non-blank and uses only allowed characters.
        """
        message = cls.problem(name, allowed_chars, label=label)
        if message is None:
            return True

        logger.warning(message)
        return False


__all__ = ["NameValidator"]
