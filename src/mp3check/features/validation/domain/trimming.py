"""
Summary: Detect strings carrying leading or trailing blanks.
Why: Whitespace repairs are only applied when there is visible text to keep.
"""

from __future__ import annotations

from typing import Final

BLANK: Final[str] = " "


def needs_trimming(text: str | None) -> bool:
    """Return whether ``text`` starts or ends with a blank.

    ``None``, empty and whitespace-only strings never need trimming: there is
    nothing left to keep once they are stripped.
    """
    if text is None or not text.strip():
        return False
    return text.startswith(BLANK) or text.endswith(BLANK)


__all__ = ["needs_trimming"]
