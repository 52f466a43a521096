"""Rich console handler for audit events.

Where: platform/logging/handlers.py
What: Render structured ``audit_event`` log records with icons, colours and compact paths.
Why: Keep violation output scannable when a run reports hundreds of files.
"""

from __future__ import annotations

import sys
import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class AuditRichHandler(RichHandler):
    """Rich handler that styles audit events and abbreviates file paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "audit.run.start": ("🚀", "cyan"),
        "audit.run.complete": ("✅", "green"),
        "audit.folder.unexpected_files": ("⛔", "red"),
        "audit.folder.invalid_files": ("⚠️", "yellow"),
        "audit.folder.skipped": ("↪️", "red"),
        "audit.folder.too_deep": ("⛔", "red"),
        "audit.file.violation": ("⛔", "red"),
        "audit.file.repair": ("🔧", "blue"),
        "audit.file.saved": ("💾", "green"),
        "audit.file.dry_run": ("📝", "magenta"),
        "audit.file.missing": ("❓", "red"),
        "audit.file.error": ("❌", "red"),
    }
    _LEVEL_COLORS: ClassVar[dict[int, str]] = {
        logging.WARNING: "yellow",
        logging.ERROR: "red",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path with coloured separators and ellipsis truncation.

        Args:
            path: Absolute or relative path string to format.
            base: Optional base path used to relativize ``path`` when possible.

        Returns:
            Text: Formatted path.
        """
        pure_path = self._to_pure_path(path)
        display_path: PurePath = pure_path
        if base:
            try:
                relative = pure_path.relative_to(self._to_pure_path(base))
                if str(relative) not in {"", "."}:
                    display_path = relative
            except ValueError:
                pass

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]
            display_string = "…" + separator + separator.join(body_parts)
        else:
            display_string = anchor.rstrip("\\/") + separator if anchor else ""
            if anchor == "/":
                display_string = "/"
            display_string += separator.join(body_parts)

        text = Text()
        for char in display_string or ".":
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _render_audit_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render structured audit events with dedicated styling."""

        event = getattr(record, "audit_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        color = self._LEVEL_COLORS.get(record.levelno, color)

        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        location = getattr(record, "file_path", None) or getattr(record, "folder", None)
        if location:
            _ = text.append_text(
                self._format_path(str(location), base=getattr(record, "root", None))
            )
            _ = text.append(": ")

        _ = text.append(message, style=Style(color=color))

        field = getattr(record, "field", None)
        if event == "audit.file.repair" and field:
            old_value = getattr(record, "old_value", None)
            new_value = getattr(record, "new_value", None)
            _ = text.append(f" [{field}: {old_value!r} → {new_value!r}]", style=Style(dim=True))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for audit events."""

        audit_text = self._render_audit_message(record, message)
        if audit_text is not None:
            return audit_text

        return super().render_message(record, message)


__all__ = ["AuditRichHandler"]
