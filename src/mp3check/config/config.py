"""Configuration management for mp3check."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from mp3check.config.paths import default_config_path
from mp3check.platform.logging import logger

AUDIO_EXTENSION_DEFAULT = ".mp3"
CONSOLE_LOG_LEVEL_DEFAULT = "INFO"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path
    log_file: Path | None = _path_field()

    # Console verbosity, one of the standard logging level names
    console_log_level: str = CONSOLE_LOG_LEVEL_DEFAULT

    # Extension identifying audio files
    audio_extension: str = AUDIO_EXTENSION_DEFAULT

    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        if not self.audio_extension.startswith("."):
            self.audio_extension = f".{self.audio_extension}"
        self.audio_extension = self.audio_extension.lower()

    @property
    def console_level(self) -> int:
        """Resolve ``console_log_level`` to a numeric logging level."""
        level = logging.getLevelName(self.console_log_level.upper())
        if isinstance(level, int):
            return level
        logger.warning(
            "Unknown console log level %r, falling back to %s",
            self.console_log_level,
            CONSOLE_LOG_LEVEL_DEFAULT,
        )
        return logging.INFO

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = default_config_path()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = target.write_text(self._render_toml(config_dict), encoding="utf-8")
            logger.info("Configuration saved to %s", target)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# mp3check Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append("# Where to store the run logs in addition to the console")
        lines.append('# Example: log_file = "/path/to/logs/mp3check.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Console log level (DEBUG, INFO, WARNING, ERROR)")
        lines.append(
            f"console_log_level = {self._format_toml_value(config['console_log_level'])}"
        )
        lines.append("")

        lines.append("# Extension that marks a file as an audio track")
        lines.append(
            f"audio_extension = {self._format_toml_value(config['audio_extension'])}"
        )
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file, creating a default one when absent.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
                instance = cls(**{k: v for k, v in config_dict.items() if k in known})
                logger.debug("Configuration loaded from %s", config_file)
            else:
                instance = cls()
                instance.save()
                logger.info("Created default configuration at %s", config_file)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        cls._instance = instance
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` re-reads the file."""
        cls._instance = None


__all__ = ["AUDIO_EXTENSION_DEFAULT", "CONSOLE_LOG_LEVEL_DEFAULT", "Config"]
