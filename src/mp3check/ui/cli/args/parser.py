"""Command line argument parser."""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from mp3check.config.config import Config
from mp3check.platform.filesystem import is_existing_directory
from mp3check.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from mp3check.ui.cli.args.options import AuditArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="mp3check",
            description=(
                "Check an Artist/Album MP3 library against its folder and tag "
                "conventions and repair what can be repaired safely."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "music_path",
            type=str,
            help="Top level music folder (<root>/<grouping>/<artist>[/<album>])",
            metavar="MUSIC_FOLDER",
        )
        _ = parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Report problems and corrections without updating any file",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> AuditArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            AuditArgs: Processed command line arguments.

        Raises:
            SystemExit: If the music folder is empty or doesn't exist.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=configuration.console_level)

        raw_path: str = parsed_args.music_path
        if not raw_path.strip():
            logger.error("The music folder was empty")
            sys.exit(1)

        music_path = Path(raw_path).expanduser()
        if not is_existing_directory(music_path):
            logger.error("The music folder was not found: %s", music_path)
            sys.exit(1)

        return AuditArgs(
            music_path=music_path.resolve(),
            dry_run=bool(parsed_args.dry_run),
            audio_extension=configuration.audio_extension,
        )
