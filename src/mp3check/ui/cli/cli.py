"""Command line interface for mp3check."""

import sys
from typing import final

from mp3check.application.services import AuditMusicService, AuditRequest, AuditRootError
from mp3check.platform.logging import logger
from mp3check.ui.cli.args import ArgumentParser
from mp3check.ui.cli.display import SummaryDisplay


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments and run the audit.

        Violations never fail the process; only a missing or empty music
        folder does.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            request = AuditRequest(
                root=args.music_path,
                dry_run=args.dry_run,
                audio_extension=args.audio_extension,
            )
            summary = AuditMusicService().run(request)
            SummaryDisplay().show_summary(summary)
        except AuditRootError:
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Fatal startup errors exit
        through ``sys.exit`` before this return is reached.
    """
    CommandProcessor.process_command()
    return 0
