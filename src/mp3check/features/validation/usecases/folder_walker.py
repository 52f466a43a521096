"""
Summary: Depth-first walk of the library that classifies folders and checks their files.
Why: Folder depth decides which files are allowed and which names tags must match.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import final

from mp3check.config.settings import ALBUM_DEPTH, ARTIST_DEPTH, GROUPING_DEPTH, ROOT_DEPTH
from mp3check.platform.logging import logger

from ..domain.folder_path import FolderContext, FolderPath
from .ports import FilesystemPort, TagStoreError, TagStorePort
from .report import AuditEvent, AuditSummary, CheckResult, FileAudit
from .rule_engine import FileRuleEngine


@final
class FolderClassifier:
    """Walk a music root and check every track against its folder.

    Layout: ``<root>/<grouping>/<artist>[/<album>]/<files>``. The root and
    grouping folders hold no files, artist folders hold tracks without an
    album, and album folders hold one album's tracks plus cover images.
    Album folders are the deepest level; anything below them is reported
    and not entered.
    """

    def __init__(
        self,
        filesystem: FilesystemPort,
        tag_store: TagStorePort,
        engine: FileRuleEngine,
        *,
        dry_run: bool,
    ) -> None:
        self.filesystem: FilesystemPort = filesystem
        self.tag_store: TagStorePort = tag_store
        self.engine: FileRuleEngine = engine
        self.dry_run: bool = dry_run

    def run(self, root: Path) -> AuditSummary:
        """Audit the library below ``root``.

        Args:
            root: Music root folder. Must exist.

        Returns:
            AuditSummary: Counters and per-file outcomes.
        """
        summary = AuditSummary(root=root, dry_run=self.dry_run)
        self._log(
            logging.INFO,
            AuditEvent.RUN_START,
            summary,
            "Checking music folder [dry_run=%s]",
            self.dry_run,
            folder=str(root),
        )

        self._visit(root, ROOT_DEPTH, summary)

        self._log(
            logging.INFO,
            AuditEvent.RUN_COMPLETE,
            summary,
            "Check complete [files=%d, errors=%d, warnings=%d, repairs=%d, saved=%d]",
            summary.files_checked,
            summary.errors,
            summary.warnings,
            summary.repairs,
            summary.files_saved,
            **summary.summary_extra(),
        )
        return summary

    def _visit(self, folder: Path, depth: int, summary: AuditSummary) -> None:
        summary.folders_visited += 1

        for subfolder in self.filesystem.list_subdirectories(folder):
            if depth < ALBUM_DEPTH:
                self._visit(subfolder, depth + 1, summary)
            else:
                summary.folder_errors += 1
                self._log(
                    logging.ERROR,
                    AuditEvent.FOLDER_TOO_DEEP,
                    summary,
                    "Folders below album folders are not allowed; not checked (depth %d)",
                    FolderPath(root=summary.root, path=subfolder).depth,
                    folder=str(subfolder),
                )

        files = self.filesystem.list_files(folder)

        if depth in (ROOT_DEPTH, GROUPING_DEPTH):
            if files:
                summary.folder_errors += 1
                self._log(
                    logging.ERROR,
                    AuditEvent.FOLDER_UNEXPECTED_FILES,
                    summary,
                    "There shouldn't be any files in this folder, but found %s",
                    ", ".join(file.name for file in files),
                    folder=str(folder),
                    files=[str(file) for file in files],
                )
        elif depth == ARTIST_DEPTH:
            self._check_artist_folder(folder, files, summary)
        else:
            self._check_album_folder(folder, files, summary)

    def _check_artist_folder(self, folder: Path, files: list[Path], summary: AuditSummary) -> None:
        context = self._folder_context(folder, summary, is_album_folder=False)
        if context is None:
            return

        audio_files, other_files = self._split_audio(files)
        if other_files:
            summary.folder_warnings += 1
            self._log(
                logging.WARNING,
                AuditEvent.FOLDER_INVALID_FILES,
                summary,
                "There are files of unexpected type in the artist folder: %s",
                ", ".join(file.name for file in other_files),
                folder=str(folder),
                files=[str(file) for file in other_files],
            )

        for file_path in audio_files:
            self._check_file(file_path, context, [], summary)

    def _check_album_folder(self, folder: Path, files: list[Path], summary: AuditSummary) -> None:
        context = self._folder_context(folder, summary, is_album_folder=True)
        if context is None:
            return

        audio_files, cover_candidates = self._split_audio(files)
        for file_path in audio_files:
            self._check_file(file_path, context, cover_candidates, summary)

    def _folder_context(
        self,
        folder: Path,
        summary: AuditSummary,
        *,
        is_album_folder: bool,
    ) -> FolderContext | None:
        context = FolderContext.from_folder(folder, is_album_folder)
        if context is None:
            summary.folders_skipped += 1
            summary.folder_errors += 1
            self._log(
                logging.ERROR,
                AuditEvent.FOLDER_SKIPPED,
                summary,
                "The folder name doesn't follow the naming convention; its files are not checked",
                folder=str(folder),
            )
        return context

    def _split_audio(self, files: list[Path]) -> tuple[list[Path], list[Path]]:
        extension = self.engine.audio_extension
        audio = [file for file in files if file.suffix.lower() == extension]
        other = [file for file in files if file.suffix.lower() != extension]
        return audio, other

    def _check_file(
        self,
        file_path: Path,
        context: FolderContext,
        cover_candidates: list[Path],
        summary: AuditSummary,
    ) -> None:
        audit = FileAudit(path=file_path)
        summary.files.append(audit)

        try:
            if not self.filesystem.exists(file_path):
                raise FileNotFoundError(str(file_path))
            metadata = self.tag_store.load(file_path)
        except FileNotFoundError:
            audit.error_message = "File doesn't exist (anymore)"
            self._log(
                logging.ERROR,
                AuditEvent.FILE_MISSING,
                summary,
                "The file doesn't exist (anymore)",
                file_path=str(file_path),
            )
            return
        except TagStoreError as exc:
            audit.error_message = exc.reason
            self._log(
                logging.ERROR,
                AuditEvent.FILE_ERROR,
                summary,
                "Reading tags failed: %s",
                exc.reason,
                file_path=str(file_path),
            )
            return

        result = self.engine.check(
            metadata,
            file_name=file_path.name,
            artist_name=context.artist_name,
            album_name=context.album_name,
            cover_candidates=cover_candidates,
        )
        audit.result = result
        self._log_result(file_path, result, summary)

        if not result.needs_update:
            return

        if self.dry_run:
            self._log(
                logging.INFO,
                AuditEvent.FILE_DRY_RUN,
                summary,
                "Dry run, not updating file (%d correction(s))",
                len(result.repairs),
                file_path=str(file_path),
            )
            return

        try:
            self.tag_store.save(file_path, result.metadata)
        except FileNotFoundError:
            audit.error_message = "File doesn't exist (anymore)"
            self._log(
                logging.ERROR,
                AuditEvent.FILE_MISSING,
                summary,
                "The file doesn't exist (anymore); not updated",
                file_path=str(file_path),
            )
            return
        except TagStoreError as exc:
            audit.error_message = exc.reason
            self._log(
                logging.ERROR,
                AuditEvent.FILE_ERROR,
                summary,
                "Updating file failed: %s",
                exc.reason,
                file_path=str(file_path),
            )
            return

        audit.saved = True
        self._log(
            logging.INFO,
            AuditEvent.FILE_SAVED,
            summary,
            "Updated file",
            file_path=str(file_path),
        )

    def _log_result(self, file_path: Path, result: CheckResult, summary: AuditSummary) -> None:
        for violation in result.report:
            self._log(
                violation.severity.log_level,
                AuditEvent.FILE_VIOLATION,
                summary,
                violation.message,
                file_path=str(file_path),
                field=violation.field,
                severity=violation.severity.value,
            )

        for repair in result.repairs:
            self._log(
                logging.INFO,
                AuditEvent.FILE_REPAIR,
                summary,
                repair.message,
                file_path=str(file_path),
                field=repair.field,
                old_value=repair.old_value,
                new_value=repair.new_value,
            )

    @staticmethod
    def _log(
        level: int,
        event: AuditEvent,
        summary: AuditSummary,
        message: str,
        *message_args: object,
        **context: object,
    ) -> None:
        extra: dict[str, object] = {"audit_event": event.value, "root": str(summary.root)}
        extra.update(context)
        logger.log(level, message, *message_args, extra=extra)


__all__ = ["FolderClassifier"]
