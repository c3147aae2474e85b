"""Service for board state management."""

from __future__ import annotations

import logging

from ..models import Board, Command, Effect
from ..repositories import StorageProtocol

logger = logging.getLogger(__name__)


class BoardService:
    """Owns the board and carries out the storage side of each command."""

    def __init__(
        self,
        repository: StorageProtocol,
        backup_repository: StorageProtocol | None = None,
    ) -> None:
        self.repository = repository
        self.backup_repository = backup_repository
        self.board = Board()
        self._storage_error: str | None = None

    @property
    def storage_error(self) -> str | None:
        """The most recent storage failure, cleared by the next success."""
        return self._storage_error

    @property
    def has_storage_error(self) -> bool:
        return self._storage_error is not None

    def initialize(self) -> Board:
        """Reset to an empty board, then load the stored snapshot over it."""
        self.board = Board()
        self.load()
        return self.board

    def load(self) -> bool:
        """
        Replace the board's columns with the stored snapshot.

        Leaves the current columns untouched when nothing usable is stored.
        """
        columns = self.repository.load()
        self._storage_error = self.repository.last_error
        if columns is None:
            return False
        self.board.replace_columns(columns)
        logger.info("Board loaded: %d tasks", self.board.task_count())
        return True

    def save(self) -> bool:
        """Persist the columns to the primary file."""
        ok = self.repository.save(self.board.columns)
        self._storage_error = self.repository.last_error
        return ok

    def backup(self) -> bool:
        """Write the columns to the backup file."""
        if self.backup_repository is None:
            logger.debug("backup skipped: no backup repository configured")
            return False
        ok = self.backup_repository.save(self.board.columns)
        self._storage_error = self.backup_repository.last_error
        if ok:
            logger.info("Backup written: %d tasks", self.board.task_count())
        return ok

    def dispatch(self, command: Command) -> list[Effect]:
        """
        Apply a command to the board and execute its storage effects.

        Returns the effects so the caller can act on the rest (e.g. QUIT).
        """
        effects = self.board.handle(command)
        logger.debug("Command %s -> %s", command.value, [e.value for e in effects])
        for effect in effects:
            if effect == Effect.PERSIST:
                self.save()
            elif effect == Effect.BACKUP:
                self.backup()
        return effects

    def append_input(self, text: str) -> None:
        """Feed typed text into the pending input."""
        self.board.append_input(text)

    def erase_input(self) -> None:
        """Erase one character from the pending input."""
        self.board.erase_input()

    def set_input(self, text: str) -> None:
        """Mirror the title editor's current value into the pending input."""
        self.board.set_input(text)
