"""JSON file repository for board snapshots."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from ..models import Column, check_column_statuses

logger = logging.getLogger(__name__)

_COLUMNS = TypeAdapter(list[Column])


class JsonFileRepository:
    """
    Repository for a board stored as a single JSON file.

    The file holds an array of exactly three column records, each with
    its tasks inline. Every save rewrites the whole file.
    """

    def __init__(self, path: Path) -> None:
        """
        Initialize repository.

        Args:
            path: Location of the JSON file (e.g., board.json)
        """
        self.path = path
        self._last_error: str | None = None

    @property
    def last_error(self) -> str | None:
        """Description of the most recent failure, if any."""
        return self._last_error

    def load(self) -> list[Column] | None:
        """
        Load the columns from the file.

        Returns None when the file is missing, unreadable, or does not hold
        exactly one valid column per status. Partial content is never used.
        """
        self._last_error = None

        try:
            data = self.path.read_bytes()
        except FileNotFoundError:
            logger.info("No board file at %s, starting with an empty board", self.path)
            return None
        except OSError as e:
            self._fail("read", e)
            return None

        try:
            columns = _COLUMNS.validate_json(data)
            check_column_statuses(columns)
        except (ValidationError, ValueError) as e:
            self._fail("parse", e)
            return None

        logger.debug(
            "Loaded board from %s (%s)",
            self.path,
            ", ".join(f"{col.status.name}={len(col.tasks)}" for col in columns),
        )
        return columns

    def save(self, columns: list[Column]) -> bool:
        """Write the columns to the file, replacing its contents."""
        self._last_error = None
        data = _COLUMNS.dump_json(columns, indent=2)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(data)
        except OSError as e:
            self._fail("write", e)
            return False

        logger.debug("Saved board to %s", self.path)
        return True

    def _fail(self, action: str, error: Exception) -> None:
        """Record and log a storage failure."""
        self._last_error = f"Failed to {action} {self.path}: {error}"
        logger.warning("Failed to %s %s: %s", action, self.path, error)
