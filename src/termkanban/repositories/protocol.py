"""Storage protocol for board persistence backends."""

from typing import Protocol

from ..models import Column


class StorageProtocol(Protocol):
    """Interface for board storage backends.

    A backend persists the full column list as one snapshot. Neither
    method raises on storage failures: problems are logged and reported
    through ``last_error`` so the interactive session keeps running.
    """

    @property
    def last_error(self) -> str | None:
        """Description of the most recent failure, or None if it succeeded."""
        ...

    def load(self) -> list[Column] | None:
        """Read a snapshot.

        Returns:
            The three columns, or None if nothing usable was stored.
        """
        ...

    def save(self, columns: list[Column]) -> bool:
        """Overwrite the stored snapshot.

        Args:
            columns: The board's columns, in status order.

        Returns:
            True if the snapshot was written.
        """
        ...
