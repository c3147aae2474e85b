"""Task domain model."""

from pydantic import BaseModel

from .enums import Status

# Maximum characters accepted by the title input
TITLE_LIMIT = 50


class Task(BaseModel):
    """A single card on the board."""

    status: Status = Status.TODO
    title: str = ""
    description: str = ""  # Persisted but not edited from the board

    @property
    def display_title(self) -> str:
        """Title for display - falls back to a placeholder when blank."""
        return self.title or "(untitled)"

    @property
    def description_preview(self) -> str:
        """First non-empty line of the description."""
        for line in self.description.split("\n"):
            line = line.strip()
            if line:
                return line
        return ""
