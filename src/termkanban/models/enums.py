"""Enums for column status, input mode, and board commands."""

from enum import Enum, IntEnum


class Status(IntEnum):
    """Column a task belongs to. Stored as an integer."""

    TODO = 0
    DOING = 1
    DONE = 2

    @property
    def next(self) -> "Status":
        """Next status in cyclic order (DONE wraps to TODO)."""
        return Status((self + 1) % len(Status))


class InputMode(str, Enum):
    """Whether keystrokes drive navigation or text entry."""

    IDLE = "idle"
    CREATING = "creating"
    EDITING = "editing"


class Command(str, Enum):
    """Semantic commands produced by the presentation layer."""

    QUIT = "quit"
    BEGIN_CREATE = "begin_create"
    BEGIN_EDIT = "begin_edit"
    COMMIT_INPUT = "commit_input"
    CANCEL_INPUT = "cancel_input"
    DELETE = "delete"
    BACKUP = "backup"
    FOCUS_PREVIOUS = "focus_previous"
    FOCUS_NEXT = "focus_next"
    CURSOR_UP = "cursor_up"
    CURSOR_DOWN = "cursor_down"
    MOVE_TASK = "move_task"


class Effect(str, Enum):
    """Side effects requested by a handled command."""

    PERSIST = "persist"
    BACKUP = "backup"
    QUIT = "quit"
