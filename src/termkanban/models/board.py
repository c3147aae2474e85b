"""Board state models."""

from __future__ import annotations

import logging
from collections.abc import Callable

from pydantic import BaseModel, Field, field_validator, model_validator

from .enums import Command, Effect, InputMode, Status
from .task import TITLE_LIMIT, Task

logger = logging.getLogger(__name__)

DEFAULT_COLUMN_TITLES: dict[Status, str] = {
    Status.TODO: "To Do",
    Status.DOING: "In Progress",
    Status.DONE: "Done",
}


class Column(BaseModel):
    """One of the three fixed task buckets."""

    status: Status
    title: str = ""
    width: int = 0  # Stored for compatibility, ignored on load
    tasks: list[Task] = Field(default_factory=list)

    @field_validator("tasks", mode="before")
    @classmethod
    def null_tasks_as_empty(cls, v: object) -> object:
        """Older files may store an empty task list as null."""
        return [] if v is None else v

    @model_validator(mode="after")
    def sync_task_status(self) -> Column:
        """Force every task's status to match this column."""
        for task in self.tasks:
            if task.status != self.status:
                logger.debug(
                    "Correcting task status: %r (%s -> %s)",
                    task.title,
                    task.status.name,
                    self.status.name,
                )
                task.status = self.status
        return self

    @classmethod
    def default(cls, status: Status) -> Column:
        """Create an empty column with the standard title."""
        return cls(status=status, title=DEFAULT_COLUMN_TITLES[status])


def default_columns() -> list[Column]:
    """Three empty columns: To Do, In Progress, Done."""
    return [Column.default(status) for status in Status]


def check_column_statuses(columns: list[Column]) -> None:
    """Exactly one column per status, in status order."""
    statuses = [col.status for col in columns]
    if statuses != list(Status):
        raise ValueError(
            f"Board needs columns {[s.value for s in Status]}, got {[s.value for s in statuses]}"
        )


class Board(BaseModel):
    """
    The kanban board state machine.

    Holds the columns, the focus/cursor position and the pending input.
    Every operation mutates the board in place and returns the side effects
    the caller must carry out; the board itself never touches storage.
    """

    columns: list[Column] = Field(default_factory=default_columns)
    focused: Status = Status.TODO
    cursor: int = 0
    mode: InputMode = InputMode.IDLE
    pending_input: str = ""

    @field_validator("columns")
    @classmethod
    def validate_columns(cls, v: list[Column]) -> list[Column]:
        """Exactly one column per status, in status order."""
        check_column_statuses(v)
        return v

    # --- Accessors ---

    def column(self, status: Status) -> Column:
        """Get the column for a status."""
        return self.columns[status]

    @property
    def focused_column(self) -> Column:
        """The column currently receiving commands."""
        return self.columns[self.focused]

    @property
    def current_task(self) -> Task | None:
        """Task under the cursor, or None if the focused column is empty."""
        tasks = self.focused_column.tasks
        if 0 <= self.cursor < len(tasks):
            return tasks[self.cursor]
        return None

    @property
    def is_idle(self) -> bool:
        return self.mode == InputMode.IDLE

    @property
    def is_editing_text(self) -> bool:
        """True while keystrokes go to the pending input buffer."""
        return not self.is_idle

    def task_count(self) -> int:
        """Total number of tasks across all columns."""
        return sum(len(col.tasks) for col in self.columns)

    def replace_columns(self, columns: list[Column]) -> None:
        """Swap in a loaded snapshot and clamp the cursor to it."""
        check_column_statuses(columns)
        self.columns = columns
        count = len(self.focused_column.tasks)
        self.cursor = max(0, min(self.cursor, count - 1))

    # --- Command dispatch ---

    def handle(self, command: Command) -> list[Effect]:
        """Apply a semantic command and return the requested side effects."""
        handlers: dict[Command, Callable[[], list[Effect]]] = {
            Command.QUIT: self.quit,
            Command.BEGIN_CREATE: self.begin_create,
            Command.BEGIN_EDIT: self.begin_edit,
            Command.COMMIT_INPUT: self.commit_input,
            Command.CANCEL_INPUT: self.cancel_input,
            Command.DELETE: self.delete_task,
            Command.BACKUP: self.backup,
            Command.FOCUS_PREVIOUS: self.focus_previous,
            Command.FOCUS_NEXT: self.focus_next,
            Command.CURSOR_UP: self.cursor_up,
            Command.CURSOR_DOWN: self.cursor_down,
            Command.MOVE_TASK: self.move_task,
        }
        return handlers[command]()

    def quit(self) -> list[Effect]:
        """Request exit. Ignored while typing so 'q' can be entered as text."""
        if not self.is_idle:
            logger.debug("quit ignored: mode=%s", self.mode.value)
            return []
        return [Effect.QUIT]

    def backup(self) -> list[Effect]:
        """Request a backup snapshot of the columns."""
        if not self.is_idle:
            logger.debug("backup ignored: mode=%s", self.mode.value)
            return []
        return [Effect.BACKUP]

    # --- Navigation ---

    def focus_previous(self) -> list[Effect]:
        """Focus the column to the left and reset the cursor."""
        if self.is_idle and self.focused > Status.TODO:
            self.focused = Status(self.focused - 1)
            self.cursor = 0
        return []

    def focus_next(self) -> list[Effect]:
        """Focus the column to the right and reset the cursor."""
        if self.is_idle and self.focused < Status.DONE:
            self.focused = Status(self.focused + 1)
            self.cursor = 0
        return []

    def cursor_up(self) -> list[Effect]:
        if self.is_idle and self.cursor > 0:
            self.cursor -= 1
        return []

    def cursor_down(self) -> list[Effect]:
        if self.is_idle and self.cursor < len(self.focused_column.tasks) - 1:
            self.cursor += 1
        return []

    # --- Text input ---

    def begin_create(self) -> list[Effect]:
        """Start composing a new task title."""
        if not self.is_idle:
            logger.debug("begin_create ignored: mode=%s", self.mode.value)
            return []
        self.mode = InputMode.CREATING
        self.pending_input = ""
        return []

    def begin_edit(self) -> list[Effect]:
        """Start editing the title of the task under the cursor."""
        task = self.current_task
        if not self.is_idle or task is None:
            logger.debug("begin_edit ignored: mode=%s, task=%r", self.mode.value, task)
            return []
        self.mode = InputMode.EDITING
        self.pending_input = task.title
        return []

    def append_input(self, text: str) -> None:
        """Append typed text to the pending input, up to TITLE_LIMIT."""
        if self.is_idle:
            return
        room = TITLE_LIMIT - len(self.pending_input)
        if room > 0:
            self.pending_input += text[:room]

    def erase_input(self) -> None:
        """Drop the last character of the pending input."""
        if self.is_idle:
            return
        self.pending_input = self.pending_input[:-1]

    def set_input(self, text: str) -> None:
        """Replace the pending input with the editor's text, up to TITLE_LIMIT."""
        if self.is_idle:
            return
        self.pending_input = text[:TITLE_LIMIT]

    def commit_input(self) -> list[Effect]:
        """
        Apply the pending input and return to idle.

        Creating always appends to the To Do column, whatever the focus.
        Editing overwrites the title of the task under the cursor.
        Empty input changes no task. The board is persisted either way.
        """
        if self.is_idle:
            logger.debug("commit_input ignored: not in input mode")
            return []

        title = self.pending_input
        if title:
            if self.mode == InputMode.CREATING:
                self.column(Status.TODO).tasks.append(Task(status=Status.TODO, title=title))
                logger.info("Task created: %r", title)
            else:
                task = self.current_task
                if task is not None:
                    old_title = task.title
                    task.title = title
                    logger.info("Task edited: %r -> %r", old_title, title)

        self.mode = InputMode.IDLE
        self.pending_input = ""
        return [Effect.PERSIST]

    def cancel_input(self) -> list[Effect]:
        """Discard the pending input and return to idle."""
        if self.is_idle:
            return []
        self.mode = InputMode.IDLE
        self.pending_input = ""
        return []

    # --- Task mutation ---

    def _pop_current(self) -> Task | None:
        """Remove the task under the cursor, keeping the cursor in range."""
        tasks = self.focused_column.tasks
        if not tasks:
            return None
        task = tasks.pop(self.cursor)
        if self.cursor >= len(tasks) and self.cursor > 0:
            self.cursor -= 1
        return task

    def delete_task(self) -> list[Effect]:
        """Delete the task under the cursor."""
        if not self.is_idle:
            logger.debug("delete_task ignored: mode=%s", self.mode.value)
            return []
        task = self._pop_current()
        if task is None:
            return []
        logger.info("Task deleted: %r (%s)", task.title, task.status.name)
        return [Effect.PERSIST]

    def move_task(self) -> list[Effect]:
        """
        Move the task under the cursor to the next column, cyclically.

        The task is appended to the destination; focus and cursor stay on
        the source column.
        """
        if not self.is_idle:
            logger.debug("move_task ignored: mode=%s", self.mode.value)
            return []
        task = self._pop_current()
        if task is None:
            return []
        source = task.status
        task.status = self.focused.next
        self.column(task.status).tasks.append(task)
        logger.info("Task moved: %r (%s -> %s)", task.title, source.name, task.status.name)
        return [Effect.PERSIST]
