"""Data models."""

from .board import DEFAULT_COLUMN_TITLES, Board, Column, check_column_statuses, default_columns
from .enums import Command, Effect, InputMode, Status
from .task import TITLE_LIMIT, Task

__all__ = [
    "DEFAULT_COLUMN_TITLES",
    "TITLE_LIMIT",
    "Board",
    "Column",
    "Command",
    "Effect",
    "InputMode",
    "Status",
    "Task",
    "check_column_statuses",
    "default_columns",
]
