"""Widget components."""

from .column import EmptyColumnMessage, KanbanColumn
from .input_bar import InputBar
from .task_card import TaskCard

__all__ = [
    "EmptyColumnMessage",
    "InputBar",
    "KanbanColumn",
    "TaskCard",
]
