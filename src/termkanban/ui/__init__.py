"""UI components."""

from .screens.board import BoardScreen
from .widgets.column import KanbanColumn
from .widgets.task_card import TaskCard

__all__ = [
    "BoardScreen",
    "KanbanColumn",
    "TaskCard",
]
