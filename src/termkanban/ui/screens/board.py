"""Main kanban board screen."""

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import Screen
from textual.widgets import Header, Static

from ...models import Board, Status
from ..widgets.column import KanbanColumn
from ..widgets.input_bar import InputBar

HELP_TEXT = "n: new • e: edit • d: del • E: backup • q: quit"


class BoardScreen(Screen):
    """Kanban board screen: three columns, the input bar and a help line."""

    @property
    def board(self) -> Board:
        """The board owned by the app's board service."""
        return self.app.board_service.board  # pyrefly: ignore[missing-attribute]

    def compose(self) -> ComposeResult:
        """Create the board layout, one column per status."""
        yield Header()

        with Container(id="board-container"), Horizontal(id="columns"):
            for column in self.board.columns:
                yield KanbanColumn(
                    title=column.title,
                    status=column.status,
                    id=self._column_widget_id(column.status),
                )

        yield Static(HELP_TEXT, id="help-line")
        yield InputBar()

    def on_mount(self) -> None:
        """Render the loaded board when the screen mounts."""
        self.refresh_board()

    def refresh_board(self) -> None:
        """Redraw columns and the input bar from the board state."""
        board = self.board
        for column in board.columns:
            widget = self._get_column(column.status)
            if widget is None:
                continue
            widget.title = column.title
            cursor = board.cursor if column.status == board.focused else None
            widget.set_tasks(column.tasks, cursor)

        try:
            input_bar = self.query_one(InputBar)
        except Exception:
            return
        if board.is_editing_text:
            input_bar.show(board.mode, board.pending_input)
        else:
            input_bar.hide()

    def _column_widget_id(self, status: Status) -> str:
        return f"column-{status.name.lower()}"

    def _get_column(self, status: Status) -> KanbanColumn | None:
        """Get column widget by status."""
        try:
            return self.query_one(f"#{self._column_widget_id(status)}", KanbanColumn)
        except Exception:
            return None
