"""Kanban column widget."""

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widget import Widget
from textual.widgets import Static

from ...models import Status, Task
from .task_card import TaskCard


class TaskListScroll(VerticalScroll, can_focus=False):
    """Scroll container for task lists.

    Never takes focus, so arrow keys reach the board bindings instead of
    scrolling the list.
    """


class EmptyColumnMessage(Static):
    """Displayed when a column has no tasks."""

    pass


class KanbanColumn(Widget):
    """A single column in the kanban board."""

    def __init__(
        self,
        title: str,
        status: Status,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.title = title
        self.status = status
        self._tasks: list[Task] = []
        self._cursor: int | None = None

    @property
    def _status_css_id(self) -> str:
        """CSS-safe version of the status for IDs."""
        return self.status.name.lower()

    def compose(self) -> ComposeResult:
        """Create column layout."""
        yield Static(self._header_text, classes="column-header", id=f"header-{self._status_css_id}")
        yield TaskListScroll(classes="column-content", id=f"content-{self._status_css_id}")

    def on_mount(self) -> None:
        """Refresh tasks when column is mounted."""
        if self._tasks:
            self.call_after_refresh(self._refresh_tasks)

    @property
    def _header_text(self) -> str:
        """Bold header text with styled task count."""
        count = len(self._tasks)
        return f"[b]{escape(self.title)}[/b] [dim]({count})[/]"

    def set_tasks(self, tasks: list[Task], cursor: int | None = None) -> None:
        """Set the tasks for this column.

        Args:
            tasks: List of tasks to display
            cursor: Index of the selected task, or None if this column
                does not have focus
        """
        self._tasks = list(tasks)
        self._cursor = cursor
        self.set_class(cursor is not None, "-focused")
        # Use call_after_refresh to ensure DOM is ready
        self.call_after_refresh(self._refresh_tasks)

    async def _refresh_tasks(self) -> None:
        """Rebuild the task cards in this column."""
        content_id = f"#content-{self._status_css_id}"
        try:
            content = self.query_one(content_id, TaskListScroll)
        except Exception as e:
            self.log.error(f"Cannot find {content_id}: {e}")
            return

        # Remove existing task cards and wait for removal to complete
        await content.remove_children()

        selected_card: TaskCard | None = None
        if not self._tasks:
            await content.mount(EmptyColumnMessage("No tasks"))
        else:
            for index, task in enumerate(self._tasks):
                card = TaskCard(task, selected=index == self._cursor)
                await content.mount(card)
                if card.selected:
                    selected_card = card

        if selected_card is not None:
            selected_card.scroll_visible()

        try:
            header = self.query_one(f"#header-{self._status_css_id}", Static)
            header.update(self._header_text)
        except Exception:
            pass
