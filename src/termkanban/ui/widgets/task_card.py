"""Task card widget."""

from __future__ import annotations

from rich.markup import escape
from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Static

from ...models import Task

SELECTED_PREFIX = "> "


class TaskCard(Widget):
    """A task card displayed in a column."""

    def __init__(
        self,
        task_data: Task,
        selected: bool = False,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self._task_data = task_data
        self._selected = selected

    @property
    def selected(self) -> bool:
        return self._selected

    def on_mount(self) -> None:
        self.set_class(self._selected, "-selected")

    def compose(self) -> ComposeResult:
        """Create card layout."""
        yield Static(self.title_text, classes="task-title")

        preview = self._task_data.description_preview
        if preview:
            yield Static(f"[dim]{escape(self._truncate(preview, 40))}[/]", classes="task-preview")

    @property
    def title_text(self) -> str:
        """Escaped title, prefixed with the selection marker when selected."""
        prefix = SELECTED_PREFIX if self._selected else ""
        return escape(prefix + self._task_data.display_title)

    def _truncate(self, text: str, max_len: int) -> str:
        """Truncate text with ellipsis."""
        if len(text) <= max_len:
            return text
        return text[: max_len - 1] + "…"
