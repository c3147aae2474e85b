"""Task title input bar widget."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widget import Widget
from textual.widgets import Input, Static

from ...models import TITLE_LIMIT, InputMode

PLACEHOLDER = "Task..."
TITLE_INPUT_ID = "title-input"

MODE_LABELS = {
    InputMode.CREATING: "New task",
    InputMode.EDITING: "Edit task",
}


class InputBar(Widget):
    """Title editor shown while a task is being created or edited.

    The board keeps the pending text; the app mirrors every change of the
    editor into it.
    """

    DEFAULT_CSS = """
    InputBar {
        height: 3;
        width: 40;
        display: none;
        border: round $secondary;
        padding: 0 1;
    }

    InputBar.-visible {
        display: block;
    }

    InputBar .mode-indicator {
        width: auto;
        padding: 0 1 0 0;
        color: $secondary;
        text-style: bold;
    }

    InputBar .title-input {
        width: 1fr;
        height: 1;
        border: none;
        padding: 0;
    }

    InputBar .title-input:focus {
        border: none;
    }
    """

    def compose(self) -> ComposeResult:
        with Horizontal():
            yield Static("", id="mode-indicator", classes="mode-indicator")
            yield Input(
                placeholder=PLACEHOLDER,
                max_length=TITLE_LIMIT,
                id=TITLE_INPUT_ID,
                classes="title-input",
            )

    def show(self, mode: InputMode, text: str) -> None:
        """Open the editor for the given mode, pre-filled with text."""
        self.add_class("-visible")
        self.query_one("#mode-indicator", Static).update(MODE_LABELS.get(mode, ""))
        title_input = self.query_one(f"#{TITLE_INPUT_ID}", Input)
        if title_input.value != text:
            title_input.value = text
            title_input.cursor_position = len(text)
        title_input.focus()

    def hide(self) -> None:
        """Hide the bar and hand the keyboard back to the board."""
        self.remove_class("-visible")
        self.query_one(f"#{TITLE_INPUT_ID}", Input).blur()
