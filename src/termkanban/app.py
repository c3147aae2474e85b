"""termkanban TUI Application."""

from textual.app import App
from textual.binding import Binding
from textual.widgets import Input

from .config import Settings
from .models import Command, Effect
from .repositories import JsonFileRepository
from .services import BoardService
from .ui.screens.board import BoardScreen
from .ui.widgets.input_bar import TITLE_INPUT_ID

# Actions that drive the board and must not fire while a title is typed
BOARD_ACTIONS = frozenset(
    {
        "quit_board",
        "new_task",
        "edit_task",
        "delete_task",
        "backup",
        "nav_left",
        "nav_right",
        "nav_up",
        "nav_down",
        "move_task",
    }
)


class KanbanApp(App):
    """termkanban - Terminal Kanban TUI."""

    TITLE = "termkanban"

    CSS_PATH = "ui/styles.tcss"

    ENABLE_COMMAND_PALETTE = False

    BINDINGS = [
        # Always quits, even while typing
        Binding("ctrl+c", "force_quit", "Quit", show=False, priority=True),
        Binding("q", "quit_board", "Quit", show=True),
        # Navigation - vim style
        Binding("h", "nav_left", "← Column", show=False),
        Binding("j", "nav_down", "↓ Task", show=False),
        Binding("k", "nav_up", "↑ Task", show=False),
        Binding("l", "nav_right", "→ Column", show=False),
        # Navigation - arrow keys
        Binding("left", "nav_left", "← Column", show=False),
        Binding("down", "nav_down", "↓ Task", show=False),
        Binding("up", "nav_up", "↑ Task", show=False),
        Binding("right", "nav_right", "→ Column", show=False),
        # Task actions
        Binding("n", "new_task", "New", show=True),
        Binding("e", "edit_task", "Edit", show=True),
        Binding("d", "delete_task", "Delete", show=True),
        Binding("backspace", "delete_task", "Delete", show=False),
        Binding("E", "backup", "Backup", show=True),
        Binding("enter", "move_task", "Move →", show=False),
        Binding("space", "move_task", "Move →", show=False),
        # Title editor
        Binding("escape", "cancel_input", "Cancel", show=False),
    ]

    SCREENS = {
        "board": BoardScreen,
    }

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self._init_services()

    def _init_services(self) -> None:
        """Initialize repositories and the board service, then load the board."""
        self.repository = JsonFileRepository(self.settings.board_file)
        self.backup_repository = JsonFileRepository(self.settings.backup_file)
        self.board_service = BoardService(self.repository, self.backup_repository)
        self.board_service.initialize()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.push_screen("board")

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        """Disable board bindings while the pending input owns the keyboard."""
        if action in BOARD_ACTIONS and self.board_service.board.is_editing_text:
            return False
        return True

    def dispatch_command(self, command: Command) -> list[Effect]:
        """Send a command to the board service and act on the returned effects."""
        effects = self.board_service.dispatch(command)

        if Effect.QUIT in effects:
            self.exit()
            return effects

        if Effect.BACKUP in effects and not self.board_service.has_storage_error:
            self.notify(f"Backup saved to {self.settings.backup_file}", timeout=2)

        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.refresh_board()
        return effects

    def action_force_quit(self) -> None:
        """Exit immediately, whatever the input mode."""
        self.exit()

    def action_quit_board(self) -> None:
        """Quit the application."""
        self.dispatch_command(Command.QUIT)

    # Navigation actions
    def action_nav_left(self) -> None:
        """Focus the previous column."""
        self.dispatch_command(Command.FOCUS_PREVIOUS)

    def action_nav_right(self) -> None:
        """Focus the next column."""
        self.dispatch_command(Command.FOCUS_NEXT)

    def action_nav_up(self) -> None:
        """Select the previous task."""
        self.dispatch_command(Command.CURSOR_UP)

    def action_nav_down(self) -> None:
        """Select the next task."""
        self.dispatch_command(Command.CURSOR_DOWN)

    # Task actions
    def action_new_task(self) -> None:
        """Start typing a new task title."""
        self.dispatch_command(Command.BEGIN_CREATE)

    def action_edit_task(self) -> None:
        """Start editing the selected task's title."""
        self.dispatch_command(Command.BEGIN_EDIT)

    def action_delete_task(self) -> None:
        """Delete the selected task."""
        self.dispatch_command(Command.DELETE)

    def action_move_task(self) -> None:
        """Move the selected task to the next column, wrapping at the end."""
        self.dispatch_command(Command.MOVE_TASK)

    def action_backup(self) -> None:
        """Write the board to the backup file."""
        self.dispatch_command(Command.BACKUP)

    def action_cancel_input(self) -> None:
        """Discard the title being typed."""
        self.dispatch_command(Command.CANCEL_INPUT)

    def on_input_changed(self, event: Input.Changed) -> None:
        """Mirror the title editor into the board's pending input."""
        if event.input.id == TITLE_INPUT_ID:
            self.board_service.set_input(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Commit the title when enter is pressed in the editor."""
        if event.input.id == TITLE_INPUT_ID:
            self.board_service.set_input(event.value)
            self.dispatch_command(Command.COMMIT_INPUT)


def run(settings: Settings | None = None) -> None:
    """Run the termkanban application."""
    app = KanbanApp(settings)
    app.run()
