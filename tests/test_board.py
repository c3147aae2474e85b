"""Unit tests for the Board state machine."""

import pytest

from termkanban.models import (
    TITLE_LIMIT,
    Board,
    Command,
    Effect,
    InputMode,
    Status,
    Task,
)


def make_board(todo=(), doing=(), done=()) -> Board:
    """Helper to build a board with titled tasks in each column."""
    board = Board()
    for status, titles in zip(Status, (todo, doing, done)):
        board.column(status).tasks = [Task(status=status, title=t) for t in titles]
    return board


def titles(board: Board, status: Status) -> list[str]:
    return [t.title for t in board.column(status).tasks]


class TestNavigation:
    """Tests for focus and cursor movement."""

    def test_focus_next_resets_cursor(self):
        board = make_board(todo=["a", "b"], doing=["c"])
        board.cursor = 1

        assert board.focus_next() == []

        assert board.focused == Status.DOING
        assert board.cursor == 0

    def test_focus_next_stops_at_last_column(self):
        board = make_board()
        board.focused = Status.DONE
        board.focus_next()
        assert board.focused == Status.DONE

    def test_focus_previous_stops_at_first_column(self):
        board = make_board()
        board.focus_previous()
        assert board.focused == Status.TODO

    def test_focus_previous_resets_cursor(self):
        board = make_board(todo=["a"], doing=["b", "c"])
        board.focused = Status.DOING
        board.cursor = 1

        board.focus_previous()

        assert board.focused == Status.TODO
        assert board.cursor == 0

    def test_cursor_bounds(self):
        """Cursor stays within the focused column."""
        board = make_board(todo=["a", "b"])
        board.cursor_up()
        assert board.cursor == 0
        board.cursor_down()
        board.cursor_down()
        assert board.cursor == 1

    def test_cursor_down_on_empty_column(self):
        board = make_board()
        board.cursor_down()
        assert board.cursor == 0

    def test_navigation_ignored_while_typing(self):
        """No focus or cursor change outside idle mode."""
        board = make_board(todo=["a", "b"])
        board.begin_create()

        board.focus_next()
        board.cursor_down()

        assert board.focused == Status.TODO
        assert board.cursor == 0


class TestCreate:
    """Tests for creating tasks."""

    def test_create_scenario(self):
        """begin_create, type 'Write report', commit -> one To Do task."""
        board = make_board()

        board.begin_create()
        assert board.mode == InputMode.CREATING
        board.pending_input = "Write report"
        effects = board.commit_input()

        assert effects == [Effect.PERSIST]
        tasks = board.column(Status.TODO).tasks
        assert len(tasks) == 1
        assert tasks[0].title == "Write report"
        assert tasks[0].status == Status.TODO
        assert board.mode == InputMode.IDLE
        assert board.pending_input == ""

    def test_create_targets_todo_regardless_of_focus(self):
        """New tasks always land in To Do."""
        board = make_board()
        board.focused = Status.DONE

        board.begin_create()
        board.append_input("x")
        board.commit_input()

        assert titles(board, Status.TODO) == ["x"]
        assert titles(board, Status.DONE) == []

    def test_empty_commit_changes_nothing_but_persists(self):
        """Empty input is a no-op on data but still returns to idle."""
        board = make_board(todo=["a"])

        board.begin_create()
        effects = board.commit_input()

        assert board.task_count() == 1
        assert board.mode == InputMode.IDLE
        assert effects == [Effect.PERSIST]

    def test_begin_create_clears_stale_input(self):
        board = make_board()
        board.pending_input = "stale"
        board.begin_create()
        assert board.pending_input == ""

    def test_begin_create_ignored_when_not_idle(self):
        board = make_board(todo=["a"])
        board.begin_edit()
        board.begin_create()
        assert board.mode == InputMode.EDITING
        assert board.pending_input == "a"


class TestInputBuffer:
    """Tests for raw text append/erase."""

    def test_append_and_erase(self):
        board = make_board()
        board.begin_create()
        board.append_input("ab")
        board.append_input("c")
        board.erase_input()
        assert board.pending_input == "ab"

    def test_erase_on_empty(self):
        board = make_board()
        board.begin_create()
        board.erase_input()
        assert board.pending_input == ""

    def test_append_respects_title_limit(self):
        board = make_board()
        board.begin_create()
        board.append_input("x" * (TITLE_LIMIT + 10))
        board.append_input("y")
        assert board.pending_input == "x" * TITLE_LIMIT

    def test_text_ignored_when_idle(self):
        board = make_board()
        board.append_input("x")
        board.erase_input()
        board.set_input("y")
        assert board.pending_input == ""

    def test_set_input_replaces_buffer(self):
        board = make_board()
        board.begin_create()
        board.append_input("abc")
        board.set_input("Write abc")
        assert board.pending_input == "Write abc"

    def test_set_input_respects_title_limit(self):
        board = make_board()
        board.begin_create()
        board.set_input("z" * (TITLE_LIMIT + 5))
        assert board.pending_input == "z" * TITLE_LIMIT


class TestEdit:
    """Tests for editing task titles."""

    def test_edit_prefills_and_overwrites(self):
        board = make_board(doing=["old", "other"])
        board.focused = Status.DOING
        board.column(Status.DOING).tasks[0].description = "keep me"

        board.begin_edit()
        assert board.mode == InputMode.EDITING
        assert board.pending_input == "old"

        board.pending_input = "new"
        effects = board.commit_input()

        task = board.column(Status.DOING).tasks[0]
        assert task.title == "new"
        assert task.status == Status.DOING
        assert task.description == "keep me"
        assert titles(board, Status.DOING) == ["new", "other"]
        assert effects == [Effect.PERSIST]

    def test_edit_requires_a_task(self):
        """begin_edit on an empty column stays idle."""
        board = make_board()
        board.begin_edit()
        assert board.mode == InputMode.IDLE

    def test_edit_with_empty_input_keeps_title(self):
        board = make_board(todo=["keep"])
        board.begin_edit()
        board.pending_input = ""
        board.commit_input()
        assert titles(board, Status.TODO) == ["keep"]

    def test_cancel_discards_edit(self):
        board = make_board(todo=["keep"])
        board.begin_edit()
        board.append_input("!!!")

        assert board.cancel_input() == []

        assert titles(board, Status.TODO) == ["keep"]
        assert board.mode == InputMode.IDLE
        assert board.pending_input == ""

    def test_commit_and_cancel_ignored_when_idle(self):
        board = make_board()
        assert board.commit_input() == []
        assert board.cancel_input() == []


class TestDelete:
    """Tests for deleting tasks."""

    def test_delete_scenario_clamps_cursor(self):
        """Deleting the last task moves the cursor back."""
        board = make_board(doing=["X", "Y"])
        board.focused = Status.DOING
        board.cursor = 1

        effects = board.delete_task()

        assert titles(board, Status.DOING) == ["X"]
        assert board.cursor == 0
        assert effects == [Effect.PERSIST]

    def test_delete_middle_keeps_cursor(self):
        board = make_board(todo=["a", "b", "c"])
        board.cursor = 1
        board.delete_task()
        assert titles(board, Status.TODO) == ["a", "c"]
        assert board.cursor == 1

    def test_delete_empty_column_noop(self):
        board = make_board()
        assert board.delete_task() == []

    def test_delete_ignored_while_typing(self):
        board = make_board(todo=["a"])
        board.begin_create()
        assert board.delete_task() == []
        assert titles(board, Status.TODO) == ["a"]

    @pytest.mark.parametrize("start", [0, 1, 2, 3, 4])
    def test_repeated_deletes_remove_cursor_task(self, start: int):
        """Each delete removes exactly the task under the cursor."""
        board = make_board(todo=["a", "b", "c", "d", "e"])
        board.cursor = start

        while board.column(Status.TODO).tasks:
            expected = board.current_task.title
            before = titles(board, Status.TODO)
            board.delete_task()
            after = titles(board, Status.TODO)

            assert expected not in after
            assert len(after) == len(before) - 1
            if after:
                assert 0 <= board.cursor < len(after)

        assert board.cursor == 0


class TestMove:
    """Tests for moving tasks between columns."""

    def test_move_scenario(self):
        """Moving 'A' from To Do lands it in Doing; focus stays."""
        board = make_board(todo=["A"])

        effects = board.move_task()

        assert titles(board, Status.TODO) == []
        assert titles(board, Status.DOING) == ["A"]
        assert board.column(Status.DOING).tasks[0].status == Status.DOING
        assert board.focused == Status.TODO
        assert board.cursor == 0
        assert effects == [Effect.PERSIST]

    def test_move_appends_to_destination(self):
        board = make_board(todo=["new"], doing=["existing"])
        board.move_task()
        assert titles(board, Status.DOING) == ["existing", "new"]

    def test_move_from_done_wraps_to_todo(self):
        board = make_board(todo=["first"], done=["finished"])
        board.focused = Status.DONE

        board.move_task()

        assert titles(board, Status.TODO) == ["first", "finished"]
        assert board.column(Status.TODO).tasks[1].status == Status.TODO

    def test_three_moves_return_to_todo(self):
        """Following a task through three moves brings it back to To Do."""
        board = make_board(todo=["loop"])
        for status in (Status.TODO, Status.DOING, Status.DONE):
            board.focused = status
            board.cursor = 0
            source_before = len(board.column(status).tasks)
            dest_before = len(board.column(status.next).tasks)

            board.move_task()

            assert len(board.column(status).tasks) == source_before - 1
            assert len(board.column(status.next).tasks) == dest_before + 1
            assert board.column(status.next).tasks[-1].status == status.next

        assert titles(board, Status.TODO) == ["loop"]

    def test_move_clamps_cursor(self):
        board = make_board(todo=["a", "b"])
        board.cursor = 1
        board.move_task()
        assert board.cursor == 0
        assert titles(board, Status.DOING) == ["b"]

    def test_move_empty_column_noop(self):
        board = make_board()
        assert board.move_task() == []

    def test_move_ignored_while_typing(self):
        board = make_board(todo=["a"])
        board.begin_edit()
        assert board.move_task() == []
        assert titles(board, Status.TODO) == ["a"]


class TestHandle:
    """Tests for command dispatch."""

    def test_every_command_has_a_handler(self):
        board = make_board(todo=["a"])
        for command in Command:
            board.cancel_input()
            assert isinstance(board.handle(command), list)

    def test_quit_only_when_idle(self):
        board = make_board()
        assert board.handle(Command.QUIT) == [Effect.QUIT]
        board.handle(Command.BEGIN_CREATE)
        assert board.handle(Command.QUIT) == []

    def test_backup_effect(self):
        board = make_board()
        assert board.handle(Command.BACKUP) == [Effect.BACKUP]

    def test_navigation_has_no_effects(self):
        board = make_board(todo=["a", "b"], doing=["c"])
        for command in (
            Command.CURSOR_DOWN,
            Command.CURSOR_UP,
            Command.FOCUS_NEXT,
            Command.FOCUS_PREVIOUS,
        ):
            assert board.handle(command) == []

    def test_mode_round_trip(self):
        """IDLE -> CREATING -> IDLE via commands."""
        board = make_board()
        board.handle(Command.BEGIN_CREATE)
        board.append_input("t")
        assert board.handle(Command.COMMIT_INPUT) == [Effect.PERSIST]
        assert board.mode == InputMode.IDLE
        assert titles(board, Status.TODO) == ["t"]
