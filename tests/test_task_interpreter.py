"""Unit tests for the TaskInterpreter."""

from unittest.mock import MagicMock

import pytest

from src.commands import OperationKind, ParsedCommand, UnknownOperationError
from src.interpreter import Response, TaskInterpreter
from src.interpreter import messages
from src.storage import InMemoryTaskStorage, StorageLoadError, StorageSaveError
from src.tasks import NO_KEYWORD_MATCH, NOTHING_TO_UNDO, TaskList, ToDo, WrongIndexError


@pytest.fixture
def storage():
    return InMemoryTaskStorage(
        [
            "T | 0 | read book",
            "D | 0 | return book | 2/12/2019 1800",
        ]
    )


@pytest.fixture
def interpreter(storage):
    return TaskInterpreter(storage=storage)


class TestResponse:
    """Tests for Response dataclass."""

    def test_defaults(self):
        response = Response(text="hi")
        assert response.operation is None
        assert response.success is True
        assert response.exit_requested is False

    def test_to_dict(self):
        response = Response(text="bye", operation=OperationKind.BYE, exit_requested=True)
        assert response.to_dict() == {
            "text": "bye",
            "operation": "bye",
            "success": True,
            "exit_requested": True,
        }


class TestInit:
    """Tests for loading the task list."""

    def test_loads_from_storage(self, interpreter):
        assert len(interpreter.task_list) == 2

    def test_load_failure_falls_back_to_empty(self):
        storage = MagicMock()
        storage.load.side_effect = StorageLoadError("tasks.txt", "corrupt")
        interpreter = TaskInterpreter(storage=storage)
        assert len(interpreter.task_list) == 0

    def test_given_task_list_skips_load(self):
        storage = MagicMock()
        task_list = TaskList([ToDo("a")])
        interpreter = TaskInterpreter(storage=storage, task_list=task_list)
        assert interpreter.task_list is task_list
        storage.load.assert_not_called()


class TestParseAndDispatch:
    """Tests for the parse/dispatch pair."""

    def test_parse(self, interpreter):
        assert interpreter.parse("done 2") == ParsedCommand(OperationKind.DONE, index=1)

    def test_parse_error_propagates(self, interpreter):
        with pytest.raises(UnknownOperationError):
            interpreter.parse("frobnicate 1")

    def test_dispatch_add(self, interpreter):
        text = interpreter.dispatch(OperationKind.TODO, "write essay", "", -1)
        assert "[T][ ] write essay" in text
        assert "Now you have 3 tasks in the list." in text

    def test_dispatch_bad_index_raises(self, interpreter):
        with pytest.raises(WrongIndexError):
            interpreter.dispatch(OperationKind.DONE, "", "", 5)

    def test_dispatch_does_not_save(self, interpreter, storage):
        interpreter.dispatch(OperationKind.TODO, "write essay")
        assert storage.save_count == 0


class TestHandle:
    """Tests for TaskInterpreter.handle."""

    def test_todo_adds_and_saves(self, interpreter, storage):
        response = interpreter.handle("todo write essay")
        assert response.success is True
        assert response.operation is OperationKind.TODO
        assert len(interpreter.task_list) == 3
        assert interpreter.task_list.get(2).description == "write essay"
        assert storage.lines[-1] == "T | 0 | write essay"

    def test_list(self, interpreter):
        response = interpreter.handle("list")
        assert response.text == (
            f"{messages.LIST_HEADER}\n"
            "1.[T][ ] read book\n"
            "2.[D][ ] return book (by: Dec 02 2019 18:00)"
        )

    def test_list_empty(self):
        interpreter = TaskInterpreter(storage=InMemoryTaskStorage())
        assert interpreter.handle("list").text == messages.EMPTY_LIST

    def test_list_does_not_save(self, interpreter, storage):
        interpreter.handle("list")
        assert storage.save_count == 0

    def test_done(self, interpreter, storage):
        response = interpreter.handle("done 1")
        assert response.text == messages.DONE_TEMPLATE.format(task="[T][X] read book")
        assert storage.lines[0] == "T | 1 | read book"

    def test_done_without_index(self, interpreter):
        response = interpreter.handle("done")
        assert response.success is False
        assert "index is invalid" in response.text

    def test_done_with_superscript_digit(self, interpreter, storage):
        response = interpreter.handle("done ²")
        assert response.success is False
        assert "index is invalid" in response.text
        assert [task.done for task in interpreter.task_list] == [False, False]
        assert storage.save_count == 0

    def test_delete_out_of_range(self, interpreter, storage):
        response = interpreter.handle("delete 3")
        assert response.success is False
        assert len(interpreter.task_list) == 2
        assert storage.save_count == 0

    def test_delete(self, interpreter):
        response = interpreter.handle("delete 1")
        assert "[T][ ] read book" in response.text
        assert "Now you have 1 tasks in the list." in response.text

    def test_delete_then_undo(self, interpreter, storage):
        interpreter.handle("delete 1")
        response = interpreter.handle("undo")
        assert "read book" in response.text
        assert interpreter.task_list.get(0).description == "read book"
        assert storage.lines[0] == "T | 0 | read book"
        assert interpreter.handle("undo").text == NOTHING_TO_UNDO

    def test_find(self, interpreter):
        response = interpreter.handle("find return")
        assert response.text == (
            f"{messages.FIND_HEADER}\n1.[D][ ] return book (by: Dec 02 2019 18:00)"
        )

    def test_find_no_match(self, interpreter):
        response = interpreter.handle("find zzz")
        assert response.text.endswith(NO_KEYWORD_MATCH)

    def test_tell(self, interpreter):
        response = interpreter.handle("tell 2/12/2019 1800")
        assert response.text.startswith(messages.DATE_HEADER)
        assert "1.[D][ ] return book" in response.text

    def test_deadline_with_unparseable_time(self, interpreter):
        response = interpreter.handle("deadline essay /by next week")
        assert "(by: I don't know the time)" in response.text

    def test_parse_error_is_reported(self, interpreter, storage):
        response = interpreter.handle("frobnicate 1")
        assert response.success is False
        assert response.operation is None
        assert "don't know what that means" in response.text
        assert storage.save_count == 0

    def test_format_error_is_reported(self, interpreter):
        response = interpreter.handle("event party")
        assert response.success is False
        assert "/at" in response.text

    def test_bye_requests_exit(self, interpreter):
        response = interpreter.handle("bye")
        assert response.exit_requested is True
        assert response.text == messages.FAREWELL

    def test_save_failure_is_reported(self):
        storage = MagicMock()
        storage.load.return_value = []
        storage.save.side_effect = StorageSaveError("tasks.txt", "disk full")
        interpreter = TaskInterpreter(storage=storage)
        response = interpreter.handle("todo read")
        assert response.success is False
        assert response.text.endswith(messages.SAVE_ERROR)
        assert len(interpreter.task_list) == 1

    def test_keeps_running_after_errors(self, interpreter):
        interpreter.handle("")
        interpreter.handle("done 99")
        response = interpreter.handle("todo still works")
        assert response.success is True
