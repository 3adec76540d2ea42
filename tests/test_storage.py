"""Unit tests for task storage backends."""

import os
from datetime import datetime
from pathlib import Path
from unittest.mock import patch

import pytest

from src.storage import (
    DATA_FILE_ENV_VAR,
    DEFAULT_DATA_FILE,
    FileTaskStorage,
    InMemoryTaskStorage,
    StorageError,
    StorageLoadError,
    StorageSaveError,
)
from src.tasks import Deadline, Event, ToDo


@pytest.fixture
def sample_tasks():
    return [
        ToDo("read book", done=True),
        Deadline("return book", time=datetime(2019, 12, 2, 18, 0)),
        Event("party"),
    ]


class TestFileTaskStorage:
    """Tests for the text-file backend."""

    def test_missing_file_loads_empty(self, tmp_path):
        storage = FileTaskStorage(tmp_path / "tasks.txt")
        assert storage.load() == []

    def test_save_writes_records(self, tmp_path, sample_tasks):
        path = tmp_path / "tasks.txt"
        FileTaskStorage(path).save(sample_tasks)
        assert path.read_text(encoding="utf-8").splitlines() == [
            "T | 1 | read book",
            "D | 0 | return book | 2/12/2019 1800",
            "E | 0 | party | I don't know the time",
        ]

    def test_save_then_load(self, tmp_path, sample_tasks):
        storage = FileTaskStorage(tmp_path / "tasks.txt")
        storage.save(sample_tasks)
        assert storage.load() == sample_tasks

    def test_save_creates_parent_directory(self, tmp_path):
        path = tmp_path / "nested" / "data" / "tasks.txt"
        FileTaskStorage(path).save([ToDo("a")])
        assert path.exists()

    def test_save_rewrites_whole_file(self, tmp_path, sample_tasks):
        storage = FileTaskStorage(tmp_path / "tasks.txt")
        storage.save(sample_tasks)
        storage.save([ToDo("only")])
        assert storage.load() == [ToDo("only")]

    def test_blank_lines_skipped(self, tmp_path):
        path = tmp_path / "tasks.txt"
        path.write_text("T | 0 | a\n\nT | 1 | b\n", encoding="utf-8")
        assert FileTaskStorage(path).load() == [ToDo("a"), ToDo("b", done=True)]

    def test_malformed_record(self, tmp_path):
        path = tmp_path / "tasks.txt"
        path.write_text("T | 0 | a\nnonsense\n", encoding="utf-8")
        with pytest.raises(StorageLoadError) as exc_info:
            FileTaskStorage(path).load()
        assert "line 2" in str(exc_info.value)

    def test_unreadable_file(self, tmp_path):
        path = tmp_path / "tasks.txt"
        path.write_text("T | 0 | a\n", encoding="utf-8")
        with patch.object(Path, "read_text", side_effect=PermissionError("denied")):
            with pytest.raises(StorageLoadError):
                FileTaskStorage(path).load()

    def test_write_failure(self, tmp_path):
        storage = FileTaskStorage(tmp_path / "tasks.txt")
        with patch.object(Path, "write_text", side_effect=OSError("disk full")):
            with pytest.raises(StorageSaveError) as exc_info:
                storage.save([ToDo("a")])
        assert isinstance(exc_info.value, StorageError)
        assert "disk full" in exc_info.value.reason

    def test_path_from_env(self, tmp_path):
        target = tmp_path / "env.txt"
        with patch.dict(os.environ, {DATA_FILE_ENV_VAR: str(target)}):
            storage = FileTaskStorage()
        assert storage.path == target

    def test_default_path(self):
        with patch.dict(os.environ, {}, clear=True):
            storage = FileTaskStorage()
        assert storage.path == DEFAULT_DATA_FILE

    def test_explicit_path_wins(self, tmp_path):
        with patch.dict(os.environ, {DATA_FILE_ENV_VAR: "ignored.txt"}):
            storage = FileTaskStorage(tmp_path / "explicit.txt")
        assert storage.path == tmp_path / "explicit.txt"


class TestInMemoryTaskStorage:
    """Tests for the in-memory backend."""

    def test_empty(self):
        assert InMemoryTaskStorage().load() == []

    def test_preloaded_lines(self):
        storage = InMemoryTaskStorage(["T | 0 | a", "E | 1 | b | 2024-01-05"])
        tasks = storage.load()
        assert tasks[0] == ToDo("a")
        assert tasks[1] == Event("b", done=True, time=datetime(2024, 1, 5))

    def test_save_encodes(self, sample_tasks):
        storage = InMemoryTaskStorage()
        storage.save(sample_tasks)
        assert storage.lines[0] == "T | 1 | read book"
        assert storage.save_count == 1

    def test_malformed_line(self):
        with pytest.raises(StorageLoadError):
            InMemoryTaskStorage(["broken"]).load()
