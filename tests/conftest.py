"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from task_tracker.config import Config, ConfigModel  # noqa: E402
from task_tracker.task import Deadline, Event, Todo  # noqa: E402
from task_tracker.task_list import TaskList  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep every test away from the real ~/.task_tracker directory."""
    monkeypatch.setenv("TASK_TRACKER_DATA_DIR", str(tmp_path / "data"))
    Config._instance = None
    yield
    Config._instance = None


@pytest.fixture
def config(tmp_path):
    return ConfigModel(data_dir=str(tmp_path / "data"))


@pytest.fixture
def sample_tasks():
    """Three tasks, a todo, a deadline and an event, the event already done."""
    return TaskList([
        Todo("Mop the floor"),
        Deadline("assignment", "Aug 26 2020 23:59"),
        Event("future date", "Feb 14 2021 19:00", done=True),
    ])
