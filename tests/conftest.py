"""
Common pytest fixtures for testing.
"""
import pathlib
import shutil
import logging

import pytest

from todolist.todo_store import TodoStore


@pytest.fixture
def fixture_path():
    """Return the path to the fixtures directory."""
    return pathlib.Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_todo_path(fixture_path):
    """Return the path to the sample todo.txt file."""
    return fixture_path / "sample_todo.txt"


@pytest.fixture
def malformed_todo_path(fixture_path):
    """Return the path to the todo.txt file with unindexed lines."""
    return fixture_path / "malformed_todo.txt"


@pytest.fixture
def sample_todo_toml_path(fixture_path):
    """Return the path to the sample todo.toml file."""
    return fixture_path / "sample_todo.toml"


@pytest.fixture
def malformed_todo_toml_path(fixture_path):
    """Return the path to the unparsable todo.toml file."""
    return fixture_path / "malformed_todo.toml"


@pytest.fixture
def temp_todo_file(tmp_path):
    """Path of a todo.txt file that does not exist yet."""
    return tmp_path / "todo.txt"


@pytest.fixture
def sample_store(tmp_path, sample_todo_path):
    """A store working on a copy of the sample list."""
    todo_file = tmp_path / "todo.txt"
    shutil.copy(sample_todo_path, todo_file)
    return TodoStore(todo_file)


@pytest.fixture
def malformed_store(tmp_path, malformed_todo_path):
    """A store working on a copy of the list with unindexed lines."""
    todo_file = tmp_path / "todo.txt"
    shutil.copy(malformed_todo_path, todo_file)
    return TodoStore(todo_file)


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging to ensure caplog fixtures work correctly."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(levelname)s  %(name)s:%(module)s.py:%(lineno)d %(message)s',
        force=True  # Override any existing configuration
    )
    yield
