import io
from pathlib import Path

import pytest
from rich.console import Console

from todocli.session import TodoSession
from todocli.todo_api.task_store import TaskStore


class ScriptedInput:
    """Feeds prepared answers to prompts; raises EOFError when they run out."""

    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture()
def tasks_file(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture()
def store(tasks_file: Path) -> TaskStore:
    s = TaskStore(tasks_file)
    s.load()
    return s


@pytest.fixture()
def make_session(store: TaskStore):
    """Build a TodoSession with scripted answers; output goes to `session.output`."""

    def _make(*answers: str) -> TodoSession:
        output = io.StringIO()
        console = Console(file=output, width=200, color_system=None)
        session = TodoSession(store, console=console, input_func=ScriptedInput(*answers))
        session.output = output
        return session

    return _make
