"""Task list persistence and mutation.

The store owns the ordered task list. It is read from a JSON file once at
startup and the whole list is written back after every mutation.
"""
import json
import os
import re
import stat
import tempfile
from pathlib import Path
from typing import List, Optional, Union

from ..utils.logger import get_logger
from .data_models import DEFAULT_CATEGORY, NO_DEADLINE, Task
from .exceptions import (
    CorruptStateError,
    EmptyTaskTextError,
    InvalidTaskNumberError,
    StorageError,
)
from .search_filters import filter_by_category, filter_by_deadline

log = get_logger(__name__)

_TASK_NUMBER_RE = re.compile(r"[+-]?[0-9]+")


class TaskStore:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._tasks: List[Task] = []

    @property
    def tasks(self) -> List[Task]:
        return self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    # -------------------- persistence --------------------
    def load(self) -> List[Task]:
        """Read the full task list from disk.

        A missing file gives an empty list. Raises CorruptStateError when
        the file is not a JSON array of task objects and StorageError when
        it cannot be read at all.
        """
        if not self.path.exists():
            log.debug("No task file at %s, starting empty", self.path)
            self._tasks = []
            return self._tasks
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw_data = json.load(f)
        except json.JSONDecodeError as e:
            raise CorruptStateError(f"Could not decode JSON from {self.path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Could not read {self.path}: {e}") from e

        if not isinstance(raw_data, list):
            raise CorruptStateError(f"Expected a JSON array in {self.path}, got {type(raw_data).__name__}")
        try:
            tasks = [Task.from_dict(item) for item in raw_data]
        except ValueError as e:
            raise CorruptStateError(f"Invalid task entry in {self.path}: {e}") from e

        self._tasks = tasks
        log.debug("Loaded %d task(s) from %s", len(tasks), self.path)
        return self._tasks

    def save(self, tasks: Optional[List[Task]] = None) -> None:
        """Replace the task file with the complete list.

        The JSON goes to a temporary file beside the target which is then
        renamed over it, so the previous file survives a failed write.
        """
        if tasks is not None:
            self._tasks = tasks
        text = json.dumps([t.to_dict() for t in self._tasks], indent=2, ensure_ascii=False)

        tmp_file_path = None
        try:
            directory = self.path.parent
            directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=directory,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp_file:
                tmp_file_path = tmp_file.name
                tmp_file.write(text)
                tmp_file.flush()
                os.fsync(tmp_file.fileno())
            # Temp files are created 0600; keep the permissions of the file being replaced.
            if self.path.exists():
                os.chmod(tmp_file_path, stat.S_IMODE(os.stat(self.path).st_mode))
            os.replace(tmp_file_path, self.path)
            tmp_file_path = None
        except OSError as e:
            log.warning("Saving %d task(s) to %s failed: %s", len(self._tasks), self.path, e)
            raise StorageError(f"Could not write {self.path}: {e}") from e
        finally:
            if tmp_file_path and os.path.exists(tmp_file_path):
                os.remove(tmp_file_path)
        log.debug("Saved %d task(s) to %s", len(self._tasks), self.path)

    # -------------------- lookups --------------------
    def index_of(self, number: Union[int, str]) -> int:
        """Translate a 1-based task number (int or user input) to a list index."""
        if isinstance(number, str):
            raw = number.strip()
            # int() alone would also take "1_0" and non-ASCII digits.
            if not _TASK_NUMBER_RE.fullmatch(raw):
                raise InvalidTaskNumberError(number)
            number = int(raw)
        if not 1 <= number <= len(self._tasks):
            raise InvalidTaskNumberError(str(number))
        return number - 1

    def get(self, number: Union[int, str]) -> Task:
        return self._tasks[self.index_of(number)]

    # -------------------- mutations --------------------
    def add(self, text: str, category: str = "", deadline: str = "") -> Task:
        text = (text or "").strip()
        if not text:
            raise EmptyTaskTextError()
        task = Task(
            text=text,
            done=False,
            category=(category or "").strip() or DEFAULT_CATEGORY,
            deadline=(deadline or "").strip() or NO_DEADLINE,
        )
        self._tasks.append(task)
        self.save()
        return task

    def toggle(self, number: Union[int, str]) -> Task:
        task = self.get(number)
        task.done = not task.done
        self.save()
        return task

    def edit(self, number: Union[int, str], text: str = "", category: str = "", deadline: str = "") -> Task:
        """Overwrite only the fields given as non-blank values."""
        task = self.get(number)
        if text and text.strip():
            task.text = text.strip()
        if category and category.strip():
            task.category = category.strip()
        if deadline and deadline.strip():
            task.deadline = deadline.strip()
        self.save()
        return task

    def delete(self, number: Union[int, str]) -> Task:
        removed = self._tasks.pop(self.index_of(number))
        self.save()
        return removed

    # -------------------- queries --------------------
    def filter_by_category(self, category: str) -> List[Task]:
        return filter_by_category(self._tasks, category)

    def filter_by_deadline(self, date_str: str) -> List[Task]:
        return filter_by_deadline(self._tasks, date_str)
