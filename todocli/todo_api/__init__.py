"""
To-do API layer package.
Implements the task model, its JSON file store, and read-only filters.
"""

from .data_models import DEFAULT_CATEGORY, NO_DEADLINE, Task
from .exceptions import (
    CorruptStateError,
    EmptyTaskTextError,
    InvalidTaskNumberError,
    StorageError,
    TodoError,
    ValidationError,
)
from .task_store import TaskStore

__all__ = [
    'Task',
    'TaskStore',
    'DEFAULT_CATEGORY',
    'NO_DEADLINE',
    'TodoError',
    'ValidationError',
    'EmptyTaskTextError',
    'InvalidTaskNumberError',
    'StorageError',
    'CorruptStateError',
]
