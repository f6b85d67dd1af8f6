"""
Data models representing to-do list objects (tasks).
"""

from dataclasses import dataclass
from typing import Any, Dict

DEFAULT_CATEGORY = "General"
NO_DEADLINE = "No deadline"


@dataclass
class Task:
    text: str
    done: bool = False
    category: str = DEFAULT_CATEGORY
    deadline: str = NO_DEADLINE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "done": self.done,
            "category": self.category,
            "deadline": self.deadline
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        """
        Build a Task from one stored JSON object.

        Missing optional fields get their defaults; stored values are kept
        as they are, empty strings included. A record without a string
        `text`, a non-boolean `done`, or a non-string category/deadline
        raises ValueError.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Task entry must be an object, got {type(data).__name__}")
        text = data.get("text")
        if not isinstance(text, str):
            raise ValueError("Task entry is missing a 'text' string")
        done = data.get("done", False)
        if not isinstance(done, bool):
            raise ValueError(f"Task 'done' must be true or false, got {done!r}")
        category = data.get("category", DEFAULT_CATEGORY)
        deadline = data.get("deadline", NO_DEADLINE)
        for key, value in (("category", category), ("deadline", deadline)):
            if not isinstance(value, str):
                raise ValueError(f"Task '{key}' must be a string, got {value!r}")
        return cls(text=text, done=done, category=category, deadline=deadline)
