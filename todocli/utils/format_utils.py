from typing import List

from rich.text import Text

from ..todo_api.data_models import Task

DONE_MARKER = "✔"
UNDONE_MARKER = "✖"


def format_task_line(number: int, task: Task) -> Text:
    """Render one task as `N. <marker> text (Category: .., Deadline: ..)`.

    Built as a Text object so task text is never parsed as rich markup.
    """
    marker = DONE_MARKER if task.done else UNDONE_MARKER
    return Text.assemble(
        (f"{number}. ", "bold cyan"),
        (marker, "green" if task.done else "red"),
        " ",
        (task.text, "dim" if task.done else ""),
        " ",
        (f"(Category: {task.category}, Deadline: {task.deadline})", "yellow"),
    )


def format_task_list(tasks: List[Task]) -> List[Text]:
    """Number tasks from 1 in the order given."""
    return [format_task_line(i, task) for i, task in enumerate(tasks, start=1)]
