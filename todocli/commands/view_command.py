from ..utils.format_utils import format_task_list


def handle_view(session) -> None:
    """Print every task with its 1-based number."""
    session.say("\n📋 Your To-Do List:", style="bold")
    tasks = session.store.tasks
    if not tasks:
        session.say("⚠️ No tasks yet.", style="yellow")
        return
    for line in format_task_list(tasks):
        session.console.print(line)
