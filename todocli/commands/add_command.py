"""
Handles the 'Add Task' menu choice.
"""
from ..todo_api.exceptions import EmptyTaskTextError


def handle_add(session) -> None:
    """
    Prompt for text, category and deadline, then append the new task.

    Blank text aborts before the category and deadline prompts.
    """
    text = session.ask("\n🆕 Enter new task: ")
    if not text.strip():
        raise EmptyTaskTextError()

    category = session.ask("📂 Enter category (Work/Personal/Study): ")
    deadline = session.ask("📅 Enter deadline (YYYY-MM-DD): ")

    session.store.add(text, category, deadline)
    session.say("✅ Task added successfully!", style="green")
