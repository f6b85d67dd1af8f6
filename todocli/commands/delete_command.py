"""
Handles the 'Delete Task' menu choice.
"""


def handle_delete(session) -> None:
    """Remove a task; later tasks move up one number."""
    number = session.ask("\n🗑️ Enter task number to delete: ")
    session.store.delete(number)
    session.say("✅ Task deleted!", style="green")
