"""
Handles the 'Edit Task' menu choice.
"""


def handle_edit(session) -> None:
    """
    Edit text, category and deadline of one task.

    The task number is checked before any field is asked for. A blank
    answer keeps the current value of that field.
    """
    number = session.ask("\n✏️ Enter task number to edit: ")
    session.store.get(number)

    new_text = session.ask("📝 Enter new task text (leave blank to keep same): ")
    new_category = session.ask("📂 Enter new category (leave blank to keep same): ")
    new_deadline = session.ask("📅 Enter new deadline (YYYY-MM-DD, leave blank to keep same): ")

    session.store.edit(number, text=new_text, category=new_category, deadline=new_deadline)
    session.say("✅ Task updated!", style="green")
