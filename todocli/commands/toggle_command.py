def handle_toggle(session) -> None:
    """Flip a task between done and undone."""
    number = session.ask("\n🔄 Enter task number to toggle: ")
    session.store.toggle(number)
    session.say("✅ Task status updated!", style="green")
