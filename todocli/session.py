"""Interactive menu loop for the to-do list.

One prompt is pending at a time. Each menu choice runs a handler from
`commands` to completion before the menu is shown again; the loop only
ends on choice "0" or end of input.
"""
from typing import Callable, Dict, Optional

from rich.console import Console
from rich.text import Text

from .commands import (
    handle_add,
    handle_delete,
    handle_edit,
    handle_filter_category,
    handle_filter_deadline,
    handle_toggle,
    handle_view,
)
from .todo_api.exceptions import StorageError, ValidationError
from .todo_api.task_store import TaskStore
from .utils.logger import get_logger

log = get_logger(__name__)

EXIT_CHOICE = "0"

MENU_HANDLERS: Dict[str, Callable[["TodoSession"], None]] = {
    "1": handle_add,
    "2": handle_view,
    "3": handle_toggle,
    "4": handle_edit,
    "5": handle_delete,
    "6": handle_filter_category,
    "7": handle_filter_deadline,
}

MENU_TEXT = """
==========================
  📌 TO-DO LIST (CLI APP)
==========================
1. Add Task
2. View Tasks
3. Toggle Task Done/Undone
4. Edit Task
5. Delete Task
6. Filter by Category
7. Filter by Deadline
0. Exit
--------------------------
"""


class TodoSession:
    def __init__(
        self,
        store: TaskStore,
        console: Optional[Console] = None,
        input_func: Optional[Callable[[str], str]] = None,
    ):
        self.store = store
        self.console = console or Console()
        self._input = input_func or self.console.input

    def ask(self, prompt: str) -> str:
        """Block until one line of input arrives."""
        return self._input(prompt)

    def say(self, message: str, style: Optional[str] = None) -> None:
        # Text is printed verbatim: no markup or emoji-code parsing of user input.
        self.console.print(Text(message, style=style or ""))

    def show_menu(self) -> None:
        self.say(MENU_TEXT, style="bold blue")

    def run(self) -> None:
        """Main loop; returns once the user exits or input ends."""
        while True:
            self.show_menu()
            try:
                choice = self.ask("👉 Choose an option: ")
                if choice == EXIT_CHOICE:
                    break
                self.dispatch(choice)
            except (EOFError, KeyboardInterrupt):
                log.debug("Input closed, leaving the menu loop")
                self.console.print()
                break
        self.say("👋 Goodbye!")

    def dispatch(self, choice: str) -> None:
        """Run the handler for one menu choice, reporting any TodoError."""
        handler = MENU_HANDLERS.get(choice)
        if handler is None:
            self.say("❌ Invalid option. Try again.", style="red")
            return
        try:
            handler(self)
        except ValidationError as e:
            log.debug("Rejected input for choice %s: %s", choice, e)
            self.say(e.user_message, style="red")
        except StorageError as e:
            self.say(f"❌ Could not save tasks: {e}", style="bold red")
            self.say("Your changes are kept for this session and will be written on the next successful save.", style="yellow")
