#!/usr/bin/env python3
import typer
from rich.console import Console
from rich.text import Text

from .session import TodoSession
from .todo_api.exceptions import StorageError
from .todo_api.task_store import TaskStore
from .utils.config import get_log_level, get_tasks_file, load_env_vars
from .utils.logger import configure_logging, get_logger

log = get_logger(__name__)

# Create app instance
app = typer.Typer(
    name="todocli",
    help="To-Do CLI - Add, view, toggle, edit, delete and filter tasks from an interactive menu.",
    add_completion=False,
)


@app.command()
def run() -> None:
    """Start the interactive to-do list menu."""
    load_env_vars()
    configure_logging(get_log_level())

    tasks_file = get_tasks_file()
    store = TaskStore(tasks_file)
    try:
        store.load()
    except StorageError as e:
        log.error("Could not load tasks from %s: %s", tasks_file, e)
        err_console = Console(stderr=True)
        err_console.print(Text(e.user_message, style="bold red"))
        err_console.print(Text(str(e)))
        raise typer.Exit(code=1)

    TodoSession(store, console=Console()).run()


if __name__ == "__main__":
    app()
