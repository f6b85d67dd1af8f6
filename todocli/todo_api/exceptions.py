"""
Error types raised by the to-do API layer.

The interactive session catches TodoError and reports `user_message`.
"""


class TodoError(Exception):
    """Base class for every error the session reports to the user."""

    user_message = "❌ Something went wrong."

    def __init__(self, message: str = ""):
        super().__init__(message or self.user_message)


class ValidationError(TodoError):
    """User input was rejected; nothing was changed."""


class EmptyTaskTextError(ValidationError):
    user_message = "⚠️ Task cannot be empty."


class InvalidTaskNumberError(ValidationError):
    user_message = "❌ Invalid task number."

    def __init__(self, raw: str = ""):
        self.raw = raw
        super().__init__(f"Invalid task number: {raw!r}")


class StorageError(TodoError):
    """The task file could not be read or written."""

    user_message = "❌ Could not access the task file."


class CorruptStateError(StorageError):
    """The task file exists but does not hold a list of tasks."""

    user_message = "❌ The task file is corrupt."
