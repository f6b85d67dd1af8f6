"""
This __init__.py file makes the 'commands' directory a Python package.

Each module defines a handler for one or more menu choices. A handler
takes the running TodoSession, prompts through it, and calls its store.
"""

from .add_command import handle_add
from .delete_command import handle_delete
from .edit_command import handle_edit
from .filter_command import handle_filter_category, handle_filter_deadline
from .toggle_command import handle_toggle
from .view_command import handle_view

__all__ = [
    'handle_add',
    'handle_view',
    'handle_toggle',
    'handle_edit',
    'handle_delete',
    'handle_filter_category',
    'handle_filter_deadline',
]
