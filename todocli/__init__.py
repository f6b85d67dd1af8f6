"""
To-Do CLI: a menu-driven command-line to-do list.

Tasks live in a local JSON file that is rewritten after every change.
"""

__version__ = "1.0.0"

# Import the main CLI app for entry point
from .todocli import app

__all__ = ["app", "__version__"]
