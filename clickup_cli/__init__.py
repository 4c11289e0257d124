"""
ClickUp CLI - manage a ClickUp workspace from the terminal.

This CLI provides:
- Token-based login with a persisted credential file
- Task, list, space and workspace operations
- Rich text or JSON output
- An interactive shell when started without a command
"""

__version__ = "0.1.0"
__app_name__ = "ClickUp CLI"
