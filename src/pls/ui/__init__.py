"""User interface components.

This subpackage provides terminal output and clipboard helpers
for the pls CLI.

Key modules:
    - output: Rich console messages and clipboard copy
"""

from pls.ui.output import (
    copy_to_clipboard,
    print_error,
    print_status,
    render_error,
)

__all__ = [
    "copy_to_clipboard",
    "print_error",
    "print_status",
    "render_error",
]
