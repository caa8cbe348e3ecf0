"""
Console output helpers.

Provides the rich consoles used for status and error messages and the
clipboard copy used by ``--prompt``. Completion text itself is written
to plain streams so it can be piped.
"""

from __future__ import annotations

import pyperclip
from rich.console import Console
from rich.text import Text

from pls.errors import ClipboardError, PlsError

err_console = Console(stderr=True)


def copy_to_clipboard(text: str) -> None:
	"""
	Copy text to the system clipboard.

	Raises:
		ClipboardError: If no clipboard mechanism is available.
	"""
	try:
		pyperclip.copy(text)
	except pyperclip.PyperclipException as exc:
		raise ClipboardError(f"clipboard copy failed: {exc}") from exc


def render_error(exc: BaseException) -> Text:
	"""Render an error as a one-line styled message."""
	text = Text()
	label = type(exc).__name__ if isinstance(exc, PlsError) else "error"
	text.append(f"{label}: ", style="bold red")
	text.append(str(exc))
	return text


def print_error(exc: BaseException, console: Console | None = None) -> None:
	"""Print an error to stderr."""
	(console or err_console).print(render_error(exc), soft_wrap=True)


def print_status(message: str, console: Console | None = None) -> None:
	"""Print a status notice to stderr, without markup."""
	(console or err_console).print(Text(message, style="dim"), soft_wrap=True)


__all__ = [
    "err_console",
    "copy_to_clipboard",
    "render_error",
    "print_error",
    "print_status",
]
