"""
Prompt and input loading utilities.

Provides functions for reading prompt template files and the input
document that gets embedded into them.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO


def load_prompt(path: str | Path) -> str:
	"""
	Load a prompt template file.

	Parameters:
		path: Path to the prompt template.

	Returns:
		Contents of the prompt file.
	"""
	return Path(path).read_text(encoding="utf-8")


def read_input(path: str | Path | None, stdin: IO[str]) -> str:
	"""
	Read the input document from a file, or from ``stdin`` when no path is given.

	Parameters:
		path: Input file path, or None.
		stdin: Stream to read when ``path`` is None.

	Returns:
		The input text.
	"""
	if path is None:
		return stdin.read()
	return Path(path).read_text(encoding="utf-8")


__all__ = ["load_prompt", "read_input"]
