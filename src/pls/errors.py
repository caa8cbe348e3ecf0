"""
Error hierarchy for pls.

Every failure the tool reports to the user derives from ``PlsError``.
Underlying exceptions are chained with ``raise ... from`` so the original
cause remains available as ``__cause__``.
"""

from __future__ import annotations


class PlsError(Exception):
	"""Base class for all pls errors."""


class FrontMatterError(PlsError):
	"""Base class for front matter splitting failures."""


class ClosingDelimiterNotFoundError(FrontMatterError):
	"""An opening delimiter was found but the block was never closed."""

	def __init__(self, delimiter: str) -> None:
		super().__init__("closing delimiter not found")
		self.delimiter = delimiter


class MismatchedDelimiterError(FrontMatterError):
	"""The block was closed with a different delimiter than it was opened with."""

	def __init__(self, expected: str, found: str) -> None:
		super().__init__(
		    f"different closing delimiter found: expected {expected!r}, "
		    f"got {found!r}")
		self.expected = expected
		self.found = found


class MetadataDecodeError(FrontMatterError):
	"""The front matter block could not be decoded into its destination."""

	def __init__(self, cause: BaseException) -> None:
		super().__init__(f"invalid front matter: {cause}")
		self.cause = cause


class ChatError(PlsError):
	"""The chat completion service failed."""


class ClipboardError(PlsError):
	"""The rendered prompt could not be copied to the clipboard."""


__all__ = [
    "PlsError",
    "FrontMatterError",
    "ClosingDelimiterNotFoundError",
    "MismatchedDelimiterError",
    "MetadataDecodeError",
    "ChatError",
    "ClipboardError",
]
