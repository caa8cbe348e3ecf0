"""
Front matter splitting.

Separates an optional metadata block from the head of a text document
and returns the remaining body. The block is bounded by two identical
delimiter lines, ``---`` or ``+++``::

    ---
    temperature: 0.7
    ---
    Summarize the following text.

The splitter only locates the block; turning its bytes into values is
delegated to a ``FrontMatterDecoder``. ``YamlFrontMatterDecoder`` is the
default and populates either a pydantic model or a mutable mapping.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from pls.errors import (
    ClosingDelimiterNotFoundError,
    MetadataDecodeError,
    MismatchedDelimiterError,
)
from pls.loaders.decoders import YamlFrontMatterDecoder
from pls.utils.logging import get_logger
from pls.utils.protocols import FrontMatterDecoder

logger = get_logger(__name__)

DELIMITERS = ("---", "+++")


def _iter_lines(source: str | Iterable[str]) -> Iterable[str]:
	"""Yield lines without their terminators (``\\n`` or ``\\r\\n``)."""
	if isinstance(source, str):
		parts = source.split("\n")
		if parts[-1] == "":
			parts.pop()
		lines: Iterable[str] = parts
	else:
		lines = source
	for line in lines:
		yield line.removesuffix("\n").removesuffix("\r")


@dataclass
class _Scanner:
	"""Per-call scanning state: searching, inside the block, or in the body."""

	found_front_matter: bool = False
	in_front_matter: bool = False
	in_body: bool = False
	delimiter: str | None = None
	front_matter: list[str] = field(default_factory=list)
	body: list[str] = field(default_factory=list)

	def feed(self, line: str) -> None:
		if self.in_body:
			self.body.append(line)
			return

		trimmed = line.strip()

		if not self.found_front_matter and trimmed == "":
			# blank lines may precede the opening delimiter
			return

		if trimmed in DELIMITERS:
			if not self.found_front_matter:
				self.delimiter = trimmed
				self.found_front_matter = True
				self.in_front_matter = True
			else:
				if trimmed != self.delimiter:
					raise MismatchedDelimiterError(self.delimiter or "", trimmed)
				self.in_body = True
				self.in_front_matter = False
			return

		if self.found_front_matter:
			self.front_matter.append(line)
		else:
			# first content line is not a delimiter: there is no front matter
			self.in_body = True
			self.body.append(line)

	def front_matter_bytes(self) -> bytes:
		return "".join(f"{ln}\n" for ln in self.front_matter).encode("utf-8")

	def body_text(self) -> str:
		return "".join(f"{ln}\n" for ln in self.body)


def parse_front_matter(
    text: str | Iterable[str],
    destination: Any,
    decoder: FrontMatterDecoder | None = None,
) -> str:
	"""
	Split front matter from a document and decode it into ``destination``.

	Leading blank lines are skipped while looking for the opening
	delimiter. The first other line decides: a delimiter opens a block,
	anything else means the document has no front matter. Once the body
	starts no more delimiters are recognized.

	Parameters:
		text: The document, as a string or an iterable of lines.
		destination: Target for the decoded metadata. Only written when a
			block is found and decodes successfully.
		decoder: Decoder for the block; defaults to YAML.

	Returns:
		The body, every line terminated by a newline.

	Raises:
		ClosingDelimiterNotFoundError: The block is never closed.
		MismatchedDelimiterError: The block is closed with the other token.
		MetadataDecodeError: The decoder rejected the block.
	"""
	scanner = _Scanner()
	for line in _iter_lines(text):
		scanner.feed(line)

	if scanner.in_front_matter:
		raise ClosingDelimiterNotFoundError(scanner.delimiter or "")

	if scanner.found_front_matter:
		logger.debug("front matter found: delimiter=%s lines=%d",
		             scanner.delimiter, len(scanner.front_matter))
		decoder = decoder or YamlFrontMatterDecoder()
		try:
			decoder.decode(scanner.front_matter_bytes(), destination)
		except Exception as exc:
			raise MetadataDecodeError(exc) from exc

	return scanner.body_text()


def split_front_matter(text: str | Iterable[str]) -> tuple[dict[str, Any], str]:
	"""
	Split front matter into a plain mapping and the body.

	Parameters:
		text: The full document.

	Returns:
		Tuple of (front matter dict, body text). The dict is empty when the
		document has no front matter.
	"""
	meta: dict[str, Any] = {}
	body = parse_front_matter(text, meta)
	return meta, body


__all__ = [
    "DELIMITERS",
    "parse_front_matter",
    "split_front_matter",
]
