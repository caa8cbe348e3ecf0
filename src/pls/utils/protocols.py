"""
Protocol definitions for dependency injection.

Defines Protocol classes for the front matter decoder and the chat
client so that tests and callers can supply their own implementations.
"""

from __future__ import annotations

from typing import Any, Iterator, Protocol


class FrontMatterDecoder(Protocol):
	"""
	Protocol for structured front matter decoders.

	A decoder interprets a raw metadata block and writes the keys it
	recognizes into a caller-supplied destination.
	"""

	def decode(self, data: bytes, destination: Any) -> None:
		"""Decode ``data`` into ``destination``; raise on malformed input."""
		...


class ChatClientProtocol(Protocol):
	"""Protocol for streaming chat completion clients."""

	def stream(self, message: str, front_matter: Any = None) -> Iterator[str]:
		"""Send a prompt and return an iterator of completion text chunks.

		The request is sent before this returns; the iterator only reads
		the response.
		"""
		...


__all__ = ["FrontMatterDecoder", "ChatClientProtocol"]
